"""
Session validation and balance endpoint tests.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from httpx import AsyncClient

from components.core.security import create_access_token
from components.user.repository import UserRepository
from conftest import ALICE, BOB, login, register


def cookie_header(token: str) -> dict:
    return {"Cookie": f"token={token}"}


@pytest.mark.anyio
async def test_balance_requires_cookie(client: AsyncClient):
    response = await client.get("/balance")

    assert response.status_code == 401
    assert response.json() == {"message": "Access Denied: No Token Provided"}


@pytest.mark.anyio
async def test_balance_rejects_garbage_token(client: AsyncClient):
    response = await client.get("/balance", headers=cookie_header("garbage"))

    assert response.status_code == 403
    assert response.json() == {"message": "Invalid Token"}


@pytest.mark.anyio
async def test_balance_rejects_expired_token(client: AsyncClient, settings):
    await register(client)
    issued = datetime.now(timezone.utc) - timedelta(hours=1, seconds=1)
    token, _ = create_access_token("alice", "Customer", 1, settings, now=issued)

    response = await client.get("/balance", headers=cookie_header(token))

    assert response.status_code == 403
    assert response.json() == {"message": "Invalid Token"}


@pytest.mark.anyio
async def test_balance_rejects_foreign_signature(client: AsyncClient, settings_factory):
    await register(client)
    forged, _ = create_access_token(
        "alice", "Customer", 1, settings_factory(JWT_SECRET="attacker-secret")
    )

    response = await client.get("/balance", headers=cookie_header(forged))

    assert response.status_code == 403


@pytest.mark.anyio
async def test_balance_after_login(client: AsyncClient):
    await register(client)
    await login(client)

    response = await client.get("/balance")

    assert response.status_code == 200
    assert response.json() == {"balance": 100000, "username": "alice"}


@pytest.mark.anyio
async def test_balance_returns_stored_value(client: AsyncClient, db_session):
    await register(client)
    user = await UserRepository(db_session).get_by_username("alice")
    user.balance = Decimal("2500.75")
    await db_session.commit()
    await login(client)

    response = await client.get("/balance")

    assert response.json()["balance"] == 2500.75


@pytest.mark.anyio
async def test_balance_ignores_client_supplied_identity(client: AsyncClient, db_session):
    await register(client, ALICE)
    await register(client, BOB)
    users = UserRepository(db_session)
    alice = await users.get_by_username("alice")
    bob = await users.get_by_username("bob")
    bob.balance = Decimal("42.00")
    await db_session.commit()

    await login(client, BOB)
    response = await client.request(
        "GET",
        "/balance",
        params={"uid": alice.id, "username": "alice"},
        json={"uid": alice.id, "username": "alice"},
    )

    assert response.status_code == 200
    assert response.json() == {"balance": 42.0, "username": "bob"}


@pytest.mark.anyio
async def test_balance_for_deleted_user(client: AsyncClient, db_session):
    await register(client)
    await login(client)
    user = await UserRepository(db_session).get_by_username("alice")
    assert await UserRepository(db_session).delete(user.id) is True

    response = await client.get("/balance")

    # The token itself is still valid, the account is gone
    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}
