"""Shared fixtures: an app on a throwaway SQLite file and a fake chat provider."""

import pytest
from httpx import ASGITransport, AsyncClient, MockTransport, Response

from components.core.config import Settings
from restapi.router import create_app

BASE_URL = "https://kodbank.test"
PROVIDER_URL = "https://provider.test/v1/chat/completions"

ALICE = {
    "uname": "alice",
    "email": "a@x.com",
    "password": "pw123",
    "phone": "+1234567890",
}
BOB = {
    "uname": "bob",
    "email": "b@x.com",
    "password": "hunter2",
    "phone": "+1987654321",
}


class FakeProvider:
    """Stands in for the chat completion API behind an httpx.MockTransport."""

    def __init__(self):
        self.requests = []
        self.reply = "Hello from the model"
        self.handler = self.ok

    def ok(self, request):
        return Response(200, json={"choices": [{"message": {"role": "assistant", "content": self.reply}}]})

    def __call__(self, request):
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings_factory(tmp_path):
    def make(**overrides) -> Settings:
        values = {
            "JWT_SECRET": "test-secret",
            "DB_URL": f"sqlite+aiosqlite:///{tmp_path / 'kodbank.db'}",
            "HUGGINGFACE_ENDPOINT": PROVIDER_URL,
            "HUGGINGFACE_API_KEY": "hf-test-key",
            "LOG_LEVEL": "WARNING",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)
    return make


@pytest.fixture
def settings(settings_factory):
    return settings_factory()


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
async def app(settings, provider):
    application = create_app(settings, chat_transport=MockTransport(provider))
    await application.state.db_manager.create_tables()
    yield application
    await application.state.db_manager.dispose()


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE_URL) as ac:
        yield ac


@pytest.fixture
async def db_session(app):
    async with app.state.db_manager.get_db() as session:
        yield session


async def register(client: AsyncClient, user: dict = ALICE):
    return await client.post("/register", json=user)


async def login(client: AsyncClient, user: dict = ALICE):
    return await client.post(
        "/login", json={"username": user["uname"], "password": user["password"]}
    )
