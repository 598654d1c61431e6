"""Balance endpoint for the API."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.errors import NotFoundError
from components.core.init_db import get_db
from components.user.repository import UserRepository
from components.user.schemas import Balance, TokenClaims
from restapi.endpoints.auth import get_current_claims

router = APIRouter(
    tags=["accounts"],
    responses={404: {"description": "Not found"}},
)


@router.get("/balance", response_model=Balance)
async def read_balance(
    db: AsyncSession = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
) -> Balance:
    """Get the balance of the logged-in user.

    The account is taken from the session token only.
    """
    user = await UserRepository(db).get_by_id(claims.uid)
    if user is None:
        raise NotFoundError("User not found")
    return Balance(balance=float(user.balance), username=user.username)
