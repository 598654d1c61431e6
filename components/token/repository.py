"""Repository for the issued token ledger.

The ledger is a record of logins. Session validity is decided by the token's
signature and expiry, so nothing on the request path reads it back.
"""

from datetime import datetime, timezone
from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.token.models import UserToken


class TokenRepository:
    """Repository for issued token operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def record(self, token: str, user_id: int, expiry: datetime) -> UserToken:
        """Append a ledger row for a freshly issued token."""
        if expiry.tzinfo is not None:
            expiry = expiry.astimezone(timezone.utc).replace(tzinfo=None)
        db_token = UserToken(token=token, user_id=user_id, expiry=expiry)
        self.session.add(db_token)
        await self.session.commit()
        await self.session.refresh(db_token)
        return db_token

    async def get_for_user(self, user_id: int) -> List[UserToken]:
        """Get all ledger rows of a user, oldest first."""
        result = await self.session.execute(
            select(UserToken).where(UserToken.user_id == user_id).order_by(UserToken.id)
        )
        return list(result.scalars().all())
