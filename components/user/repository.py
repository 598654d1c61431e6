"""Repository for user operations."""

from decimal import Decimal
from typing import Optional
from fastapi.concurrency import run_in_threadpool
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.errors import ValidationError
from components.core.logging_config import get_logger
from components.core.security import get_password_hash, verify_password
from components.user.models import DEFAULT_BALANCE, User, UserRole
from components.user.schemas import UserCreate

logger = get_logger("users")

USER_EXISTS_MESSAGE = "User already exists"

# Verified against when the username is unknown so both login failures cost one hash.
_DUMMY_PASSWORD_HASH = get_password_hash("kodbank-unknown-user")


class UserRepository:
    """Repository for user operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, user: UserCreate) -> User:
        """Create a new customer with the default balance.

        A unique-key violation at insert time is reported as a duplicate user,
        the same as the up-front existence check.
        """
        hashed_password = await run_in_threadpool(get_password_hash, user.password)
        db_user = User(
            username=user.uname,
            email=user.email,
            password=hashed_password,
            phone=user.phone,
            balance=Decimal(DEFAULT_BALANCE),
            role=UserRole.CUSTOMER,
        )
        self.session.add(db_user)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.info("Duplicate user rejected at insert", extra={"username": user.uname})
            raise ValidationError(USER_EXISTS_MESSAGE)
        await self.session.refresh(db_user)
        return db_user

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        result = await self.session.execute(
            select(User).where(User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        result = await self.session.execute(
            select(User).where(User.username == username)
        )
        return result.scalar_one_or_none()

    async def exists(self, username: str, email: str) -> bool:
        """Check if a user with given username or email exists."""
        result = await self.session.execute(
            select(User.id).where(or_(User.username == username, User.email == email)).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def authenticate(self, username: str, password: str) -> Optional[User]:
        """Return the user when the password matches, None otherwise."""
        user = await self.get_by_username(username)
        if user is None:
            await run_in_threadpool(verify_password, password, _DUMMY_PASSWORD_HASH)
            return None
        if not await run_in_threadpool(verify_password, password, user.password):
            return None
        return user

    async def delete(self, user_id: int) -> bool:
        """Delete user by ID. Issued token rows are removed by the database."""
        db_user = await self.get_by_id(user_id)
        if not db_user:
            return False

        await self.session.delete(db_user)
        await self.session.commit()
        return True
