"""Core classes and mixins for DB connections"""

from contextlib import asynccontextmanager
from typing import Any, Optional, cast
from typing import Callable, AsyncContextManager

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from components.core.config import Settings
from components.core.logging_config import get_logger

logger = get_logger("db")
Base = declarative_base()
SessionMaker = Callable[[], AsyncContextManager[AsyncSession]]


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    def __init__(self, settings: Settings, engine: Optional[AsyncEngine] = None) -> None:
        """Initialize DatabaseManager with optional engine for testing."""
        self.settings = settings
        self.engine = engine or self._create_engine()
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        self._session_maker = None

    def _create_engine(self) -> AsyncEngine:
        """Create async engine for the configured database."""
        url = self.settings.async_db_url
        if url.startswith("sqlite"):
            return create_async_engine(url, echo=False)
        return create_async_engine(
            url,
            echo=False,  # Set to True for SQL query logging
            pool_pre_ping=True,  # Enable connection health checks
            pool_size=5,  # Connection pool size
            max_overflow=10,  # Maximum number of connections that can be created beyond pool_size
        )

    def get_session(self) -> SessionMaker:
        """Returns SessionMaker for database sessions."""
        if not self.engine:
            raise ValueError("Database engine wasn't initialized")

        if self._session_maker is None:
            self._session_maker = cast(
                SessionMaker,
                sessionmaker(
                    self.engine,
                    class_=AsyncSession,
                    expire_on_commit=False,
                    autocommit=False,
                    autoflush=False,
                ),
            )
        return self._session_maker

    @asynccontextmanager
    async def get_db(self) -> AsyncContextManager[AsyncSession]:
        """Get database session context manager."""
        async_session = self.get_session()
        async with async_session() as session:
            try:
                yield session
            finally:
                await session.close()

    async def create_tables(self) -> None:
        """Create all registered tables that do not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """Run a trivial query; False when the database cannot be reached."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError):
            logger.exception("Database ping failed")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()
