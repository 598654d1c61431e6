"""Database initialization and dependency injection."""

from typing import AsyncGenerator, Optional

import fastapi
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from components.core.config import Settings
from components.core.database import DatabaseManager
# Import all models to ensure they're registered
import components.user.models
import components.token.models


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was built with."""
    return request.app.state.settings


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for getting database sessions."""
    db_manager: DatabaseManager = request.app.state.db_manager
    async with db_manager.get_db() as session:
        yield session


def init_db(
    app: fastapi.FastAPI,
    settings: Settings,
    engine: Optional[AsyncEngine] = None,
) -> DatabaseManager:
    """Initialize database connection and attach the manager to the app."""
    db_manager = DatabaseManager(settings, engine=engine)
    app.state.db_manager = db_manager
    return db_manager
