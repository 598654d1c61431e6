"""Script to create the users and user_tokens tables."""

import asyncio
import sys

from components.core.config import get_settings
from components.core.database import DatabaseManager
# Import all models to ensure they're registered
import components.user.models
import components.token.models


async def create_tables():
    """Create all tables that do not exist yet."""
    db_manager = DatabaseManager(get_settings())
    try:
        print("Creating tables...")
        await db_manager.create_tables()
        print("Database setup complete.")
    finally:
        await db_manager.dispose()


if __name__ == "__main__":
    try:
        asyncio.run(create_tables())
    except Exception as e:
        print(f"Error creating tables: {e}")
        sys.exit(1)
