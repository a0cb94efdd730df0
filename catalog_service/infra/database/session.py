"""Database session management with the psycopg3 async driver.

The engine and session factory are created at import time from
PostgresSettings. When PostgreSQL is disabled the service falls back to a
local ``sqlite+aiosqlite`` database.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from sqlalchemy import make_url, text
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.ext.asyncio import async_sessionmaker as _async_sessionmaker
from sqlalchemy.ext.asyncio import create_async_engine as _create_async_engine

from catalog_service.core.database.base import Base
from catalog_service.core.settings import get_db_settings
from catalog_service.utils.retry import retry_until_ready

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)

db_settings = get_db_settings()
database_url = db_settings.get_sqlalchemy_url()

engine = _create_async_engine(database_url, **db_settings.sqlalchemy_engine_kwargs())

# Create session factory
AsyncSessionLocal = _async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


def _safe_url() -> str:
    """Database URL with the password masked, for logs."""
    return make_url(database_url).render_as_string(hide_password=True)


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Get async database session.

    Yields:
        Database session that is automatically closed. Uncommitted work is
        rolled back on close.

    Example:
        async with get_async_session() as session:
            result = await session.execute(select(Product))
            products = result.scalars().all()
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def _ping() -> None:
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def init_database() -> None:
    """Initialize database connection with retry logic.

    Attempts to connect with exponential backoff, which helps during
    container startup when the database might not be ready yet.

    Uses retry settings from PostgresSettings:
    - startup_retry_attempts: Maximum number of connection attempts
    - startup_retry_delay: Initial delay between retries
    - startup_retry_timeout: Give up once the next wait would pass this

    Raises:
        RetryError: If unable to connect after all retry attempts.
    """
    logger.info(
        "Initializing database connection with retry",
        extra={
            "max_attempts": db_settings.startup_retry_attempts,
            "initial_delay": db_settings.startup_retry_delay,
        },
    )

    try:
        await retry_until_ready(
            _ping,
            operation="database.connect",
            attempts=db_settings.startup_retry_attempts,
            initial_delay=db_settings.startup_retry_delay,
            timeout=db_settings.startup_retry_timeout,
            exceptions=(OperationalError, InterfaceError, OSError),
        )
    except Exception as e:
        logger.error(
            "Failed to connect to database",
            extra={"url": _safe_url(), "error": str(e)},
        )
        raise

    logger.info(
        "Database connection established successfully",
        extra={"url": _safe_url(), "dialect": engine.dialect.name},
    )


async def create_schema() -> None:
    """Create missing tables and indexes from model metadata."""
    # Registers every model on Base.metadata
    import catalog_service.core.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(
        "Database schema ensured",
        extra={"tables": sorted(Base.metadata.tables)},
    )


async def close_database() -> None:
    """Close database connections and cleanup resources.

    This should be called during application shutdown.
    """
    logger.info("Closing database connection")
    await engine.dispose()


__all__ = [
    "AsyncSessionLocal",
    "close_database",
    "create_schema",
    "engine",
    "get_async_session",
    "init_database",
]
