"""Application lifespan management.

Startup Order:
1. Logging
2. Database connection (with retry)
3. Schema creation, when DB_CREATE_SCHEMA is set

Shutdown disposes the connection pool.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from catalog_service.core.settings import (
    get_app_settings,
    get_db_settings,
    get_logging_settings,
)
from catalog_service.infra.database import close_database, create_schema, init_database
from catalog_service.infra.logging import setup_logging

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start and stop the services the API depends on.

    A database that stays unreachable through every retry aborts startup.
    """
    app_settings = get_app_settings()
    db_settings = get_db_settings()

    setup_logging(log_settings=get_logging_settings(), force=True)
    logger.info(
        "Application starting",
        extra={
            "service": app_settings.service_name,
            "environment": app_settings.environment,
            "version": app_settings.version,
        },
    )

    await init_database()
    if db_settings.create_schema:
        await create_schema()

    logger.info("Application startup complete")

    try:
        yield
    finally:
        logger.info("Application shutting down")
        await close_database()
        logger.info("Application shutdown complete")
