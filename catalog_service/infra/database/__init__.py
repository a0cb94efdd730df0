"""Database engine, session factory and lifecycle helpers."""

from catalog_service.infra.database.session import (
    AsyncSessionLocal,
    close_database,
    create_schema,
    engine,
    get_async_session,
    init_database,
)

__all__ = [
    "AsyncSessionLocal",
    "close_database",
    "create_schema",
    "engine",
    "get_async_session",
    "init_database",
]
