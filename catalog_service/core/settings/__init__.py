"""Modular settings, one pydantic-settings class per concern.

Usage:
    from catalog_service.core.settings import get_db_settings

    db = get_db_settings()
    engine = create_async_engine(db.get_sqlalchemy_url())
"""

from .app import AppSettings
from .loader import (
    clear_settings_cache,
    get_app_settings,
    get_db_settings,
    get_logging_settings,
    get_pagination_settings,
)
from .logs import LoggingSettings
from .pagination import PaginationSettings
from .postgres import PostgresSettings

__all__ = [
    "AppSettings",
    "LoggingSettings",
    "PaginationSettings",
    "PostgresSettings",
    "clear_settings_cache",
    "get_app_settings",
    "get_db_settings",
    "get_logging_settings",
    "get_pagination_settings",
]
