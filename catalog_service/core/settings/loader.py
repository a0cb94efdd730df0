"""LRU-cached settings loaders.

Settings are loaded and validated once, then cached for the lifetime of the process.

Usage:
    from catalog_service.core.settings.loader import get_app_settings

    settings = get_app_settings()  # First call: loads and validates
    settings = get_app_settings()  # Subsequent calls: returns cached instance

Testing:
    In tests, clear the cache to force reload:
    clear_settings_cache()

    Or build instances directly:
    settings = PaginationSettings(max_limit=5)
"""

from __future__ import annotations

from functools import lru_cache

from .app import AppSettings
from .logs import LoggingSettings
from .pagination import PaginationSettings
from .postgres import PostgresSettings


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    """Get cached FastAPI application settings."""
    return AppSettings()


@lru_cache(maxsize=1)
def get_db_settings() -> PostgresSettings:
    """Get cached database settings."""
    return PostgresSettings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings."""
    return LoggingSettings()


@lru_cache(maxsize=1)
def get_pagination_settings() -> PaginationSettings:
    """Get cached pagination settings."""
    return PaginationSettings()


def clear_settings_cache() -> None:
    """Clear every cached settings instance.

    The next getter call re-reads environment variables and ``.env``.
    """
    get_app_settings.cache_clear()
    get_db_settings.cache_clear()
    get_logging_settings.cache_clear()
    get_pagination_settings.cache_clear()
