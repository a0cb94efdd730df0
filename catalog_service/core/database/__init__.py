"""Database building blocks: declarative base, repository, filters and errors."""

from catalog_service.core.database.base import (
    Base,
    StringUUIDPKMixin,
    TimestampMixin,
)
from catalog_service.core.database.exceptions import (
    InvalidCursorError,
    NotFoundError,
    RepositoryError,
    StorageUnavailableError,
    storage_guard,
)
from catalog_service.core.database.filters import LimitOffset, OrderBy, StatementFilter
from catalog_service.core.database.repository import (
    BaseRepository,
    CursorPageResult,
    OffsetPageResult,
)

__all__ = [
    "Base",
    "BaseRepository",
    "CursorPageResult",
    "InvalidCursorError",
    "LimitOffset",
    "NotFoundError",
    "OffsetPageResult",
    "OrderBy",
    "RepositoryError",
    "StatementFilter",
    "StorageUnavailableError",
    "StringUUIDPKMixin",
    "TimestampMixin",
    "storage_guard",
]
