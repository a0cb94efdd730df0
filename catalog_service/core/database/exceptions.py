"""Database repository exceptions.

Typed failures raised by repositories and services so callers can tell a
missing record or a stale cursor apart from an infrastructure problem,
instead of inspecting raw SQLAlchemy exceptions.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


class RepositoryError(Exception):
    """Base exception for repository operations.

    Attributes:
        message: Error description
        details: Additional context about the error
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize repository error.

        Args:
            message: Error description
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Format error message with details."""
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class NotFoundError(RepositoryError):
    """Entity not found in database.

    Raised when an identifier does not resolve to a live record.
    This is a data-level error (404-like) rather than a system error.

    Attributes:
        model_name: Name of the model class that wasn't found
        identifier: The key/value that was searched for
    """

    def __init__(self, model_name: str, identifier: dict[str, Any]):
        """Initialize not found error.

        Args:
            model_name: Name of the model (e.g., "Product")
            identifier: Key-value pairs used in the search (e.g., {"id": "abc"})
        """
        self.model_name = model_name
        self.identifier = identifier

        id_str = ", ".join(f"{k}={v!r}" for k, v in identifier.items())
        message = f"{model_name} not found with {id_str}"

        super().__init__(message, details={"model": model_name, **identifier})

    def __repr__(self) -> str:
        """Repr for debugging."""
        return f"NotFoundError(model={self.model_name!r}, identifier={self.identifier!r})"


class InvalidCursorError(RepositoryError):
    """Pagination cursor does not resolve to a live record.

    Raised when the row a cursor points at was deleted between pages,
    so the position to resume from can no longer be determined.

    Attributes:
        model_name: Name of the paginated model
        cursor: The cursor token supplied by the caller
    """

    def __init__(self, model_name: str, cursor: str):
        """Initialize invalid cursor error.

        Args:
            model_name: Name of the paginated model
            cursor: The cursor token that failed to resolve
        """
        self.model_name = model_name
        self.cursor = cursor
        super().__init__(
            f"Cursor {cursor!r} does not reference an existing {model_name}",
            details={"model": model_name, "cursor": cursor},
        )


class StorageUnavailableError(RepositoryError):
    """Backing store unreachable or failing for infrastructure reasons.

    Wraps driver level connection, interface and pool checkout errors.
    The original exception is chained as ``__cause__``.
    """

    def __init__(self, operation: str, reason: str | None = None):
        """Initialize storage unavailable error.

        Args:
            operation: Logical operation that failed (e.g., "products.list_offset")
            reason: Short description of the underlying failure
        """
        self.operation = operation
        self.reason = reason
        details: dict[str, Any] = {"operation": operation}
        if reason:
            details["reason"] = reason
        super().__init__("Storage is unavailable", details=details)


STORAGE_ERRORS: tuple[type[Exception], ...] = (
    OperationalError,
    InterfaceError,
    PoolTimeoutError,
    ConnectionError,
)


@asynccontextmanager
async def storage_guard(operation: str) -> AsyncIterator[None]:
    """Translate infrastructure failures into StorageUnavailableError.

    Data-level errors (NotFoundError, IntegrityError, ...) pass through
    untouched.

    Example:
        async with storage_guard("products.create"):
            await session.commit()
    """
    try:
        yield
    except STORAGE_ERRORS as exc:
        raise StorageUnavailableError(operation, type(exc).__name__) from exc


__all__ = [
    "STORAGE_ERRORS",
    "InvalidCursorError",
    "NotFoundError",
    "RepositoryError",
    "StorageUnavailableError",
    "storage_guard",
]
