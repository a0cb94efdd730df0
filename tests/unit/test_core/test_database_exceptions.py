"""Unit tests for repository exceptions and storage_guard."""
from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from catalog_service.core.database import (
    InvalidCursorError,
    NotFoundError,
    RepositoryError,
    StorageUnavailableError,
    storage_guard,
)


class TestExceptions:
    """Tests for the repository exception hierarchy."""

    def test_not_found_message_and_details(self):
        exc = NotFoundError("Product", {"id": "abc"})

        assert exc.message == "Product not found with id='abc'"
        assert exc.details == {"model": "Product", "id": "abc"}
        assert isinstance(exc, RepositoryError)

    def test_invalid_cursor(self):
        exc = InvalidCursorError("Product", "abc")

        assert exc.cursor == "abc"
        assert "does not reference an existing Product" in exc.message
        assert str(exc).endswith("(model='Product', cursor='abc')")

    def test_storage_unavailable_details(self):
        exc = StorageUnavailableError("products.get", "OperationalError")

        assert exc.message == "Storage is unavailable"
        assert exc.details == {"operation": "products.get", "reason": "OperationalError"}

    def test_storage_unavailable_without_reason(self):
        assert StorageUnavailableError("products.get").details == {"operation": "products.get"}


class TestStorageGuard:
    """Tests for storage_guard translation."""

    @pytest.mark.parametrize(
        "error",
        [
            OperationalError("SELECT 1", {}, Exception("connection refused")),
            InterfaceError("SELECT 1", {}, Exception("connection closed")),
            PoolTimeoutError("QueuePool limit reached"),
            ConnectionResetError("reset by peer"),
        ],
    )
    async def test_translates_infrastructure_errors(self, error):
        with pytest.raises(StorageUnavailableError) as exc_info:
            async with storage_guard("products.list_offset"):
                raise error

        assert exc_info.value.operation == "products.list_offset"
        assert exc_info.value.reason == type(error).__name__
        assert exc_info.value.__cause__ is error

    async def test_passes_data_errors_through(self):
        with pytest.raises(NotFoundError):
            async with storage_guard("products.get"):
                raise NotFoundError("Product", {"id": "abc"})

    async def test_passes_integrity_errors_through(self):
        with pytest.raises(IntegrityError):
            async with storage_guard("products.create"):
                raise IntegrityError("INSERT", {}, Exception("CHECK constraint failed"))

    async def test_no_error(self):
        async with storage_guard("products.get"):
            value = 1

        assert value == 1
