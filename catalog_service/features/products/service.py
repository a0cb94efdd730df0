"""Service layer for the products feature."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from catalog_service.core.database import storage_guard
from catalog_service.core.models import Product
from catalog_service.core.services import BaseService
from catalog_service.core.settings import get_db_settings, get_pagination_settings
from catalog_service.features.products.repository import (
    ProductRepository,
    get_product_repository,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from catalog_service.core.database import CursorPageResult, OffsetPageResult
    from catalog_service.core.settings import PaginationSettings, PostgresSettings
    from catalog_service.features.products.schemas import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


class ProductService(BaseService):
    """Service for product catalog operations.

    Every storage call runs under ``storage_guard`` so connection failures
    surface as ``StorageUnavailableError``. Mutations commit before
    returning; reads leave the session's transaction to the request scope.
    """

    def __init__(
        self,
        session: AsyncSession,
        repo: ProductRepository | None = None,
        pagination: PaginationSettings | None = None,
        db_settings: PostgresSettings | None = None,
    ) -> None:
        """Initialize the product service.

        Args:
            session: Database session for operations
            repo: Product repository (optional, uses default if not provided)
            pagination: Page size defaults and cap
            db_settings: Source of the snapshot isolation level
        """
        super().__init__()
        self._session = session
        self._repo = repo or get_product_repository()
        self._pagination = pagination or get_pagination_settings()
        self._db_settings = db_settings or get_db_settings()

    async def create_product(self, payload: ProductCreate) -> Product:
        """Persist a new product and return it with generated fields."""
        async with storage_guard("products.create"):
            product = await self._repo.create(self._session, Product(**payload.model_dump()))
            await self._session.commit()

        logger.info(
            "Product created",
            extra={"product_id": product.id, "product_name": product.name},
        )
        return product

    async def get_product(self, product_id: str) -> Product:
        """Get a product by id.

        Raises:
            NotFoundError: If the product doesn't exist
        """
        async with storage_guard("products.get"):
            return await self._repo.get_or_raise(self._session, product_id)

    async def list_offset(self, *, page: int, limit: int) -> OffsetPageResult[Product]:
        """List products by page number, newest first.

        ``limit`` is capped at the configured maximum. Pages past the end
        return no rows with the true total.
        """
        limit = self._pagination.clamp(limit)
        async with storage_guard("products.list_offset"):
            result = await self._repo.list_offset(
                self._session,
                page=page,
                limit=limit,
                isolation_level=self._db_settings.snapshot_isolation_level,
            )

        self._lazy.debug(
            lambda: f"service.list_offset(page={page}, limit={limit}) -> {len(result.rows)}/{result.total}"
        )
        return result

    async def list_cursor(self, *, limit: int, cursor: str | None = None) -> CursorPageResult[Product]:
        """List products after ``cursor``, newest first.

        Raises:
            InvalidCursorError: If the cursor does not name an existing product
        """
        limit = self._pagination.clamp(limit)
        async with storage_guard("products.list_cursor"):
            result = await self._repo.list_cursor(self._session, limit=limit, cursor=cursor)

        self._lazy.debug(
            lambda: f"service.list_cursor(limit={limit}, cursor={cursor}) -> {len(result.rows)}, next={result.next_cursor}"
        )
        return result

    async def update_product(self, product_id: str, payload: ProductUpdate) -> Product:
        """Apply the fields present in ``payload`` to an existing product.

        Raises:
            NotFoundError: If the product doesn't exist
        """
        values = payload.model_dump(exclude_unset=True)
        async with storage_guard("products.update"):
            product = await self._repo.get_or_raise(self._session, product_id)
            if values:
                product = await self._repo.update(self._session, product, values)
                await self._session.commit()

        logger.info(
            "Product updated",
            extra={"product_id": product_id, "fields": sorted(values)},
        )
        return product

    async def delete_product(self, product_id: str) -> Product:
        """Delete a product and return the record as it was.

        Raises:
            NotFoundError: If the product doesn't exist
        """
        async with storage_guard("products.delete"):
            product = await self._repo.get_or_raise(self._session, product_id)
            await self._repo.delete(self._session, product)
            await self._session.commit()

        logger.info("Product deleted", extra={"product_id": product_id})
        return product
