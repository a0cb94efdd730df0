"""Repository for the products feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, select

from catalog_service.core.database.repository import BaseRepository
from catalog_service.core.models import Product

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from catalog_service.core.database.repository import (
        CursorPageResult,
        OffsetPageResult,
        SortSpec,
    )

# Newest first; id breaks created_at ties so the order is total
PRODUCT_ORDERING: SortSpec = (
    (Product.created_at, "desc"),
    (Product.id, "desc"),
)


class ProductRepository(BaseRepository[Product]):
    """Repository for Product model.

    Inherits from BaseRepository:
        - get(session, id) -> Product | None
        - get_or_raise(session, id) -> Product
        - create(session, instance) -> Product
        - update(session, instance, values) -> Product
        - delete(session, instance) -> None
        - bulk_insert(session, rows) -> int

    Listing methods below pin the catalog ordering.
    """

    def __init__(self) -> None:
        """Initialize with Product model."""
        super().__init__(Product)

    async def list_offset(
        self,
        session: AsyncSession,
        *,
        page: int,
        limit: int,
        isolation_level: str | None = None,
    ) -> OffsetPageResult[Product]:
        """Return one numbered page of products plus the total count.

        Args:
            session: Database session
            page: 1-based page number
            limit: Page size
            isolation_level: Snapshot level for the count and window reads

        Returns:
            OffsetPageResult ordered newest first
        """
        return await self.paginate_offset(
            session,
            select(Product),
            page=page,
            limit=limit,
            order_by=PRODUCT_ORDERING,
            isolation_level=isolation_level,
        )

    async def list_cursor(
        self,
        session: AsyncSession,
        *,
        limit: int,
        cursor: str | None = None,
    ) -> CursorPageResult[Product]:
        """Return the products that follow ``cursor`` in catalog order.

        Raises:
            InvalidCursorError: If no product has the cursor id
        """
        return await self.paginate_cursor(
            session,
            select(Product),
            limit=limit,
            cursor=cursor,
            order_by=PRODUCT_ORDERING,
        )

    async def delete_all(self, session: AsyncSession) -> int:
        """Remove every product. Used by the seed command.

        Returns:
            Number of rows deleted
        """
        result = await session.execute(delete(Product))
        deleted = result.rowcount or 0
        self._logger.info(
            "Products cleared",
            extra={"entity": "Product", "count": deleted, "operation": "db.delete_all"},
        )
        return deleted


# Factory function for dependency injection
_product_repository: ProductRepository | None = None


def get_product_repository() -> ProductRepository:
    """Get the shared ProductRepository instance.

    The repository holds no session state, so one instance serves every
    request.
    """
    global _product_repository
    if _product_repository is None:
        _product_repository = ProductRepository()
    return _product_repository
