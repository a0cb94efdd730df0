"""Product domain model."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import CheckConstraint, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_service.core.database.base import Base, StringUUIDPKMixin, TimestampMixin


class Product(Base, StringUUIDPKMixin, TimestampMixin):
    """Product model.

    Represents a product in the catalog with pricing and inventory
    information. Listings are ordered newest first, with ``id`` breaking
    ties between rows created in the same instant; the composite index
    on ``(created_at, id)`` serves both the offset window and the cursor
    seek.

    Example:
        ```python
        from decimal import Decimal

        from catalog_service.core.models import Product
        from catalog_service.infra.database.session import get_async_session

        async with get_async_session() as session:
            product = Product(
                name="Wireless Mouse",
                description="Ergonomic wireless mouse with USB receiver",
                price=Decimal("29.99"),
                stock=100,
            )
            session.add(product)
            await session.commit()
        ```
    """

    __tablename__ = "products"
    __table_args__ = (
        Index("ix_products_created_at_id", "created_at", "id"),
        CheckConstraint("price > 0", name="price_positive"),
        CheckConstraint("stock >= 0", name="stock_non_negative"),
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Product name",
    )
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Detailed product description",
    )
    price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        comment="Unit price",
    )
    stock: Mapped[int] = mapped_column(
        default=0,
        nullable=False,
        comment="Units in stock",
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id!r}, name={self.name!r}, price={self.price})>"
