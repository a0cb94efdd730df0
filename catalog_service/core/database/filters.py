"""Query filtering utilities for SQLAlchemy.

These filters work directly with SQLAlchemy statements without hiding the
query. They're utility helpers, not an abstraction layer.

Usage:
    from sqlalchemy import select
    from catalog_service.core.database.filters import OrderBy, LimitOffset

    stmt = select(Product)
    stmt = OrderBy([Product.created_at, Product.id], "desc").apply(stmt)
    stmt = LimitOffset(limit=10, offset=20).apply(stmt)

    result = await session.execute(stmt)
    products = result.scalars().all()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.orm import InstrumentedAttribute


class StatementFilter(ABC):
    """Base class for statement filters.

    All filters implement `apply()` which modifies a SQLAlchemy statement.
    """

    @abstractmethod
    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply filter to statement.

        Args:
            statement: SQLAlchemy select statement

        Returns:
            Modified select statement
        """
        ...


class OrderBy(StatementFilter):
    """Column ordering/sorting.

    Example:
        # Newest first, id breaks ties
        stmt = OrderBy([Product.created_at, Product.id], "desc").apply(stmt)

        # Mixed directions
        stmt = OrderBy([Product.stock, Product.name], ["desc", "asc"]).apply(stmt)
    """

    def __init__(
        self,
        fields: InstrumentedAttribute[Any] | Sequence[InstrumentedAttribute[Any]],
        sort_order: Literal["asc", "desc"] | Sequence[Literal["asc", "desc"]] = "asc",
    ):
        """Initialize ordering filter.

        Args:
            fields: Single field or list of fields to order by
            sort_order: Sort direction(s) - 'asc' or 'desc'

        Raises:
            ValueError: If the number of directions differs from the fields
        """
        self.fields = [fields] if not isinstance(fields, Sequence) else list(fields)

        if isinstance(sort_order, str):
            self.sort_orders = [sort_order] * len(self.fields)
        else:
            self.sort_orders = list(sort_order)
            if len(self.sort_orders) != len(self.fields):
                msg = "sort_order length must match fields length"
                raise ValueError(msg)

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply ordering to statement."""
        for field, order in zip(self.fields, self.sort_orders, strict=True):
            if order == "desc":
                statement = statement.order_by(field.desc())
            else:
                statement = statement.order_by(field.asc())
        return statement


class LimitOffset(StatementFilter):
    """Pagination using LIMIT and OFFSET.

    Example:
        # Page 1 (first 10 items)
        stmt = LimitOffset(limit=10, offset=0).apply(stmt)

        # Page 3
        stmt = LimitOffset(limit=10, offset=20).apply(stmt)
    """

    def __init__(self, limit: int, offset: int = 0):
        """Initialize pagination filter.

        Args:
            limit: Maximum number of results
            offset: Number of results to skip
        """
        self.limit = limit
        self.offset = offset

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply pagination to statement."""
        return statement.limit(self.limit).offset(self.offset)


__all__ = ["LimitOffset", "OrderBy", "StatementFilter"]
