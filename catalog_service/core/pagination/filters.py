"""Cursor filter for SQLAlchemy queries.

The CursorFilter implements the seek/keyset pagination method:
- Instead of OFFSET, we use WHERE conditions to seek directly to the cursor position
- Cost does not grow with page depth when the sort columns are indexed
- Rows inserted before the cursor position never shift later pages

How it works:
    For ORDER BY created_at DESC, id DESC with cursor at (t1, id1):
    WHERE (created_at < t1) OR (created_at = t1 AND id < id1)

The cursor row itself fails both branches, so it is never returned again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from sqlalchemy import and_, or_

from catalog_service.core.database.filters import StatementFilter

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.orm import InstrumentedAttribute

    from catalog_service.core.pagination.cursor import CursorPosition


class CursorFilter(StatementFilter):
    """Apply cursor-based pagination to a SQLAlchemy query.

    The filter adds:
    1. ORDER BY clause for a stable total order
    2. WHERE conditions to seek past the cursor (when a position is given)
    3. LIMIT of page size + 1 so callers can detect a further page

    Example:
        stmt = select(Product)
        stmt = CursorFilter(
            position=position,
            order_by=[(Product.created_at, "desc"), (Product.id, "desc")],
            limit=10,
        ).apply(stmt)

    Attributes:
        position: Sort key of the last row already seen (None for first page)
        order_by: List of (column, direction) tuples
        limit: Page size
    """

    def __init__(
        self,
        position: CursorPosition | None,
        order_by: list[tuple[InstrumentedAttribute[Any], Literal["asc", "desc"]]],
        *,
        limit: int = 10,
    ) -> None:
        """Initialize cursor filter.

        Args:
            position: Resolved cursor position (None for first page)
            order_by: List of (column, direction) tuples defining sort order.
                The last column must be unique so the order is total.
            limit: Maximum items to return (page size)
        """
        self.position = position
        self.order_by = order_by
        self.limit = limit

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply cursor pagination to statement."""
        statement = self._apply_ordering(statement)

        if self.position is not None:
            statement = self._apply_seek_condition(statement, self.position)

        # Fetch one extra to detect has_next_page
        return statement.limit(self.limit + 1)

    def _apply_ordering(self, statement: Select[Any]) -> Select[Any]:
        """Apply ORDER BY clause based on sort specification."""
        for column, direction in self.order_by:
            if direction == "desc":
                statement = statement.order_by(column.desc())
            else:
                statement = statement.order_by(column.asc())
        return statement

    def _apply_seek_condition(
        self, statement: Select[Any], position: CursorPosition
    ) -> Select[Any]:
        """Apply WHERE condition to seek past the cursor.

        For columns (a, b, c) with cursor values (v1, v2, v3):
            (a op v1) OR
            (a = v1 AND b op v2) OR
            (a = v1 AND b = v2 AND c op v3)

        Where 'op' is < for descending columns and > for ascending ones.
        """
        values = position.values
        or_conditions = []

        for i, (column, direction) in enumerate(self.order_by):
            cursor_value = values[column.key]
            compare_cond = column < cursor_value if direction == "desc" else column > cursor_value

            eq_conditions = [
                prev_column == values[prev_column.key]
                for prev_column, _ in self.order_by[:i]
            ]
            if eq_conditions:
                or_conditions.append(and_(*eq_conditions, compare_cond))
            else:
                or_conditions.append(compare_cond)

        return statement.where(or_(*or_conditions))

    @property
    def sort_fields(self) -> list[str]:
        """Get list of sort field names."""
        return [col.key for col, _ in self.order_by]


__all__ = ["CursorFilter"]
