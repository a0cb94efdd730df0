"""Cursor positions for keyset pagination.

A cursor token handed to clients is the primary key of the last row of
the previous page. Before seeking, the token is resolved back to the
row's sort key values, which this module represents as a CursorPosition:

    {"created_at": datetime(2025, 1, 15, 10, 30), "id": "3f0c..."}

Resolving on every request keeps tokens short and readable, at the cost
of one primary key lookup per page.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.orm import InstrumentedAttribute


class CursorPosition(BaseModel):
    """Sort key values of the row a cursor points at.

    Attributes:
        values: Mapping of sort column name to that row's value
    """

    values: dict[str, Any] = Field(description="Sort field values for seeking")

    model_config = {"frozen": True}

    @classmethod
    def from_row(
        cls,
        row: Any,
        columns: Sequence[InstrumentedAttribute[Any]],
    ) -> CursorPosition:
        """Capture the sort key of a loaded ORM row.

        Args:
            row: ORM instance the cursor refers to
            columns: Sort columns, in ordering priority

        Returns:
            Position holding the row's value for every sort column

        Example:
            position = CursorPosition.from_row(product, [Product.created_at, Product.id])
        """
        return cls(values={column.key: getattr(row, column.key) for column in columns})


__all__ = ["CursorPosition"]
