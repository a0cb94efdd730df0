"""Offset and cursor pagination.

Offset pagination skips ``(page - 1) * limit`` rows and reports totals.
Cursor (keyset) pagination seeks past the last row already seen and is:
- Stable: Results don't shift when rows are inserted ahead of the cursor
- Performant: Uses indexed seeks instead of OFFSET scans

Example:
    @router.get("/products/cursor", response_model=CursorPage[ProductResponse])
    async def list_products(...) -> CursorPage[ProductResponse]:
        result = await service.list_cursor(limit=limit, cursor=cursor)
        return CursorPage(data=result.rows, meta=CursorMeta(...))
"""

from catalog_service.core.pagination.cursor import CursorPosition
from catalog_service.core.pagination.filters import CursorFilter
from catalog_service.core.pagination.schemas import (
    CursorMeta,
    CursorPage,
    OffsetMeta,
    OffsetPage,
)

__all__ = [
    "CursorFilter",
    "CursorMeta",
    "CursorPage",
    "CursorPosition",
    "OffsetMeta",
    "OffsetPage",
]
