"""Pagination response schemas.

Both listing modes return the same envelope, a ``data`` list plus a
``meta`` object describing the page:

Offset style:
    {"data": [...], "meta": {"total": 42, "page": 2, "limit": 10, "totalPages": 5}}

Cursor style:
    {"data": [...], "meta": {"hasNextPage": true, "nextCursor": "3f0c..."}}

Keys are camelCase on the wire; Python attributes stay snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OffsetMeta(_CamelModel):
    """Metadata for an offset page.

    Attributes:
        total: Total number of rows across all pages
        page: 1-based page number that was requested
        limit: Page size that was requested
        total_pages: ceil(total / limit)
    """

    total: int = Field(ge=0, description="Total number of items")
    page: int = Field(ge=1, description="Current page number (1-based)")
    limit: int = Field(ge=1, description="Items per page")
    total_pages: int = Field(ge=0, description="Total number of pages")


class CursorMeta(_CamelModel):
    """Metadata for a cursor page.

    Attributes:
        has_next_page: Whether more items exist after this page
        next_cursor: Cursor to pass back for the next page (None when exhausted)
    """

    has_next_page: bool = Field(description="Whether more items exist")
    next_cursor: str | None = Field(
        default=None,
        description="Cursor to fetch next page",
    )


class OffsetPage[T](_CamelModel):
    """Offset-paginated response envelope.

    Usage:
        @router.get("/products/offset", response_model=OffsetPage[ProductResponse])
    """

    data: list[T] = Field(default_factory=list, description="Items on this page")
    meta: OffsetMeta = Field(description="Pagination metadata")


class CursorPage[T](_CamelModel):
    """Cursor-paginated response envelope.

    Usage:
        @router.get("/products/cursor", response_model=CursorPage[ProductResponse])
    """

    data: list[T] = Field(default_factory=list, description="Items on this page")
    meta: CursorMeta = Field(description="Pagination metadata")


__all__ = [
    "CursorMeta",
    "CursorPage",
    "OffsetMeta",
    "OffsetPage",
]
