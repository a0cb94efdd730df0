"""Products feature: catalog CRUD with offset and cursor listings."""

from __future__ import annotations

from .repository import PRODUCT_ORDERING, ProductRepository, get_product_repository
from .schemas import (
    ProductCreate,
    ProductCursorPage,
    ProductOffsetPage,
    ProductResponse,
    ProductUpdate,
)
from .service import ProductService

__all__ = [
    "PRODUCT_ORDERING",
    "ProductCreate",
    "ProductCursorPage",
    "ProductOffsetPage",
    "ProductRepository",
    "ProductResponse",
    "ProductService",
    "ProductUpdate",
    "get_product_repository",
]
