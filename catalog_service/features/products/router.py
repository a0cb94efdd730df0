"""API router for the products feature.

Endpoints:
    POST   /products               - Create a product
    GET    /products/offset        - List products by page number
    GET    /products/cursor        - List products after a cursor
    GET    /products/{product_id}  - Get a single product
    PUT    /products/{product_id}  - Update some or all fields of a product
    DELETE /products/{product_id}  - Delete a product, returning the removed record

Both listings are ordered newest first, with ties on ``createdAt`` broken by
id. The cursor for the next page is the id of the last product returned.

Example Usage:
    # Walk the whole catalog
    GET /products/cursor?limit=50
    GET /products/cursor?limit=50&cursor=<meta.nextCursor>
"""

from __future__ import annotations

from typing import Annotated
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Query, status

# FastAPI resolves Annotated[..., Depends(...)] at runtime
from catalog_service.core.dependencies import DbSessionDep  # noqa: TC001
from catalog_service.core.pagination import CursorMeta, OffsetMeta
from catalog_service.core.settings import get_pagination_settings
from catalog_service.features.products.schemas import (
    ProductCreate,
    ProductCursorPage,
    ProductOffsetPage,
    ProductResponse,
    ProductUpdate,
)
from catalog_service.features.products.service import ProductService

router = APIRouter(prefix="/products", tags=["products"])

_DEFAULT_LIMIT = get_pagination_settings().default_limit


# ──────────────────────────────────────────────────────────────
# Create
# ──────────────────────────────────────────────────────────────


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
    description="Validate the payload and persist a new product.",
    responses={422: {"description": "Validation failed"}},
)
async def create_product(payload: ProductCreate, session: DbSessionDep) -> ProductResponse:
    """Create a new product."""
    service = ProductService(session)
    product = await service.create_product(payload)
    return ProductResponse.model_validate(product)


# ──────────────────────────────────────────────────────────────
# Listings (declared before /{product_id} so the literal paths win)
# ──────────────────────────────────────────────────────────────


@router.get(
    "/offset",
    response_model=ProductOffsetPage,
    summary="List products (offset)",
    description="Return one numbered page of products with the total count.",
)
async def list_products_offset(
    session: DbSessionDep,
    page: Annotated[int, Query(ge=1, description="1-based page number")] = 1,
    limit: Annotated[int, Query(ge=1, description="Page size")] = _DEFAULT_LIMIT,
) -> ProductOffsetPage:
    """List products using page numbers."""
    service = ProductService(session)
    result = await service.list_offset(page=page, limit=limit)

    return ProductOffsetPage(
        data=[ProductResponse.model_validate(p) for p in result.rows],
        meta=OffsetMeta(
            total=result.total,
            page=result.page,
            limit=result.limit,
            total_pages=result.total_pages,
        ),
    )


@router.get(
    "/cursor",
    response_model=ProductCursorPage,
    summary="List products (cursor)",
    description="Return the products that follow the given cursor.",
    responses={400: {"description": "Cursor does not reference an existing product"}},
)
async def list_products_cursor(
    session: DbSessionDep,
    limit: Annotated[int, Query(ge=1, description="Page size")] = _DEFAULT_LIMIT,
    cursor: Annotated[
        UUID | None,
        Query(description="Id of the last product from the previous page"),
    ] = None,
) -> ProductCursorPage:
    """List products using an opaque cursor."""
    service = ProductService(session)
    result = await service.list_cursor(
        limit=limit,
        cursor=str(cursor) if cursor is not None else None,
    )

    return ProductCursorPage(
        data=[ProductResponse.model_validate(p) for p in result.rows],
        meta=CursorMeta(
            has_next_page=result.has_next_page,
            next_cursor=result.next_cursor,
        ),
    )


# ──────────────────────────────────────────────────────────────
# Single product
# ──────────────────────────────────────────────────────────────


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get a product",
    description="Fetch a product by its identifier.",
    responses={404: {"description": "Product not found"}},
)
async def get_product(product_id: UUID, session: DbSessionDep) -> ProductResponse:
    """Get a single product by ID."""
    service = ProductService(session)
    product = await service.get_product(str(product_id))
    return ProductResponse.model_validate(product)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Update a product",
    description="Apply the supplied fields to a product; omitted fields are kept.",
    responses={404: {"description": "Product not found"}},
)
async def update_product(
    product_id: UUID,
    payload: ProductUpdate,
    session: DbSessionDep,
) -> ProductResponse:
    """Update an existing product."""
    service = ProductService(session)
    product = await service.update_product(str(product_id), payload)
    return ProductResponse.model_validate(product)


@router.delete(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Delete a product",
    description="Delete a product and return the record that was removed.",
    responses={404: {"description": "Product not found"}},
)
async def delete_product(product_id: UUID, session: DbSessionDep) -> ProductResponse:
    """Delete a product."""
    service = ProductService(session)
    product = await service.delete_product(str(product_id))
    return ProductResponse.model_validate(product)
