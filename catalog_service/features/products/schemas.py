"""Pydantic schemas for the products feature."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from catalog_service.core.pagination import CursorPage, OffsetPage


class ProductBase(BaseModel):
    """Shared attributes for product payloads."""

    name: str = Field(
        ...,
        min_length=3,
        max_length=255,
        description="Display name (e.g., 'Espresso Machine')",
    )
    description: str | None = Field(
        default=None,
        description="Optional free-text description",
    )
    price: Decimal = Field(
        ...,
        gt=0,
        max_digits=10,
        decimal_places=2,
        description="Unit price, strictly positive, two decimal places",
    )
    stock: int = Field(
        default=0,
        ge=0,
        description="Units on hand",
    )


class ProductCreate(ProductBase):
    """Payload used when creating a product."""

    model_config = ConfigDict(extra="ignore")


class ProductUpdate(BaseModel):
    """Payload for a partial product update.

    Omitted fields are left untouched. ``description`` may be set to null
    to clear it; the other fields reject null.
    """

    name: str | None = Field(default=None, min_length=3, max_length=255)
    description: str | None = None
    price: Decimal | None = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    stock: int | None = Field(default=None, ge=0)

    @field_validator("name", "price", "stock")
    @classmethod
    def reject_null(cls, v: object) -> object:
        """Refuse explicit nulls for required columns."""
        if v is None:
            msg = "Field may not be null"
            raise ValueError(msg)
        return v


class ProductResponse(BaseModel):
    """Representation returned from the API (camelCase keys)."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    name: str
    description: str | None
    price: Decimal
    stock: int
    created_at: datetime
    updated_at: datetime


ProductOffsetPage = OffsetPage[ProductResponse]
ProductCursorPage = CursorPage[ProductResponse]
