from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.features.products.schemas import ProductBrief


class CartItemOut(BaseSchema):
    id: UUID
    product_id: UUID
    quantity: int
    size: str
    color: str
    product: ProductBrief
    created_at: datetime
    updated_at: datetime


class CartSummary(BaseSchema):
    item_count: int
    subtotal: float
    estimated_total: float


class CartOut(BaseSchema):
    items: list[CartItemOut]
    summary: CartSummary


class CartItemCreate(BaseSchema):
    product_id: UUID
    quantity: int = Field(default=1, ge=1)
    size: str | None = Field(default=None, max_length=40)
    color: str | None = Field(default=None, max_length=40)


class CartItemUpdate(BaseSchema):
    quantity: int


__all__ = ["CartItemCreate", "CartItemOut", "CartItemUpdate", "CartOut", "CartSummary"]
