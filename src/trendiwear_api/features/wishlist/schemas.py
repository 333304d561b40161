from __future__ import annotations

from datetime import datetime
from uuid import UUID

from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.features.products.schemas import ProductBrief


class WishlistItemOut(BaseSchema):
    id: UUID
    product_id: UUID
    product: ProductBrief
    created_at: datetime


class WishlistOut(BaseSchema):
    items: list[WishlistItemOut]


class WishlistItemCreate(BaseSchema):
    product_id: UUID


__all__ = ["WishlistItemCreate", "WishlistItemOut", "WishlistOut"]
