from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.features.products.schemas import CategoryRef, ProductOut
from trendiwear_api.models import Season


class CollectionOut(BaseSchema):
    id: UUID
    name: str
    slug: str
    description: str | None = None
    image_url: str | None = None
    category_id: UUID | None = None
    season: Season | None = None
    is_featured: bool
    order: int
    is_active: bool
    category: CategoryRef | None = None
    created_at: datetime
    updated_at: datetime


class CollectionListItem(CollectionOut):
    product_count: int = 0
    products: list[ProductOut] = Field(default_factory=list)


class CollectionList(BaseSchema):
    collections: list[CollectionListItem]


class CollectionCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=120)
    slug: str | None = Field(default=None, max_length=160)
    description: str | None = None
    image_url: str | None = None
    category_id: UUID | None = None
    season: Season | None = None
    is_featured: bool = False
    order: int = 0
    is_active: bool = True


class CollectionUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    slug: str | None = Field(default=None, min_length=1, max_length=160)
    description: str | None = None
    image_url: str | None = None
    category_id: UUID | None = None
    season: Season | None = None
    is_featured: bool | None = None
    order: int | None = None
    is_active: bool | None = None


__all__ = [
    "CollectionCreate",
    "CollectionList",
    "CollectionListItem",
    "CollectionOut",
    "CollectionUpdate",
]
