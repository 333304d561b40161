from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.pagination import Pagination
from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.features.products.schemas import ProductListItem, ProductOut


class CategoryRef(BaseSchema):
    id: UUID
    name: str
    slug: str
    image_url: str | None = None


class CollectionRef(BaseSchema):
    id: UUID
    name: str
    slug: str


class ChildCategory(CategoryRef):
    product_count: int = 0


class CategoryOut(BaseSchema):
    id: UUID
    name: str
    slug: str
    description: str | None = None
    image_url: str | None = None
    parent_id: UUID | None = None
    order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CategoryListItem(CategoryOut):
    parent: CategoryRef | None = None
    children: list[ChildCategory] = Field(default_factory=list)
    collections: list[CollectionRef] = Field(default_factory=list)
    product_count: int = 0
    products: list[ProductOut] | None = None


class CategoryList(BaseSchema):
    categories: list[CategoryListItem]


class CategoryDetail(BaseSchema):
    category: CategoryListItem
    products: list[ProductListItem] = Field(default_factory=list)
    pagination: Pagination | None = None


class CategoryCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=120)
    slug: str | None = Field(default=None, max_length=160)
    description: str | None = None
    image_url: str | None = None
    parent_id: UUID | None = None
    order: int = 0
    is_active: bool = True


class CategoryUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    slug: str | None = Field(default=None, min_length=1, max_length=160)
    description: str | None = None
    image_url: str | None = None
    parent_id: UUID | None = None
    order: int | None = None
    is_active: bool | None = None


__all__ = [
    "CategoryCreate",
    "CategoryDetail",
    "CategoryList",
    "CategoryListItem",
    "CategoryOut",
    "CategoryRef",
    "ChildCategory",
    "CollectionRef",
    "CategoryUpdate",
]
