from __future__ import annotations

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.pagination import Page
from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.features.users.schemas import UserSummary
from trendiwear_api.models import Gender


class CategoryRef(BaseSchema):
    id: UUID
    name: str
    slug: str


class CollectionRef(BaseSchema):
    id: UUID
    name: str
    slug: str


class ProductBrief(BaseSchema):
    """Product fields embedded in cart, wishlist and order lines."""

    id: UUID
    name: str
    price: float
    images: list[str] = Field(default_factory=list)
    stock_quantity: int
    is_active: bool
    is_in_stock: bool
    professional_id: UUID


class ProductOut(BaseSchema):
    id: UUID
    name: str
    description: str
    price: float
    stock_quantity: int
    images: list[str] = Field(default_factory=list)
    category_id: UUID
    collection_id: UUID | None = None
    professional_id: UUID
    sizes: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    material: str | None = None
    care_instructions: str | None = None
    estimated_delivery: int | None = None
    is_customizable: bool
    gender: Gender
    is_active: bool
    is_in_stock: bool
    view_count: int
    cart_count: int
    sold_count: int
    is_showcase_approved: bool
    approved_at: datetime | None = None
    category: CategoryRef | None = None
    collection: CollectionRef | None = None
    professional: UserSummary | None = None
    created_at: datetime
    updated_at: datetime


class ProductListItem(ProductOut):
    review_count: int = 0


class ProductPage(Page[ProductListItem]):
    pass


class ProductCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=200)
    description: str = ""
    price: float = Field(gt=0)
    stock_quantity: int = Field(default=0, ge=0)
    images: list[str] = Field(default_factory=list)
    category_id: UUID
    collection_id: UUID | None = None
    sizes: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    material: str | None = Field(default=None, max_length=200)
    care_instructions: str | None = None
    estimated_delivery: int | None = Field(default=None, ge=0)
    is_customizable: bool = False
    gender: Gender = Gender.UNISEX


class ProductUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    price: float | None = Field(default=None, gt=0)
    stock_quantity: int | None = Field(default=None, ge=0)
    images: list[str] | None = None
    category_id: UUID | None = None
    collection_id: UUID | None = None
    sizes: list[str] | None = None
    colors: list[str] | None = None
    tags: list[str] | None = None
    material: str | None = Field(default=None, max_length=200)
    care_instructions: str | None = None
    estimated_delivery: int | None = Field(default=None, ge=0)
    is_customizable: bool | None = None
    gender: Gender | None = None
    is_active: bool | None = None


ProductSortField = Literal["createdAt", "price", "viewCount"]
SortOrder = Literal["asc", "desc"]


class ShowcaseToggle(BaseSchema):
    approved: bool


class ShowcaseProductOut(ProductOut):
    review_count: int = 0
    average_rating: float = 0.0


class ShowcaseProductPage(Page[ShowcaseProductOut]):
    pass


class ShowcaseAdd(BaseSchema):
    product_id: UUID


__all__ = [
    "CategoryRef",
    "CollectionRef",
    "ProductBrief",
    "ProductCreate",
    "ProductListItem",
    "ProductOut",
    "ProductPage",
    "ProductSortField",
    "ProductUpdate",
    "ShowcaseAdd",
    "ShowcaseProductOut",
    "ShowcaseProductPage",
    "ShowcaseToggle",
    "SortOrder",
]
