from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.pagination import Page
from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.features.products.schemas import ProductBrief
from trendiwear_api.features.users.schemas import UserSummary


class EventRef(BaseSchema):
    id: UUID
    name: str


class OutfitSummary(BaseSchema):
    """Card view used in event previews and saved-outfit lists."""

    id: UUID
    event_id: UUID
    stylist_id: UUID
    title: str
    outfit_image_url: str
    total_price: float | None = None
    tags: list[str] = Field(default_factory=list)
    likes: int
    is_featured: bool
    created_at: datetime


class OutfitProductOut(BaseSchema):
    product_id: UUID
    position: int
    notes: str | None = None
    product: ProductBrief


class OutfitOut(OutfitSummary):
    description: str | None = None
    is_active: bool
    updated_at: datetime
    event: EventRef
    stylist: UserSummary
    stylist_business_name: str | None = None
    products: list[OutfitProductOut] = Field(default_factory=list)
    saved_count: int = 0


class OutfitPage(Page[OutfitOut]):
    pass


class OutfitProductIn(BaseSchema):
    product_id: UUID
    position: int | None = Field(default=None, ge=0)
    notes: str | None = None


class OutfitCreate(BaseSchema):
    event_id: UUID
    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    outfit_image_url: str = Field(min_length=1, max_length=1024)
    total_price: float | None = Field(default=None, ge=0)
    tags: list[str] = Field(default_factory=list)
    is_featured: bool = False
    products: list[OutfitProductIn] = Field(default_factory=list)


class OutfitUpdate(BaseSchema):
    event_id: UUID | None = None
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    outfit_image_url: str | None = Field(default=None, min_length=1, max_length=1024)
    total_price: float | None = Field(default=None, ge=0)
    tags: list[str] | None = None
    is_featured: bool | None = None
    is_active: bool | None = None
    products: list[OutfitProductIn] | None = None


class SavedOutfitOut(BaseSchema):
    id: UUID
    outfit_id: UUID
    created_at: datetime
    outfit: OutfitSummary


class SavedOutfitList(BaseSchema):
    saved_outfits: list[SavedOutfitOut]


class SaveOutfitRequest(BaseSchema):
    outfit_id: UUID


__all__ = [
    "EventRef",
    "OutfitCreate",
    "OutfitOut",
    "OutfitPage",
    "OutfitProductIn",
    "OutfitProductOut",
    "OutfitSummary",
    "OutfitUpdate",
    "SaveOutfitRequest",
    "SavedOutfitList",
    "SavedOutfitOut",
]
