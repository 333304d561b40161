from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.pagination import Page
from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.features.products.schemas import ProductOut


class ProfileUser(BaseSchema):
    id: UUID
    first_name: str | None = None
    last_name: str | None = None
    profile_image: str | None = None
    email: str


class SpecializationRef(BaseSchema):
    id: UUID
    name: str


class SocialMediaIn(BaseSchema):
    platform: str = Field(min_length=1, max_length=50)
    url: str = Field(min_length=1, max_length=1024)


class SocialMediaOut(SocialMediaIn):
    id: UUID


class DeliveryZoneIn(BaseSchema):
    zone_name: str = Field(min_length=1, max_length=120)
    delivery_fee: float = Field(default=0.0, ge=0)
    estimated_days: int = Field(default=3, ge=0)


class DeliveryZoneOut(DeliveryZoneIn):
    id: UUID


class ProfessionalProfileOut(BaseSchema):
    id: UUID
    user_id: UUID
    slug: str
    business_name: str | None = None
    business_image: str | None = None
    specialization_id: UUID
    specialization: SpecializationRef | None = None
    experience: int
    bio: str | None = None
    portfolio_url: str | None = None
    location: str | None = None
    availability: str | None = None
    free_delivery_threshold: float | None = None
    is_verified: bool
    rating: float
    total_reviews: int
    user: ProfileUser | None = None
    social_media: list[SocialMediaOut] = Field(default_factory=list)
    delivery_zones: list[DeliveryZoneOut] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class ProfessionalProfilePage(Page[ProfessionalProfileOut]):
    pass


class ProfessionalProfileCreate(BaseSchema):
    business_name: str = Field(min_length=1, max_length=200)
    business_image: str | None = None
    specialization_id: UUID
    experience: int = Field(default=0, ge=0)
    bio: str | None = None
    portfolio_url: str | None = None
    location: str | None = Field(default=None, max_length=200)
    availability: str | None = Field(default=None, max_length=200)
    free_delivery_threshold: float | None = Field(default=None, ge=0)
    social_media: list[SocialMediaIn] = Field(default_factory=list)
    delivery_zones: list[DeliveryZoneIn] = Field(default_factory=list)


class ProfessionalProfileUpdate(BaseSchema):
    business_name: str | None = Field(default=None, min_length=1, max_length=200)
    business_image: str | None = None
    specialization_id: UUID | None = None
    experience: int | None = Field(default=None, ge=0)
    bio: str | None = None
    portfolio_url: str | None = None
    location: str | None = Field(default=None, max_length=200)
    availability: str | None = Field(default=None, max_length=200)
    free_delivery_threshold: float | None = Field(default=None, ge=0)
    is_verified: bool | None = None
    social_media: list[SocialMediaIn] | None = None
    delivery_zones: list[DeliveryZoneIn] | None = None


class ShopCategory(BaseSchema):
    name: str
    product_count: int


class ProfessionalShop(BaseSchema):
    profile: ProfessionalProfileOut
    products: list[ProductOut]
    categories: list[ShopCategory]


__all__ = [
    "DeliveryZoneIn",
    "DeliveryZoneOut",
    "ProfessionalProfileCreate",
    "ProfessionalProfileOut",
    "ProfessionalProfilePage",
    "ProfessionalProfileUpdate",
    "ProfessionalShop",
    "ProfileUser",
    "ShopCategory",
    "SocialMediaIn",
    "SocialMediaOut",
    "SpecializationRef",
]
