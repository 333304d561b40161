from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.pagination import Page
from trendiwear_api.common.schema import BaseSchema


class ServiceCategoryRef(BaseSchema):
    id: UUID
    name: str


class ServiceOut(BaseSchema):
    id: UUID
    name: str
    description: str | None = None
    duration: int
    image_url: str | None = None
    category_id: UUID
    category: ServiceCategoryRef | None = None
    is_home_service: bool
    requirements: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class ServiceListItem(ServiceOut):
    booking_count: int = 0


class ServicePage(Page[ServiceListItem]):
    pass


class ProfessionalServiceOut(BaseSchema):
    id: UUID
    professional_id: UUID
    service_id: UUID
    price: float
    is_active: bool
    service: ServiceOut
    created_at: datetime


class ServiceCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    price: float = Field(ge=0)
    duration: int = Field(gt=0, description="Duration in minutes.")
    image_url: str | None = None
    category_id: UUID
    is_home_service: bool = False
    requirements: str | None = None


class ServiceUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    duration: int | None = Field(default=None, gt=0)
    image_url: str | None = None
    category_id: UUID | None = None
    is_home_service: bool | None = None
    requirements: str | None = None
    is_active: bool | None = None


__all__ = [
    "ProfessionalServiceOut",
    "ServiceCategoryRef",
    "ServiceCreate",
    "ServiceListItem",
    "ServiceOut",
    "ServicePage",
    "ServiceUpdate",
]
