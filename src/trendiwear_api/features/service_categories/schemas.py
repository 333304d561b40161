from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.schema import BaseSchema


class ServiceCategoryOut(BaseSchema):
    id: UUID
    name: str
    description: str | None = None
    image_url: str | None = None
    is_active: bool
    service_count: int = 0
    created_at: datetime
    updated_at: datetime


class ServiceCategoryList(BaseSchema):
    service_categories: list[ServiceCategoryOut]


class ServiceCategoryCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=120)
    description: str | None = None
    image_url: str | None = None
    is_active: bool = True


class ServiceCategoryUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    description: str | None = None
    image_url: str | None = None
    is_active: bool | None = None


__all__ = [
    "ServiceCategoryCreate",
    "ServiceCategoryList",
    "ServiceCategoryOut",
    "ServiceCategoryUpdate",
]
