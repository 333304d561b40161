from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.features.outfits.schemas import OutfitSummary
from trendiwear_api.models import Season


class EventOut(BaseSchema):
    id: UUID
    name: str
    description: str | None = None
    image_url: str | None = None
    dress_codes: list[str] = Field(default_factory=list)
    seasonality: list[Season] = Field(default_factory=list)
    is_active: bool
    created_at: datetime
    updated_at: datetime


class EventListItem(EventOut):
    outfit_count: int = 0
    outfits: list[OutfitSummary] = Field(default_factory=list)


class EventList(BaseSchema):
    events: list[EventListItem]


class EventCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=120)
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=1024)
    dress_codes: list[str] = Field(default_factory=list)
    seasonality: list[Season] = Field(default_factory=list)
    is_active: bool = True


class EventUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=1024)
    dress_codes: list[str] | None = None
    seasonality: list[Season] | None = None
    is_active: bool | None = None


__all__ = ["EventCreate", "EventList", "EventListItem", "EventOut", "EventUpdate"]
