from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.pagination import Page
from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.features.services.schemas import ServiceOut
from trendiwear_api.features.users.schemas import UserSummary
from trendiwear_api.models import BookingStatus


class BookingOut(BaseSchema):
    id: UUID
    customer_id: UUID
    professional_id: UUID | None = None
    service_id: UUID
    booking_date: datetime
    end_time: datetime
    location: str | None = None
    notes: str | None = None
    price: float | None = None
    status: BookingStatus
    service: ServiceOut
    customer: UserSummary | None = None
    professional: UserSummary | None = None
    created_at: datetime
    updated_at: datetime


class BookingPage(Page[BookingOut]):
    pass


class BookingCreate(BaseSchema):
    service_id: UUID
    professional_id: UUID | None = None
    booking_date: datetime
    location: str | None = Field(default=None, max_length=255)
    notes: str | None = None


class BookingUpdate(BaseSchema):
    status: BookingStatus | None = None
    notes: str | None = None
    location: str | None = Field(default=None, max_length=255)


__all__ = ["BookingCreate", "BookingOut", "BookingPage", "BookingUpdate"]
