from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.pagination import Page
from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.features.users.schemas import UserSummary
from trendiwear_api.models import ReviewTargetType


class ReviewOut(BaseSchema):
    id: UUID
    user_id: UUID
    target_id: UUID
    target_type: ReviewTargetType
    order_id: UUID | None = None
    rating: int
    title: str | None = None
    comment: str | None = None
    images: list[str] = Field(default_factory=list)
    is_verified: bool
    user: UserSummary | None = None
    created_at: datetime


class ReviewPage(Page[ReviewOut]):
    pass


class ReviewCreate(BaseSchema):
    target_id: UUID
    target_type: ReviewTargetType
    order_id: UUID | None = None
    rating: int
    title: str | None = Field(default=None, max_length=200)
    comment: str | None = None
    images: list[str] = Field(default_factory=list)


__all__ = ["ReviewCreate", "ReviewOut", "ReviewPage"]
