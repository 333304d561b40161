from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.features.users.schemas import UserSummary
from trendiwear_api.models import ReportStatus


class ReportOut(BaseSchema):
    id: UUID
    reporter_id: UUID
    content_type: str
    content_id: str
    reason: str
    description: str | None = None
    status: ReportStatus
    resolution: str | None = None
    reviewed_by: UUID | None = None
    reviewed_at: datetime | None = None
    reporter: UserSummary | None = None
    created_at: datetime


class ReportList(BaseSchema):
    reports: list[ReportOut]


class ReportCreate(BaseSchema):
    content_type: str = Field(min_length=1, max_length=60)
    content_id: str = Field(min_length=1, max_length=64)
    reason: str = Field(min_length=1, max_length=200)
    description: str | None = None


class ReportResolve(BaseSchema):
    status: ReportStatus
    resolution: str | None = None


__all__ = ["ReportCreate", "ReportList", "ReportOut", "ReportResolve"]
