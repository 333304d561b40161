from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.schema import BaseSchema


class ProfessionalTypeOut(BaseSchema):
    id: UUID
    name: str
    description: str | None = None
    is_active: bool
    professional_count: int = 0
    created_at: datetime
    updated_at: datetime


class ProfessionalTypeList(BaseSchema):
    professional_types: list[ProfessionalTypeOut]


class ProfessionalTypeCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=120)
    description: str | None = None
    is_active: bool = True


class ProfessionalTypeUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    description: str | None = None
    is_active: bool | None = None


__all__ = [
    "ProfessionalTypeCreate",
    "ProfessionalTypeList",
    "ProfessionalTypeOut",
    "ProfessionalTypeUpdate",
]
