from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.schema import BaseSchema


class SystemSettingOut(BaseSchema):
    key: str
    value: Any = None
    description: str | None = None
    category: str
    updated_by: UUID | None = None
    updated_at: datetime


class SystemSettingList(BaseSchema):
    settings: list[SystemSettingOut]


class SystemSettingUpsert(BaseSchema):
    key: str = Field(min_length=1, max_length=100)
    value: Any = None
    description: str | None = None
    category: str | None = Field(default=None, max_length=60)


__all__ = ["SystemSettingList", "SystemSettingOut", "SystemSettingUpsert"]
