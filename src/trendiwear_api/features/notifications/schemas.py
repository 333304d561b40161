from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.pagination import Page
from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.models import NotificationType


class NotificationOut(BaseSchema):
    id: UUID
    user_id: UUID
    type: NotificationType
    title: str
    message: str
    data: dict[str, Any] | None = None
    is_read: bool
    created_at: datetime


class NotificationPage(Page[NotificationOut]):
    unread_count: int = 0


class NotificationCreate(BaseSchema):
    user_id: UUID
    type: NotificationType = NotificationType.SYSTEM
    title: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=1)
    data: dict[str, Any] | None = None


class NotificationsMarkRead(BaseSchema):
    mark_all_as_read: bool = False


class NotificationUpdate(BaseSchema):
    is_read: bool


__all__ = [
    "NotificationCreate",
    "NotificationOut",
    "NotificationPage",
    "NotificationUpdate",
    "NotificationsMarkRead",
]
