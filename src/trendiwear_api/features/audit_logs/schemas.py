from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from trendiwear_api.common.schema import BaseSchema


class AuditLogOut(BaseSchema):
    id: UUID
    user_id: UUID | None = None
    action: str
    entity: str
    entity_id: str | None = None
    details: dict[str, Any]
    ip_address: str | None = None
    created_at: datetime


class AuditLogList(BaseSchema):
    logs: list[AuditLogOut]


__all__ = ["AuditLogList", "AuditLogOut"]
