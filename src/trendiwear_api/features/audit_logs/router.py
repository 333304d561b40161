"""Read access to the audit trail (administrators only)."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from trendiwear_api.api.deps import get_audit_log_service
from trendiwear_api.core.http import AdminUser

from .schemas import AuditLogList
from .service import AuditLogService

router = APIRouter(prefix="/audit-logs", tags=["audit-logs"])


@router.get(
    "",
    response_model=AuditLogList,
    status_code=status.HTTP_200_OK,
    summary="List recent audit log entries",
    responses={
        status.HTTP_401_UNAUTHORIZED: {"description": "Authentication required."},
        status.HTTP_403_FORBIDDEN: {"description": "Administrator role required."},
    },
)
async def list_audit_logs(
    _: AdminUser,
    service: Annotated[AuditLogService, Depends(get_audit_log_service)],
    action: str | None = None,
    entity: str | None = None,
    user_id: Annotated[UUID | None, Query(alias="userId")] = None,
    limit: Annotated[int, Query(ge=1, le=500)] = 50,
) -> AuditLogList:
    return await service.list_logs(action=action, entity=entity, user_id=user_id, limit=limit)


__all__ = ["router"]
