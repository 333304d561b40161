from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from trendiwear_api.api.deps import get_reported_content_service
from trendiwear_api.core.http import AdminUser, CurrentUser
from trendiwear_api.models import ReportStatus

from .schemas import ReportCreate, ReportList, ReportOut, ReportResolve
from .service import ReportedContentService

router = APIRouter(prefix="/reported-content", tags=["moderation"])

ReportsServiceDep = Annotated[ReportedContentService, Depends(get_reported_content_service)]


@router.get("", response_model=ReportList, summary="List content reports (administrator only)")
async def list_reports(
    _: AdminUser,
    service: ReportsServiceDep,
    status_filter: Annotated[ReportStatus | None, Query(alias="status")] = None,
) -> ReportList:
    return await service.list_reports(status_filter=status_filter)


@router.post(
    "",
    response_model=ReportOut,
    status_code=status.HTTP_201_CREATED,
    summary="Report content for moderation",
)
async def create_report(
    user: CurrentUser,
    payload: ReportCreate,
    service: ReportsServiceDep,
) -> ReportOut:
    return await service.create_report(user=user, payload=payload)


@router.put(
    "/{report_id}",
    response_model=ReportOut,
    summary="Record a moderation decision (administrator only)",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Report not found."}},
)
async def resolve_report(
    actor: AdminUser,
    report_id: Annotated[UUID, Path(description="Report identifier.")],
    payload: ReportResolve,
    service: ReportsServiceDep,
) -> ReportOut:
    return await service.resolve_report(report_id=report_id, payload=payload, actor=actor)


__all__ = ["router"]
