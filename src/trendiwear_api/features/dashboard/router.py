from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from trendiwear_api.api.deps import get_dashboard_service
from trendiwear_api.core.http import AdminUser

from .schemas import DashboardStats
from .service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

DashboardServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]


@router.get(
    "/stats",
    response_model=DashboardStats,
    summary="Platform totals and month-over-month order growth (administrator only)",
)
async def dashboard_stats(_: AdminUser, service: DashboardServiceDep) -> DashboardStats:
    return await service.stats()


__all__ = ["router"]
