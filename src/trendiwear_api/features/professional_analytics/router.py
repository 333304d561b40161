from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from trendiwear_api.api.deps import get_professional_analytics_service
from trendiwear_api.core.http import ProfessionalUser

from .metrics import Period
from .schemas import ProfessionalAnalytics, ProfessionalDashboard
from .service import ProfessionalAnalyticsService

router = APIRouter(prefix="/professional-analytics", tags=["professional-analytics"])

AnalyticsServiceDep = Annotated[
    ProfessionalAnalyticsService, Depends(get_professional_analytics_service)
]
_NO_PROFILE = {status.HTTP_404_NOT_FOUND: {"description": "Professional profile not found."}}


@router.get(
    "",
    response_model=ProfessionalAnalytics,
    summary="Sales analytics for the caller's storefront",
    responses=_NO_PROFILE,
)
async def professional_analytics(
    user: ProfessionalUser,
    service: AnalyticsServiceDep,
    period: Period = "30d",
    compare: bool = False,
) -> ProfessionalAnalytics:
    return await service.analytics(user=user, period=period, compare=compare)


@router.get(
    "/dashboard",
    response_model=ProfessionalDashboard,
    summary="Thirty-day dashboard for the caller's storefront",
    responses=_NO_PROFILE,
)
async def professional_dashboard(
    user: ProfessionalUser, service: AnalyticsServiceDep
) -> ProfessionalDashboard:
    return await service.dashboard(user=user)


__all__ = ["router"]
