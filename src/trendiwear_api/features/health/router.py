"""API routes for the health module."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from trendiwear_api.api.deps import get_health_service

from .schemas import HealthCheckResponse
from .service import HealthService

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "",
    response_model=HealthCheckResponse,
    status_code=status.HTTP_200_OK,
    summary="Service health status",
    response_model_exclude_none=True,
)
async def read_health(
    service: Annotated[HealthService, Depends(get_health_service)],
) -> HealthCheckResponse:
    """Return the current health information for the API."""
    return await service.status()


__all__ = ["router"]
