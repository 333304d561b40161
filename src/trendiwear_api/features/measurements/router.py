from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from trendiwear_api.api.deps import get_measurements_service
from trendiwear_api.core.http import CurrentUser

from .schemas import MeasurementEnvelope, MeasurementOut, MeasurementUpsert
from .service import MeasurementsService

router = APIRouter(prefix="/measurements", tags=["measurements"])

MeasurementsServiceDep = Annotated[MeasurementsService, Depends(get_measurements_service)]


@router.get(
    "",
    response_model=MeasurementEnvelope,
    summary="Read the caller's measurements (null when none are recorded)",
)
async def get_measurements(
    user: CurrentUser, service: MeasurementsServiceDep
) -> MeasurementEnvelope:
    return await service.get_measurements(user=user)


@router.post(
    "",
    response_model=MeasurementOut,
    status_code=status.HTTP_201_CREATED,
    summary="Record or update the caller's measurements",
)
async def upsert_measurements(
    user: CurrentUser,
    payload: MeasurementUpsert,
    service: MeasurementsServiceDep,
) -> MeasurementOut:
    return await service.upsert(user=user, payload=payload)


__all__ = ["router"]
