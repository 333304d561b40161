from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from trendiwear_api.api.deps import get_bookings_service
from trendiwear_api.common.pagination import PageParams, page_params
from trendiwear_api.core.http import CurrentUser
from trendiwear_api.models import BookingStatus

from .schemas import BookingCreate, BookingOut, BookingPage, BookingUpdate
from .service import BookingsService

router = APIRouter(prefix="/bookings", tags=["bookings"])

BookingsServiceDep = Annotated[BookingsService, Depends(get_bookings_service)]


@router.get("", response_model=BookingPage, summary="List bookings visible to the caller")
async def list_bookings(
    user: CurrentUser,
    service: BookingsServiceDep,
    page: Annotated[PageParams, Depends(page_params(10))],
    status_filter: Annotated[BookingStatus | None, Query(alias="status")] = None,
    service_id: Annotated[UUID | None, Query(alias="serviceId")] = None,
) -> BookingPage:
    return await service.list_bookings(
        user=user, params=page, status_filter=status_filter, service_id=service_id
    )


@router.post(
    "",
    response_model=BookingOut,
    status_code=status.HTTP_201_CREATED,
    summary="Book a service",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Service not available."}},
)
async def create_booking(
    user: CurrentUser,
    payload: BookingCreate,
    service: BookingsServiceDep,
) -> BookingOut:
    return await service.create_booking(user=user, payload=payload)


@router.put(
    "/{booking_id}",
    response_model=BookingOut,
    summary="Update a booking (customer, professional or administrator)",
    responses={
        status.HTTP_403_FORBIDDEN: {"description": "Not a party to the booking."},
        status.HTTP_404_NOT_FOUND: {"description": "Booking not found."},
    },
)
async def update_booking(
    actor: CurrentUser,
    booking_id: Annotated[UUID, Path(description="Booking identifier.")],
    payload: BookingUpdate,
    service: BookingsServiceDep,
) -> BookingOut:
    return await service.update_booking(booking_id=booking_id, payload=payload, actor=actor)


__all__ = ["router"]
