"""Service bookings, scoped by the caller's role."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.common.pagination import PageParams, paginate_query
from trendiwear_api.core.auth.errors import PermissionDeniedError
from trendiwear_api.core.http.dependencies import is_admin
from trendiwear_api.features.notifications.service import NotificationsService
from trendiwear_api.models import (
    Booking,
    BookingStatus,
    NotificationType,
    ProfessionalService,
    Service,
    User,
    UserRole,
)

from .schemas import BookingCreate, BookingOut, BookingPage, BookingUpdate

logger = logging.getLogger(__name__)


def booking_end_time(start: datetime, duration_minutes: int) -> datetime:
    """Return when a booking starting at ``start`` ends, in UTC."""

    if start.tzinfo is None:
        start = start.replace(tzinfo=UTC)
    return start.astimezone(UTC) + timedelta(minutes=duration_minutes)


class BookingsService:
    def __init__(
        self, *, session: AsyncSession, notifications: NotificationsService | None = None
    ) -> None:
        self._session = session
        self._notifications = notifications or NotificationsService(session=session)

    async def list_bookings(
        self,
        *,
        user: User,
        params: PageParams,
        status_filter: BookingStatus | None = None,
        service_id: UUID | None = None,
    ) -> BookingPage:
        """Customers see their bookings, professionals also those made with them."""

        logger.debug(
            "bookings.list.start",
            extra=log_context(user_id=str(user.id), page=params.page, limit=params.limit),
        )

        stmt = select(Booking)
        role = UserRole(user.role)
        if role is UserRole.PROFESSIONAL:
            stmt = stmt.where(
                or_(Booking.professional_id == user.id, Booking.customer_id == user.id)
            )
        elif not is_admin(user):
            stmt = stmt.where(Booking.customer_id == user.id)
        if status_filter is not None:
            stmt = stmt.where(Booking.status == BookingStatus(status_filter))
        if service_id is not None:
            stmt = stmt.where(Booking.service_id == service_id)

        result = await paginate_query(
            self._session,
            stmt,
            params=params,
            order_by=[Booking.booking_date.desc(), Booking.id],
        )
        items = [BookingOut.model_validate(row) for row in result.rows]
        logger.info(
            "bookings.list.success",
            extra=log_context(
                user_id=str(user.id), count=len(items), total=result.pagination.total
            ),
        )
        return BookingPage(items=items, pagination=result.pagination)

    async def create_booking(self, *, user: User, payload: BookingCreate) -> BookingOut:
        service = await self._session.get(Service, payload.service_id)
        if service is None or not service.is_active:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Service not available")

        price: float | None = None
        if payload.professional_id is not None:
            stmt = select(ProfessionalService).where(
                ProfessionalService.professional_id == payload.professional_id,
                ProfessionalService.service_id == service.id,
                ProfessionalService.is_active.is_(True),
            )
            offering = (await self._session.execute(stmt)).scalar_one_or_none()
            if offering is None:
                raise HTTPException(
                    status.HTTP_400_BAD_REQUEST,
                    detail="The selected professional does not offer this service",
                )
            price = offering.price

        booking = Booking(
            customer_id=user.id,
            professional_id=payload.professional_id,
            service_id=service.id,
            booking_date=payload.booking_date,
            end_time=booking_end_time(payload.booking_date, service.duration),
            location=payload.location,
            notes=payload.notes,
            price=price,
        )
        self._session.add(booking)
        await self._session.flush()
        if booking.professional_id is not None:
            await self._notifications.notify(
                user_id=booking.professional_id,
                type=NotificationType.BOOKING_UPDATE,
                title="New booking",
                message=f"{service.name} was booked for {booking.booking_date:%Y-%m-%d %H:%M}.",
                data={"bookingId": str(booking.id)},
            )

        logger.info(
            "bookings.create.success",
            extra=log_context(
                user_id=str(user.id), booking_id=str(booking.id), service_id=str(service.id)
            ),
        )
        return await self._fresh(booking.id)

    async def update_booking(
        self, *, booking_id: UUID, payload: BookingUpdate, actor: User
    ) -> BookingOut:
        booking = await self._session.get(Booking, booking_id)
        if booking is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Booking not found")
        if actor.id not in (booking.customer_id, booking.professional_id) and not is_admin(actor):
            raise PermissionDeniedError("Forbidden")

        updates = payload.model_dump(exclude_unset=True)
        if updates.get("status") is not None:
            new_status = BookingStatus(updates["status"])
            if new_status is not BookingStatus(booking.status):
                booking.status = new_status
                await self._notify_status(booking, new_status, actor)
        if "notes" in updates:
            booking.notes = updates["notes"]
        if "location" in updates:
            booking.location = updates["location"]
        await self._session.flush()

        logger.info(
            "bookings.update.success",
            extra=log_context(
                booking_id=str(booking.id), status=BookingStatus(booking.status).value
            ),
        )
        return await self._fresh(booking.id)

    async def _notify_status(
        self, booking: Booking, new_status: BookingStatus, actor: User
    ) -> None:
        for recipient in (booking.customer_id, booking.professional_id):
            if recipient is None or recipient == actor.id:
                continue
            await self._notifications.notify(
                user_id=recipient,
                type=NotificationType.BOOKING_UPDATE,
                title="Booking update",
                message=f"Your booking is now {new_status.value.lower()}.",
                data={"bookingId": str(booking.id), "status": new_status.value},
            )

    async def _fresh(self, booking_id: UUID) -> BookingOut:
        stmt = (
            select(Booking)
            .where(Booking.id == booking_id)
            .execution_options(populate_existing=True)
        )
        return BookingOut.model_validate((await self._session.execute(stmt)).scalar_one())


__all__ = ["BookingsService", "booking_end_time"]
