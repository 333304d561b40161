"""Base services and the professional offerings built on them."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.common.pagination import PageParams, paginate_query
from trendiwear_api.common.text import like_pattern
from trendiwear_api.features.audit_logs.service import AuditLogService
from trendiwear_api.models import Booking, ProfessionalService, Service, ServiceCategory, User

from .schemas import (
    ProfessionalServiceOut,
    ServiceCreate,
    ServiceListItem,
    ServiceOut,
    ServicePage,
    ServiceUpdate,
)

logger = logging.getLogger(__name__)

_NOT_NULL = {"name", "duration", "category_id", "is_home_service", "is_active"}


class ServicesService:
    def __init__(self, *, session: AsyncSession, audit: AuditLogService) -> None:
        self._session = session
        self._audit = audit

    async def list_services(
        self,
        *,
        params: PageParams,
        category_id: UUID | None = None,
        is_home_service: bool | None = None,
        search: str | None = None,
    ) -> ServicePage:
        logger.debug(
            "services.list.start",
            extra=log_context(page=params.page, limit=params.limit, search=search),
        )

        stmt = select(Service).where(Service.is_active.is_(True))
        if category_id is not None:
            stmt = stmt.where(Service.category_id == category_id)
        if is_home_service is not None:
            stmt = stmt.where(Service.is_home_service.is_(is_home_service))
        if search:
            pattern = like_pattern(search)
            stmt = stmt.where(
                or_(
                    Service.name.ilike(pattern, escape="\\"),
                    Service.description.ilike(pattern, escape="\\"),
                )
            )

        result = await paginate_query(
            self._session,
            stmt,
            params=params,
            order_by=[Service.created_at.desc(), Service.id],
        )
        counts = await self._booking_counts([row.id for row in result.rows])
        items = [
            ServiceListItem.model_validate(row).model_copy(
                update={"booking_count": counts.get(row.id, 0)}
            )
            for row in result.rows
        ]
        logger.info(
            "services.list.success",
            extra=log_context(count=len(items), total=result.pagination.total),
        )
        return ServicePage(items=items, pagination=result.pagination)

    async def get_service(self, *, service_id: UUID) -> ServiceListItem:
        service = await self._get_or_404(service_id)
        counts = await self._booking_counts([service.id])
        return ServiceListItem.model_validate(service).model_copy(
            update={"booking_count": counts.get(service.id, 0)}
        )

    async def create_offering(
        self, *, payload: ServiceCreate, actor: User
    ) -> ProfessionalServiceOut:
        """Offer a service, reusing an identical base service when one exists.

        A base service is identical when name, category and duration match.
        """

        category = await self._session.get(ServiceCategory, payload.category_id)
        if category is None:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Service category not found")

        stmt = select(Service).where(
            Service.name == payload.name,
            Service.category_id == payload.category_id,
            Service.duration == payload.duration,
        )
        service = (await self._session.execute(stmt)).scalars().first()
        reused = service is not None
        if service is None:
            service = Service(
                name=payload.name,
                description=payload.description,
                duration=payload.duration,
                image_url=payload.image_url,
                category_id=payload.category_id,
                is_home_service=payload.is_home_service,
                requirements=payload.requirements,
            )
            self._session.add(service)
            await self._session.flush()
        else:
            existing = await self._session.execute(
                select(ProfessionalService.id).where(
                    ProfessionalService.professional_id == actor.id,
                    ProfessionalService.service_id == service.id,
                )
            )
            if existing.first() is not None:
                raise HTTPException(
                    status.HTTP_409_CONFLICT, detail="You already offer this service"
                )

        offering = ProfessionalService(
            professional_id=actor.id,
            service_id=service.id,
            price=payload.price,
        )
        self._session.add(offering)
        await self._session.flush()

        logger.info(
            "services.create.success",
            extra=log_context(
                user_id=str(actor.id), service_id=str(service.id), reused=reused
            ),
        )
        stmt = (
            select(ProfessionalService)
            .where(ProfessionalService.id == offering.id)
            .execution_options(populate_existing=True)
        )
        return ProfessionalServiceOut.model_validate(
            (await self._session.execute(stmt)).scalar_one()
        )

    async def update_service(
        self, *, service_id: UUID, payload: ServiceUpdate, actor: User
    ) -> ServiceOut:
        service = await self._get_or_404(service_id)
        updates = payload.model_dump(exclude_unset=True)
        if updates.get("category_id") is not None:
            if await self._session.get(ServiceCategory, updates["category_id"]) is None:
                raise HTTPException(
                    status.HTTP_400_BAD_REQUEST, detail="Service category not found"
                )
        for field, value in updates.items():
            if value is None and field in _NOT_NULL:
                continue
            setattr(service, field, value)
        await self._session.flush()

        await self._audit.record(
            actor=actor,
            action="UPDATE",
            entity="Service",
            entity_id=service.id,
            details={"fields": sorted(updates)},
        )
        logger.info("services.update.success", extra=log_context(service_id=str(service.id)))
        stmt = (
            select(Service)
            .where(Service.id == service.id)
            .execution_options(populate_existing=True)
        )
        return ServiceOut.model_validate((await self._session.execute(stmt)).scalar_one())

    async def delete_service(self, *, service_id: UUID, actor: User) -> None:
        service = await self._get_or_404(service_id)
        bookings = await self._booking_counts([service.id])
        if bookings.get(service.id):
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail="Cannot delete service that has bookings",
            )

        await self._audit.record(
            actor=actor,
            action="DELETE",
            entity="Service",
            entity_id=service.id,
            details={"name": service.name},
        )
        await self._session.delete(service)
        await self._session.flush()
        logger.info("services.delete.success", extra=log_context(service_id=str(service_id)))

    async def _booking_counts(self, service_ids: list[UUID]) -> dict[UUID, int]:
        if not service_ids:
            return {}
        stmt = (
            select(Booking.service_id, func.count())
            .where(Booking.service_id.in_(service_ids))
            .group_by(Booking.service_id)
        )
        return {row[0]: row[1] for row in (await self._session.execute(stmt)).all()}

    async def _get_or_404(self, service_id: UUID) -> Service:
        service = await self._session.get(Service, service_id)
        if service is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Service not found")
        return service


__all__ = ["ServicesService"]
