from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.models import Service, ServiceCategory

from .schemas import (
    ServiceCategoryCreate,
    ServiceCategoryList,
    ServiceCategoryOut,
    ServiceCategoryUpdate,
)

logger = logging.getLogger(__name__)


class ServiceCategoriesService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def list_categories(self) -> ServiceCategoryList:
        """Active categories with their count of active services."""

        stmt = (
            select(ServiceCategory)
            .where(ServiceCategory.is_active.is_(True))
            .order_by(ServiceCategory.name)
        )
        rows = (await self._session.execute(stmt)).scalars().all()
        counts_stmt = (
            select(Service.category_id, func.count())
            .where(Service.is_active.is_(True))
            .group_by(Service.category_id)
        )
        counts = {row[0]: row[1] for row in (await self._session.execute(counts_stmt)).all()}
        logger.info("service_categories.list.success", extra=log_context(count=len(rows)))
        return ServiceCategoryList(
            service_categories=[self._out(row, counts.get(row.id, 0)) for row in rows]
        )

    async def create_category(self, *, payload: ServiceCategoryCreate) -> ServiceCategoryOut:
        await self._ensure_name_free(payload.name)
        category = ServiceCategory(**payload.model_dump())
        self._session.add(category)
        await self._session.flush()
        logger.info(
            "service_categories.create.success",
            extra=log_context(service_category_id=str(category.id)),
        )
        return self._out(category, 0)

    async def update_category(
        self, *, category_id: UUID, payload: ServiceCategoryUpdate
    ) -> ServiceCategoryOut:
        category = await self._get_or_404(category_id)
        updates = payload.model_dump(exclude_unset=True)
        if updates.get("name") and updates["name"] != category.name:
            await self._ensure_name_free(updates["name"])
        for field, value in updates.items():
            if value is None and field in {"name", "is_active"}:
                continue
            setattr(category, field, value)
        await self._session.flush()
        logger.info(
            "service_categories.update.success",
            extra=log_context(service_category_id=str(category_id)),
        )
        return self._out(category, await self._service_count(category_id))

    async def delete_category(self, *, category_id: UUID) -> None:
        category = await self._get_or_404(category_id)
        if await self._service_count(category_id):
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail="Cannot delete service category that has services",
            )
        await self._session.delete(category)
        await self._session.flush()
        logger.info(
            "service_categories.delete.success",
            extra=log_context(service_category_id=str(category_id)),
        )

    async def _service_count(self, category_id: UUID) -> int:
        stmt = select(func.count()).select_from(Service).where(Service.category_id == category_id)
        return int((await self._session.execute(stmt)).scalar_one())

    async def _ensure_name_free(self, name: str) -> None:
        stmt = select(ServiceCategory.id).where(ServiceCategory.name == name)
        if (await self._session.execute(stmt)).first() is not None:
            raise HTTPException(
                status.HTTP_409_CONFLICT,
                detail="A service category with this name already exists.",
            )

    async def _get_or_404(self, category_id: UUID) -> ServiceCategory:
        category = await self._session.get(ServiceCategory, category_id)
        if category is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Service category not found")
        return category

    @staticmethod
    def _out(category: ServiceCategory, count: int) -> ServiceCategoryOut:
        return ServiceCategoryOut.model_validate(category).model_copy(
            update={"service_count": count}
        )


__all__ = ["ServiceCategoriesService"]
