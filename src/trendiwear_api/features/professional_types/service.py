from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.models import ProfessionalProfile, ProfessionalType

from .schemas import (
    ProfessionalTypeCreate,
    ProfessionalTypeList,
    ProfessionalTypeOut,
    ProfessionalTypeUpdate,
)

logger = logging.getLogger(__name__)


class ProfessionalTypesService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def list_types(self) -> ProfessionalTypeList:
        stmt = select(ProfessionalType).order_by(ProfessionalType.name)
        rows = (await self._session.execute(stmt)).scalars().all()
        counts_stmt = select(ProfessionalProfile.specialization_id, func.count()).group_by(
            ProfessionalProfile.specialization_id
        )
        counts = {row[0]: row[1] for row in (await self._session.execute(counts_stmt)).all()}
        logger.info("professional_types.list.success", extra=log_context(count=len(rows)))
        return ProfessionalTypeList(
            professional_types=[self._out(row, counts.get(row.id, 0)) for row in rows]
        )

    async def create_type(self, *, payload: ProfessionalTypeCreate) -> ProfessionalTypeOut:
        await self._ensure_name_free(payload.name)
        professional_type = ProfessionalType(**payload.model_dump())
        self._session.add(professional_type)
        await self._session.flush()
        logger.info(
            "professional_types.create.success",
            extra=log_context(professional_type_id=str(professional_type.id)),
        )
        return self._out(professional_type, 0)

    async def update_type(
        self, *, type_id: UUID, payload: ProfessionalTypeUpdate
    ) -> ProfessionalTypeOut:
        professional_type = await self._get_or_404(type_id)
        updates = payload.model_dump(exclude_unset=True)
        if updates.get("name") and updates["name"] != professional_type.name:
            await self._ensure_name_free(updates["name"])
        for field, value in updates.items():
            if value is None and field in {"name", "is_active"}:
                continue
            setattr(professional_type, field, value)
        await self._session.flush()
        logger.info(
            "professional_types.update.success",
            extra=log_context(professional_type_id=str(type_id)),
        )
        return self._out(professional_type, await self._professional_count(type_id))

    async def delete_type(self, *, type_id: UUID) -> None:
        professional_type = await self._get_or_404(type_id)
        if await self._professional_count(type_id):
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail="Cannot delete professional type that is being used by professionals",
            )
        await self._session.delete(professional_type)
        await self._session.flush()
        logger.info(
            "professional_types.delete.success",
            extra=log_context(professional_type_id=str(type_id)),
        )

    async def _professional_count(self, type_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(ProfessionalProfile)
            .where(ProfessionalProfile.specialization_id == type_id)
        )
        return int((await self._session.execute(stmt)).scalar_one())

    async def _ensure_name_free(self, name: str) -> None:
        stmt = select(ProfessionalType.id).where(ProfessionalType.name == name)
        if (await self._session.execute(stmt)).first() is not None:
            raise HTTPException(
                status.HTTP_409_CONFLICT,
                detail="A professional type with this name already exists.",
            )

    async def _get_or_404(self, type_id: UUID) -> ProfessionalType:
        professional_type = await self._session.get(ProfessionalType, type_id)
        if professional_type is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Professional type not found")
        return professional_type

    @staticmethod
    def _out(professional_type: ProfessionalType, count: int) -> ProfessionalTypeOut:
        return ProfessionalTypeOut.model_validate(professional_type).model_copy(
            update={"professional_count": count}
        )


__all__ = ["ProfessionalTypesService"]
