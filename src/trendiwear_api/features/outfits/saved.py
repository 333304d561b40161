from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.models import OutfitInspiration, SavedOutfit, User

from .schemas import SavedOutfitList, SavedOutfitOut, SaveOutfitRequest

logger = logging.getLogger(__name__)


class SavedOutfitsService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def list_saved(self, *, user: User) -> SavedOutfitList:
        stmt = (
            select(SavedOutfit)
            .where(SavedOutfit.user_id == user.id)
            .order_by(SavedOutfit.created_at.desc(), SavedOutfit.id)
        )
        rows = (await self._session.execute(stmt)).scalars().all()
        logger.info(
            "saved_outfits.list.success",
            extra=log_context(user_id=str(user.id), count=len(rows)),
        )
        return SavedOutfitList(saved_outfits=[SavedOutfitOut.model_validate(row) for row in rows])

    async def save(self, *, user: User, payload: SaveOutfitRequest) -> SavedOutfitOut:
        outfit = await self._session.get(OutfitInspiration, payload.outfit_id)
        if outfit is None:
            raise HTTPException(
                status.HTTP_404_NOT_FOUND, detail="Outfit inspiration not found"
            )
        if not outfit.is_active:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Outfit is not available")
        if await self._find(user.id, outfit.id) is not None:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Outfit already saved")

        saved = SavedOutfit(user_id=user.id, outfit_id=outfit.id)
        self._session.add(saved)
        await self._session.flush()
        await self._session.refresh(saved)

        logger.info(
            "saved_outfits.save.success",
            extra=log_context(user_id=str(user.id), outfit_id=str(outfit.id)),
        )
        return SavedOutfitOut.model_validate(saved)

    async def unsave(self, *, user: User, outfit_id: UUID) -> None:
        saved = await self._find(user.id, outfit_id)
        if saved is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Saved outfit not found")
        await self._session.delete(saved)
        await self._session.flush()
        logger.info(
            "saved_outfits.remove.success",
            extra=log_context(user_id=str(user.id), outfit_id=str(outfit_id)),
        )

    async def _find(self, user_id: UUID, outfit_id: UUID) -> SavedOutfit | None:
        stmt = select(SavedOutfit).where(
            SavedOutfit.user_id == user_id, SavedOutfit.outfit_id == outfit_id
        )
        return (await self._session.execute(stmt)).scalar_one_or_none()


__all__ = ["SavedOutfitsService"]
