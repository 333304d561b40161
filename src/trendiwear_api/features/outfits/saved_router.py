from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status

from trendiwear_api.api.deps import get_saved_outfits_service
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import CurrentUser

from .saved import SavedOutfitsService
from .schemas import SavedOutfitList, SavedOutfitOut, SaveOutfitRequest

router = APIRouter(prefix="/saved-outfits", tags=["outfit-inspirations"])

SavedOutfitsServiceDep = Annotated[SavedOutfitsService, Depends(get_saved_outfits_service)]


@router.get("", response_model=SavedOutfitList, summary="List the caller's saved outfits")
async def list_saved_outfits(
    user: CurrentUser, service: SavedOutfitsServiceDep
) -> SavedOutfitList:
    return await service.list_saved(user=user)


@router.post(
    "",
    response_model=SavedOutfitOut,
    status_code=status.HTTP_201_CREATED,
    summary="Save an outfit inspiration",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Outfit already saved."},
        status.HTTP_404_NOT_FOUND: {"description": "Outfit inspiration not found."},
    },
)
async def save_outfit(
    user: CurrentUser,
    payload: SaveOutfitRequest,
    service: SavedOutfitsServiceDep,
) -> SavedOutfitOut:
    return await service.save(user=user, payload=payload)


@router.delete(
    "/{outfit_id}",
    response_model=MessageOut,
    summary="Remove an outfit from the caller's saved outfits",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Saved outfit not found."}},
)
async def unsave_outfit(
    user: CurrentUser,
    outfit_id: Annotated[UUID, Path(description="Outfit inspiration identifier.")],
    service: SavedOutfitsServiceDep,
) -> MessageOut:
    await service.unsave(user=user, outfit_id=outfit_id)
    return MessageOut(message="Outfit removed from saved outfits")


__all__ = ["router"]
