from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from trendiwear_api.api.deps import get_outfits_service
from trendiwear_api.common.pagination import PageParams, page_params
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import CurrentUser

from .schemas import OutfitCreate, OutfitOut, OutfitPage, OutfitUpdate
from .service import OutfitsService

router = APIRouter(prefix="/outfit-inspirations", tags=["outfit-inspirations"])

OutfitsServiceDep = Annotated[OutfitsService, Depends(get_outfits_service)]
OUTFIT_ID_PARAM = Annotated[UUID, Path(description="Outfit inspiration identifier.")]


@router.get("", response_model=OutfitPage, summary="List active outfit inspirations")
async def list_outfits(
    service: OutfitsServiceDep,
    page: Annotated[PageParams, Depends(page_params(12))],
    event_id: Annotated[UUID | None, Query(alias="eventId")] = None,
    stylist_id: Annotated[UUID | None, Query(alias="stylistId")] = None,
    featured: bool = False,
    search: Annotated[str | None, Query(max_length=128)] = None,
) -> OutfitPage:
    return await service.list_outfits(
        params=page,
        event_id=event_id,
        stylist_id=stylist_id,
        featured=featured,
        search=search,
    )


@router.get(
    "/{outfit_id}",
    response_model=OutfitOut,
    summary="Read an outfit inspiration",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Outfit inspiration not found."}},
)
async def get_outfit(outfit_id: OUTFIT_ID_PARAM, service: OutfitsServiceDep) -> OutfitOut:
    return await service.get_outfit(outfit_id=outfit_id)


@router.post(
    "",
    response_model=OutfitOut,
    status_code=status.HTTP_201_CREATED,
    summary="Curate an outfit inspiration (professional or administrator)",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Unknown products."},
        status.HTTP_404_NOT_FOUND: {"description": "Event not found."},
    },
)
async def create_outfit(
    stylist: CurrentUser,
    payload: OutfitCreate,
    service: OutfitsServiceDep,
) -> OutfitOut:
    return await service.create_outfit(payload=payload, stylist=stylist)


@router.put(
    "/{outfit_id}",
    response_model=OutfitOut,
    summary="Update an outfit inspiration (stylist or administrator)",
    responses={
        status.HTTP_403_FORBIDDEN: {"description": "Only the stylist or an administrator."},
        status.HTTP_404_NOT_FOUND: {"description": "Outfit inspiration not found."},
    },
)
async def update_outfit(
    actor: CurrentUser,
    outfit_id: OUTFIT_ID_PARAM,
    payload: OutfitUpdate,
    service: OutfitsServiceDep,
) -> OutfitOut:
    return await service.update_outfit(outfit_id=outfit_id, payload=payload, actor=actor)


@router.delete(
    "/{outfit_id}",
    response_model=MessageOut,
    summary="Delete an outfit inspiration (stylist or administrator)",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Outfit inspiration not found."}},
)
async def delete_outfit(
    actor: CurrentUser,
    outfit_id: OUTFIT_ID_PARAM,
    service: OutfitsServiceDep,
) -> MessageOut:
    await service.delete_outfit(outfit_id=outfit_id, actor=actor)
    return MessageOut(message="Outfit inspiration deleted successfully")


__all__ = ["router"]
