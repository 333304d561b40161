from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from trendiwear_api.api.deps import get_collections_service
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import AdminUser
from trendiwear_api.models import Season

from .schemas import (
    CollectionCreate,
    CollectionList,
    CollectionListItem,
    CollectionOut,
    CollectionUpdate,
)
from .service import CollectionsService

router = APIRouter(prefix="/collections", tags=["collections"])

CollectionsServiceDep = Annotated[CollectionsService, Depends(get_collections_service)]
COLLECTION_ID_PARAM = Annotated[UUID, Path(description="Collection identifier.")]


@router.get("", response_model=CollectionList, summary="List active collections")
async def list_collections(
    service: CollectionsServiceDep,
    category_id: Annotated[UUID | None, Query(alias="categoryId")] = None,
    featured: bool = False,
    season: Season | None = None,
) -> CollectionList:
    return await service.list_collections(
        category_id=category_id, featured=featured, season=season
    )


@router.get(
    "/{collection_id}",
    response_model=CollectionListItem,
    summary="Retrieve a collection",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Collection not found."}},
)
async def get_collection(
    collection_id: COLLECTION_ID_PARAM,
    service: CollectionsServiceDep,
) -> CollectionListItem:
    return await service.get_collection(collection_id=collection_id)


@router.post(
    "",
    response_model=CollectionOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a collection (administrator only)",
)
async def create_collection(
    _: AdminUser,
    payload: CollectionCreate,
    service: CollectionsServiceDep,
) -> CollectionOut:
    return await service.create_collection(payload=payload)


@router.put(
    "/{collection_id}",
    response_model=CollectionOut,
    summary="Update a collection (administrator only)",
)
async def update_collection(
    _: AdminUser,
    collection_id: COLLECTION_ID_PARAM,
    payload: CollectionUpdate,
    service: CollectionsServiceDep,
) -> CollectionOut:
    return await service.update_collection(collection_id=collection_id, payload=payload)


@router.delete(
    "/{collection_id}",
    response_model=MessageOut,
    summary="Delete a collection without products (administrator only)",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Collection still has products."}},
)
async def delete_collection(
    _: AdminUser,
    collection_id: COLLECTION_ID_PARAM,
    service: CollectionsServiceDep,
) -> MessageOut:
    await service.delete_collection(collection_id=collection_id)
    return MessageOut(message="Collection deleted successfully")


__all__ = ["router"]
