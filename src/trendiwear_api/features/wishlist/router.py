from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status

from trendiwear_api.api.deps import get_wishlist_service
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import CurrentUser

from .schemas import WishlistItemCreate, WishlistItemOut, WishlistOut
from .service import WishlistService

router = APIRouter(prefix="/wishlist", tags=["wishlist"])

WishlistServiceDep = Annotated[WishlistService, Depends(get_wishlist_service)]


@router.get("", response_model=WishlistOut, summary="List the caller's wishlist")
async def list_wishlist(user: CurrentUser, service: WishlistServiceDep) -> WishlistOut:
    return await service.list_items(user=user)


@router.post(
    "",
    response_model=WishlistItemOut,
    status_code=status.HTTP_201_CREATED,
    summary="Add a product to the wishlist",
    responses={
        status.HTTP_404_NOT_FOUND: {"description": "Product not found."},
        status.HTTP_409_CONFLICT: {"description": "Product already in wishlist."},
    },
)
async def add_wishlist_item(
    user: CurrentUser,
    payload: WishlistItemCreate,
    service: WishlistServiceDep,
) -> WishlistItemOut:
    return await service.add_item(user=user, payload=payload)


@router.delete(
    "/{product_id}",
    response_model=MessageOut,
    summary="Remove a product from the wishlist",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Item not found in wishlist."}},
)
async def remove_wishlist_item(
    user: CurrentUser,
    product_id: Annotated[UUID, Path(description="Product identifier.")],
    service: WishlistServiceDep,
) -> MessageOut:
    await service.remove_item(user=user, product_id=product_id)
    return MessageOut(message="Item removed from wishlist")


__all__ = ["router"]
