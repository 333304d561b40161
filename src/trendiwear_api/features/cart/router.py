"""Routes for the caller's shopping cart."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status

from trendiwear_api.api.deps import get_cart_service
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import CurrentUser

from .schemas import CartItemCreate, CartItemOut, CartItemUpdate, CartOut
from .service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])

CartServiceDep = Annotated[CartService, Depends(get_cart_service)]
CART_ITEM_ID_PARAM = Annotated[UUID, Path(description="Cart line identifier.")]


@router.get(
    "",
    response_model=CartOut,
    status_code=status.HTTP_200_OK,
    summary="Return the caller's cart with totals",
)
async def get_cart(user: CurrentUser, service: CartServiceDep) -> CartOut:
    return await service.get_cart(user=user)


@router.post(
    "",
    response_model=CartItemOut,
    status_code=status.HTTP_201_CREATED,
    summary="Add a product to the cart",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Unavailable or insufficient stock."}},
)
async def add_cart_item(
    user: CurrentUser,
    payload: CartItemCreate,
    service: CartServiceDep,
) -> CartItemOut:
    return await service.add_item(user=user, payload=payload)


@router.put(
    "/{item_id}",
    response_model=CartItemOut,
    status_code=status.HTTP_200_OK,
    summary="Change the quantity of a cart line",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Quantity out of range."},
        status.HTTP_404_NOT_FOUND: {"description": "Cart item not found."},
    },
)
async def update_cart_item(
    user: CurrentUser,
    item_id: CART_ITEM_ID_PARAM,
    payload: CartItemUpdate,
    service: CartServiceDep,
) -> CartItemOut:
    return await service.update_item(user=user, item_id=item_id, payload=payload)


@router.delete(
    "/{item_id}",
    response_model=MessageOut,
    status_code=status.HTTP_200_OK,
    summary="Remove a cart line",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Cart item not found."}},
)
async def remove_cart_item(
    user: CurrentUser,
    item_id: CART_ITEM_ID_PARAM,
    service: CartServiceDep,
) -> MessageOut:
    await service.remove_item(user=user, item_id=item_id)
    return MessageOut(message="Item removed from cart")


__all__ = ["router"]
