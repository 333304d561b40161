from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from trendiwear_api.api.deps import get_orders_service
from trendiwear_api.common.pagination import PageParams, page_params
from trendiwear_api.core.http import CurrentUser
from trendiwear_api.models import OrderStatus

from .schemas import OrderCreate, OrderOut, OrderPage, OrderUpdate
from .service import OrdersService

router = APIRouter(prefix="/orders", tags=["orders"])

OrdersServiceDep = Annotated[OrdersService, Depends(get_orders_service)]
ORDER_ID_PARAM = Annotated[UUID, Path(description="Order identifier.")]


@router.get("", response_model=OrderPage, summary="List orders visible to the caller")
async def list_orders(
    user: CurrentUser,
    service: OrdersServiceDep,
    page: Annotated[PageParams, Depends(page_params(10))],
    status_filter: Annotated[OrderStatus | None, Query(alias="status")] = None,
) -> OrderPage:
    return await service.list_orders(user=user, params=page, status_filter=status_filter)


@router.post(
    "",
    response_model=OrderOut,
    status_code=status.HTTP_201_CREATED,
    summary="Place an order",
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "description": "Invalid address, unavailable product, stock or coupon."
        }
    },
)
async def create_order(
    user: CurrentUser,
    payload: OrderCreate,
    service: OrdersServiceDep,
) -> OrderOut:
    return await service.create_order(user=user, payload=payload)


@router.get(
    "/{order_id}",
    response_model=OrderOut,
    summary="Retrieve an order",
    responses={
        status.HTTP_403_FORBIDDEN: {"description": "Not a party to the order."},
        status.HTTP_404_NOT_FOUND: {"description": "Order not found."},
    },
)
async def get_order(
    user: CurrentUser,
    order_id: ORDER_ID_PARAM,
    service: OrdersServiceDep,
) -> OrderOut:
    return await service.get_order(order_id=order_id, user=user)


@router.put(
    "/{order_id}",
    response_model=OrderOut,
    summary="Update fulfilment status (selling professional or administrator)",
    responses={
        status.HTTP_403_FORBIDDEN: {"description": "Caller sells nothing in this order."},
        status.HTTP_404_NOT_FOUND: {"description": "Order not found."},
    },
)
async def update_order(
    actor: CurrentUser,
    order_id: ORDER_ID_PARAM,
    payload: OrderUpdate,
    service: OrdersServiceDep,
) -> OrderOut:
    return await service.update_order(order_id=order_id, payload=payload, actor=actor)


__all__ = ["router"]
