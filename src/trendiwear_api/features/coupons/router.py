from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from trendiwear_api.api.deps import get_coupons_service
from trendiwear_api.common.pagination import PageParams, page_params
from trendiwear_api.core.http import AdminUser

from .schemas import CouponCreate, CouponOut, CouponPage
from .service import CouponsService

router = APIRouter(prefix="/coupons", tags=["coupons"])

CouponsServiceDep = Annotated[CouponsService, Depends(get_coupons_service)]


@router.get("", response_model=CouponPage, summary="List coupons (administrator only)")
async def list_coupons(
    _: AdminUser,
    service: CouponsServiceDep,
    page: Annotated[PageParams, Depends(page_params(10))],
    active: bool | None = None,
) -> CouponPage:
    return await service.list_coupons(params=page, active=active)


@router.post(
    "",
    response_model=CouponOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a coupon (administrator only)",
    responses={status.HTTP_409_CONFLICT: {"description": "Coupon code already exists."}},
)
async def create_coupon(
    actor: AdminUser,
    payload: CouponCreate,
    service: CouponsServiceDep,
) -> CouponOut:
    return await service.create_coupon(payload=payload, actor=actor)


__all__ = ["router"]
