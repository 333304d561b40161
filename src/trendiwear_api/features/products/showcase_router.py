"""Routes for the public showcase and its super-admin management."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from trendiwear_api.api.deps import get_showcase_service
from trendiwear_api.common.pagination import PageParams, page_params
from trendiwear_api.core.auth.errors import AuthenticationError, PermissionDeniedError
from trendiwear_api.core.http import OptionalUser, SuperAdminUser
from trendiwear_api.models import UserRole

from .schemas import ProductOut, ShowcaseAdd, ShowcaseProductPage
from .showcase import ShowcaseService

router = APIRouter(prefix="/showcase-products", tags=["showcase"])

ShowcaseServiceDep = Annotated[ShowcaseService, Depends(get_showcase_service)]


@router.get(
    "",
    response_model=ShowcaseProductPage,
    summary="List showcase products",
    description=(
        "The public view returns at most ten products. ``dashboard=true`` pages "
        "through every showcase product and requires the super administrator role."
    ),
)
async def list_showcase_products(
    user: OptionalUser,
    service: ShowcaseServiceDep,
    page: Annotated[PageParams, Depends(page_params())],
    dashboard: bool = False,
) -> ShowcaseProductPage:
    if not dashboard:
        return await service.list_showcase()
    if user is None:
        raise AuthenticationError("Unauthorized")
    if UserRole(user.role) is not UserRole.SUPER_ADMIN:
        raise PermissionDeniedError(
            "Only super admins can access showcase management",
            required_roles=[UserRole.SUPER_ADMIN.value],
        )
    return await service.list_showcase(params=page)


@router.post(
    "",
    response_model=ProductOut,
    status_code=status.HTTP_201_CREATED,
    summary="Add a product to the showcase (super administrator only)",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Product inactive or out of stock."},
        status.HTTP_404_NOT_FOUND: {"description": "Product not found."},
    },
)
async def add_showcase_product(
    actor: SuperAdminUser,
    payload: ShowcaseAdd,
    service: ShowcaseServiceDep,
) -> ProductOut:
    return await service.add_product(product_id=payload.product_id, actor=actor)


@router.delete(
    "",
    response_model=ProductOut,
    summary="Remove a product from the showcase (super administrator only)",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Product is not showcased."},
        status.HTTP_404_NOT_FOUND: {"description": "Product not found."},
    },
)
async def remove_showcase_product(
    actor: SuperAdminUser,
    product_id: Annotated[UUID, Query(alias="productId")],
    service: ShowcaseServiceDep,
) -> ProductOut:
    return await service.remove_product(product_id=product_id, actor=actor)


__all__ = ["router"]
