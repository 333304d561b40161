"""Routes for the category tree."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from trendiwear_api.api.deps import get_categories_service
from trendiwear_api.common.pagination import PageParams, page_params
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import AdminUser

from .schemas import CategoryCreate, CategoryDetail, CategoryList, CategoryOut, CategoryUpdate
from .service import CategoriesService

router = APIRouter(prefix="/categories", tags=["categories"])

CategoriesServiceDep = Annotated[CategoriesService, Depends(get_categories_service)]
CATEGORY_ID_PARAM = Annotated[UUID, Path(description="Category identifier.")]
INCLUDE_PRODUCTS = Annotated[bool, Query(alias="includeProducts")]


@router.get("", response_model=CategoryList, summary="List every category by display order")
async def list_categories(
    service: CategoriesServiceDep,
    include_products: INCLUDE_PRODUCTS = False,
) -> CategoryList:
    return await service.list_categories(include_products=include_products)


@router.get("/parents", response_model=CategoryList, summary="List top-level categories")
async def list_parent_categories(
    service: CategoriesServiceDep,
    include_products: INCLUDE_PRODUCTS = False,
) -> CategoryList:
    return await service.list_categories(parents_only=True, include_products=include_products)


@router.get(
    "/{category_id}",
    response_model=CategoryDetail,
    summary="Retrieve a category, optionally with its subtree's products",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Category not found."}},
)
async def get_category(
    category_id: CATEGORY_ID_PARAM,
    service: CategoriesServiceDep,
    page: Annotated[PageParams, Depends(page_params(20))],
    include_products: INCLUDE_PRODUCTS = False,
) -> CategoryDetail:
    return await service.get_category(
        category_id=category_id, include_products=include_products, params=page
    )


@router.post(
    "",
    response_model=CategoryOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category (administrator only)",
    responses={status.HTTP_409_CONFLICT: {"description": "Slug already in use."}},
)
async def create_category(
    actor: AdminUser,
    payload: CategoryCreate,
    service: CategoriesServiceDep,
) -> CategoryOut:
    return await service.create_category(payload=payload, actor=actor)


@router.put(
    "/{category_id}",
    response_model=CategoryOut,
    summary="Update a category (administrator only)",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Category not found."}},
)
async def update_category(
    actor: AdminUser,
    category_id: CATEGORY_ID_PARAM,
    payload: CategoryUpdate,
    service: CategoriesServiceDep,
) -> CategoryOut:
    return await service.update_category(category_id=category_id, payload=payload, actor=actor)


@router.delete(
    "/{category_id}",
    response_model=MessageOut,
    summary="Delete a category without dependents (administrator only)",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Category still has dependents."},
        status.HTTP_404_NOT_FOUND: {"description": "Category not found."},
    },
)
async def delete_category(
    actor: AdminUser,
    category_id: CATEGORY_ID_PARAM,
    service: CategoriesServiceDep,
) -> MessageOut:
    await service.delete_category(category_id=category_id, actor=actor)
    return MessageOut(message="Category deleted successfully")


__all__ = ["router"]
