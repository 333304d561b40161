from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status

from trendiwear_api.api.deps import get_service_categories_service
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import AdminUser

from .schemas import (
    ServiceCategoryCreate,
    ServiceCategoryList,
    ServiceCategoryOut,
    ServiceCategoryUpdate,
)
from .service import ServiceCategoriesService

router = APIRouter(prefix="/service-categories", tags=["service-categories"])

ServiceCategoriesServiceDep = Annotated[
    ServiceCategoriesService, Depends(get_service_categories_service)
]
CATEGORY_ID_PARAM = Annotated[UUID, Path(description="Service category identifier.")]


@router.get("", response_model=ServiceCategoryList, summary="List active service categories")
async def list_service_categories(service: ServiceCategoriesServiceDep) -> ServiceCategoryList:
    return await service.list_categories()


@router.post(
    "",
    response_model=ServiceCategoryOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a service category (administrator only)",
)
async def create_service_category(
    _: AdminUser,
    payload: ServiceCategoryCreate,
    service: ServiceCategoriesServiceDep,
) -> ServiceCategoryOut:
    return await service.create_category(payload=payload)


@router.put(
    "/{category_id}",
    response_model=ServiceCategoryOut,
    summary="Update a service category (administrator only)",
)
async def update_service_category(
    _: AdminUser,
    category_id: CATEGORY_ID_PARAM,
    payload: ServiceCategoryUpdate,
    service: ServiceCategoriesServiceDep,
) -> ServiceCategoryOut:
    return await service.update_category(category_id=category_id, payload=payload)


@router.delete(
    "/{category_id}",
    response_model=MessageOut,
    summary="Delete a service category without services (administrator only)",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Category still has services."}},
)
async def delete_service_category(
    _: AdminUser,
    category_id: CATEGORY_ID_PARAM,
    service: ServiceCategoriesServiceDep,
) -> MessageOut:
    await service.delete_category(category_id=category_id)
    return MessageOut(message="Service category deleted successfully")


__all__ = ["router"]
