from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from trendiwear_api.api.deps import get_services_service
from trendiwear_api.common.pagination import PageParams, page_params
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import AdminUser, ProfessionalUser

from .schemas import (
    ProfessionalServiceOut,
    ServiceCreate,
    ServiceListItem,
    ServiceOut,
    ServicePage,
    ServiceUpdate,
)
from .service import ServicesService

router = APIRouter(prefix="/services", tags=["services"])

ServicesServiceDep = Annotated[ServicesService, Depends(get_services_service)]
SERVICE_ID_PARAM = Annotated[UUID, Path(description="Service identifier.")]


@router.get("", response_model=ServicePage, summary="List active services")
async def list_services(
    service: ServicesServiceDep,
    page: Annotated[PageParams, Depends(page_params())],
    category_id: Annotated[UUID | None, Query(alias="categoryId")] = None,
    is_home_service: Annotated[bool | None, Query(alias="isHomeService")] = None,
    search: Annotated[str | None, Query(max_length=128)] = None,
) -> ServicePage:
    return await service.list_services(
        params=page,
        category_id=category_id,
        is_home_service=is_home_service,
        search=search,
    )


@router.get(
    "/{service_id}",
    response_model=ServiceListItem,
    summary="Retrieve a service",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Service not found."}},
)
async def get_service(
    service_id: SERVICE_ID_PARAM,
    service: ServicesServiceDep,
) -> ServiceListItem:
    return await service.get_service(service_id=service_id)


@router.post(
    "",
    response_model=ProfessionalServiceOut,
    status_code=status.HTTP_201_CREATED,
    summary="Offer a service (professionals only)",
    responses={status.HTTP_409_CONFLICT: {"description": "Service already offered."}},
)
async def create_service(
    actor: ProfessionalUser,
    payload: ServiceCreate,
    service: ServicesServiceDep,
) -> ProfessionalServiceOut:
    return await service.create_offering(payload=payload, actor=actor)


@router.put(
    "/{service_id}",
    response_model=ServiceOut,
    summary="Update a base service (administrator only)",
)
async def update_service(
    actor: AdminUser,
    service_id: SERVICE_ID_PARAM,
    payload: ServiceUpdate,
    service: ServicesServiceDep,
) -> ServiceOut:
    return await service.update_service(service_id=service_id, payload=payload, actor=actor)


@router.delete(
    "/{service_id}",
    response_model=MessageOut,
    summary="Delete a service without bookings (administrator only)",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Service has bookings."}},
)
async def delete_service(
    actor: AdminUser,
    service_id: SERVICE_ID_PARAM,
    service: ServicesServiceDep,
) -> MessageOut:
    await service.delete_service(service_id=service_id, actor=actor)
    return MessageOut(message="Service deleted successfully")


__all__ = ["router"]
