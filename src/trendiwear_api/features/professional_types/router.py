from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status

from trendiwear_api.api.deps import get_professional_types_service
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import AdminUser

from .schemas import (
    ProfessionalTypeCreate,
    ProfessionalTypeList,
    ProfessionalTypeOut,
    ProfessionalTypeUpdate,
)
from .service import ProfessionalTypesService

router = APIRouter(prefix="/professional-types", tags=["professional-types"])

ProfessionalTypesServiceDep = Annotated[
    ProfessionalTypesService, Depends(get_professional_types_service)
]
TYPE_ID_PARAM = Annotated[UUID, Path(description="Professional type identifier.")]


@router.get("", response_model=ProfessionalTypeList, summary="List professional types")
async def list_professional_types(service: ProfessionalTypesServiceDep) -> ProfessionalTypeList:
    return await service.list_types()


@router.post(
    "",
    response_model=ProfessionalTypeOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a professional type (administrator only)",
)
async def create_professional_type(
    _: AdminUser,
    payload: ProfessionalTypeCreate,
    service: ProfessionalTypesServiceDep,
) -> ProfessionalTypeOut:
    return await service.create_type(payload=payload)


@router.put(
    "/{type_id}",
    response_model=ProfessionalTypeOut,
    summary="Update a professional type (administrator only)",
)
async def update_professional_type(
    _: AdminUser,
    type_id: TYPE_ID_PARAM,
    payload: ProfessionalTypeUpdate,
    service: ProfessionalTypesServiceDep,
) -> ProfessionalTypeOut:
    return await service.update_type(type_id=type_id, payload=payload)


@router.delete(
    "/{type_id}",
    response_model=MessageOut,
    summary="Delete an unused professional type (administrator only)",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Type is in use."}},
)
async def delete_professional_type(
    _: AdminUser,
    type_id: TYPE_ID_PARAM,
    service: ProfessionalTypesServiceDep,
) -> MessageOut:
    await service.delete_type(type_id=type_id)
    return MessageOut(message="Professional type deleted successfully")


__all__ = ["router"]
