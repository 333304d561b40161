"""Routes for the caller's saved addresses."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status

from trendiwear_api.api.deps import get_addresses_service
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import CurrentUser

from .schemas import AddressCreate, AddressList, AddressOut, AddressUpdate
from .service import AddressesService

router = APIRouter(prefix="/addresses", tags=["addresses"])

AddressesServiceDep = Annotated[AddressesService, Depends(get_addresses_service)]
ADDRESS_ID_PARAM = Annotated[UUID, Path(description="Address identifier.")]


@router.get(
    "",
    response_model=AddressList,
    status_code=status.HTTP_200_OK,
    summary="List the caller's addresses, default first",
)
async def list_addresses(user: CurrentUser, service: AddressesServiceDep) -> AddressList:
    return await service.list_addresses(user=user)


@router.post(
    "",
    response_model=AddressOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create an address",
    responses={status.HTTP_409_CONFLICT: {"description": "Concurrent default change."}},
)
async def create_address(
    user: CurrentUser,
    payload: AddressCreate,
    service: AddressesServiceDep,
) -> AddressOut:
    return await service.create_address(user=user, payload=payload)


@router.put(
    "/{address_id}",
    response_model=AddressOut,
    status_code=status.HTTP_200_OK,
    summary="Update one of the caller's addresses",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Address not found."}},
)
async def update_address(
    user: CurrentUser,
    address_id: ADDRESS_ID_PARAM,
    payload: AddressUpdate,
    service: AddressesServiceDep,
) -> AddressOut:
    return await service.update_address(user=user, address_id=address_id, payload=payload)


@router.delete(
    "/{address_id}",
    response_model=MessageOut,
    status_code=status.HTTP_200_OK,
    summary="Delete one of the caller's addresses",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Address not found."}},
)
async def delete_address(
    user: CurrentUser,
    address_id: ADDRESS_ID_PARAM,
    service: AddressesServiceDep,
) -> MessageOut:
    await service.delete_address(user=user, address_id=address_id)
    return MessageOut(message="Address deleted successfully")


__all__ = ["router"]
