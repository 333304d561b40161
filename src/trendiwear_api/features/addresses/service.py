"""Saved shipping addresses for the authenticated user."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.features.users.repository import UsersRepository
from trendiwear_api.models import Address, AddressType, User
from trendiwear_api.settings import Settings

from .repository import AddressesRepository
from .schemas import AddressCreate, AddressList, AddressOut, AddressUpdate

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = {"type", "first_name", "last_name", "street", "city", "country"}


class AddressesService:
    """CRUD over a user's addresses, keeping at most one default per user.

    Every default change locks the owning user row before clearing the other
    defaults so two concurrent requests serialize on that lock. The partial
    unique index on ``addresses`` is the backstop; a violation surfaces as a
    409 through the ``IntegrityError`` handler.
    """

    def __init__(self, *, session: AsyncSession, settings: Settings) -> None:
        self._session = session
        self._settings = settings
        self._repo = AddressesRepository(session)
        self._users = UsersRepository(session)

    async def list_addresses(self, *, user: User) -> AddressList:
        logger.debug("addresses.list.start", extra=log_context(user_id=str(user.id)))
        rows = await self._repo.list_for_user(user.id)
        logger.info(
            "addresses.list.success",
            extra=log_context(user_id=str(user.id), count=len(rows)),
        )
        return AddressList(addresses=[AddressOut.model_validate(row) for row in rows])

    async def create_address(self, *, user: User, payload: AddressCreate) -> AddressOut:
        data = payload.model_dump()
        data["type"] = AddressType(data["type"])
        data["country"] = data.get("country") or self._settings.default_country
        make_default = bool(data.pop("is_default"))

        address = Address(user_id=user.id, is_default=False, **data)
        self._session.add(address)
        await self._session.flush()

        if make_default:
            await self._make_default(user.id, address)

        logger.info(
            "addresses.create.success",
            extra=log_context(
                user_id=str(user.id), address_id=str(address.id), is_default=make_default
            ),
        )
        return await self._fresh(address.id)

    async def update_address(
        self, *, user: User, address_id: UUID, payload: AddressUpdate
    ) -> AddressOut:
        address = await self._get_owned_or_404(address_id, user)
        updates = payload.model_dump(exclude_unset=True)
        make_default = updates.pop("is_default", None)

        for field, value in updates.items():
            if value is None and field in _REQUIRED_FIELDS:
                raise HTTPException(
                    status.HTTP_400_BAD_REQUEST,
                    detail=f"{field} must not be null when provided.",
                )
            if field == "type":
                value = AddressType(value)
            setattr(address, field, value)

        if make_default is True:
            await self._make_default(user.id, address)
        elif make_default is False:
            address.is_default = False
        await self._session.flush()

        logger.info(
            "addresses.update.success",
            extra=log_context(user_id=str(user.id), address_id=str(address.id)),
        )
        return await self._fresh(address.id)

    async def delete_address(self, *, user: User, address_id: UUID) -> None:
        address = await self._get_owned_or_404(address_id, user)
        await self._session.delete(address)
        await self._session.flush()
        logger.info(
            "addresses.delete.success",
            extra=log_context(user_id=str(user.id), address_id=str(address_id)),
        )

    async def _make_default(self, user_id: UUID, address: Address) -> None:
        await self._users.lock(user_id)
        cleared = await self._repo.clear_default(user_id, keep=address.id)
        address.is_default = True
        await self._session.flush()
        logger.debug(
            "addresses.default.set",
            extra=log_context(user_id=str(user_id), address_id=str(address.id), cleared=cleared),
        )

    async def _get_owned_or_404(self, address_id: UUID, user: User) -> Address:
        address = await self._repo.get_owned(address_id, user.id)
        if address is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Address not found")
        return address

    async def _fresh(self, address_id: UUID) -> AddressOut:
        stmt = (
            select(Address)
            .where(Address.id == address_id)
            .execution_options(populate_existing=True)
        )
        address = (await self._session.execute(stmt)).scalar_one()
        return AddressOut.model_validate(address)


__all__ = ["AddressesService"]
