"""Query helpers for ``Address`` rows."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.models import Address


class AddressesRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_user(self, user_id: UUID) -> list[Address]:
        stmt = (
            select(Address)
            .where(Address.user_id == user_id)
            .order_by(Address.is_default.desc(), Address.created_at.desc())
        )
        return list((await self._session.execute(stmt)).scalars().all())

    async def get_owned(self, address_id: UUID, user_id: UUID) -> Address | None:
        stmt = select(Address).where(Address.id == address_id, Address.user_id == user_id)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def clear_default(self, user_id: UUID, *, keep: UUID | None = None) -> int:
        """Unset ``is_default`` on every address of ``user_id`` except ``keep``."""

        stmt = (
            update(Address)
            .where(Address.user_id == user_id, Address.is_default.is_(True))
            .values(is_default=False)
            .execution_options(synchronize_session="fetch")
        )
        if keep is not None:
            stmt = stmt.where(Address.id != keep)
        result = await self._session.execute(stmt)
        return result.rowcount or 0

    async def count_defaults(self, user_id: UUID) -> int:
        stmt = select(Address.id).where(Address.user_id == user_id, Address.is_default.is_(True))
        return len((await self._session.execute(stmt)).all())


__all__ = ["AddressesRepository"]
