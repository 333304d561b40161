"""Query helpers for working with ``User`` records."""

from __future__ import annotations

from typing import cast
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.models import User, UserRole


def _canonical_email(value: str) -> str:
    return value.strip().lower()


_UNSET = object()


class UsersRepository:
    """Persistence helpers for marketplace accounts."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: UUID) -> User | None:
        return await self._session.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == _canonical_email(email))
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def lock(self, user_id: UUID) -> User | None:
        """Load ``user_id`` with a row lock held until the transaction ends."""

        stmt = select(User).where(User.id == user_id).with_for_update()
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(
        self,
        *,
        email: str,
        first_name: str | None = None,
        last_name: str | None = None,
        phone: str | None = None,
        profile_image: str | None = None,
        role: UserRole = UserRole.CUSTOMER,
        is_active: bool = True,
    ) -> User:
        user = User(
            email=_canonical_email(email),
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            profile_image=profile_image,
            role=role,
            is_active=is_active,
        )
        self._session.add(user)
        await self._session.flush()
        await self._session.refresh(user)
        return user

    async def update_user(
        self,
        user: User,
        *,
        first_name: str | None | object = _UNSET,
        last_name: str | None | object = _UNSET,
        phone: str | None | object = _UNSET,
        profile_image: str | None | object = _UNSET,
        role: UserRole | object = _UNSET,
        is_active: bool | object = _UNSET,
    ) -> User:
        if first_name is not _UNSET:
            user.first_name = cast(str | None, first_name)
        if last_name is not _UNSET:
            user.last_name = cast(str | None, last_name)
        if phone is not _UNSET:
            user.phone = cast(str | None, phone)
        if profile_image is not _UNSET:
            user.profile_image = cast(str | None, profile_image)
        if role is not _UNSET:
            user.role = cast(UserRole, role)
        if is_active is not _UNSET:
            user.is_active = cast(bool, is_active)
        await self._session.flush()
        await self._session.refresh(user)
        return user

    async def set_role(self, user: User, role: UserRole) -> User:
        return await self.update_user(user, role=role)


__all__ = ["UsersRepository"]
