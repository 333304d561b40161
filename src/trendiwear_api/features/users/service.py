"""Business logic for user operations."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.common.pagination import PageParams, paginate_query
from trendiwear_api.common.text import like_pattern
from trendiwear_api.core.auth.errors import PermissionDeniedError
from trendiwear_api.core.http.dependencies import is_admin
from trendiwear_api.features.audit_logs.service import AuditLogService
from trendiwear_api.models import Order, Product, Review, User, UserRole
from trendiwear_api.settings import Settings

from .repository import UsersRepository
from .schemas import UserCounts, UserCreate, UserListItem, UserOut, UserPage, UserUpdate

logger = logging.getLogger(__name__)

_ADMIN_ONLY_FIELDS = {"role", "is_active"}


class UsersService:
    """Account management for administrators and self-service profile edits."""

    def __init__(
        self,
        *,
        session: AsyncSession,
        settings: Settings,
        audit: AuditLogService,
    ) -> None:
        self._session = session
        self._settings = settings
        self._repo = UsersRepository(session)
        self._audit = audit

    async def list_users(
        self,
        *,
        params: PageParams,
        role: UserRole | None = None,
        search: str | None = None,
    ) -> UserPage:
        logger.debug(
            "users.list.start",
            extra=log_context(page=params.page, limit=params.limit, role=role, search=search),
        )

        stmt = select(User)
        if role is not None:
            stmt = stmt.where(User.role == role)
        if search:
            pattern = like_pattern(search)
            stmt = stmt.where(
                or_(
                    User.email.ilike(pattern, escape="\\"),
                    User.first_name.ilike(pattern, escape="\\"),
                    User.last_name.ilike(pattern, escape="\\"),
                )
            )

        result = await paginate_query(
            self._session,
            stmt,
            params=params,
            order_by=[User.created_at.desc(), User.id],
        )
        counts = await self._counts_for([user.id for user in result.rows])
        items = [
            UserListItem.model_validate(user).model_copy(
                update={"counts": counts.get(user.id, UserCounts())}
            )
            for user in result.rows
        ]

        logger.info(
            "users.list.success",
            extra=log_context(count=len(items), total=result.pagination.total),
        )
        return UserPage(items=items, pagination=result.pagination)

    async def create_user(self, *, payload: UserCreate, actor: User) -> UserOut:
        existing = await self._repo.get_by_email(payload.email)
        if existing is not None:
            raise HTTPException(
                status.HTTP_409_CONFLICT,
                detail="A user with this email already exists.",
            )

        user = await self._repo.create(
            email=payload.email,
            first_name=payload.first_name,
            last_name=payload.last_name,
            phone=payload.phone,
            profile_image=payload.profile_image,
            role=UserRole(payload.role),
        )
        await self._audit.record(
            actor=actor,
            action="CREATE",
            entity="User",
            entity_id=user.id,
            details={"email": user.email, "role": UserRole(user.role).value},
        )
        logger.info(
            "users.create.success",
            extra=log_context(user_id=str(user.id), role=UserRole(user.role).value),
        )
        return UserOut.model_validate(user)

    async def get_user(self, *, user_id: UUID, actor: User) -> UserOut:
        logger.debug("users.get.start", extra=log_context(user_id=str(user_id)))

        if actor.id != user_id and not is_admin(actor):
            raise PermissionDeniedError("Forbidden")
        user = await self._get_or_404(user_id)

        logger.info("users.get.success", extra=log_context(user_id=str(user.id)))
        return UserOut.model_validate(user)

    async def update_user(self, *, user_id: UUID, payload: UserUpdate, actor: User) -> UserOut:
        """Update profile fields; only administrators may change role or activation."""

        logger.debug("users.update.start", extra=log_context(user_id=str(user_id)))

        actor_is_admin = is_admin(actor)
        if actor.id != user_id and not actor_is_admin:
            raise PermissionDeniedError("Forbidden")

        updates = payload.model_dump(exclude_unset=True)
        if not updates:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail="Provide at least one field to update.",
            )
        restricted = _ADMIN_ONLY_FIELDS & updates.keys()
        if restricted and not actor_is_admin:
            raise PermissionDeniedError("Only administrators can change role or active status")
        for field in restricted:
            if updates[field] is None:
                raise HTTPException(
                    status.HTTP_400_BAD_REQUEST,
                    detail=f"{field} must not be null when provided.",
                )

        user = await self._get_or_404(user_id)
        previous = {"role": UserRole(user.role).value, "is_active": user.is_active}
        if "role" in updates:
            updates["role"] = UserRole(updates["role"])
        await self._repo.update_user(user, **updates)

        if restricted:
            await self._audit.record(
                actor=actor,
                action="UPDATE",
                entity="User",
                entity_id=user.id,
                details={
                    "before": previous,
                    "after": {"role": UserRole(user.role).value, "is_active": user.is_active},
                },
            )

        logger.info(
            "users.update.success",
            extra=log_context(user_id=str(user.id), fields=",".join(sorted(updates))),
        )
        return UserOut.model_validate(user)

    async def delete_user(self, *, user_id: UUID, actor: User) -> None:
        if actor.id == user_id:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail="You cannot delete your own account.",
            )
        user = await self._get_or_404(user_id)

        order_count = await self._session.scalar(
            select(func.count()).select_from(Order).where(Order.customer_id == user.id)
        )
        if order_count:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail="Cannot delete user with existing orders. Deactivate the account instead.",
            )

        await self._audit.record(
            actor=actor,
            action="DELETE",
            entity="User",
            entity_id=user.id,
            details={"email": user.email},
        )
        await self._session.delete(user)
        await self._session.flush()
        logger.info("users.delete.success", extra=log_context(user_id=str(user_id)))

    async def _get_or_404(self, user_id: UUID) -> User:
        user = await self._repo.get_by_id(user_id)
        if user is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="User not found")
        return user

    async def _counts_for(self, user_ids: list[UUID]) -> dict[UUID, UserCounts]:
        if not user_ids:
            return {}

        async def _grouped(column) -> dict[UUID, int]:
            stmt = (
                select(column, func.count())
                .where(column.in_(user_ids))
                .group_by(column)
            )
            return {row[0]: row[1] for row in (await self._session.execute(stmt)).all()}

        orders = await _grouped(Order.customer_id)
        products = await _grouped(Product.professional_id)
        reviews = await _grouped(Review.user_id)
        return {
            user_id: UserCounts(
                orders=orders.get(user_id, 0),
                products=products.get(user_id, 0),
                reviews=reviews.get(user_id, 0),
            )
            for user_id in user_ids
        }


__all__ = ["UsersService"]
