"""Outfit inspirations curated by stylists for events."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.filters import json_list_contains_any
from trendiwear_api.common.logging import log_context
from trendiwear_api.common.pagination import PageParams, paginate_query
from trendiwear_api.common.text import like_pattern
from trendiwear_api.core.auth.errors import PermissionDeniedError
from trendiwear_api.core.http.dependencies import ensure_owner_or_admin, is_admin
from trendiwear_api.models import (
    Event,
    OutfitInspiration,
    OutfitProduct,
    Product,
    SavedOutfit,
    User,
    UserRole,
)

from .schemas import OutfitCreate, OutfitOut, OutfitPage, OutfitProductIn, OutfitUpdate

logger = logging.getLogger(__name__)

_NOT_NULL = {"event_id", "title", "outfit_image_url", "tags", "is_featured", "is_active"}


class OutfitsService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def list_outfits(
        self,
        *,
        params: PageParams,
        event_id: UUID | None = None,
        stylist_id: UUID | None = None,
        featured: bool = False,
        search: str | None = None,
    ) -> OutfitPage:
        """Page through active outfits: featured first, then most liked, then newest."""

        stmt = select(OutfitInspiration).where(OutfitInspiration.is_active.is_(True))
        if event_id is not None:
            stmt = stmt.where(OutfitInspiration.event_id == event_id)
        if stylist_id is not None:
            stmt = stmt.where(OutfitInspiration.stylist_id == stylist_id)
        if featured:
            stmt = stmt.where(OutfitInspiration.is_featured.is_(True))
        if search:
            pattern = like_pattern(search)
            stmt = stmt.where(
                or_(
                    OutfitInspiration.title.ilike(pattern, escape="\\"),
                    OutfitInspiration.description.ilike(pattern, escape="\\"),
                    json_list_contains_any(OutfitInspiration.tags, [search]),
                )
            )

        result = await paginate_query(
            self._session,
            stmt,
            params=params,
            order_by=[
                OutfitInspiration.is_featured.desc(),
                OutfitInspiration.likes.desc(),
                OutfitInspiration.created_at.desc(),
                OutfitInspiration.id,
            ],
        )
        saved = await self._saved_counts([row.id for row in result.rows])
        items = [self._to_out(row, saved.get(row.id, 0)) for row in result.rows]
        logger.info(
            "outfits.list.success",
            extra=log_context(count=len(items), total=result.pagination.total),
        )
        return OutfitPage(items=items, pagination=result.pagination)

    async def get_outfit(self, *, outfit_id: UUID) -> OutfitOut:
        await self._get_or_404(outfit_id)
        return await self._fresh(outfit_id)

    async def create_outfit(self, *, payload: OutfitCreate, stylist: User) -> OutfitOut:
        if UserRole(stylist.role) is not UserRole.PROFESSIONAL and not is_admin(stylist):
            raise PermissionDeniedError(
                "Only professionals, admins, or super admins can create outfit inspirations",
                required_roles=[UserRole.PROFESSIONAL.value, UserRole.ADMIN.value],
            )
        if payload.is_featured and not is_admin(stylist):
            raise PermissionDeniedError("Only administrators can feature outfits")
        await self._ensure_event(payload.event_id)

        outfit = OutfitInspiration(
            **payload.model_dump(exclude={"products"}),
            stylist_id=stylist.id,
            products=await self._build_products(payload.products),
        )
        self._session.add(outfit)
        await self._session.flush()

        logger.info(
            "outfits.create.success",
            extra=log_context(
                outfit_id=str(outfit.id),
                user_id=str(stylist.id),
                products=len(outfit.products),
            ),
        )
        return await self._fresh(outfit.id)

    async def update_outfit(
        self, *, outfit_id: UUID, payload: OutfitUpdate, actor: User
    ) -> OutfitOut:
        """Apply a partial update; a ``products`` list replaces the linked products."""

        outfit = await self._get_or_404(outfit_id)
        ensure_owner_or_admin(actor, outfit.stylist_id)

        updates = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if not (value is None and key in _NOT_NULL)
        }
        if "is_featured" in updates and not is_admin(actor):
            raise PermissionDeniedError("Only administrators can feature outfits")
        if "event_id" in updates:
            await self._ensure_event(updates["event_id"])

        updates.pop("products", None)
        products = payload.products if "products" in payload.model_fields_set else None
        for key, value in updates.items():
            setattr(outfit, key, value)
        if products is not None:
            rows = await self._build_products(products)
            outfit.products.clear()
            await self._session.flush()
            outfit.products.extend(rows)
        await self._session.flush()

        logger.info(
            "outfits.update.success",
            extra=log_context(
                outfit_id=str(outfit.id),
                fields=",".join(sorted(updates)),
                products_replaced=products is not None,
            ),
        )
        return await self._fresh(outfit.id)

    async def delete_outfit(self, *, outfit_id: UUID, actor: User) -> None:
        outfit = await self._get_or_404(outfit_id)
        ensure_owner_or_admin(actor, outfit.stylist_id)
        await self._session.delete(outfit)
        await self._session.flush()
        logger.info(
            "outfits.delete.success",
            extra=log_context(outfit_id=str(outfit_id), user_id=str(actor.id)),
        )

    async def _build_products(self, items: list[OutfitProductIn]) -> list[OutfitProduct]:
        """Turn the requested links into rows, keeping the first mention of each product."""

        unique: dict[UUID, OutfitProductIn] = {}
        for item in items:
            unique.setdefault(item.product_id, item)
        if not unique:
            return []

        found = set(
            (
                await self._session.execute(select(Product.id).where(Product.id.in_(list(unique))))
            ).scalars()
        )
        missing = [str(product_id) for product_id in unique if product_id not in found]
        if missing:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail=f"Products not found: {', '.join(missing)}",
            )
        return [
            OutfitProduct(
                product_id=product_id,
                position=item.position if item.position is not None else index,
                notes=item.notes,
            )
            for index, (product_id, item) in enumerate(unique.items())
        ]

    async def _saved_counts(self, outfit_ids: list[UUID]) -> dict[UUID, int]:
        if not outfit_ids:
            return {}
        stmt = (
            select(SavedOutfit.outfit_id, func.count())
            .where(SavedOutfit.outfit_id.in_(outfit_ids))
            .group_by(SavedOutfit.outfit_id)
        )
        return {row[0]: row[1] for row in (await self._session.execute(stmt)).all()}

    async def _ensure_event(self, event_id: UUID) -> None:
        if await self._session.get(Event, event_id) is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Event not found")

    async def _get_or_404(self, outfit_id: UUID) -> OutfitInspiration:
        outfit = await self._session.get(OutfitInspiration, outfit_id)
        if outfit is None:
            raise HTTPException(
                status.HTTP_404_NOT_FOUND, detail="Outfit inspiration not found"
            )
        return outfit

    @staticmethod
    def _to_out(outfit: OutfitInspiration, saved_count: int) -> OutfitOut:
        return OutfitOut.model_validate(outfit).model_copy(update={"saved_count": saved_count})

    async def _fresh(self, outfit_id: UUID) -> OutfitOut:
        stmt = (
            select(OutfitInspiration)
            .where(OutfitInspiration.id == outfit_id)
            .execution_options(populate_existing=True)
        )
        outfit = (await self._session.execute(stmt)).scalar_one()
        saved = await self._saved_counts([outfit_id])
        return self._to_out(outfit, saved.get(outfit_id, 0))


__all__ = ["OutfitsService"]
