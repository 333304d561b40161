from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.models import Product, User, WishlistItem

from .schemas import WishlistItemCreate, WishlistItemOut, WishlistOut

logger = logging.getLogger(__name__)


class WishlistService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def list_items(self, *, user: User) -> WishlistOut:
        stmt = (
            select(WishlistItem)
            .where(WishlistItem.user_id == user.id)
            .order_by(WishlistItem.created_at.desc())
        )
        rows = (await self._session.execute(stmt)).scalars().all()
        logger.info(
            "wishlist.list.success",
            extra=log_context(user_id=str(user.id), count=len(rows)),
        )
        return WishlistOut(items=[WishlistItemOut.model_validate(row) for row in rows])

    async def add_item(self, *, user: User, payload: WishlistItemCreate) -> WishlistItemOut:
        product = await self._session.get(Product, payload.product_id)
        if product is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Product not found")
        if not product.is_active:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Product is not available")

        existing = await self._find(user.id, product.id)
        if existing is not None:
            raise HTTPException(status.HTTP_409_CONFLICT, detail="Product already in wishlist")

        item = WishlistItem(user_id=user.id, product_id=product.id)
        self._session.add(item)
        await self._session.flush()
        await self._session.refresh(item)

        logger.info(
            "wishlist.add.success",
            extra=log_context(user_id=str(user.id), product_id=str(product.id)),
        )
        return WishlistItemOut.model_validate(item)

    async def remove_item(self, *, user: User, product_id: UUID) -> None:
        item = await self._find(user.id, product_id)
        if item is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Item not found in wishlist")
        await self._session.delete(item)
        await self._session.flush()
        logger.info(
            "wishlist.remove.success",
            extra=log_context(user_id=str(user.id), product_id=str(product_id)),
        )

    async def _find(self, user_id: UUID, product_id: UUID) -> WishlistItem | None:
        stmt = select(WishlistItem).where(
            WishlistItem.user_id == user_id, WishlistItem.product_id == product_id
        )
        return (await self._session.execute(stmt)).scalar_one_or_none()


__all__ = ["WishlistService"]
