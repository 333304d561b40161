"""Shopping cart lines for the authenticated user."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.models import CartItem, Product, User
from trendiwear_api.settings import Settings

from .schemas import CartItemCreate, CartItemOut, CartItemUpdate, CartOut, CartSummary

logger = logging.getLogger(__name__)


def summarize(items: list[CartItem], *, tax_rate: float) -> CartSummary:
    """Return item count, subtotal and tax-inclusive estimate for ``items``."""

    subtotal = sum(item.product.price * item.quantity for item in items)
    return CartSummary(
        item_count=sum(item.quantity for item in items),
        subtotal=round(subtotal, 2),
        estimated_total=round(subtotal * (1 + tax_rate), 2),
    )


class CartService:
    def __init__(self, *, session: AsyncSession, settings: Settings) -> None:
        self._session = session
        self._settings = settings

    async def get_cart(self, *, user: User) -> CartOut:
        logger.debug("cart.get.start", extra=log_context(user_id=str(user.id)))

        stmt = (
            select(CartItem)
            .where(CartItem.user_id == user.id)
            .order_by(CartItem.created_at.desc())
        )
        items = list((await self._session.execute(stmt)).scalars().all())
        summary = summarize(items, tax_rate=self._settings.tax_rate)

        logger.info(
            "cart.get.success",
            extra=log_context(user_id=str(user.id), lines=len(items), items=summary.item_count),
        )
        return CartOut(
            items=[CartItemOut.model_validate(item) for item in items],
            summary=summary,
        )

    async def add_item(self, *, user: User, payload: CartItemCreate) -> CartItemOut:
        """Add ``payload`` to the cart, merging with an existing size/color line."""

        product = await self._session.get(Product, payload.product_id)
        if product is None or not product.is_available:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Product not available")

        size = payload.size or ""
        color = payload.color or ""
        stmt = select(CartItem).where(
            CartItem.user_id == user.id,
            CartItem.product_id == product.id,
            CartItem.size == size,
            CartItem.color == color,
        )
        existing = (await self._session.execute(stmt)).scalar_one_or_none()

        quantity = payload.quantity + (existing.quantity if existing is not None else 0)
        if quantity > product.stock_quantity:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Insufficient stock")

        if existing is not None:
            existing.quantity = quantity
            item = existing
        else:
            item = CartItem(
                user_id=user.id,
                product_id=product.id,
                quantity=quantity,
                size=size,
                color=color,
            )
            self._session.add(item)
        product.cart_count += 1
        await self._session.flush()

        logger.info(
            "cart.add.success",
            extra=log_context(
                user_id=str(user.id),
                product_id=str(product.id),
                quantity=quantity,
                merged=existing is not None,
            ),
        )
        return await self._fresh(item.id)

    async def update_item(
        self, *, user: User, item_id: UUID, payload: CartItemUpdate
    ) -> CartItemOut:
        item = await self._get_owned_or_404(item_id, user)
        if payload.quantity < 1:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST, detail="Quantity must be at least 1"
            )
        if payload.quantity > item.product.stock_quantity:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Insufficient stock")

        item.quantity = payload.quantity
        await self._session.flush()

        logger.info(
            "cart.update.success",
            extra=log_context(
                user_id=str(user.id), cart_item_id=str(item.id), quantity=item.quantity
            ),
        )
        return await self._fresh(item.id)

    async def remove_item(self, *, user: User, item_id: UUID) -> None:
        item = await self._get_owned_or_404(item_id, user)
        await self._session.delete(item)
        await self._session.flush()
        logger.info(
            "cart.remove.success",
            extra=log_context(user_id=str(user.id), cart_item_id=str(item_id)),
        )

    async def _get_owned_or_404(self, item_id: UUID, user: User) -> CartItem:
        stmt = select(CartItem).where(CartItem.id == item_id, CartItem.user_id == user.id)
        item = (await self._session.execute(stmt)).scalar_one_or_none()
        if item is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Cart item not found")
        return item

    async def _fresh(self, item_id: UUID) -> CartItemOut:
        stmt = (
            select(CartItem)
            .where(CartItem.id == item_id)
            .execution_options(populate_existing=True)
        )
        item = (await self._session.execute(stmt)).scalar_one()
        return CartItemOut.model_validate(item)


__all__ = ["CartService", "summarize"]
