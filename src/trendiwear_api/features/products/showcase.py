"""Showcase (featured) products and their super-admin approval."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.common.pagination import PageParams, paginate_query
from trendiwear_api.db import utc_now
from trendiwear_api.features.audit_logs.service import AuditLogService
from trendiwear_api.models import Product, User

from .repository import ProductsRepository
from .schemas import ProductOut, ShowcaseProductOut, ShowcaseProductPage

logger = logging.getLogger(__name__)

PUBLIC_SHOWCASE_LIMIT = 10


def average_rating(ratings: Sequence[int]) -> float:
    """Mean of ``ratings``; an empty sequence rates ``0.0``."""

    if not ratings:
        return 0.0
    return sum(ratings) / len(ratings)


class ShowcaseService:
    def __init__(self, *, session: AsyncSession, audit: AuditLogService) -> None:
        self._session = session
        self._audit = audit
        self._repo = ProductsRepository(session)

    async def list_showcase(self, *, params: PageParams | None = None) -> ShowcaseProductPage:
        """List approved products, newest approval first.

        Without ``params`` the public view is returned: a single page capped at
        ``PUBLIC_SHOWCASE_LIMIT`` items.
        """

        params = params or PageParams(page=1, limit=PUBLIC_SHOWCASE_LIMIT)
        stmt = select(Product).where(
            Product.is_active.is_(True),
            Product.is_in_stock.is_(True),
            Product.is_showcase_approved.is_(True),
        )
        result = await paginate_query(
            self._session,
            stmt,
            params=params,
            order_by=[Product.approved_at.desc(), Product.id],
        )

        ratings = await self._repo.review_ratings([product.id for product in result.rows])
        items = [
            ShowcaseProductOut.model_validate(product).model_copy(
                update={
                    "review_count": len(ratings.get(product.id, [])),
                    "average_rating": average_rating(ratings.get(product.id, [])),
                }
            )
            for product in result.rows
        ]
        logger.info(
            "showcase.list.success",
            extra=log_context(count=len(items), total=result.pagination.total),
        )
        return ShowcaseProductPage(items=items, pagination=result.pagination)

    async def add_product(self, *, product_id: UUID, actor: User) -> ProductOut:
        product = await self._get_or_404(product_id)
        if not product.is_available:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail="Product must be active and in stock to be showcased",
            )
        return await self._set_approval(product, approved=True, actor=actor)

    async def remove_product(self, *, product_id: UUID, actor: User) -> ProductOut:
        product = await self._get_or_404(product_id)
        if not product.is_showcase_approved:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail="Product is not currently in showcase",
            )
        return await self._set_approval(product, approved=False, actor=actor)

    async def set_approval(self, *, product_id: UUID, approved: bool, actor: User) -> ProductOut:
        product = await self._get_or_404(product_id)
        return await self._set_approval(product, approved=approved, actor=actor)

    async def _set_approval(self, product: Product, *, approved: bool, actor: User) -> ProductOut:
        product.is_showcase_approved = approved
        product.approved_at = utc_now() if approved else None
        product.approved_by = actor.id if approved else None
        await self._session.flush()

        await self._audit.record(
            actor=actor,
            action="SHOWCASE_APPROVE" if approved else "SHOWCASE_REMOVE",
            entity="Product",
            entity_id=product.id,
            details={"approved": approved},
        )
        logger.info(
            "showcase.approval.success",
            extra=log_context(product_id=str(product.id), approved=approved),
        )
        return ProductOut.model_validate(await self._repo.refetch(product.id))

    async def _get_or_404(self, product_id: UUID) -> Product:
        product = await self._repo.get(product_id)
        if product is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Product not found")
        return product


__all__ = ["PUBLIC_SHOWCASE_LIMIT", "ShowcaseService", "average_rating"]
