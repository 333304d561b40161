"""Query helpers for ``Product`` rows and their review rollups."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.models import Product, Review, ReviewTargetType

from .schemas import ProductListItem


class ProductsRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, product_id: UUID) -> Product | None:
        return await self._session.get(Product, product_id)

    async def refetch(self, product_id: UUID) -> Product:
        stmt = (
            select(Product)
            .where(Product.id == product_id)
            .execution_options(populate_existing=True)
        )
        return (await self._session.execute(stmt)).scalar_one()

    async def review_ratings(self, product_ids: Sequence[UUID]) -> dict[UUID, list[int]]:
        """Return every ``PRODUCT`` review rating keyed by product id."""

        if not product_ids:
            return {}
        stmt = select(Review.target_id, Review.rating).where(
            Review.target_type == ReviewTargetType.PRODUCT,
            Review.target_id.in_(list(product_ids)),
        )
        ratings: dict[UUID, list[int]] = {}
        for target_id, rating in (await self._session.execute(stmt)).all():
            ratings.setdefault(target_id, []).append(rating)
        return ratings

    async def review_counts(self, product_ids: Sequence[UUID]) -> dict[UUID, int]:
        if not product_ids:
            return {}
        stmt = (
            select(Review.target_id, func.count())
            .where(
                Review.target_type == ReviewTargetType.PRODUCT,
                Review.target_id.in_(list(product_ids)),
            )
            .group_by(Review.target_id)
        )
        return {row[0]: row[1] for row in (await self._session.execute(stmt)).all()}

    async def list_items(self, products: Sequence[Product]) -> list[ProductListItem]:
        """Serialize ``products`` with their review counts."""

        counts = await self.review_counts([product.id for product in products])
        return [
            ProductListItem.model_validate(product).model_copy(
                update={"review_count": counts.get(product.id, 0)}
            )
            for product in products
        ]


__all__ = ["ProductsRepository"]
