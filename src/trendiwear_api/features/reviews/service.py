"""Customer reviews and the professional rating rollup they feed."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.common.pagination import PageParams, paginate_query
from trendiwear_api.features.products.showcase import average_rating
from trendiwear_api.models import (
    Order,
    OrderStatus,
    ProfessionalProfile,
    Review,
    ReviewTargetType,
    User,
)

from .schemas import ReviewCreate, ReviewOut, ReviewPage

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


class ReviewsService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def list_reviews(
        self,
        *,
        params: PageParams,
        target_id: UUID | None = None,
        target_type: ReviewTargetType | None = None,
        rating: int | None = None,
    ) -> ReviewPage:
        stmt = select(Review)
        if target_id is not None:
            stmt = stmt.where(Review.target_id == target_id)
        if target_type is not None:
            stmt = stmt.where(Review.target_type == ReviewTargetType(target_type))
        if rating is not None:
            stmt = stmt.where(Review.rating == rating)

        result = await paginate_query(
            self._session,
            stmt,
            params=params,
            order_by=[Review.created_at.desc(), Review.id],
        )
        items = [ReviewOut.model_validate(row) for row in result.rows]
        logger.info(
            "reviews.list.success",
            extra=log_context(count=len(items), total=result.pagination.total),
        )
        return ReviewPage(items=items, pagination=result.pagination)

    async def create_review(self, *, user: User, payload: ReviewCreate) -> ReviewOut:
        """Record a review; it is verified when backed by the caller's delivered order."""

        if not MIN_RATING <= payload.rating <= MAX_RATING:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST, detail="Rating must be between 1 and 5"
            )
        target_type = ReviewTargetType(payload.target_type)

        existing = await self._session.execute(
            select(Review.id).where(
                Review.user_id == user.id,
                Review.target_id == payload.target_id,
                Review.target_type == target_type,
            )
        )
        if existing.first() is not None:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST, detail="You have already reviewed this item"
            )

        review = Review(
            user_id=user.id,
            target_id=payload.target_id,
            target_type=target_type,
            order_id=payload.order_id,
            rating=payload.rating,
            title=payload.title,
            comment=payload.comment,
            images=payload.images,
            is_verified=await self._is_verified(
                user, payload.order_id, payload.target_id, target_type
            ),
        )
        self._session.add(review)
        await self._session.flush()

        if target_type is ReviewTargetType.PROFESSIONAL:
            await self._refresh_professional_rating(payload.target_id)

        logger.info(
            "reviews.create.success",
            extra=log_context(
                review_id=str(review.id),
                user_id=str(user.id),
                target_type=target_type.value,
                verified=review.is_verified,
            ),
        )
        return await self._fresh(review.id)

    async def delete_review(self, *, review_id: UUID, actor: User) -> None:
        review = await self._session.get(Review, review_id)
        if review is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Review not found")

        target_id = review.target_id
        target_type = ReviewTargetType(review.target_type)
        await self._session.delete(review)
        await self._session.flush()
        if target_type is ReviewTargetType.PROFESSIONAL:
            await self._refresh_professional_rating(target_id)

        logger.info(
            "reviews.delete.success",
            extra=log_context(review_id=str(review_id), user_id=str(actor.id)),
        )

    async def _is_verified(
        self,
        user: User,
        order_id: UUID | None,
        target_id: UUID,
        target_type: ReviewTargetType,
    ) -> bool:
        if order_id is None or target_type is ReviewTargetType.SERVICE:
            return False
        order = (
            await self._session.execute(
                select(Order).where(
                    Order.id == order_id,
                    Order.customer_id == user.id,
                    Order.status == OrderStatus.DELIVERED,
                )
            )
        ).scalar_one_or_none()
        if order is None:
            return False
        if target_type is ReviewTargetType.PRODUCT:
            return any(item.product_id == target_id for item in order.items)
        return any(item.professional_id == target_id for item in order.items)

    async def _refresh_professional_rating(self, professional_id: UUID) -> None:
        """Recompute a professional's rating from every review they have received."""

        profile = (
            await self._session.execute(
                select(ProfessionalProfile).where(ProfessionalProfile.user_id == professional_id)
            )
        ).scalar_one_or_none()
        if profile is None:
            return

        ratings = (
            await self._session.execute(
                select(Review.rating).where(
                    Review.target_id == professional_id,
                    Review.target_type == ReviewTargetType.PROFESSIONAL,
                )
            )
        ).scalars().all()
        profile.rating = round(average_rating(ratings), 2)
        profile.total_reviews = len(ratings)
        await self._session.flush()

    async def _fresh(self, review_id: UUID) -> ReviewOut:
        stmt = (
            select(Review)
            .where(Review.id == review_id)
            .execution_options(populate_existing=True)
        )
        return ReviewOut.model_validate((await self._session.execute(stmt)).scalar_one())


__all__ = ["MAX_RATING", "MIN_RATING", "ReviewsService"]
