from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from trendiwear_api.api.deps import get_reviews_service
from trendiwear_api.common.pagination import PageParams, page_params
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import AdminUser, CurrentUser
from trendiwear_api.models import ReviewTargetType

from .schemas import ReviewCreate, ReviewOut, ReviewPage
from .service import ReviewsService

router = APIRouter(prefix="/reviews", tags=["reviews"])

ReviewsServiceDep = Annotated[ReviewsService, Depends(get_reviews_service)]


@router.get("", response_model=ReviewPage, summary="List reviews")
async def list_reviews(
    service: ReviewsServiceDep,
    page: Annotated[PageParams, Depends(page_params(10))],
    target_id: Annotated[UUID | None, Query(alias="targetId")] = None,
    target_type: Annotated[ReviewTargetType | None, Query(alias="targetType")] = None,
    rating: Annotated[int | None, Query(ge=1, le=5)] = None,
) -> ReviewPage:
    return await service.list_reviews(
        params=page, target_id=target_id, target_type=target_type, rating=rating
    )


@router.post(
    "",
    response_model=ReviewOut,
    status_code=status.HTTP_201_CREATED,
    summary="Review a product, professional or service",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Invalid rating or duplicate."}},
)
async def create_review(
    user: CurrentUser,
    payload: ReviewCreate,
    service: ReviewsServiceDep,
) -> ReviewOut:
    return await service.create_review(user=user, payload=payload)


@router.delete(
    "/{review_id}",
    response_model=MessageOut,
    summary="Delete a review (administrator only)",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Review not found."}},
)
async def delete_review(
    actor: AdminUser,
    review_id: Annotated[UUID, Path(description="Review identifier.")],
    service: ReviewsServiceDep,
) -> MessageOut:
    await service.delete_review(review_id=review_id, actor=actor)
    return MessageOut(message="Review deleted successfully")


__all__ = ["router"]
