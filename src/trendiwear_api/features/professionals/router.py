"""Routes for professional profiles."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from trendiwear_api.api.deps import get_professionals_service
from trendiwear_api.common.pagination import PageParams, page_params
from trendiwear_api.core.http import CurrentUser

from .schemas import (
    ProfessionalProfileCreate,
    ProfessionalProfileOut,
    ProfessionalProfilePage,
    ProfessionalProfileUpdate,
    ProfessionalShop,
)
from .service import ProfessionalsService

router = APIRouter(prefix="/professional-profiles", tags=["professionals"])

ProfessionalsServiceDep = Annotated[ProfessionalsService, Depends(get_professionals_service)]
PROFILE_ID_PARAM = Annotated[UUID, Path(description="Professional profile identifier.")]
SLUG_PARAM = Annotated[str, Path(min_length=1, max_length=200)]


@router.get("", response_model=ProfessionalProfilePage, summary="List professional profiles")
async def list_profiles(
    service: ProfessionalsServiceDep,
    page: Annotated[PageParams, Depends(page_params())],
    specialization: Annotated[UUID | None, Query(description="Professional type id.")] = None,
    location: Annotated[str | None, Query(max_length=200)] = None,
    min_rating: Annotated[float | None, Query(alias="minRating", ge=0, le=5)] = None,
    search: Annotated[str | None, Query(max_length=128)] = None,
    verified: bool | None = None,
) -> ProfessionalProfilePage:
    return await service.list_profiles(
        params=page,
        specialization_id=specialization,
        location=location,
        min_rating=min_rating,
        search=search,
        verified=verified,
    )


@router.post(
    "",
    response_model=ProfessionalProfileOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create the caller's professional profile",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Profile already exists."}},
)
async def create_profile(
    user: CurrentUser,
    payload: ProfessionalProfileCreate,
    service: ProfessionalsServiceDep,
) -> ProfessionalProfileOut:
    return await service.create_profile(user=user, payload=payload)


@router.get(
    "/slug/{slug}",
    response_model=ProfessionalProfileOut,
    summary="Look up a profile by slug, business name or user name",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Professional profile not found."}},
)
async def get_profile_by_slug(
    slug: SLUG_PARAM, service: ProfessionalsServiceDep
) -> ProfessionalProfileOut:
    return await service.get_by_slug(slug=slug)


@router.get(
    "/slug/{slug}/shop",
    response_model=ProfessionalShop,
    summary="Return a professional's storefront",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Professional profile not found."}},
)
async def get_profile_shop(slug: SLUG_PARAM, service: ProfessionalsServiceDep) -> ProfessionalShop:
    return await service.get_shop(slug=slug)


@router.get(
    "/{profile_id}",
    response_model=ProfessionalProfileOut,
    summary="Retrieve a professional profile",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Professional profile not found."}},
)
async def get_profile(
    profile_id: PROFILE_ID_PARAM,
    service: ProfessionalsServiceDep,
) -> ProfessionalProfileOut:
    return await service.get_profile(profile_id=profile_id)


@router.put(
    "/{profile_id}",
    response_model=ProfessionalProfileOut,
    summary="Update a professional profile (owner or administrator)",
    responses={
        status.HTTP_403_FORBIDDEN: {"description": "Only the owner or an administrator."},
        status.HTTP_404_NOT_FOUND: {"description": "Professional profile not found."},
    },
)
async def update_profile(
    actor: CurrentUser,
    profile_id: PROFILE_ID_PARAM,
    payload: ProfessionalProfileUpdate,
    service: ProfessionalsServiceDep,
) -> ProfessionalProfileOut:
    return await service.update_profile(profile_id=profile_id, payload=payload, actor=actor)


__all__ = ["router"]
