"""Professional business profiles: listing, onboarding and public lookup."""

from __future__ import annotations

import logging
from collections import Counter
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.common.pagination import PageParams, paginate_query
from trendiwear_api.common.text import like_pattern, slug_candidates, slugify
from trendiwear_api.core.auth.errors import PermissionDeniedError
from trendiwear_api.core.http.dependencies import ensure_owner_or_admin, is_admin
from trendiwear_api.features.products.schemas import ProductOut
from trendiwear_api.models import (
    Category,
    DeliveryZone,
    Product,
    ProfessionalProfile,
    ProfessionalType,
    SocialMedia,
    User,
    UserRole,
)

from .schemas import (
    ProfessionalProfileCreate,
    ProfessionalProfileOut,
    ProfessionalProfilePage,
    ProfessionalProfileUpdate,
    ProfessionalShop,
    ShopCategory,
)

logger = logging.getLogger(__name__)

_NOT_NULL = {"business_name", "specialization_id", "experience", "is_verified"}


class ProfessionalsService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def list_profiles(
        self,
        *,
        params: PageParams,
        specialization_id: UUID | None = None,
        location: str | None = None,
        min_rating: float | None = None,
        search: str | None = None,
        verified: bool | None = None,
    ) -> ProfessionalProfilePage:
        logger.debug(
            "professionals.list.start",
            extra=log_context(page=params.page, limit=params.limit, search=search),
        )

        stmt = select(ProfessionalProfile).join(User, User.id == ProfessionalProfile.user_id)
        if verified:
            stmt = stmt.where(ProfessionalProfile.is_verified.is_(True))
        if specialization_id is not None:
            stmt = stmt.where(ProfessionalProfile.specialization_id == specialization_id)
        if location:
            stmt = stmt.where(
                ProfessionalProfile.location.ilike(like_pattern(location), escape="\\")
            )
        if min_rating is not None:
            stmt = stmt.where(ProfessionalProfile.rating >= min_rating)
        if search:
            pattern = like_pattern(search)
            stmt = stmt.where(
                or_(
                    ProfessionalProfile.business_name.ilike(pattern, escape="\\"),
                    ProfessionalProfile.bio.ilike(pattern, escape="\\"),
                    User.first_name.ilike(pattern, escape="\\"),
                    User.last_name.ilike(pattern, escape="\\"),
                )
            )

        result = await paginate_query(
            self._session,
            stmt,
            params=params,
            order_by=[
                ProfessionalProfile.is_verified.desc(),
                ProfessionalProfile.rating.desc(),
                ProfessionalProfile.total_reviews.desc(),
                ProfessionalProfile.id,
            ],
        )
        items = [ProfessionalProfileOut.model_validate(row) for row in result.rows]
        logger.info(
            "professionals.list.success",
            extra=log_context(count=len(items), total=result.pagination.total),
        )
        return ProfessionalProfilePage(items=items, pagination=result.pagination)

    async def create_profile(
        self, *, user: User, payload: ProfessionalProfileCreate
    ) -> ProfessionalProfileOut:
        """Create the caller's profile and promote a customer to professional."""

        existing = await self._by_user(user.id)
        if existing is not None:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail="Professional profile already exists",
            )
        await self._ensure_specialization(payload.specialization_id)

        profile = ProfessionalProfile(
            user_id=user.id,
            slug=await self._unique_slug(slugify(payload.business_name)),
            business_name=payload.business_name,
            business_image=payload.business_image,
            specialization_id=payload.specialization_id,
            experience=payload.experience,
            bio=payload.bio,
            portfolio_url=payload.portfolio_url,
            location=payload.location,
            availability=payload.availability,
            free_delivery_threshold=payload.free_delivery_threshold,
            social_media=[SocialMedia(**item.model_dump()) for item in payload.social_media],
            delivery_zones=[DeliveryZone(**item.model_dump()) for item in payload.delivery_zones],
        )
        self._session.add(profile)
        if UserRole(user.role) is UserRole.CUSTOMER:
            user.role = UserRole.PROFESSIONAL
        await self._session.flush()

        logger.info(
            "professionals.create.success",
            extra=log_context(user_id=str(user.id), profile_id=str(profile.id), slug=profile.slug),
        )
        return await self._fresh(profile.id)

    async def get_profile(self, *, profile_id: UUID) -> ProfessionalProfileOut:
        profile = await self._session.get(ProfessionalProfile, profile_id)
        if profile is None:
            raise HTTPException(
                status.HTTP_404_NOT_FOUND, detail="Professional profile not found"
            )
        return ProfessionalProfileOut.model_validate(profile)

    async def get_by_slug(self, *, slug: str) -> ProfessionalProfileOut:
        return ProfessionalProfileOut.model_validate(await self._resolve_slug(slug))

    async def get_shop(self, *, slug: str) -> ProfessionalShop:
        """Return a profile with its active products grouped by category."""

        profile = await self._resolve_slug(slug)
        stmt = (
            select(Product)
            .where(
                Product.professional_id == profile.user_id,
                Product.is_active.is_(True),
                Product.is_in_stock.is_(True),
            )
            .order_by(Product.created_at.desc())
        )
        products = (await self._session.execute(stmt)).scalars().all()

        per_category = Counter(product.category_id for product in products)
        names: dict[UUID, str] = {}
        if per_category:
            rows = await self._session.execute(
                select(Category.id, Category.name).where(Category.id.in_(list(per_category)))
            )
            names = {row[0]: row[1] for row in rows.all()}
        categories = [
            ShopCategory(name=names.get(category_id, "Unknown"), product_count=count)
            for category_id, count in per_category.items()
        ]

        logger.info(
            "professionals.shop.success",
            extra=log_context(profile_id=str(profile.id), products=len(products)),
        )
        return ProfessionalShop(
            profile=ProfessionalProfileOut.model_validate(profile),
            products=[ProductOut.model_validate(product) for product in products],
            categories=categories,
        )

    async def update_profile(
        self, *, profile_id: UUID, payload: ProfessionalProfileUpdate, actor: User
    ) -> ProfessionalProfileOut:
        profile = await self._session.get(ProfessionalProfile, profile_id)
        if profile is None:
            raise HTTPException(
                status.HTTP_404_NOT_FOUND, detail="Professional profile not found"
            )
        ensure_owner_or_admin(actor, profile.user_id)

        updates = payload.model_dump(exclude_unset=True)
        if "is_verified" in updates and not is_admin(actor):
            raise PermissionDeniedError("Only administrators can verify professionals")
        if updates.get("specialization_id") is not None:
            await self._ensure_specialization(updates["specialization_id"])

        social_media = updates.pop("social_media", None)
        delivery_zones = updates.pop("delivery_zones", None)
        for field, value in updates.items():
            if value is None and field in _NOT_NULL:
                continue
            setattr(profile, field, value)
        if social_media is not None:
            profile.social_media = [SocialMedia(**item) for item in social_media]
        if delivery_zones is not None:
            profile.delivery_zones = [DeliveryZone(**item) for item in delivery_zones]
        await self._session.flush()

        logger.info(
            "professionals.update.success",
            extra=log_context(profile_id=str(profile.id), user_id=str(actor.id)),
        )
        return await self._fresh(profile.id)

    async def _resolve_slug(self, slug: str) -> ProfessionalProfile:
        """Find a profile by slug, then business name, then ``first-last`` user name."""

        profile = (
            await self._session.execute(
                select(ProfessionalProfile).where(ProfessionalProfile.slug == slug)
            )
        ).scalar_one_or_none()
        if profile is not None:
            return profile

        business_name = slug.replace("-", " ").strip().lower()
        profile = (
            await self._session.execute(
                select(ProfessionalProfile)
                .where(func.lower(ProfessionalProfile.business_name) == business_name)
                .limit(1)
            )
        ).scalar_one_or_none()
        if profile is not None:
            return profile

        first, _, last = slug.lower().partition("-")
        if first and last:
            profile = (
                await self._session.execute(
                    select(ProfessionalProfile)
                    .join(User, User.id == ProfessionalProfile.user_id)
                    .where(
                        func.lower(User.first_name) == first,
                        func.lower(User.last_name) == last,
                    )
                    .limit(1)
                )
            ).scalar_one_or_none()
            if profile is not None:
                return profile

        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Professional profile not found")

    async def _unique_slug(self, base: str) -> str:
        candidates = slug_candidates(base)
        while True:
            candidate = next(candidates)
            stmt = select(ProfessionalProfile.id).where(ProfessionalProfile.slug == candidate)
            if (await self._session.execute(stmt)).first() is None:
                return candidate

    async def _ensure_specialization(self, specialization_id: UUID) -> None:
        specialization = await self._session.get(ProfessionalType, specialization_id)
        if specialization is None or not specialization.is_active:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST, detail="Invalid specialization"
            )

    async def _by_user(self, user_id: UUID) -> ProfessionalProfile | None:
        stmt = select(ProfessionalProfile).where(ProfessionalProfile.user_id == user_id)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def _fresh(self, profile_id: UUID) -> ProfessionalProfileOut:
        stmt = (
            select(ProfessionalProfile)
            .where(ProfessionalProfile.id == profile_id)
            .execution_options(populate_existing=True)
        )
        profile = (await self._session.execute(stmt)).scalar_one()
        return ProfessionalProfileOut.model_validate(profile)


__all__ = ["ProfessionalsService"]
