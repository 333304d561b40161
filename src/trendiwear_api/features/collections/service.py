from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.common.text import slugify
from trendiwear_api.features.products.schemas import ProductOut
from trendiwear_api.models import Category, Collection, Product, Season

from .schemas import (
    CollectionCreate,
    CollectionList,
    CollectionListItem,
    CollectionOut,
    CollectionUpdate,
)

logger = logging.getLogger(__name__)

PREVIEW_PRODUCTS = 8
_NOT_NULL = {"name", "slug", "is_featured", "order", "is_active"}


class CollectionsService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def list_collections(
        self,
        *,
        category_id: UUID | None = None,
        featured: bool = False,
        season: Season | None = None,
    ) -> CollectionList:
        logger.debug(
            "collections.list.start",
            extra=log_context(
                category_id=str(category_id) if category_id else None, featured=featured
            ),
        )

        stmt = select(Collection).where(Collection.is_active.is_(True))
        if category_id is not None:
            stmt = stmt.where(Collection.category_id == category_id)
        if featured:
            stmt = stmt.where(Collection.is_featured.is_(True))
        if season is not None:
            stmt = stmt.where(Collection.season == Season(season))
        stmt = stmt.order_by(Collection.is_featured.desc(), Collection.order, Collection.name)
        collections = (await self._session.execute(stmt)).scalars().all()

        counts = await self._product_counts([collection.id for collection in collections])
        items = []
        for collection in collections:
            items.append(await self._list_item(collection, counts.get(collection.id, 0)))

        logger.info("collections.list.success", extra=log_context(count=len(items)))
        return CollectionList(collections=items)

    async def get_collection(self, *, collection_id: UUID) -> CollectionListItem:
        collection = await self._get_or_404(collection_id)
        counts = await self._product_counts([collection.id])
        return await self._list_item(collection, counts.get(collection.id, 0))

    async def create_collection(self, *, payload: CollectionCreate) -> CollectionOut:
        slug = slugify(payload.slug or payload.name)
        await self._ensure_slug_free(slug)
        if payload.category_id is not None:
            await self._ensure_category(payload.category_id)

        collection = Collection(
            name=payload.name,
            slug=slug,
            description=payload.description,
            image_url=payload.image_url,
            category_id=payload.category_id,
            season=Season(payload.season) if payload.season else None,
            is_featured=payload.is_featured,
            order=payload.order,
            is_active=payload.is_active,
        )
        self._session.add(collection)
        await self._session.flush()
        logger.info(
            "collections.create.success",
            extra=log_context(collection_id=str(collection.id), slug=slug),
        )
        return await self._fresh(collection.id)

    async def update_collection(
        self, *, collection_id: UUID, payload: CollectionUpdate
    ) -> CollectionOut:
        collection = await self._get_or_404(collection_id)
        updates = payload.model_dump(exclude_unset=True)
        if not updates:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail="Provide at least one field to update.",
            )
        if updates.get("slug"):
            updates["slug"] = slugify(updates["slug"])
            if updates["slug"] != collection.slug:
                await self._ensure_slug_free(updates["slug"])
        if updates.get("category_id") is not None:
            await self._ensure_category(updates["category_id"])
        if updates.get("season") is not None:
            updates["season"] = Season(updates["season"])

        for field, value in updates.items():
            if value is None and field in _NOT_NULL:
                continue
            setattr(collection, field, value)
        await self._session.flush()

        logger.info(
            "collections.update.success",
            extra=log_context(collection_id=str(collection.id), fields=",".join(sorted(updates))),
        )
        return await self._fresh(collection.id)

    async def delete_collection(self, *, collection_id: UUID) -> None:
        collection = await self._get_or_404(collection_id)
        products = (
            await self._session.execute(
                select(func.count())
                .select_from(Product)
                .where(Product.collection_id == collection.id)
            )
        ).scalar_one()
        if products:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail=(
                    "Cannot delete collection with existing products. "
                    "Please remove products first."
                ),
            )
        await self._session.delete(collection)
        await self._session.flush()
        logger.info(
            "collections.delete.success",
            extra=log_context(collection_id=str(collection_id)),
        )

    async def _list_item(self, collection: Collection, product_count: int) -> CollectionListItem:
        stmt = (
            select(Product)
            .where(
                Product.collection_id == collection.id,
                Product.is_active.is_(True),
                Product.is_in_stock.is_(True),
            )
            .order_by(Product.created_at.desc())
            .limit(PREVIEW_PRODUCTS)
        )
        products = (await self._session.execute(stmt)).scalars().all()
        return CollectionListItem.model_validate(collection).model_copy(
            update={
                "product_count": product_count,
                "products": [ProductOut.model_validate(product) for product in products],
            }
        )

    async def _product_counts(self, collection_ids: list[UUID]) -> dict[UUID, int]:
        if not collection_ids:
            return {}
        stmt = (
            select(Product.collection_id, func.count())
            .where(
                Product.collection_id.in_(collection_ids),
                Product.is_active.is_(True),
                Product.is_in_stock.is_(True),
            )
            .group_by(Product.collection_id)
        )
        return {row[0]: row[1] for row in (await self._session.execute(stmt)).all()}

    async def _ensure_slug_free(self, slug: str) -> None:
        stmt = select(Collection.id).where(Collection.slug == slug)
        if (await self._session.execute(stmt)).first() is not None:
            raise HTTPException(
                status.HTTP_409_CONFLICT,
                detail="A collection with this slug already exists.",
            )

    async def _ensure_category(self, category_id: UUID) -> None:
        if await self._session.get(Category, category_id) is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Category not found")

    async def _get_or_404(self, collection_id: UUID) -> Collection:
        collection = await self._session.get(Collection, collection_id)
        if collection is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Collection not found")
        return collection

    async def _fresh(self, collection_id: UUID) -> CollectionOut:
        stmt = (
            select(Collection)
            .where(Collection.id == collection_id)
            .execution_options(populate_existing=True)
        )
        return CollectionOut.model_validate((await self._session.execute(stmt)).scalar_one())


__all__ = ["CollectionsService"]
