"""Category tree reads and administrator maintenance."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.common.pagination import PageParams, paginate_query
from trendiwear_api.common.text import slugify
from trendiwear_api.features.audit_logs.service import AuditLogService
from trendiwear_api.features.products.repository import ProductsRepository
from trendiwear_api.features.products.schemas import ProductOut
from trendiwear_api.models import Category, Collection, Product, User

from .schemas import (
    CategoryCreate,
    CategoryDetail,
    CategoryList,
    CategoryListItem,
    CategoryOut,
    CategoryRef,
    CategoryUpdate,
    ChildCategory,
    CollectionRef,
)

logger = logging.getLogger(__name__)

PREVIEW_PRODUCTS = 8


def _listed_products():
    return select(Product).where(Product.is_active.is_(True), Product.is_in_stock.is_(True))


class CategoriesService:
    def __init__(self, *, session: AsyncSession, audit: AuditLogService) -> None:
        self._session = session
        self._audit = audit
        self._products = ProductsRepository(session)

    async def list_categories(
        self, *, parents_only: bool = False, include_products: bool = False
    ) -> CategoryList:
        logger.debug(
            "categories.list.start",
            extra=log_context(parents_only=parents_only, include_products=include_products),
        )

        stmt = select(Category)
        if parents_only:
            stmt = stmt.where(Category.parent_id.is_(None))
        stmt = stmt.order_by(Category.order, Category.name)
        categories = (await self._session.execute(stmt)).scalars().all()

        items = await self._build_items(
            categories, active_children_only=False, include_products=include_products
        )
        logger.info("categories.list.success", extra=log_context(count=len(items)))
        return CategoryList(categories=items)

    async def get_category(
        self,
        *,
        category_id: UUID,
        include_products: bool = False,
        params: PageParams,
    ) -> CategoryDetail:
        """Return one category; with ``include_products`` also page its subtree's products."""

        logger.debug("categories.get.start", extra=log_context(category_id=str(category_id)))
        category = await self._get_or_404(category_id)
        [item] = await self._build_items([category], active_children_only=True)

        if not include_products:
            return CategoryDetail(category=item)

        subtree = [category.id, *await self.descendant_ids(category.id)]
        stmt = _listed_products().where(Product.category_id.in_(subtree))
        result = await paginate_query(
            self._session,
            stmt,
            params=params,
            order_by=[Product.created_at.desc(), Product.id],
        )
        products = await self._products.list_items(result.rows)

        logger.info(
            "categories.get.success",
            extra=log_context(
                category_id=str(category.id),
                subtree=len(subtree),
                total=result.pagination.total,
            ),
        )
        return CategoryDetail(category=item, products=products, pagination=result.pagination)

    async def descendant_ids(self, category_id: UUID, *, active_only: bool = True) -> list[UUID]:
        """Return ids of every category below ``category_id``, breadth first."""

        found: list[UUID] = []
        seen = {category_id}
        frontier = [category_id]
        while frontier:
            stmt = select(Category.id).where(Category.parent_id.in_(frontier))
            if active_only:
                stmt = stmt.where(Category.is_active.is_(True))
            rows = (await self._session.execute(stmt)).scalars().all()
            children = [row for row in rows if row not in seen]
            seen.update(children)
            found.extend(children)
            frontier = children
        return found

    async def create_category(self, *, payload: CategoryCreate, actor: User) -> CategoryOut:
        slug = slugify(payload.slug or payload.name)
        await self._ensure_slug_free(slug)
        if payload.parent_id is not None:
            await self._get_or_404(payload.parent_id, detail="Parent category not found")

        category = Category(
            name=payload.name,
            slug=slug,
            description=payload.description,
            image_url=payload.image_url,
            parent_id=payload.parent_id,
            order=payload.order,
            is_active=payload.is_active,
        )
        self._session.add(category)
        await self._session.flush()
        await self._audit.record(
            actor=actor,
            action="CREATE",
            entity="Category",
            entity_id=category.id,
            details={"name": category.name, "slug": category.slug},
        )
        logger.info(
            "categories.create.success",
            extra=log_context(category_id=str(category.id), slug=slug),
        )
        return CategoryOut.model_validate(category)

    async def update_category(
        self, *, category_id: UUID, payload: CategoryUpdate, actor: User
    ) -> CategoryOut:
        category = await self._get_or_404(category_id)
        updates = payload.model_dump(exclude_unset=True)
        if not updates:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail="Provide at least one field to update.",
            )

        if updates.get("slug"):
            updates["slug"] = slugify(updates["slug"])
            if updates["slug"] != category.slug:
                await self._ensure_slug_free(updates["slug"])
        if updates.get("parent_id") is not None:
            parent_id = updates["parent_id"]
            if parent_id == category.id or parent_id in await self.descendant_ids(
                category.id, active_only=False
            ):
                raise HTTPException(
                    status.HTTP_400_BAD_REQUEST,
                    detail="A category cannot be nested under itself or its descendants.",
                )
            await self._get_or_404(parent_id, detail="Parent category not found")

        for field, value in updates.items():
            if value is None and field in {"name", "slug", "order", "is_active"}:
                continue
            setattr(category, field, value)
        await self._session.flush()

        await self._audit.record(
            actor=actor,
            action="UPDATE",
            entity="Category",
            entity_id=category.id,
            details={"fields": sorted(updates)},
        )
        logger.info(
            "categories.update.success",
            extra=log_context(category_id=str(category.id), fields=",".join(sorted(updates))),
        )
        stmt = (
            select(Category)
            .where(Category.id == category.id)
            .execution_options(populate_existing=True)
        )
        return CategoryOut.model_validate((await self._session.execute(stmt)).scalar_one())

    async def delete_category(self, *, category_id: UUID, actor: User) -> None:
        category = await self._get_or_404(category_id)

        products = await self._count(Product, Product.category_id == category.id)
        children = await self._count(Category, Category.parent_id == category.id)
        collections = await self._count(Collection, Collection.category_id == category.id)
        if products or children or collections:
            logger.info(
                "categories.delete.blocked",
                extra=log_context(
                    category_id=str(category.id),
                    products=products,
                    children=children,
                    collections=collections,
                ),
            )
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail=(
                    "Cannot delete category with existing products, subcategories "
                    "or collections"
                ),
            )

        await self._audit.record(
            actor=actor,
            action="DELETE",
            entity="Category",
            entity_id=category.id,
            details={"name": category.name, "slug": category.slug},
        )
        await self._session.delete(category)
        await self._session.flush()
        logger.info("categories.delete.success", extra=log_context(category_id=str(category_id)))

    async def _build_items(
        self,
        categories: Sequence[Category],
        *,
        active_children_only: bool,
        include_products: bool = False,
    ) -> list[CategoryListItem]:
        ids = [category.id for category in categories]
        if not ids:
            return []

        child_stmt = select(Category).where(Category.parent_id.in_(ids))
        if active_children_only:
            child_stmt = child_stmt.where(Category.is_active.is_(True))
        child_stmt = child_stmt.order_by(Category.order, Category.name)
        children = (await self._session.execute(child_stmt)).scalars().all()

        collection_stmt = (
            select(Collection)
            .where(Collection.category_id.in_(ids), Collection.is_active.is_(True))
            .order_by(Collection.order, Collection.name)
        )
        collections = (await self._session.execute(collection_stmt)).scalars().all()

        counts = await self._product_counts([*ids, *(child.id for child in children)])

        children_by_parent: dict[UUID, list[ChildCategory]] = {}
        for child in children:
            ref = ChildCategory.model_validate(child).model_copy(
                update={"product_count": counts.get(child.id, 0)}
            )
            children_by_parent.setdefault(child.parent_id, []).append(ref)
        collections_by_category: dict[UUID, list[CollectionRef]] = {}
        for collection in collections:
            collections_by_category.setdefault(collection.category_id, []).append(
                CollectionRef.model_validate(collection)
            )

        items: list[CategoryListItem] = []
        for category in categories:
            products = None
            if include_products:
                stmt = (
                    _listed_products()
                    .where(Product.category_id == category.id)
                    .order_by(Product.created_at.desc())
                    .limit(PREVIEW_PRODUCTS)
                )
                rows = (await self._session.execute(stmt)).scalars().all()
                products = [ProductOut.model_validate(row) for row in rows]
            items.append(
                CategoryListItem.model_validate(category).model_copy(
                    update={
                        "parent": (
                            CategoryRef.model_validate(category.parent)
                            if category.parent is not None
                            else None
                        ),
                        "children": children_by_parent.get(category.id, []),
                        "collections": collections_by_category.get(category.id, []),
                        "product_count": counts.get(category.id, 0),
                        "products": products,
                    }
                )
            )
        return items

    async def _product_counts(self, category_ids: list[UUID]) -> dict[UUID, int]:
        stmt = (
            select(Product.category_id, func.count())
            .where(
                Product.category_id.in_(category_ids),
                Product.is_active.is_(True),
                Product.is_in_stock.is_(True),
            )
            .group_by(Product.category_id)
        )
        return {row[0]: row[1] for row in (await self._session.execute(stmt)).all()}

    async def _count(self, model, condition) -> int:
        stmt = select(func.count()).select_from(model).where(condition)
        return int((await self._session.execute(stmt)).scalar_one())

    async def _ensure_slug_free(self, slug: str) -> None:
        stmt = select(Category.id).where(Category.slug == slug)
        if (await self._session.execute(stmt)).first() is not None:
            raise HTTPException(
                status.HTTP_409_CONFLICT,
                detail="A category with this slug already exists.",
            )

    async def _get_or_404(
        self, category_id: UUID, *, detail: str = "Category not found"
    ) -> Category:
        category = await self._session.get(Category, category_id)
        if category is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail=detail)
        return category


__all__ = ["CategoriesService"]
