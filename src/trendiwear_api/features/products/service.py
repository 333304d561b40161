"""Product catalog browsing and professional listing management."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.filters import json_list_contains_any
from trendiwear_api.common.logging import log_context
from trendiwear_api.common.pagination import PageParams, paginate_query
from trendiwear_api.common.text import like_pattern
from trendiwear_api.core.http.dependencies import ensure_owner_or_admin
from trendiwear_api.models import Category, Collection, Gender, OrderItem, Product, User

from .repository import ProductsRepository
from .schemas import ProductCreate, ProductOut, ProductPage, ProductUpdate

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    "createdAt": Product.created_at,
    "price": Product.price,
    "viewCount": Product.view_count,
}
_NOT_NULL = {
    "name",
    "description",
    "price",
    "stock_quantity",
    "images",
    "category_id",
    "sizes",
    "colors",
    "tags",
    "is_customizable",
    "gender",
    "is_active",
}


@dataclass(frozen=True)
class ProductFilters:
    category_id: UUID | None = None
    collection_id: UUID | None = None
    professional_id: UUID | None = None
    search: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    gender: Gender | None = None
    tags: list[str] = field(default_factory=list)
    colors: list[str] = field(default_factory=list)
    sizes: list[str] = field(default_factory=list)
    sort_by: str = "createdAt"
    sort_order: str = "desc"


class ProductsService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._repo = ProductsRepository(session)

    async def list_products(self, *, params: PageParams, filters: ProductFilters) -> ProductPage:
        """Page through active, in-stock products matching ``filters``."""

        logger.debug(
            "products.list.start",
            extra=log_context(
                page=params.page,
                limit=params.limit,
                sort_by=filters.sort_by,
                sort_order=filters.sort_order,
            ),
        )

        stmt = select(Product).where(Product.is_active.is_(True), Product.is_in_stock.is_(True))
        if filters.category_id is not None:
            stmt = stmt.where(Product.category_id == filters.category_id)
        if filters.collection_id is not None:
            stmt = stmt.where(Product.collection_id == filters.collection_id)
        if filters.professional_id is not None:
            stmt = stmt.where(Product.professional_id == filters.professional_id)
        if filters.gender is not None:
            stmt = stmt.where(Product.gender == Gender(filters.gender))
        if filters.search:
            pattern = like_pattern(filters.search)
            stmt = stmt.where(
                or_(
                    Product.name.ilike(pattern, escape="\\"),
                    Product.description.ilike(pattern, escape="\\"),
                )
            )
        if filters.min_price is not None:
            stmt = stmt.where(Product.price >= filters.min_price)
        if filters.max_price is not None:
            stmt = stmt.where(Product.price <= filters.max_price)
        if filters.tags:
            stmt = stmt.where(json_list_contains_any(Product.tags, filters.tags))
        if filters.colors:
            stmt = stmt.where(json_list_contains_any(Product.colors, filters.colors))
        if filters.sizes:
            stmt = stmt.where(json_list_contains_any(Product.sizes, filters.sizes))

        column = _SORT_COLUMNS.get(filters.sort_by, Product.created_at)
        ordering = column.asc() if filters.sort_order == "asc" else column.desc()
        result = await paginate_query(
            self._session,
            stmt,
            params=params,
            order_by=[ordering, Product.id],
        )
        items = await self._repo.list_items(result.rows)

        logger.info(
            "products.list.success",
            extra=log_context(count=len(items), total=result.pagination.total),
        )
        return ProductPage(items=items, pagination=result.pagination)

    async def get_product(self, *, product_id: UUID) -> ProductOut:
        """Return a product and count the view."""

        result = await self._session.execute(
            update(Product)
            .where(Product.id == product_id)
            .values(view_count=Product.view_count + 1)
            .execution_options(synchronize_session=False)
        )
        if not result.rowcount:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Product not found")

        product = await self._repo.refetch(product_id)
        logger.info(
            "products.get.success",
            extra=log_context(product_id=str(product.id), view_count=product.view_count),
        )
        return ProductOut.model_validate(product)

    async def create_product(self, *, payload: ProductCreate, actor: User) -> ProductOut:
        await self._ensure_references(payload.category_id, payload.collection_id)

        data = payload.model_dump()
        data["gender"] = Gender(data["gender"])
        product = Product(
            **data,
            professional_id=actor.id,
            is_in_stock=payload.stock_quantity > 0,
        )
        self._session.add(product)
        await self._session.flush()

        logger.info(
            "products.create.success",
            extra=log_context(product_id=str(product.id), user_id=str(actor.id)),
        )
        return ProductOut.model_validate(await self._repo.refetch(product.id))

    async def update_product(
        self, *, product_id: UUID, payload: ProductUpdate, actor: User
    ) -> ProductOut:
        product = await self._get_or_404(product_id)
        ensure_owner_or_admin(actor, product.professional_id)

        updates = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if not (value is None and key in _NOT_NULL)
        }
        if not updates:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail="Provide at least one field to update.",
            )
        if "category_id" in updates or updates.get("collection_id") is not None:
            await self._ensure_references(
                updates.get("category_id", product.category_id),
                updates.get("collection_id"),
            )
        if "gender" in updates:
            updates["gender"] = Gender(updates["gender"])
        if "stock_quantity" in updates:
            updates["is_in_stock"] = updates["stock_quantity"] > 0

        for key, value in updates.items():
            setattr(product, key, value)
        await self._session.flush()

        logger.info(
            "products.update.success",
            extra=log_context(product_id=str(product.id), fields=",".join(sorted(updates))),
        )
        return ProductOut.model_validate(await self._repo.refetch(product.id))

    async def delete_product(self, *, product_id: UUID, actor: User) -> None:
        product = await self._get_or_404(product_id)
        ensure_owner_or_admin(actor, product.professional_id)

        ordered = (
            await self._session.execute(
                select(func.count())
                .select_from(OrderItem)
                .where(OrderItem.product_id == product.id)
            )
        ).scalar_one()
        if ordered:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail="Cannot delete a product that has been ordered. Deactivate it instead.",
            )

        await self._session.delete(product)
        await self._session.flush()
        logger.info("products.delete.success", extra=log_context(product_id=str(product_id)))

    async def _ensure_references(
        self, category_id: UUID, collection_id: UUID | None
    ) -> None:
        if await self._session.get(Category, category_id) is None:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Category not found")
        if collection_id is None:
            return
        if await self._session.get(Collection, collection_id) is None:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Collection not found")

    async def _get_or_404(self, product_id: UUID) -> Product:
        product = await self._repo.get(product_id)
        if product is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Product not found")
        return product


__all__ = ["ProductFilters", "ProductsService"]
