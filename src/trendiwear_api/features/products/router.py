"""Routes for browsing and managing products."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from trendiwear_api.api.deps import get_products_service, get_showcase_service
from trendiwear_api.common.filters import split_csv
from trendiwear_api.common.pagination import PageParams, page_params
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import CurrentUser, ProfessionalUser, SuperAdminUser
from trendiwear_api.models import Gender

from .schemas import (
    ProductCreate,
    ProductOut,
    ProductPage,
    ProductSortField,
    ProductUpdate,
    ShowcaseToggle,
    SortOrder,
)
from .service import ProductFilters, ProductsService
from .showcase import ShowcaseService

router = APIRouter(prefix="/products", tags=["products"])

ProductsServiceDep = Annotated[ProductsService, Depends(get_products_service)]
ShowcaseServiceDep = Annotated[ShowcaseService, Depends(get_showcase_service)]
PRODUCT_ID_PARAM = Annotated[UUID, Path(description="Product identifier.")]


@router.get("", response_model=ProductPage, summary="List active, in-stock products")
async def list_products(
    service: ProductsServiceDep,
    page: Annotated[PageParams, Depends(page_params())],
    category_id: Annotated[UUID | None, Query(alias="categoryId")] = None,
    collection_id: Annotated[UUID | None, Query(alias="collectionId")] = None,
    professional_id: Annotated[UUID | None, Query(alias="professionalId")] = None,
    search: Annotated[str | None, Query(max_length=128)] = None,
    min_price: Annotated[float | None, Query(alias="minPrice", ge=0)] = None,
    max_price: Annotated[float | None, Query(alias="maxPrice", ge=0)] = None,
    gender: Gender | None = None,
    tags: Annotated[str | None, Query(description="Comma separated tags.")] = None,
    colors: Annotated[str | None, Query(description="Comma separated colors.")] = None,
    sizes: Annotated[str | None, Query(description="Comma separated sizes.")] = None,
    sort_by: Annotated[ProductSortField, Query(alias="sortBy")] = "createdAt",
    sort_order: Annotated[SortOrder, Query(alias="sortOrder")] = "desc",
) -> ProductPage:
    filters = ProductFilters(
        category_id=category_id,
        collection_id=collection_id,
        professional_id=professional_id,
        search=search,
        min_price=min_price,
        max_price=max_price,
        gender=gender,
        tags=split_csv(tags),
        colors=split_csv(colors),
        sizes=split_csv(sizes),
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return await service.list_products(params=page, filters=filters)


@router.get(
    "/{product_id}",
    response_model=ProductOut,
    summary="Retrieve a product and count the view",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Product not found."}},
)
async def get_product(product_id: PRODUCT_ID_PARAM, service: ProductsServiceDep) -> ProductOut:
    return await service.get_product(product_id=product_id)


@router.post(
    "",
    response_model=ProductOut,
    status_code=status.HTTP_201_CREATED,
    summary="List a new product (professionals only)",
    responses={status.HTTP_403_FORBIDDEN: {"description": "Professional role required."}},
)
async def create_product(
    actor: ProfessionalUser,
    payload: ProductCreate,
    service: ProductsServiceDep,
) -> ProductOut:
    return await service.create_product(payload=payload, actor=actor)


@router.put(
    "/{product_id}",
    response_model=ProductOut,
    summary="Update a product (owner or administrator)",
    responses={
        status.HTTP_403_FORBIDDEN: {"description": "Only the owner or an administrator."},
        status.HTTP_404_NOT_FOUND: {"description": "Product not found."},
    },
)
async def update_product(
    actor: CurrentUser,
    product_id: PRODUCT_ID_PARAM,
    payload: ProductUpdate,
    service: ProductsServiceDep,
) -> ProductOut:
    return await service.update_product(product_id=product_id, payload=payload, actor=actor)


@router.delete(
    "/{product_id}",
    response_model=MessageOut,
    summary="Delete a product (owner or administrator)",
    responses={
        status.HTTP_403_FORBIDDEN: {"description": "Only the owner or an administrator."},
        status.HTTP_404_NOT_FOUND: {"description": "Product not found."},
    },
)
async def delete_product(
    actor: CurrentUser,
    product_id: PRODUCT_ID_PARAM,
    service: ProductsServiceDep,
) -> MessageOut:
    await service.delete_product(product_id=product_id, actor=actor)
    return MessageOut(message="Product deleted successfully")


@router.put(
    "/{product_id}/showcase",
    response_model=ProductOut,
    summary="Approve or withdraw showcase status (super administrator only)",
    responses={status.HTTP_403_FORBIDDEN: {"description": "Super administrator role required."}},
)
async def toggle_showcase(
    actor: SuperAdminUser,
    product_id: PRODUCT_ID_PARAM,
    payload: ShowcaseToggle,
    service: ShowcaseServiceDep,
) -> ProductOut:
    return await service.set_approval(
        product_id=product_id, approved=payload.approved, actor=actor
    )


__all__ = ["router"]
