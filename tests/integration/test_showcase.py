from __future__ import annotations

import pytest

from ..utils import create_category, create_product


@pytest.mark.asyncio
async def test_approved_product_without_reviews_rates_zero(
    async_client, admin, professional, super_admin
) -> None:
    category = await create_category(async_client, admin)
    product = await create_product(async_client, professional, category["id"])

    added = await async_client.post(
        "/api/v1/showcase-products",
        json={"productId": product["id"]},
        headers=super_admin.headers,
    )
    assert added.status_code == 201
    assert added.json()["isShowcaseApproved"] is True

    listing = await async_client.get("/api/v1/showcase-products")
    assert listing.status_code == 200
    items = {item["id"]: item for item in listing.json()["items"]}
    assert len(items) <= 10
    assert items[product["id"]]["averageRating"] == 0.0
    assert items[product["id"]]["reviewCount"] == 0


@pytest.mark.asyncio
async def test_showcase_removal_requires_an_approved_product(
    async_client, admin, professional, super_admin
) -> None:
    category = await create_category(async_client, admin)
    product = await create_product(async_client, professional, category["id"])
    toggled = await async_client.put(
        f"/api/v1/products/{product['id']}/showcase",
        json={"approved": True},
        headers=super_admin.headers,
    )
    assert toggled.status_code == 200

    removed = await async_client.delete(
        "/api/v1/showcase-products",
        params={"productId": product["id"]},
        headers=super_admin.headers,
    )
    again = await async_client.delete(
        "/api/v1/showcase-products",
        params={"productId": product["id"]},
        headers=super_admin.headers,
    )

    assert removed.status_code == 200
    assert removed.json()["isShowcaseApproved"] is False
    assert again.status_code == 400
    assert again.json() == {"error": "Product is not currently in showcase"}


@pytest.mark.asyncio
async def test_showcase_management_is_for_super_admins(
    async_client, admin, professional
) -> None:
    category = await create_category(async_client, admin)
    product = await create_product(async_client, professional, category["id"])

    forbidden = await async_client.post(
        "/api/v1/showcase-products",
        json={"productId": product["id"]},
        headers=admin.headers,
    )
    dashboard = await async_client.get(
        "/api/v1/showcase-products", params={"dashboard": "true"}, headers=admin.headers
    )

    assert forbidden.status_code == 403
    assert dashboard.status_code == 403
    assert dashboard.json()["error"] == "Only super admins can access showcase management"
    fetched = await async_client.get(f"/api/v1/products/{product['id']}")
    assert fetched.json()["isShowcaseApproved"] is False
