from __future__ import annotations

import pytest

from ..utils import create_category, create_product


@pytest.mark.asyncio
async def test_tag_filter_matches_non_ascii_values(async_client, admin, professional) -> None:
    category = await create_category(async_client, admin)
    accented = await create_product(
        async_client, professional, category["id"], tags=["café", "linen"], colors=["écru"]
    )
    await create_product(async_client, professional, category["id"], tags=["cafe"])

    response = await async_client.get(
        "/api/v1/products", params={"tags": "café", "categoryId": category["id"]}
    )

    assert response.status_code == 200
    assert [item["id"] for item in response.json()["items"]] == [accented["id"]]

    by_color = await async_client.get(
        "/api/v1/products", params={"colors": "ÉCRU", "categoryId": category["id"]}
    )
    assert by_color.status_code == 200
    assert [item["id"] for item in by_color.json()["items"]] == [accented["id"]]


@pytest.mark.asyncio
async def test_size_filter_matches_whole_members(async_client, admin, professional) -> None:
    category = await create_category(async_client, admin)
    large = await create_product(async_client, professional, category["id"], sizes=["XL"])
    await create_product(async_client, professional, category["id"], sizes=["XXL"])

    response = await async_client.get(
        "/api/v1/products", params={"sizes": "xl,S", "categoryId": category["id"]}
    )

    assert response.status_code == 200
    assert [item["id"] for item in response.json()["items"]] == [large["id"]]
