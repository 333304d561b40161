from __future__ import annotations

from uuid import uuid4

import pytest

from ..utils import create_address, create_category, create_product


async def _profile(async_client, admin, professional) -> dict:
    specialization = await async_client.post(
        "/api/v1/professional-types",
        json={"name": f"Tailor {uuid4().hex[:8]}"},
        headers=admin.headers,
    )
    assert specialization.status_code == 201
    profile = await async_client.post(
        "/api/v1/professional-profiles",
        json={
            "businessName": f"Ankara Atelier {uuid4().hex[:6]}",
            "specializationId": specialization.json()["id"],
        },
        headers=professional.headers,
    )
    assert profile.status_code == 201, profile.text
    return profile.json()


async def _order(async_client, customer, address, product, quantity) -> str:
    response = await async_client.post(
        "/api/v1/orders",
        json={
            "addressId": address["id"],
            "items": [{"productId": product["id"], "quantity": quantity}],
        },
        headers=customer.headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


@pytest.mark.asyncio
async def test_dashboard_counts_live_sales_only(
    async_client, admin, professional, customer
) -> None:
    profile = await _profile(async_client, admin, professional)
    category = await create_category(async_client, admin)
    product = await create_product(
        async_client, professional, category["id"], name="Ankara blazer", price=100.0
    )
    for _ in range(4):
        await async_client.get(f"/api/v1/products/{product['id']}")
    address = await create_address(async_client, customer)
    kept = await _order(async_client, customer, address, product, 2)
    cancelled = await _order(async_client, customer, address, product, 1)
    await async_client.put(
        f"/api/v1/orders/{cancelled}", json={"status": "CANCELLED"}, headers=professional.headers
    )

    response = await async_client.get(
        "/api/v1/professional-analytics/dashboard", headers=professional.headers
    )

    assert response.status_code == 200, response.text
    body = response.json()
    assert body["professional"]["businessName"] == profile["businessName"]
    assert body["metrics"]["totalRevenue"] == 200.0
    assert body["metrics"]["completedOrders"] == 0
    assert body["metrics"]["activeCustomers"] == 1
    assert body["metrics"]["totalProducts"] == 1
    assert body["metrics"]["conversionRate"] == 75.0
    assert body["topServices"] == [
        {"productId": product["id"], "name": "Ankara blazer", "revenue": 200.0, "orders": 1}
    ]
    assert [order["id"] for order in body["recentOrders"]] == [cancelled, kept]
    assert body["recentOrders"][0]["status"] == "CANCELLED"
    assert body["periodComparison"] == {"current": 1, "previous": 0, "change": 0.0}


@pytest.mark.asyncio
async def test_analytics_report_with_comparison(
    async_client, admin, professional, customer
) -> None:
    await _profile(async_client, admin, professional)
    category = await create_category(async_client, admin)
    product = await create_product(async_client, professional, category["id"], price=50.0)
    address = await create_address(async_client, customer)
    await _order(async_client, customer, address, product, 3)

    response = await async_client.get(
        "/api/v1/professional-analytics",
        params={"period": "7d", "compare": "true"},
        headers=professional.headers,
    )

    assert response.status_code == 200, response.text
    body = response.json()
    assert body["period"] == "7d"
    assert body["overview"]["totalRevenue"] == 150.0
    assert body["overview"]["totalOrders"] == 1
    assert body["overview"]["avgOrderValue"] == 150.0
    assert sum(body["monthlyRevenue"].values()) == 150.0
    assert sum(body["peakHours"].values()) == 100
    assert body["comparison"]["orders"] == {"current": 1, "previous": 0, "change": 0.0}
    assert body["comparison"]["previousPeriod"]["end"] == body["dateRange"]["start"]


@pytest.mark.asyncio
async def test_analytics_need_a_professional_profile(
    async_client, professional, customer
) -> None:
    no_profile = await async_client.get(
        "/api/v1/professional-analytics/dashboard", headers=professional.headers
    )
    not_professional = await async_client.get(
        "/api/v1/professional-analytics", headers=customer.headers
    )
    bad_period = await async_client.get(
        "/api/v1/professional-analytics", params={"period": "2w"}, headers=professional.headers
    )

    assert no_profile.status_code == 404
    assert no_profile.json() == {"error": "Professional profile not found"}
    assert not_professional.status_code == 403
    assert bad_period.status_code == 400
