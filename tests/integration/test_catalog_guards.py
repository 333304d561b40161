from __future__ import annotations

from uuid import uuid4

import pytest

from ..utils import create_category, create_product


@pytest.mark.asyncio
async def test_category_with_products_cannot_be_deleted(
    async_client, admin, professional
) -> None:
    category = await create_category(async_client, admin)
    await create_product(async_client, professional, category["id"])

    response = await async_client.delete(
        f"/api/v1/categories/{category['id']}", headers=admin.headers
    )

    assert response.status_code == 400
    assert "existing products" in response.json()["error"]
    still_there = await async_client.get(f"/api/v1/categories/{category['id']}")
    assert still_there.status_code == 200


@pytest.mark.asyncio
async def test_category_with_children_cannot_be_deleted(async_client, admin) -> None:
    parent = await create_category(async_client, admin)
    await create_category(async_client, admin, parentId=parent["id"])

    response = await async_client.delete(
        f"/api/v1/categories/{parent['id']}", headers=admin.headers
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_category_cannot_be_nested_under_its_descendant(async_client, admin) -> None:
    parent = await create_category(async_client, admin)
    child = await create_category(async_client, admin, parentId=parent["id"])

    response = await async_client.put(
        f"/api/v1/categories/{parent['id']}",
        json={"parentId": child["id"]},
        headers=admin.headers,
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_empty_category_is_deleted(async_client, admin) -> None:
    category = await create_category(async_client, admin)

    response = await async_client.delete(
        f"/api/v1/categories/{category['id']}", headers=admin.headers
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Category deleted successfully"}
    missing = await async_client.get(f"/api/v1/categories/{category['id']}")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_customers_cannot_create_categories(async_client, customer) -> None:
    name = f"Forbidden {uuid4().hex[:8]}"

    response = await async_client.post(
        "/api/v1/categories", json={"name": name}, headers=customer.headers
    )

    assert response.status_code == 403
    listing = await async_client.get("/api/v1/categories")
    assert name not in {item["name"] for item in listing.json()["categories"]}


@pytest.mark.asyncio
async def test_professional_type_in_use_cannot_be_deleted(
    async_client, admin, customer
) -> None:
    created = await async_client.post(
        "/api/v1/professional-types",
        json={"name": f"Tailor {uuid4().hex[:8]}"},
        headers=admin.headers,
    )
    assert created.status_code == 201
    type_id = created.json()["id"]

    profile = await async_client.post(
        "/api/v1/professional-profiles",
        json={"businessName": f"Stitch House {uuid4().hex[:6]}", "specializationId": type_id},
        headers=customer.headers,
    )
    assert profile.status_code == 201

    response = await async_client.delete(
        f"/api/v1/professional-types/{type_id}", headers=admin.headers
    )

    assert response.status_code == 400
    assert response.json() == {
        "error": "Cannot delete professional type that is being used by professionals"
    }
    listing = await async_client.get("/api/v1/professional-types")
    assert type_id in {item["id"] for item in listing.json()["professionalTypes"]}


@pytest.mark.asyncio
async def test_service_category_with_services_cannot_be_deleted(
    async_client, admin, professional
) -> None:
    created = await async_client.post(
        "/api/v1/service-categories",
        json={"name": f"Alterations {uuid4().hex[:8]}"},
        headers=admin.headers,
    )
    assert created.status_code == 201
    category_id = created.json()["id"]

    offering = await async_client.post(
        "/api/v1/services",
        json={"name": "Hemming", "price": 15.0, "duration": 30, "categoryId": category_id},
        headers=professional.headers,
    )
    assert offering.status_code == 201

    response = await async_client.delete(
        f"/api/v1/service-categories/{category_id}", headers=admin.headers
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Cannot delete service category that has services"}


@pytest.mark.asyncio
async def test_service_with_bookings_cannot_be_deleted(
    async_client, admin, professional, customer
) -> None:
    category = await async_client.post(
        "/api/v1/service-categories",
        json={"name": f"Fittings {uuid4().hex[:8]}"},
        headers=admin.headers,
    )
    assert category.status_code == 201
    offering = await async_client.post(
        "/api/v1/services",
        json={
            "name": f"Suit fitting {uuid4().hex[:6]}",
            "price": 40.0,
            "duration": 45,
            "categoryId": category.json()["id"],
        },
        headers=professional.headers,
    )
    assert offering.status_code == 201
    service_id = offering.json()["serviceId"]

    booking = await async_client.post(
        "/api/v1/bookings",
        json={
            "serviceId": service_id,
            "professionalId": professional.id,
            "bookingDate": "2030-05-01T10:00:00Z",
        },
        headers=customer.headers,
    )
    assert booking.status_code == 201, booking.text

    response = await async_client.delete(
        f"/api/v1/services/{service_id}", headers=admin.headers
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Cannot delete service that has bookings"}
    still_there = await async_client.get(f"/api/v1/services/{service_id}")
    assert still_there.status_code == 200
    assert still_there.json()["bookingCount"] == 1


@pytest.mark.asyncio
async def test_collection_with_products_cannot_be_deleted(
    async_client, admin, professional
) -> None:
    category = await create_category(async_client, admin)
    created = await async_client.post(
        "/api/v1/collections",
        json={"name": f"Resort {uuid4().hex[:8]}", "categoryId": category["id"]},
        headers=admin.headers,
    )
    assert created.status_code == 201, created.text
    collection_id = created.json()["id"]
    await create_product(
        async_client, professional, category["id"], collectionId=collection_id
    )

    response = await async_client.delete(
        f"/api/v1/collections/{collection_id}", headers=admin.headers
    )

    assert response.status_code == 400
    assert "existing products" in response.json()["error"]
    still_there = await async_client.get(f"/api/v1/collections/{collection_id}")
    assert still_there.status_code == 200
