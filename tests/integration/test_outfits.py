from __future__ import annotations

from uuid import uuid4

import pytest

from ..utils import create_category, create_product


async def _event(async_client, admin, **overrides) -> dict:
    payload = {
        "name": f"Garden wedding {uuid4().hex[:6]}",
        "dressCodes": ["semi-formal"],
        "seasonality": ["SUMMER"],
    }
    payload.update(overrides)
    response = await async_client.post("/api/v1/events", json=payload, headers=admin.headers)
    assert response.status_code == 201, response.text
    return response.json()


async def _outfit(async_client, stylist, event_id, **overrides):
    payload = {
        "eventId": event_id,
        "title": f"Linen pastels {uuid4().hex[:6]}",
        "outfitImageUrl": "https://cdn.example.test/looks/1.jpg",
        "tags": ["pastel"],
    }
    payload.update(overrides)
    return await async_client.post(
        "/api/v1/outfit-inspirations", json=payload, headers=stylist.headers
    )


@pytest.mark.asyncio
async def test_events_are_managed_by_admins(async_client, admin, customer) -> None:
    denied = await async_client.post(
        "/api/v1/events", json={"name": "Gala"}, headers=customer.headers
    )
    assert denied.status_code == 403

    event = await _event(async_client, admin)
    assert event["seasonality"] == ["SUMMER"]
    duplicate = await async_client.post(
        "/api/v1/events", json={"name": event["name"].upper()}, headers=admin.headers
    )
    assert duplicate.status_code == 409

    hidden = await async_client.put(
        f"/api/v1/events/{event['id']}", json={"isActive": False}, headers=admin.headers
    )
    assert hidden.status_code == 200
    listed = await async_client.get("/api/v1/events")
    assert event["id"] not in {item["id"] for item in listed.json()["events"]}

    missing = await async_client.get(f"/api/v1/events/{uuid4()}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Event not found"}


@pytest.mark.asyncio
async def test_event_with_outfits_cannot_be_deleted(async_client, admin, professional) -> None:
    event = await _event(async_client, admin)
    outfit = await _outfit(async_client, professional, event["id"])
    assert outfit.status_code == 201, outfit.text

    blocked = await async_client.delete(f"/api/v1/events/{event['id']}", headers=admin.headers)
    assert blocked.status_code == 400
    assert blocked.json() == {
        "error": (
            "Cannot delete event with existing outfit inspirations. "
            "Please remove outfit inspirations first."
        )
    }
    preview = await async_client.get(f"/api/v1/events/{event['id']}")
    assert preview.json()["outfitCount"] == 1
    assert [item["id"] for item in preview.json()["outfits"]] == [outfit.json()["id"]]

    removed = await async_client.delete(
        f"/api/v1/outfit-inspirations/{outfit.json()['id']}", headers=professional.headers
    )
    assert removed.json() == {"message": "Outfit inspiration deleted successfully"}
    deleted = await async_client.delete(f"/api/v1/events/{event['id']}", headers=admin.headers)
    assert deleted.json() == {"message": "Event deleted successfully"}


@pytest.mark.asyncio
async def test_outfit_products_are_linked_and_replaced(
    async_client, admin, professional, make_user
) -> None:
    event = await _event(async_client, admin)
    category = await create_category(async_client, admin)
    skirt = await create_product(async_client, professional, category["id"], name="Skirt")
    blouse = await create_product(async_client, professional, category["id"], name="Blouse")

    created = await _outfit(
        async_client,
        professional,
        event["id"],
        products=[
            {"productId": skirt["id"], "notes": "High waist"},
            {"productId": blouse["id"]},
            {"productId": skirt["id"]},
        ],
    )
    assert created.status_code == 201, created.text
    outfit = created.json()
    assert [item["product"]["name"] for item in outfit["products"]] == ["Skirt", "Blouse"]
    assert outfit["products"][0]["notes"] == "High waist"
    assert outfit["stylist"]["id"] == professional.id
    assert outfit["event"]["name"] == event["name"]

    other = await make_user()
    forbidden = await async_client.put(
        f"/api/v1/outfit-inspirations/{outfit['id']}",
        json={"title": "Mine now"},
        headers=other.headers,
    )
    assert forbidden.status_code == 403

    updated = await async_client.put(
        f"/api/v1/outfit-inspirations/{outfit['id']}",
        json={"products": [{"productId": blouse["id"]}]},
        headers=professional.headers,
    )
    assert updated.status_code == 200, updated.text
    assert [item["productId"] for item in updated.json()["products"]] == [blouse["id"]]

    unknown = await async_client.put(
        f"/api/v1/outfit-inspirations/{outfit['id']}",
        json={"products": [{"productId": str(uuid4())}]},
        headers=professional.headers,
    )
    assert unknown.status_code == 400
    kept = await async_client.get(f"/api/v1/outfit-inspirations/{outfit['id']}")
    assert [item["productId"] for item in kept.json()["products"]] == [blouse["id"]]


@pytest.mark.asyncio
async def test_only_stylists_and_admins_curate_or_feature(
    async_client, admin, customer, professional
) -> None:
    event = await _event(async_client, admin)

    by_customer = await _outfit(async_client, customer, event["id"])
    featured_by_stylist = await _outfit(async_client, professional, event["id"], isFeatured=True)
    featured_by_admin = await _outfit(async_client, admin, event["id"], isFeatured=True)
    unknown_event = await _outfit(async_client, professional, str(uuid4()))

    assert by_customer.status_code == 403
    assert featured_by_stylist.status_code == 403
    assert featured_by_admin.status_code == 201
    assert unknown_event.status_code == 404


@pytest.mark.asyncio
async def test_listing_orders_featured_then_likes_and_searches_tags(
    async_client, admin, professional
) -> None:
    event = await _event(async_client, admin)
    marker = uuid4().hex[:8]
    plain = await _outfit(async_client, professional, event["id"], tags=[marker])
    featured = await _outfit(async_client, admin, event["id"], isFeatured=True)
    hidden = await _outfit(async_client, professional, event["id"])
    await async_client.put(
        f"/api/v1/outfit-inspirations/{hidden.json()['id']}",
        json={"isActive": False},
        headers=professional.headers,
    )

    listed = await async_client.get(
        "/api/v1/outfit-inspirations", params={"eventId": event["id"]}
    )
    assert [item["id"] for item in listed.json()["items"]] == [
        featured.json()["id"],
        plain.json()["id"],
    ]
    assert listed.json()["pagination"]["limit"] == 12

    by_tag = await async_client.get("/api/v1/outfit-inspirations", params={"search": marker})
    assert [item["id"] for item in by_tag.json()["items"]] == [plain.json()["id"]]


@pytest.mark.asyncio
async def test_saving_outfits(async_client, admin, professional, customer) -> None:
    event = await _event(async_client, admin)
    outfit = (await _outfit(async_client, professional, event["id"])).json()

    saved = await async_client.post(
        "/api/v1/saved-outfits", json={"outfitId": outfit["id"]}, headers=customer.headers
    )
    assert saved.status_code == 201, saved.text
    assert saved.json()["outfit"]["id"] == outfit["id"]

    again = await async_client.post(
        "/api/v1/saved-outfits", json={"outfitId": outfit["id"]}, headers=customer.headers
    )
    assert again.status_code == 400
    assert again.json() == {"error": "Outfit already saved"}

    listing = await async_client.get("/api/v1/saved-outfits", headers=customer.headers)
    assert [item["outfitId"] for item in listing.json()["savedOutfits"]] == [outfit["id"]]
    detail = await async_client.get(f"/api/v1/outfit-inspirations/{outfit['id']}")
    assert detail.json()["savedCount"] == 1

    removed = await async_client.delete(
        f"/api/v1/saved-outfits/{outfit['id']}", headers=customer.headers
    )
    assert removed.status_code == 200
    gone = await async_client.delete(
        f"/api/v1/saved-outfits/{outfit['id']}", headers=customer.headers
    )
    assert gone.status_code == 404
