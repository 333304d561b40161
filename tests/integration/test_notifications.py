from __future__ import annotations

from uuid import uuid4

import pytest

from ..utils import create_address, create_category, create_product


async def _inbox(async_client, user, **params) -> dict:
    response = await async_client.get(
        "/api/v1/notifications", params=params, headers=user.headers
    )
    assert response.status_code == 200, response.text
    return response.json()


@pytest.mark.asyncio
async def test_order_lifecycle_notifies_both_sides(
    async_client, admin, customer, professional
) -> None:
    category = await create_category(async_client, admin)
    product = await create_product(async_client, professional, category["id"])
    address = await create_address(async_client, customer)
    created = await async_client.post(
        "/api/v1/orders",
        json={
            "addressId": address["id"],
            "items": [{"productId": product["id"], "quantity": 1}],
        },
        headers=customer.headers,
    )
    assert created.status_code == 201, created.text
    order_id = created.json()["id"]

    seller_inbox = await _inbox(async_client, professional)
    assert [item["title"] for item in seller_inbox["items"]] == ["New order"]
    assert seller_inbox["items"][0]["data"] == {"orderId": order_id}
    assert seller_inbox["items"][0]["type"] == "ORDER_UPDATE"

    shipped = await async_client.put(
        f"/api/v1/orders/{order_id}", json={"status": "SHIPPED"}, headers=professional.headers
    )
    assert shipped.status_code == 200

    inbox = await _inbox(async_client, customer)
    assert [item["title"] for item in inbox["items"]] == ["Order update", "Order placed"]
    assert inbox["items"][0]["message"] == "Your order is now shipped."
    assert inbox["items"][0]["data"] == {"orderId": order_id, "status": "SHIPPED"}
    assert inbox["unreadCount"] == 2
    assert inbox["pagination"]["total"] == 2


@pytest.mark.asyncio
async def test_booking_status_change_notifies_the_other_party(
    async_client, admin, professional, customer
) -> None:
    category = await async_client.post(
        "/api/v1/service-categories",
        json={"name": f"Alterations {uuid4().hex[:8]}"},
        headers=admin.headers,
    )
    offering = await async_client.post(
        "/api/v1/services",
        json={
            "name": f"Hemming {uuid4().hex[:6]}",
            "price": 15.0,
            "duration": 30,
            "categoryId": category.json()["id"],
        },
        headers=professional.headers,
    )
    assert offering.status_code == 201
    booking = await async_client.post(
        "/api/v1/bookings",
        json={
            "serviceId": offering.json()["serviceId"],
            "professionalId": professional.id,
            "bookingDate": "2030-07-01T09:00:00Z",
        },
        headers=customer.headers,
    )
    assert booking.status_code == 201, booking.text
    booking_id = booking.json()["id"]

    confirmed = await async_client.put(
        f"/api/v1/bookings/{booking_id}",
        json={"status": "CONFIRMED"},
        headers=professional.headers,
    )
    assert confirmed.status_code == 200

    seller = await _inbox(async_client, professional)
    buyer = await _inbox(async_client, customer)
    assert [item["title"] for item in seller["items"]] == ["New booking"]
    assert [item["title"] for item in buyer["items"]] == ["Booking update"]
    assert buyer["items"][0]["data"] == {"bookingId": booking_id, "status": "CONFIRMED"}


@pytest.mark.asyncio
async def test_marking_notifications_read(async_client, admin, customer, make_user) -> None:
    for title in ("Welcome", "Spring sale"):
        sent = await async_client.post(
            "/api/v1/notifications",
            json={"userId": customer.id, "title": title, "message": "Hello", "type": "PROMOTION"},
            headers=admin.headers,
        )
        assert sent.status_code == 201, sent.text
    newest = sent.json()

    outsider = await make_user()
    foreign = await async_client.put(
        f"/api/v1/notifications/{newest['id']}", json={"isRead": True}, headers=outsider.headers
    )
    assert foreign.status_code == 404
    assert foreign.json() == {"error": "Notification not found"}

    one = await async_client.put(
        f"/api/v1/notifications/{newest['id']}", json={"isRead": True}, headers=customer.headers
    )
    assert one.status_code == 200
    assert one.json()["isRead"] is True
    unread = await _inbox(async_client, customer, unreadOnly="true")
    assert [item["title"] for item in unread["items"]] == ["Welcome"]
    assert unread["unreadCount"] == 1

    nothing = await async_client.put(
        "/api/v1/notifications", json={"markAllAsRead": False}, headers=customer.headers
    )
    assert nothing.status_code == 400
    everything = await async_client.put(
        "/api/v1/notifications", json={"markAllAsRead": True}, headers=customer.headers
    )
    assert everything.json() == {"message": "All notifications marked as read"}
    assert (await _inbox(async_client, customer))["unreadCount"] == 0


@pytest.mark.asyncio
async def test_only_admins_send_notifications(async_client, admin, customer) -> None:
    payload = {"userId": customer.id, "title": "Hi", "message": "Hello"}

    forbidden = await async_client.post(
        "/api/v1/notifications", json=payload, headers=customer.headers
    )
    unknown = await async_client.post(
        "/api/v1/notifications",
        json={**payload, "userId": str(uuid4())},
        headers=admin.headers,
    )

    assert forbidden.status_code == 403
    assert unknown.status_code == 404
    assert unknown.json() == {"error": "User not found"}
