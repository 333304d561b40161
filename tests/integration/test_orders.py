from __future__ import annotations

from uuid import uuid4

import pytest
import pytest_asyncio

from ..utils import create_address, create_category, create_product

ZONE = "Nairobi CBD"


@pytest_asyncio.fixture()
async def storefront(async_client, admin, professional):
    """A professional with a delivery zone selling one product."""

    specialization = await async_client.post(
        "/api/v1/professional-types",
        json={"name": f"Designer {uuid4().hex[:8]}"},
        headers=admin.headers,
    )
    assert specialization.status_code == 201
    profile = await async_client.post(
        "/api/v1/professional-profiles",
        json={
            "businessName": f"Kanga Studio {uuid4().hex[:6]}",
            "specializationId": specialization.json()["id"],
            "freeDeliveryThreshold": 500.0,
            "deliveryZones": [{"zoneName": ZONE, "deliveryFee": 5.0, "estimatedDays": 1}],
        },
        headers=professional.headers,
    )
    assert profile.status_code == 201, profile.text
    category = await create_category(async_client, admin)
    product = await create_product(
        async_client, professional, category["id"], price=100.0, stockQuantity=5
    )
    return {"profile": profile.json(), "product": product}


async def _coupon(async_client, admin, **overrides) -> dict:
    payload = {"code": f"save{uuid4().hex[:6]}", "type": "PERCENTAGE", "value": 10}
    payload.update(overrides)
    response = await async_client.post("/api/v1/coupons", json=payload, headers=admin.headers)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_checkout_prices_stock_escrow_and_cart(
    async_client, admin, customer, professional, storefront
) -> None:
    product = storefront["product"]
    address = await create_address(async_client, customer)
    coupon = await _coupon(async_client, admin)
    assert coupon["code"] == coupon["code"].upper()
    in_cart = await async_client.post(
        "/api/v1/cart", json={"productId": product["id"]}, headers=customer.headers
    )
    assert in_cart.status_code == 201

    response = await async_client.post(
        "/api/v1/orders",
        json={
            "addressId": address["id"],
            "items": [{"productId": product["id"], "quantity": 2, "size": "M"}],
            "deliveryZone": ZONE,
            "couponCode": coupon["code"].lower(),
        },
        headers=customer.headers,
    )

    assert response.status_code == 201, response.text
    order = response.json()
    assert order["status"] == "PENDING"
    assert order["subtotal"] == 200.0
    assert order["shippingCost"] == 5.0
    assert order["discount"] == 20.0
    assert order["tax"] == pytest.approx(28.8)
    assert order["totalPrice"] == pytest.approx(213.8)
    assert order["couponCode"] == coupon["code"]
    assert [item["price"] for item in order["items"]] == [100.0]
    assert len(order["escrows"]) == 1
    escrow = order["escrows"][0]
    assert escrow["professionalId"] == professional.id
    assert escrow["amount"] == 200.0
    assert escrow["status"] == "HELD"

    fetched = await async_client.get(f"/api/v1/products/{product['id']}")
    assert fetched.json()["stockQuantity"] == 3
    assert fetched.json()["soldCount"] == 2

    cart = await async_client.get("/api/v1/cart", headers=customer.headers)
    assert cart.json()["items"] == []


@pytest.mark.asyncio
async def test_shipping_is_waived_above_the_free_delivery_threshold(
    async_client, admin, customer, professional
) -> None:
    specialization = await async_client.post(
        "/api/v1/professional-types",
        json={"name": f"Cobbler {uuid4().hex[:8]}"},
        headers=admin.headers,
    )
    profile = await async_client.post(
        "/api/v1/professional-profiles",
        json={
            "businessName": f"Sole Works {uuid4().hex[:6]}",
            "specializationId": specialization.json()["id"],
            "freeDeliveryThreshold": 150.0,
            "deliveryZones": [{"zoneName": ZONE, "deliveryFee": 8.0}],
        },
        headers=professional.headers,
    )
    assert profile.status_code == 201
    category = await create_category(async_client, admin)
    product = await create_product(async_client, professional, category["id"], price=160.0)
    address = await create_address(async_client, customer)

    response = await async_client.post(
        "/api/v1/orders",
        json={
            "addressId": address["id"],
            "items": [{"productId": product["id"], "quantity": 1}],
            "deliveryZone": ZONE,
        },
        headers=customer.headers,
    )

    assert response.status_code == 201
    assert response.json()["shippingCost"] == 0.0


@pytest.mark.asyncio
async def test_insufficient_stock_rejects_the_whole_order(
    async_client, customer, storefront
) -> None:
    product = storefront["product"]
    address = await create_address(async_client, customer)

    response = await async_client.post(
        "/api/v1/orders",
        json={
            "addressId": address["id"],
            "items": [
                {"productId": product["id"], "quantity": 3},
                {"productId": product["id"], "quantity": 3},
            ],
        },
        headers=customer.headers,
    )

    assert response.status_code == 400
    assert response.json() == {"error": f"Insufficient stock for {product['name']}"}
    fetched = await async_client.get(f"/api/v1/products/{product['id']}")
    assert fetched.json()["stockQuantity"] == 5
    orders = await async_client.get("/api/v1/orders", headers=customer.headers)
    assert orders.json()["pagination"]["total"] == 0


@pytest.mark.asyncio
async def test_unusable_coupon_rejects_the_order(
    async_client, admin, customer, storefront
) -> None:
    coupon = await _coupon(async_client, admin, minOrderAmount=1000.0)
    address = await create_address(async_client, customer)

    response = await async_client.post(
        "/api/v1/orders",
        json={
            "addressId": address["id"],
            "items": [{"productId": storefront["product"]["id"], "quantity": 1}],
            "couponCode": coupon["code"],
        },
        headers=customer.headers,
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Coupon is invalid or not applicable"}


@pytest.mark.asyncio
async def test_order_needs_the_callers_own_address(
    async_client, customer, make_user, storefront
) -> None:
    stranger = await make_user()
    address = await create_address(async_client, stranger)

    response = await async_client.post(
        "/api/v1/orders",
        json={
            "addressId": address["id"],
            "items": [{"productId": storefront["product"]["id"], "quantity": 1}],
        },
        headers=customer.headers,
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid address"}


@pytest.mark.asyncio
async def test_delivery_unlocks_verified_reviews_and_professional_rating(
    async_client, customer, professional, make_user, storefront
) -> None:
    product = storefront["product"]
    address = await create_address(async_client, customer)
    created = await async_client.post(
        "/api/v1/orders",
        json={
            "addressId": address["id"],
            "items": [{"productId": product["id"], "quantity": 1}],
        },
        headers=customer.headers,
    )
    order_id = created.json()["id"]

    outsider = await make_user()
    hidden = await async_client.get(f"/api/v1/orders/{order_id}", headers=outsider.headers)
    assert hidden.status_code == 403
    not_seller = await async_client.put(
        f"/api/v1/orders/{order_id}", json={"status": "SHIPPED"}, headers=customer.headers
    )
    assert not_seller.status_code == 403

    delivered = await async_client.put(
        f"/api/v1/orders/{order_id}",
        json={"status": "DELIVERED", "trackingNumber": "TRK-001"},
        headers=professional.headers,
    )
    assert delivered.status_code == 200
    assert delivered.json()["status"] == "DELIVERED"
    assert delivered.json()["actualDelivery"] is not None
    assert delivered.json()["trackingNumber"] == "TRK-001"

    product_review = await async_client.post(
        "/api/v1/reviews",
        json={
            "targetId": product["id"],
            "targetType": "PRODUCT",
            "orderId": order_id,
            "rating": 5,
        },
        headers=customer.headers,
    )
    assert product_review.status_code == 201
    assert product_review.json()["isVerified"] is True

    duplicate = await async_client.post(
        "/api/v1/reviews",
        json={"targetId": product["id"], "targetType": "PRODUCT", "rating": 4},
        headers=customer.headers,
    )
    assert duplicate.status_code == 400
    assert duplicate.json() == {"error": "You have already reviewed this item"}

    professional_review = await async_client.post(
        "/api/v1/reviews",
        json={
            "targetId": professional.id,
            "targetType": "PROFESSIONAL",
            "orderId": order_id,
            "rating": 4,
        },
        headers=customer.headers,
    )
    assert professional_review.status_code == 201
    assert professional_review.json()["isVerified"] is True

    profile = await async_client.get(
        f"/api/v1/professional-profiles/{storefront['profile']['id']}"
    )
    assert profile.json()["rating"] == 4.0
    assert profile.json()["totalReviews"] == 1


@pytest.mark.asyncio
async def test_review_rating_must_be_in_range(async_client, customer) -> None:
    response = await async_client.post(
        "/api/v1/reviews",
        json={"targetId": str(uuid4()), "targetType": "SERVICE", "rating": 6},
        headers=customer.headers,
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Rating must be between 1 and 5"}


@pytest.mark.asyncio
async def test_unverified_review_without_delivered_order(async_client, customer) -> None:
    response = await async_client.post(
        "/api/v1/reviews",
        json={"targetId": str(uuid4()), "targetType": "PRODUCT", "rating": 3},
        headers=customer.headers,
    )

    assert response.status_code == 201
    assert response.json()["isVerified"] is False
