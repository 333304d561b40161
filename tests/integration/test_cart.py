from __future__ import annotations

import pytest
import pytest_asyncio

from ..utils import create_category, create_product


@pytest_asyncio.fixture()
async def cart_line(async_client, admin, professional, customer):
    category = await create_category(async_client, admin)
    product = await create_product(
        async_client, professional, category["id"], price=40.0, stockQuantity=3
    )
    response = await async_client.post(
        "/api/v1/cart",
        json={"productId": product["id"], "quantity": 2, "size": "M"},
        headers=customer.headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


async def _cart(async_client, customer) -> dict:
    response = await async_client.get("/api/v1/cart", headers=customer.headers)
    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
async def test_cart_summary_includes_tax(async_client, customer, cart_line) -> None:
    cart = await _cart(async_client, customer)

    assert [item["id"] for item in cart["items"]] == [cart_line["id"]]
    assert cart["summary"] == {"itemCount": 2, "subtotal": 80.0, "estimatedTotal": 92.8}


@pytest.mark.asyncio
async def test_adding_the_same_line_merges_quantities(async_client, customer, cart_line) -> None:
    response = await async_client.post(
        "/api/v1/cart",
        json={"productId": cart_line["productId"], "quantity": 1, "size": "M"},
        headers=customer.headers,
    )

    assert response.status_code == 201
    assert response.json()["id"] == cart_line["id"]
    assert response.json()["quantity"] == 3


@pytest.mark.asyncio
async def test_adding_beyond_stock_is_rejected(async_client, customer, cart_line) -> None:
    response = await async_client.post(
        "/api/v1/cart",
        json={"productId": cart_line["productId"], "quantity": 2, "size": "M"},
        headers=customer.headers,
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Insufficient stock"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("quantity", "message"),
    [(0, "Quantity must be at least 1"), (4, "Insufficient stock")],
)
async def test_invalid_quantity_leaves_the_line_unchanged(
    async_client, customer, cart_line, quantity, message
) -> None:
    response = await async_client.put(
        f"/api/v1/cart/{cart_line['id']}",
        json={"quantity": quantity},
        headers=customer.headers,
    )

    assert response.status_code == 400
    assert response.json() == {"error": message}
    cart = await _cart(async_client, customer)
    assert cart["items"][0]["quantity"] == 2


@pytest.mark.asyncio
async def test_other_users_cannot_touch_a_cart_line(async_client, make_user, cart_line) -> None:
    stranger = await make_user()

    response = await async_client.delete(
        f"/api/v1/cart/{cart_line['id']}", headers=stranger.headers
    )

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("quantity", [0, 1])
async def test_updating_someone_elses_line_is_not_found(
    async_client, make_user, customer, cart_line, quantity
) -> None:
    stranger = await make_user()

    response = await async_client.put(
        f"/api/v1/cart/{cart_line['id']}",
        json={"quantity": quantity},
        headers=stranger.headers,
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Cart item not found"}
    cart = await _cart(async_client, customer)
    assert cart["items"][0]["quantity"] == 2
