from __future__ import annotations

from uuid import UUID

import pytest

from trendiwear_api.db import session_scope
from trendiwear_api.features.addresses.repository import AddressesRepository

from ..utils import create_address


@pytest.mark.asyncio
async def test_only_one_default_address_per_user(async_client, customer) -> None:
    first = await create_address(async_client, customer, isDefault=True)
    second = await create_address(async_client, customer, city="Mombasa", isDefault=True)

    response = await async_client.get("/api/v1/addresses", headers=customer.headers)

    assert response.status_code == 200
    addresses = {item["id"]: item for item in response.json()["addresses"]}
    assert addresses[first["id"]]["isDefault"] is False
    assert addresses[second["id"]]["isDefault"] is True
    async with session_scope() as session:
        defaults = await AddressesRepository(session).count_defaults(UUID(customer.id))
    assert defaults == 1


@pytest.mark.asyncio
async def test_promoting_an_address_clears_the_previous_default(async_client, customer) -> None:
    first = await create_address(async_client, customer, isDefault=True)
    second = await create_address(async_client, customer)

    response = await async_client.put(
        f"/api/v1/addresses/{second['id']}",
        json={"isDefault": True},
        headers=customer.headers,
    )
    assert response.status_code == 200

    listing = await async_client.get("/api/v1/addresses", headers=customer.headers)
    defaults = [item["id"] for item in listing.json()["addresses"] if item["isDefault"]]
    assert defaults == [second["id"]]
    assert first["country"] == "Kenya"


@pytest.mark.asyncio
async def test_addresses_are_private(async_client, customer, make_user) -> None:
    address = await create_address(async_client, customer)
    stranger = await make_user()

    response = await async_client.delete(
        f"/api/v1/addresses/{address['id']}", headers=stranger.headers
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Address not found"}
