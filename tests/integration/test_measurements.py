from __future__ import annotations

import pytest


@pytest.mark.asyncio
async def test_measurements_are_created_then_merged(async_client, customer) -> None:
    empty = await async_client.get("/api/v1/measurements", headers=customer.headers)
    assert empty.status_code == 200
    assert empty.json() == {"measurements": None}

    created = await async_client.post(
        "/api/v1/measurements",
        json={
            "bust": 88.5,
            "waist": 70,
            "topSize": "M",
            "bodyType": "HOURGLASS",
            "stylePreferences": ["BOHEMIAN", "CASUAL"],
        },
        headers=customer.headers,
    )
    assert created.status_code == 201, created.text
    assert created.json()["userId"] == customer.id

    merged = await async_client.post(
        "/api/v1/measurements",
        json={"waist": 72, "preferredColors": ["ochre"]},
        headers=customer.headers,
    )
    assert merged.status_code == 201
    body = merged.json()
    assert body["id"] == created.json()["id"]
    assert body["waist"] == 72
    assert body["bust"] == 88.5
    assert body["bodyType"] == "HOURGLASS"
    assert body["stylePreferences"] == ["BOHEMIAN", "CASUAL"]
    assert body["preferredColors"] == ["ochre"]

    stored = await async_client.get("/api/v1/measurements", headers=customer.headers)
    assert stored.json()["measurements"]["waist"] == 72


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"stylePreferences": ["GOTHIC"]},
        {"bodyType": "SQUARE"},
        {"height": -170},
    ],
)
async def test_invalid_measurements_are_rejected(async_client, customer, payload) -> None:
    response = await async_client.post(
        "/api/v1/measurements", json=payload, headers=customer.headers
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_measurements_require_authentication(async_client) -> None:
    response = await async_client.get("/api/v1/measurements")

    assert response.status_code == 401
