from __future__ import annotations

from datetime import timedelta

import pytest

from ..utils import make_token


@pytest.mark.asyncio
async def test_health_reports_api_and_database(async_client) -> None:
    response = await async_client.get("/api/v1/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    components = {item["name"]: item["status"] for item in payload["components"]}
    assert components == {"api": "available", "database": "available"}


@pytest.mark.asyncio
async def test_me_requires_a_bearer_token(async_client) -> None:
    response = await async_client.get("/api/v1/me")

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}
    assert response.headers["WWW-Authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_expired_token_is_unauthorized(async_client, settings) -> None:
    token = make_token(
        "expired@example.test",
        secret=settings.jwt_secret_value,
        expires_in=timedelta(hours=-1),
    )

    response = await async_client.get(
        "/api/v1/me", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 401
    assert response.json()["error"] == "Access token has expired."


@pytest.mark.asyncio
async def test_first_request_provisions_a_customer(async_client, settings) -> None:
    token = make_token(
        "Njeri@Example.Test",
        secret=settings.jwt_secret_value,
        given_name="Njeri",
        family_name="Mwangi",
    )
    headers = {"Authorization": f"Bearer {token}"}

    first = await async_client.get("/api/v1/me", headers=headers)
    second = await async_client.get("/api/v1/me", headers=headers)

    assert first.status_code == 200
    body = first.json()
    assert body["email"] == "njeri@example.test"
    assert body["firstName"] == "Njeri"
    assert body["role"] == "CUSTOMER"
    assert second.json()["id"] == body["id"]


@pytest.mark.asyncio
async def test_admin_routes_reject_customers(async_client, customer) -> None:
    response = await async_client.get("/api/v1/users", headers=customer.headers)

    assert response.status_code == 403
    body = response.json()
    assert body["error"] == "Forbidden"
    assert set(body["requiredRoles"]) == {"ADMIN", "SUPER_ADMIN"}


@pytest.mark.asyncio
async def test_validation_errors_are_bad_requests(async_client, customer) -> None:
    response = await async_client.post(
        "/api/v1/addresses", json={"firstName": "Only"}, headers=customer.headers
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"].startswith("Invalid ")
    assert body["errors"]
