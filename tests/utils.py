"""Helper functions shared across tests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import uuid4

import jwt
from httpx import AsyncClient
from sqlalchemy import update

from trendiwear_api.db import session_scope
from trendiwear_api.models import User, UserRole


@dataclass(frozen=True)
class ApiUser:
    id: str
    email: str
    role: UserRole
    headers: dict[str, str]


def make_token(
    email: str,
    *,
    secret: str,
    expires_in: timedelta = timedelta(hours=1),
    **claims: Any,
) -> str:
    """Mint an HS256 bearer token the way the identity provider would."""

    payload: dict[str, Any] = {
        "email": email,
        "sub": f"idp|{email}",
        "exp": datetime.now(tz=UTC) + expires_in,
    }
    payload.update(claims)
    return jwt.encode(payload, secret, algorithm="HS256")


async def register_user(
    client: AsyncClient,
    *,
    secret: str,
    role: UserRole = UserRole.CUSTOMER,
    **claims: Any,
) -> ApiUser:
    """Provision a user through ``GET /me`` and promote it to ``role``."""

    email = f"user-{uuid4().hex[:12]}@example.test"
    headers = {"Authorization": f"Bearer {make_token(email, secret=secret, **claims)}"}
    response = await client.get("/api/v1/me", headers=headers)
    assert response.status_code == 200, response.text
    user_id = response.json()["id"]

    if role is not UserRole.CUSTOMER:
        async with session_scope() as session:
            await session.execute(update(User).where(User.email == email).values(role=role))
    return ApiUser(id=user_id, email=email, role=role, headers=headers)


async def create_category(client: AsyncClient, admin: ApiUser, **overrides: Any) -> dict:
    payload = {"name": f"Category {uuid4().hex[:8]}"}
    payload.update(overrides)
    response = await client.post("/api/v1/categories", json=payload, headers=admin.headers)
    assert response.status_code == 201, response.text
    return response.json()


async def create_product(
    client: AsyncClient, professional: ApiUser, category_id: str, **overrides: Any
) -> dict:
    payload = {
        "name": f"Linen shirt {uuid4().hex[:6]}",
        "description": "Breathable summer shirt",
        "price": 100.0,
        "stockQuantity": 5,
        "categoryId": category_id,
        "sizes": ["M", "L"],
        "colors": ["white"],
        "tags": ["summer"],
    }
    payload.update(overrides)
    response = await client.post("/api/v1/products", json=payload, headers=professional.headers)
    assert response.status_code == 201, response.text
    return response.json()


async def create_address(client: AsyncClient, user: ApiUser, **overrides: Any) -> dict:
    payload = {
        "firstName": "Amani",
        "lastName": "Otieno",
        "street": "12 Moi Avenue",
        "city": "Nairobi",
    }
    payload.update(overrides)
    response = await client.post("/api/v1/addresses", json=payload, headers=user.headers)
    assert response.status_code == 201, response.text
    return response.json()


__all__ = [
    "ApiUser",
    "create_address",
    "create_category",
    "create_product",
    "make_token",
    "register_user",
]
