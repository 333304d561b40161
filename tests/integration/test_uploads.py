from __future__ import annotations

from urllib.parse import urlparse

import pytest

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


@pytest.mark.asyncio
async def test_upload_stores_the_image_and_serves_it(async_client, customer, settings) -> None:
    response = await async_client.post(
        "/api/v1/upload",
        files={"file": ("look.png", PNG_BYTES, "image/png")},
        data={"folder": "products"},
        headers=customer.headers,
    )

    assert response.status_code == 200, response.text
    body = response.json()
    assert body["success"] is True
    assert body["bucket"] == "images"
    assert body["provider"] == "filesystem"
    assert body["path"].startswith(f"products/{customer.id}/")
    assert body["path"].endswith(".png")
    stored = settings.storage_dir / "images" / body["path"]
    assert stored.read_bytes() == PNG_BYTES

    served = await async_client.get(urlparse(body["url"]).path)
    assert served.status_code == 200
    assert served.content == PNG_BYTES


@pytest.mark.asyncio
async def test_upload_rejects_non_images(async_client, customer) -> None:
    response = await async_client.post(
        "/api/v1/upload",
        files={"file": ("notes.txt", b"hello", "text/plain")},
        headers=customer.headers,
    )

    assert response.status_code == 400
    assert response.json() == {
        "error": "Invalid file type. Only JPEG, PNG, WebP, and GIF are allowed."
    }


@pytest.mark.asyncio
async def test_upload_rejects_unsafe_folders(async_client, customer) -> None:
    response = await async_client.post(
        "/api/v1/upload",
        files={"file": ("look.png", PNG_BYTES, "image/png")},
        data={"folder": "../secrets"},
        headers=customer.headers,
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid folder name."}


@pytest.mark.asyncio
async def test_upload_enforces_the_size_limit(async_client, customer, settings) -> None:
    oversized = PNG_BYTES + b"\x00" * settings.upload_max_bytes

    response = await async_client.post(
        "/api/v1/upload",
        files={"file": ("huge.png", oversized, "image/png")},
        headers=customer.headers,
    )

    assert response.status_code == 413
    assert response.json() == {"error": "File too large. Maximum size is 5MB."}


@pytest.mark.asyncio
async def test_upload_requires_authentication(async_client) -> None:
    response = await async_client.post(
        "/api/v1/upload", files={"file": ("look.png", PNG_BYTES, "image/png")}
    )

    assert response.status_code == 401
