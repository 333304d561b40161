from __future__ import annotations

from uuid import uuid4

import pytest


async def _post(async_client, author, **overrides):
    payload = {"title": f"Styling kitenge {uuid4().hex[:6]}", "content": "Mix prints boldly."}
    payload.update(overrides)
    return await async_client.post("/api/v1/blogs", json=payload, headers=author.headers)


@pytest.mark.asyncio
async def test_customers_cannot_write_blogs(async_client, customer) -> None:
    response = await _post(async_client, customer)

    assert response.status_code == 403
    assert response.json()["error"] == "Only professionals and admins can create blogs"


@pytest.mark.asyncio
async def test_drafts_are_hidden_from_everyone_but_the_author(
    async_client, professional, make_user
) -> None:
    created = await _post(async_client, professional)
    assert created.status_code == 201
    draft = created.json()
    assert draft["isPublished"] is False
    assert draft["publishedAt"] is None

    anonymous = await async_client.get(f"/api/v1/blogs/{draft['id']}")
    reader = await make_user()
    other = await async_client.get(f"/api/v1/blogs/{draft['id']}", headers=reader.headers)
    own = await async_client.get(f"/api/v1/blogs/{draft['id']}", headers=professional.headers)

    assert anonymous.status_code == 404
    assert other.status_code == 404
    assert own.status_code == 200
    assert own.json()["viewCount"] == 1


@pytest.mark.asyncio
async def test_published_posts_are_listed_publicly(async_client, professional) -> None:
    marker = uuid4().hex[:10]
    published = await _post(
        async_client, professional, title=f"Published {marker}", isPublished=True
    )
    await _post(async_client, professional, title=f"Draft {marker}")

    response = await async_client.get("/api/v1/blogs", params={"search": marker})

    assert response.status_code == 200
    assert [item["id"] for item in response.json()["items"]] == [published.json()["id"]]
    assert published.json()["publishedAt"] is not None


@pytest.mark.asyncio
async def test_generated_slugs_are_unique(async_client, professional) -> None:
    title = f"Wax print care {uuid4().hex[:6]}"

    first = await _post(async_client, professional, title=title)
    second = await _post(async_client, professional, title=title)
    taken = await _post(async_client, professional, slug=first.json()["slug"])

    assert second.json()["slug"] == f"{first.json()['slug']}-2"
    assert taken.status_code == 409
    assert taken.json() == {"error": "Slug already in use"}


@pytest.mark.asyncio
async def test_only_admins_feature_posts(async_client, professional, admin) -> None:
    by_professional = await _post(async_client, professional, isFeatured=True)
    by_admin = await _post(async_client, admin, isFeatured=True, isPublished=True)

    assert by_professional.status_code == 403
    assert by_admin.status_code == 201
    assert by_admin.json()["isFeatured"] is True


@pytest.mark.asyncio
async def test_blog_deletion_is_for_author_or_admin(
    async_client, professional, make_user, admin
) -> None:
    created = await _post(async_client, professional, isPublished=True)
    blog_id = created.json()["id"]
    rival = await make_user(role=professional.role)

    denied = await async_client.delete(f"/api/v1/blogs/{blog_id}", headers=rival.headers)
    removed = await async_client.delete(f"/api/v1/blogs/{blog_id}", headers=admin.headers)

    assert denied.status_code == 403
    assert removed.status_code == 200
    assert removed.json() == {"message": "Blog deleted successfully"}
    assert (await async_client.get(f"/api/v1/blogs/{blog_id}")).status_code == 404
