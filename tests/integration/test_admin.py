from __future__ import annotations

import pytest


@pytest.mark.asyncio
async def test_dashboard_counts_new_users(async_client, admin, make_user) -> None:
    before = await async_client.get("/api/v1/dashboard/stats", headers=admin.headers)
    await make_user()
    after = await async_client.get("/api/v1/dashboard/stats", headers=admin.headers)

    assert before.status_code == 200
    stats = after.json()
    assert stats["totalUsers"] == before.json()["totalUsers"] + 1
    assert set(stats) == {
        "totalUsers",
        "totalProfessionals",
        "totalOrders",
        "totalRevenue",
        "monthlyGrowth",
        "pendingOrders",
    }
    assert isinstance(stats["monthlyGrowth"], float)


@pytest.mark.asyncio
async def test_dashboard_is_admin_only(async_client, professional) -> None:
    response = await async_client.get("/api/v1/dashboard/stats", headers=professional.headers)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_reports_are_moderated_and_audited(async_client, customer, admin) -> None:
    created = await async_client.post(
        "/api/v1/reported-content",
        json={"contentType": "REVIEW", "contentId": "abc123", "reason": "Spam"},
        headers=customer.headers,
    )
    assert created.status_code == 201
    report = created.json()
    assert report["status"] == "PENDING"

    pending = await async_client.get(
        "/api/v1/reported-content", params={"status": "PENDING"}, headers=admin.headers
    )
    assert report["id"] in {item["id"] for item in pending.json()["reports"]}

    resolved = await async_client.put(
        f"/api/v1/reported-content/{report['id']}",
        json={"status": "RESOLVED", "resolution": "Review removed"},
        headers=admin.headers,
    )
    assert resolved.status_code == 200
    assert resolved.json()["status"] == "RESOLVED"
    assert resolved.json()["reviewedBy"] == admin.id
    assert resolved.json()["reviewedAt"] is not None

    logs = await async_client.get(
        "/api/v1/audit-logs", params={"entity": "ReportedContent"}, headers=admin.headers
    )
    assert report["id"] in {entry["entityId"] for entry in logs.json()["logs"]}


@pytest.mark.asyncio
async def test_customers_cannot_list_reports(async_client, customer) -> None:
    response = await async_client.get("/api/v1/reported-content", headers=customer.headers)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_system_settings_upsert(async_client, admin) -> None:
    created = await async_client.put(
        "/api/v1/system-settings",
        json={"key": "maintenance_mode", "value": False, "category": "ops"},
        headers=admin.headers,
    )
    updated = await async_client.put(
        "/api/v1/system-settings",
        json={"key": "maintenance_mode", "value": True},
        headers=admin.headers,
    )

    assert created.status_code == 200
    assert updated.status_code == 200
    assert updated.json()["value"] is True
    assert updated.json()["updatedBy"] == admin.id

    listing = await async_client.get("/api/v1/system-settings", headers=admin.headers)
    entries = [item for item in listing.json()["settings"] if item["key"] == "maintenance_mode"]
    assert len(entries) == 1
    assert entries[0]["value"] is True
