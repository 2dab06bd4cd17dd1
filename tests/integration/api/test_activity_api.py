from datetime import datetime

import pytest
from httpx import AsyncClient


async def _make_some_noise(client: AsyncClient, headers: dict):
    """A handful of audited mutations"""
    for i in range(4):
        await client.post(
            "/api/roles",
            json={"name": f"noise_{i}", "display_name": f"Noise {i}"},
            headers=headers,
        )


@pytest.mark.asyncio
async def test_pages_cover_every_entry_once(client: AsyncClient, admin_headers):
    """
    Given more entries than fit on one page
    When every page is fetched at a fixed per_page
    Then each entry shows up exactly once, newest first
    """
    await _make_some_noise(client, admin_headers)

    first = await client.get("/api/activity", params={"per_page": 2}, headers=admin_headers)
    assert first.status_code == 200
    total = first.json()["total"]
    total_pages = first.json()["total_pages"]
    assert total >= 6
    assert total_pages == (total + 1) // 2

    seen = []
    timestamps = []
    for page in range(1, total_pages + 1):
        response = await client.get(
            "/api/activity", params={"per_page": 2, "page": page}, headers=admin_headers
        )
        for item in response.json()["items"]:
            seen.append(item["id"])
            timestamps.append(datetime.fromisoformat(item["created_at"].removesuffix("Z")))

    assert len(seen) == total
    assert len(set(seen)) == total
    assert timestamps == sorted(timestamps, reverse=True)


@pytest.mark.asyncio
async def test_filters(client: AsyncClient, admin_headers):
    await _make_some_noise(client, admin_headers)

    auth_only = await client.get(
        "/api/activity", params={"module": "auth", "action": "all"}, headers=admin_headers
    )
    assert auth_only.status_code == 200
    assert auth_only.json()["total"] >= 1
    assert {i["module"] for i in auth_only.json()["items"]} == {"auth"}

    search = await client.get(
        "/api/activity", params={"search": "noise 2"}, headers=admin_headers
    )
    assert [i["resource_name"] for i in search.json()["items"]] == ["Noise 2"]


@pytest.mark.asyncio
async def test_bad_date_range(client: AsyncClient, admin_headers):
    response = await client.get(
        "/api/activity",
        params={"start_date": "2026-03-10", "end_date": "2026-03-01"},
        headers=admin_headers,
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_system_entry_has_no_actor(client: AsyncClient, admin_headers):
    response = await client.get(
        "/api/activity", params={"search": "admin@mall.example.com"}, headers=admin_headers
    )

    items = response.json()["items"]
    assert len(items) == 1
    assert items[0]["actor_id"] == "system"
    assert items[0]["actor"] is None
    assert items[0]["metadata"] == {"bootstrap": True}

    me = await client.get("/api/me/access", headers=admin_headers)
    assert items[0]["resource_id"] == me.json()["user_id"]


@pytest.mark.asyncio
async def test_entry_detail_joins_actor(client: AsyncClient, admin_headers):
    listing = await client.get(
        "/api/activity", params={"action": "login"}, headers=admin_headers
    )
    entry_id = listing.json()["items"][0]["id"]

    response = await client.get(f"/api/activity/{entry_id}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["actor"]["email"] == "admin@mall.example.com"
    assert response.json()["created_at"].endswith("Z")


@pytest.mark.asyncio
async def test_unknown_entry(client: AsyncClient, admin_headers):
    response = await client.get(
        "/api/activity/00000000-0000-0000-0000-000000000000", headers=admin_headers
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "ACTIVITY_NOT_FOUND"


@pytest.mark.asyncio
async def test_daily_stats_are_zero_filled(client: AsyncClient, admin_headers):
    total = (await client.get("/api/activity", headers=admin_headers)).json()["total"]

    response = await client.get(
        "/api/activity/stats/days", params={"days": 6}, headers=admin_headers
    )

    assert response.status_code == 200
    days = response.json()
    assert len(days) == 7
    assert sum(d["count"] for d in days) == total
    assert days[-1]["count"] == total


@pytest.mark.asyncio
async def test_module_stats_and_recent(client: AsyncClient, admin_headers):
    await _make_some_noise(client, admin_headers)

    by_module = await client.get("/api/activity/stats/modules", headers=admin_headers)
    assert by_module.status_code == 200
    counts = [m["count"] for m in by_module.json()]
    assert counts == sorted(counts, reverse=True)

    recent = await client.get(
        "/api/activity/recent", params={"limit": 3}, headers=admin_headers
    )
    assert recent.status_code == 200
    assert len(recent.json()) == 3
    assert recent.json()[0]["resource_name"] == "Noise 3"


@pytest.mark.asyncio
async def test_actor_options(client: AsyncClient, viewer_headers):
    response = await client.get("/api/activity/actors", headers=viewer_headers)

    assert response.status_code == 200
    assert [a["full_name"] for a in response.json()] == ["Administrator", "Vera Viewer"]
