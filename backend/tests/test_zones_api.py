"""Tests for zone and stats API endpoints."""

from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_zones_returns_seeded_zones(client: AsyncClient):
    response = await client.get("/api/zones")
    assert response.status_code == 200

    zones = response.json()
    assert [z["id"] for z in zones] == ["standing", "zone-a", "zone-b", "zone-c", "recharge"]


@pytest.mark.asyncio
async def test_list_zones_structure(client: AsyncClient):
    response = await client.get("/api/zones")
    zone = response.json()[0]

    assert set(zone) == {
        "id",
        "name",
        "temperature",
        "hotVotes",
        "coldVotes",
        "activeVoters",
        "lastUpdated",
    }


@pytest.mark.asyncio
async def test_list_zones_issues_session_id(client: AsyncClient):
    response = await client.get("/api/zones")
    assert response.headers["x-session-id"]

    stats = (await client.get("/api/stats")).json()
    assert stats["connectedUsers"] == 1


@pytest.mark.asyncio
async def test_list_zones_reuses_client_session_id(client: AsyncClient):
    for _ in range(3):
        response = await client.get("/api/zones", headers={"x-session-id": "browser-1"})
        assert response.headers["x-session-id"] == "browser-1"

    stats = (await client.get("/api/stats")).json()
    assert stats["connectedUsers"] == 1


@pytest.mark.asyncio
async def test_get_zone_by_id(client: AsyncClient):
    response = await client.get("/api/zones/zone-b")
    assert response.status_code == 200

    zone = response.json()
    assert zone["id"] == "zone-b"
    assert zone["name"] == "1F Zone B"
    assert zone["temperature"] == 22.7


@pytest.mark.asyncio
async def test_get_zone_not_found(client: AsyncClient):
    response = await client.get("/api/zones/unknown-zone-xyz")
    assert response.status_code == 404
    assert response.json() == {"message": "Zone not found"}


@pytest.mark.asyncio
async def test_vote_history_default_six_hours(client: AsyncClient):
    response = await client.get("/api/zones/zone-a/vote-history")
    assert response.status_code == 200

    points = response.json()
    assert len(points) == 36
    assert set(points[0]) == {"timestamp", "hotVotes", "coldVotes"}
    assert points[-1]["timestamp"].endswith("Z")

    timestamps = [datetime.fromisoformat(p["timestamp"]) for p in points]
    for earlier, later in zip(timestamps, timestamps[1:]):
        assert later - earlier == timedelta(minutes=10)


@pytest.mark.asyncio
async def test_vote_history_counts_new_vote(client: AsyncClient):
    await client.post("/api/vote", json={"zoneId": "zone-a", "voteType": "cold"})

    response = await client.get("/api/zones/zone-a/vote-history", params={"hours": 1})
    points = response.json()

    assert len(points) == 6
    assert sum(p["coldVotes"] + p["hotVotes"] for p in points) == 1


@pytest.mark.asyncio
async def test_vote_history_not_found(client: AsyncClient):
    response = await client.get("/api/zones/unknown-zone-xyz/vote-history")
    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("hours", ["0", "500", "abc"])
async def test_vote_history_rejects_bad_hours(client: AsyncClient, hours):
    response = await client.get("/api/zones/zone-a/vote-history", params={"hours": hours})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_temperature_history_after_vote(client: AsyncClient):
    await client.post("/api/vote", json={"zoneId": "zone-c", "voteType": "hot"})

    response = await client.get("/api/zones/zone-c/temperature-history")
    assert response.status_code == 200

    points = response.json()
    assert len(points) == 1
    assert points[0]["zoneId"] == "zone-c"
    assert points[0]["temperature"] == 22.1


@pytest.mark.asyncio
async def test_stats_structure(client: AsyncClient):
    response = await client.get("/api/stats")
    assert response.status_code == 200

    assert response.json() == {
        "totalVotes": 0,
        "hotVotes": 0,
        "coldVotes": 0,
        "averageTemperature": 22.3,
        "connectedUsers": 0,
        "zones": 5,
    }
