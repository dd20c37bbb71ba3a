"""Tests for app wiring: health check and CORS for the voting frontend."""

import pytest
from httpx import AsyncClient

FRONTEND_ORIGIN = "http://localhost:5173"


@pytest.mark.asyncio
async def test_health_endpoint_returns_ok(client: AsyncClient):
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_vote_preflight_allowed_for_frontend(client: AsyncClient):
    response = await client.options(
        "/api/vote",
        headers={
            "Origin": FRONTEND_ORIGIN,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type,x-session-id",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == FRONTEND_ORIGIN
    assert "POST" in response.headers["access-control-allow-methods"]


@pytest.mark.asyncio
async def test_issued_session_id_is_readable_cross_origin(client: AsyncClient):
    response = await client.get("/api/zones", headers={"Origin": FRONTEND_ORIGIN})

    assert response.headers["x-session-id"]
    exposed = response.headers.get("access-control-expose-headers", "").lower()
    assert "x-session-id" in exposed


@pytest.mark.asyncio
async def test_unknown_origin_is_not_allowed(client: AsyncClient):
    response = await client.options(
        "/api/vote",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers
