"""Tests for the storage backends. Fixture-based tests run against memory and SQLite."""

import asyncio
from datetime import datetime, timedelta

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import Base
from app.exceptions import ZoneNotFoundError
from app.schemas.zone import RecentVoteCounts
from app.services.connection_service import touch_connection
from app.storage import SqlStorage

NOW = datetime(2026, 10, 17, 12, 7, 30)


@pytest.mark.asyncio
async def test_default_zones_are_seeded(storage):
    zones = await storage.list_zones()
    by_id = {z.id: z.temperature for z in zones}
    assert by_id == {
        "standing": 22.3,
        "zone-a": 21.8,
        "zone-b": 22.7,
        "zone-c": 21.5,
        "recharge": 23.1,
    }


@pytest.mark.asyncio
async def test_get_unknown_zone_returns_none(storage):
    assert await storage.get_zone("lobby") is None


@pytest.mark.asyncio
async def test_votes_since_filters_zone_and_time(storage):
    await storage.add_vote("zone-a", "hot", NOW - timedelta(minutes=30))
    await storage.add_vote("zone-a", "cold", NOW - timedelta(minutes=5))
    await storage.add_vote("zone-b", "hot", NOW - timedelta(minutes=5))
    await storage.commit()

    votes = await storage.get_votes_since("zone-a", NOW - timedelta(minutes=10))
    assert [v.vote_type for v in votes] == ["cold"]


@pytest.mark.asyncio
async def test_votes_since_includes_cutoff(storage):
    cutoff = NOW - timedelta(minutes=10)
    await storage.add_vote("zone-a", "hot", cutoff)
    await storage.commit()

    counts = await storage.count_votes_since("zone-a", cutoff)
    assert counts == RecentVoteCounts(hot=1, cold=0)


@pytest.mark.asyncio
async def test_count_votes_since(storage):
    for vote_type in ["hot", "hot", "cold"]:
        await storage.add_vote("zone-c", vote_type, NOW)
    await storage.commit()

    counts = await storage.count_votes_since("zone-c", NOW - timedelta(minutes=10))
    assert counts.hot == 2
    assert counts.cold == 1


@pytest.mark.asyncio
async def test_vote_for_unknown_zone_is_rejected(storage):
    with pytest.raises(ZoneNotFoundError):
        await storage.add_vote("lobby", "hot", NOW)
    assert await storage.get_votes_since("lobby", NOW - timedelta(days=1)) == []


@pytest.mark.asyncio
async def test_sample_for_unknown_zone_is_rejected(storage):
    with pytest.raises(ZoneNotFoundError):
        await storage.add_temperature_sample("lobby", 22.0, NOW)


@pytest.mark.asyncio
async def test_update_zone_temperature(storage):
    zone = await storage.update_zone_temperature(
        "zone-a", 22.3, RecentVoteCounts(hot=3, cold=0), NOW
    )
    await storage.commit()

    assert zone.temperature == 22.3
    stored = await storage.get_zone("zone-a")
    assert stored.temperature == 22.3
    assert stored.hot_votes == 3
    assert stored.cold_votes == 0
    assert stored.last_updated == NOW


@pytest.mark.asyncio
async def test_update_unknown_zone_returns_none(storage):
    assert await storage.update_zone_temperature("lobby", 22.0, RecentVoteCounts(), NOW) is None


@pytest.mark.asyncio
async def test_temperature_samples_are_ordered(storage):
    await storage.add_temperature_sample("zone-b", 22.5, NOW)
    await storage.add_temperature_sample("zone-b", 22.1, NOW - timedelta(hours=1))
    await storage.add_temperature_sample("zone-b", 21.0, NOW - timedelta(hours=30))
    await storage.commit()

    samples = await storage.get_temperature_samples_since("zone-b", NOW - timedelta(hours=24))
    assert [s.temperature for s in samples] == [22.1, 22.5]


@pytest.mark.asyncio
async def test_touch_connection_upserts(storage):
    await storage.touch_connection("session-1", NOW - timedelta(minutes=3))
    await storage.touch_connection("session-1", NOW)
    await storage.touch_connection("session-2", NOW)
    await storage.commit()

    assert await storage.count_connections() == 2


@pytest.mark.asyncio
async def test_delete_connections_before(storage):
    await storage.touch_connection("old", NOW - timedelta(minutes=6))
    await storage.touch_connection("fresh", NOW - timedelta(minutes=4))
    await storage.commit()

    removed = await storage.delete_connections_before(NOW - timedelta(minutes=5))
    await storage.commit()

    assert removed == 1
    assert await storage.count_connections() == 1


@pytest.mark.asyncio
async def test_zones_are_listed_in_floor_plan_order(storage):
    zones = await storage.list_zones()
    assert [z.id for z in zones] == ["standing", "zone-a", "zone-b", "zone-c", "recharge"]


@pytest.mark.asyncio
async def test_concurrent_first_touch_of_one_session(tmp_path):
    """Two requests with the same new session id, each on its own database session."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'connections.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def first_request(at: datetime) -> None:
        async with session_factory() as session:
            await touch_connection(SqlStorage(session), "browser-1", now=at)

    try:
        await asyncio.gather(first_request(NOW), first_request(NOW + timedelta(seconds=1)))

        async with session_factory() as session:
            storage = SqlStorage(session)
            assert await storage.count_connections() == 1
            connection = await storage.touch_connection("browser-1", NOW + timedelta(minutes=1))
            assert connection.last_seen == NOW + timedelta(minutes=1)
    finally:
        await engine.dispose()
