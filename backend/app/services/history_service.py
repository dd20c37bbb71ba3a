"""History service layer: vote series for charting and temperature samples."""

import logging
from collections import Counter
from datetime import UTC, datetime, timedelta

from app.config import BUCKET_MINUTES, DEFAULT_HISTORY_HOURS, DEFAULT_TEMPERATURE_HISTORY_HOURS
from app.exceptions import ZoneNotFoundError
from app.schemas.history import TemperatureHistoryPoint, VoteHistoryPoint
from app.services.bucketing import floor_to_interval, interval_grid, utc_now
from app.storage import Storage

__all__ = ["build_vote_series", "get_temperature_history", "snapshot_temperatures"]

logger = logging.getLogger(__name__)

BUCKETS_PER_HOUR = 60 // BUCKET_MINUTES


async def build_vote_series(
    storage: Storage,
    zone_id: str,
    hours: int = DEFAULT_HISTORY_HOURS,
    now: datetime | None = None,
) -> list[VoteHistoryPoint]:
    """
    Build a gap-free series of 10-minute vote buckets for a zone.

    Returns exactly hours * 6 points, oldest first, spaced 10 minutes apart.
    The last point is the bucket containing ``now``. Buckets without votes
    report zero hot and zero cold votes.

    Votes are fetched from ``now - hours`` on, so the oldest bucket only
    counts the part of it that falls inside the lookback span.
    """
    if hours < 1:
        raise ValueError("hours must be at least 1")
    if await storage.get_zone(zone_id) is None:
        raise ZoneNotFoundError(zone_id)

    now = now or utc_now()
    votes = await storage.get_votes_since(zone_id, now - timedelta(hours=hours))

    # (bucket start, vote type) -> count
    counts: Counter[tuple[datetime, str]] = Counter()
    for vote in votes:
        counts[(floor_to_interval(vote.timestamp), vote.vote_type)] += 1

    return [
        VoteHistoryPoint(
            timestamp=bucket.replace(tzinfo=UTC),
            hot_votes=counts[(bucket, "hot")],
            cold_votes=counts[(bucket, "cold")],
        )
        for bucket in interval_grid(now, hours * BUCKETS_PER_HOUR)
    ]


async def get_temperature_history(
    storage: Storage,
    zone_id: str,
    hours: int = DEFAULT_TEMPERATURE_HISTORY_HOURS,
    now: datetime | None = None,
) -> list[TemperatureHistoryPoint]:
    """Temperature samples recorded for a zone in the last ``hours``, oldest first."""
    if await storage.get_zone(zone_id) is None:
        raise ZoneNotFoundError(zone_id)

    now = now or utc_now()
    samples = await storage.get_temperature_samples_since(zone_id, now - timedelta(hours=hours))
    return [TemperatureHistoryPoint.model_validate(sample) for sample in samples]


async def snapshot_temperatures(storage: Storage, now: datetime | None = None) -> int:
    """Record every zone's current temperature. Returns the number of samples written."""
    now = now or utc_now()
    zones = await storage.list_zones()
    for zone in zones:
        await storage.add_temperature_sample(zone.id, zone.temperature, now)
    await storage.commit()
    logger.debug(f"Recorded temperature snapshot for {len(zones)} zone(s)")
    return len(zones)
