"""Vote service layer: recency counts and vote ingestion."""

import asyncio
import logging
from collections import defaultdict
from datetime import datetime, timedelta

from app.config import VOTE_WINDOW_MINUTES
from app.exceptions import InvalidVoteError, ZoneNotFoundError
from app.schemas.zone import RecentVoteCounts, ZoneView
from app.services.bucketing import utc_now
from app.services.temperature_model import next_temperature
from app.storage import Storage

__all__ = ["VOTE_TYPES", "ZoneLocks", "get_recent_counts", "submit_vote", "zone_locks"]

logger = logging.getLogger(__name__)

VOTE_TYPES = ("hot", "cold")


class ZoneLocks:
    """One asyncio lock per zone id.

    Votes for the same zone run their count/compute/write sequence one at a
    time; votes for different zones do not wait on each other.
    """

    def __init__(self):
        self._locks: defaultdict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    def for_zone(self, zone_id: str) -> asyncio.Lock:
        return self._locks[zone_id]


zone_locks = ZoneLocks()


async def get_recent_counts(
    storage: Storage,
    zone_id: str,
    window_minutes: int = VOTE_WINDOW_MINUTES,
    now: datetime | None = None,
) -> RecentVoteCounts:
    """Count hot and cold votes for a zone within the trailing window.

    The zone is assumed to exist; unknown ids simply count zero.
    """
    now = now or utc_now()
    return await storage.count_votes_since(zone_id, now - timedelta(minutes=window_minutes))


async def submit_vote(
    storage: Storage,
    zone_id: str,
    vote_type: str,
    now: datetime | None = None,
    locks: ZoneLocks = zone_locks,
) -> ZoneView:
    """
    Record a vote and recompute the zone temperature.

    Steps:
    - Reject unknown vote types (InvalidVoteError) and zones (ZoneNotFoundError)
      before anything is written
    - Append the vote, recount the last 10 minutes, derive the new temperature
    - Store temperature, counts and last_updated on the zone and append a
      temperature sample, all in one commit

    This is the only code path that changes a zone's temperature.
    """
    if vote_type not in VOTE_TYPES:
        raise InvalidVoteError(
            "Invalid vote data",
            errors=[
                {
                    "loc": ["voteType"],
                    "msg": f"voteType must be one of {', '.join(VOTE_TYPES)}",
                    "input": vote_type,
                }
            ],
        )

    if await storage.get_zone(zone_id) is None:
        raise ZoneNotFoundError(zone_id)

    async with locks.for_zone(zone_id):
        now = now or utc_now()
        try:
            await storage.add_vote(zone_id, vote_type, now)
            counts = await get_recent_counts(storage, zone_id, now=now)
            temperature = next_temperature(counts.hot, counts.cold)

            zone = await storage.update_zone_temperature(zone_id, temperature, counts, now)
            if zone is None:
                raise ZoneNotFoundError(zone_id)
            await storage.add_temperature_sample(zone_id, temperature, now)
            await storage.commit()
        except Exception:
            await storage.rollback()
            raise

    logger.info(
        f"Vote {vote_type} on {zone_id}: hot={counts.hot} cold={counts.cold} -> {temperature}°C"
    )
    return ZoneView.from_zone(zone, counts)
