"""Zone service layer: zone views, statistics and default zones."""

import logging
from datetime import datetime

from app.exceptions import ZoneNotFoundError
from app.models import Zone
from app.schemas.zone import StatsResponse, ZoneResponse, ZoneView
from app.services.bucketing import utc_now
from app.services.connection_service import count_live_connections
from app.services.vote_service import get_recent_counts
from app.storage import Storage

__all__ = ["DEFAULT_ZONES", "list_zone_views", "get_zone", "get_stats", "seed_default_zones"]

logger = logging.getLogger(__name__)

# Zone definitions in floor plan order, which is also the listing order
DEFAULT_ZONES = [
    {"id": "standing", "name": "1F Standing Area", "temperature": 22.3},
    {"id": "zone-a", "name": "1F Zone A", "temperature": 21.8},
    {"id": "zone-b", "name": "1F Zone B", "temperature": 22.7},
    {"id": "zone-c", "name": "2F Zone C", "temperature": 21.5},
    {"id": "recharge", "name": "2F Recharge Zone", "temperature": 23.1},
]


async def list_zone_views(storage: Storage, now: datetime | None = None) -> list[ZoneView]:
    """All zones with hot/cold counts taken from the last 10 minutes of votes."""
    now = now or utc_now()
    views = []
    for zone in await storage.list_zones():
        counts = await get_recent_counts(storage, zone.id, now=now)
        views.append(ZoneView.from_zone(zone, counts))
    return views


async def get_zone(storage: Storage, zone_id: str) -> ZoneResponse:
    """A zone exactly as stored, including its last-computed vote counts."""
    zone = await storage.get_zone(zone_id)
    if zone is None:
        raise ZoneNotFoundError(zone_id)
    return ZoneResponse.model_validate(zone)


async def get_stats(storage: Storage, now: datetime | None = None) -> StatsResponse:
    """
    Aggregate statistics across zones.

    Vote totals use each zone's 10-minute recency counts. The average is
    taken over stored zone temperatures and rounded to one decimal.
    """
    now = now or utc_now()
    zones = await storage.list_zones()

    total_votes = 0
    hot_votes = 0
    cold_votes = 0
    for zone in zones:
        counts = await get_recent_counts(storage, zone.id, now=now)
        total_votes += counts.total
        hot_votes += counts.hot
        cold_votes += counts.cold

    average = sum(z.temperature for z in zones) / len(zones) if zones else 0.0

    return StatsResponse(
        total_votes=total_votes,
        hot_votes=hot_votes,
        cold_votes=cold_votes,
        average_temperature=round(average, 1),
        connected_users=await count_live_connections(storage),
        zones=len(zones),
    )


async def seed_default_zones(storage: Storage, now: datetime | None = None) -> int:
    """Insert the default zones that are missing (idempotent). Returns how many were added."""
    now = now or utc_now()
    added = 0
    for position, zone_data in enumerate(DEFAULT_ZONES):
        if await storage.get_zone(zone_data["id"]) is not None:
            continue
        await storage.add_zone(
            Zone(
                **zone_data,
                hot_votes=0,
                cold_votes=0,
                active_voters=0,
                display_order=position,
                last_updated=now,
            )
        )
        added += 1
    await storage.commit()
    if added:
        logger.info(f"Seeded {added} zone(s)")
    return added
