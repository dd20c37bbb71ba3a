"""Service layer modules."""

from app.services.connection_service import (
    count_live_connections,
    sweep_connections,
    touch_connection,
)
from app.services.history_service import (
    build_vote_series,
    get_temperature_history,
    snapshot_temperatures,
)
from app.services.temperature_model import next_temperature
from app.services.vote_service import get_recent_counts, submit_vote
from app.services.zone_service import get_stats, get_zone, list_zone_views, seed_default_zones

__all__ = [
    "build_vote_series",
    "count_live_connections",
    "get_recent_counts",
    "get_stats",
    "get_temperature_history",
    "get_zone",
    "list_zone_views",
    "next_temperature",
    "seed_default_zones",
    "snapshot_temperatures",
    "submit_vote",
    "sweep_connections",
    "touch_connection",
]
