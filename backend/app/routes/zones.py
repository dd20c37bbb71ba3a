"""Zone API routes."""

from fastapi import APIRouter, Depends, Query

from app.config import (
    DEFAULT_HISTORY_HOURS,
    DEFAULT_TEMPERATURE_HISTORY_HOURS,
    MAX_HISTORY_HOURS,
)
from app.routes.session import resolve_session_id
from app.schemas import TemperatureHistoryPoint, VoteHistoryPoint, ZoneResponse, ZoneView
from app.services import (
    build_vote_series,
    get_temperature_history,
    get_zone,
    list_zone_views,
    touch_connection,
)
from app.storage import Storage, get_storage

router = APIRouter(prefix="/api/zones", tags=["zones"])


@router.get("", response_model=list[ZoneView])
async def list_zones(
    session_id: str = Depends(resolve_session_id),
    storage: Storage = Depends(get_storage),
) -> list[ZoneView]:
    """Get all zones with vote counts from the last 10 minutes."""
    await touch_connection(storage, session_id)
    return await list_zone_views(storage)


@router.get("/{zone_id}", response_model=ZoneResponse)
async def get_zone_by_id(
    zone_id: str,
    storage: Storage = Depends(get_storage),
) -> ZoneResponse:
    """Get a single zone as stored."""
    return await get_zone(storage, zone_id)


@router.get("/{zone_id}/vote-history", response_model=list[VoteHistoryPoint])
async def get_vote_history(
    zone_id: str,
    hours: int = Query(
        DEFAULT_HISTORY_HOURS,
        ge=1,
        le=MAX_HISTORY_HOURS,
        description="Hours of history, in 10-minute buckets",
    ),
    storage: Storage = Depends(get_storage),
) -> list[VoteHistoryPoint]:
    """Get hot/cold vote counts per 10-minute interval, oldest first."""
    return await build_vote_series(storage, zone_id, hours)


@router.get("/{zone_id}/temperature-history", response_model=list[TemperatureHistoryPoint])
async def get_zone_temperature_history(
    zone_id: str,
    hours: int = Query(
        DEFAULT_TEMPERATURE_HISTORY_HOURS,
        ge=1,
        le=MAX_HISTORY_HOURS,
        description="Hours of recorded temperatures",
    ),
    storage: Storage = Depends(get_storage),
) -> list[TemperatureHistoryPoint]:
    """Get recorded temperatures for a zone, oldest first."""
    return await get_temperature_history(storage, zone_id, hours)
