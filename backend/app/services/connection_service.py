"""Connection tracking: approximate count of users with the page open."""

import logging
from datetime import datetime, timedelta

from app.config import CONNECTION_STALE_MINUTES
from app.services.bucketing import utc_now
from app.storage import Storage

__all__ = ["touch_connection", "count_live_connections", "sweep_connections"]

logger = logging.getLogger(__name__)


async def touch_connection(
    storage: Storage,
    session_id: str,
    now: datetime | None = None,
) -> None:
    """Mark a session as seen now, creating its record on first sight."""
    await storage.touch_connection(session_id, now or utc_now())
    await storage.commit()


async def count_live_connections(storage: Storage) -> int:
    """Number of tracked sessions.

    Stale sessions are removed by ``sweep_connections``, not filtered here.
    """
    return await storage.count_connections()


async def sweep_connections(
    storage: Storage,
    stale_minutes: int = CONNECTION_STALE_MINUTES,
    now: datetime | None = None,
) -> int:
    """Remove sessions not seen for more than ``stale_minutes``. Returns how many."""
    now = now or utc_now()
    removed = await storage.delete_connections_before(now - timedelta(minutes=stale_minutes))
    await storage.commit()
    if removed:
        logger.info(f"Swept {removed} stale connection(s)")
    return removed
