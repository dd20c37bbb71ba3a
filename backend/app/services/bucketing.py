"""Clock helpers and the fixed 10-minute bucket grid."""

from datetime import UTC, datetime, timedelta

from app.config import BUCKET_MINUTES

__all__ = ["utc_now", "floor_to_interval", "interval_grid"]


def utc_now() -> datetime:
    """Current time as naive UTC (what SQLite stores)."""
    return datetime.now(UTC).replace(tzinfo=None)


def floor_to_interval(timestamp: datetime, minutes: int = BUCKET_MINUTES) -> datetime:
    """Start of the bucket containing ``timestamp``.

    Minutes are floored to the lower multiple of ``minutes``; seconds and
    microseconds are zeroed. Only divisors of 60 give a stable grid.
    """
    return timestamp.replace(
        minute=(timestamp.minute // minutes) * minutes,
        second=0,
        microsecond=0,
    )


def interval_grid(
    now: datetime,
    count: int,
    minutes: int = BUCKET_MINUTES,
) -> list[datetime]:
    """Return ``count`` consecutive bucket starts, oldest first.

    The last entry is the bucket containing ``now``.
    """
    if count <= 0:
        return []
    current = floor_to_interval(now, minutes)
    step = timedelta(minutes=minutes)
    # Walk backwards from the current bucket, then flip to oldest-first
    grid = [current - i * step for i in range(count)]
    grid.reverse()
    return grid
