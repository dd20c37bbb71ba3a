"""Pydantic schemas for API request/response models."""

from app.schemas.history import TemperatureHistoryPoint, VoteHistoryPoint
from app.schemas.zone import (
    RecentVoteCounts,
    StatsResponse,
    VoteRequest,
    VoteType,
    ZoneResponse,
    ZoneView,
)

__all__ = [
    # Zone schemas
    "RecentVoteCounts",
    "StatsResponse",
    "VoteRequest",
    "VoteType",
    "ZoneResponse",
    "ZoneView",
    # History schemas
    "TemperatureHistoryPoint",
    "VoteHistoryPoint",
]
