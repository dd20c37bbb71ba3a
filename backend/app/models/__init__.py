"""SQLAlchemy models."""

from app.models.connection import ActiveConnection
from app.models.temperature import TemperatureSample
from app.models.vote import Vote
from app.models.zone import Zone

__all__ = [
    "Zone",
    "Vote",
    "TemperatureSample",
    "ActiveConnection",
]
