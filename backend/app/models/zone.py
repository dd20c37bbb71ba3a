"""Zone model."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Zone(Base):
    """Physical area with its own comfort temperature (1F Zone A, Recharge Zone, etc.).

    ``hot_votes`` and ``cold_votes`` hold the counts computed at the last vote.
    They go stale as votes age out of the window, so views always recompute them.
    """

    __tablename__ = "zones"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    temperature: Mapped[float] = mapped_column(Float, nullable=False, default=22.0)
    hot_votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cold_votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    active_voters: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Position in the floor plan listing
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_updated: Mapped[datetime] = mapped_column(DateTime, nullable=False)
