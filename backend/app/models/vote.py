"""Vote ledger model."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Vote(Base):
    """A single hot/cold vote. Rows are only ever inserted."""

    __tablename__ = "votes"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    zone_id: Mapped[str] = mapped_column(String(50), ForeignKey("zones.id"), nullable=False)
    vote_type: Mapped[str] = mapped_column(String(10), nullable=False)  # "hot" or "cold"
    timestamp: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    __table_args__ = (Index("ix_votes_zone_time", "zone_id", "timestamp"),)
