"""Temperature history model."""

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class TemperatureSample(Base):
    """Zone temperature recorded after a vote or by the periodic snapshot."""

    __tablename__ = "temperature_history"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    zone_id: Mapped[str] = mapped_column(String(50), ForeignKey("zones.id"), nullable=False)
    temperature: Mapped[float] = mapped_column(Float, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    __table_args__ = (Index("ix_temperature_history_zone_time", "zone_id", "timestamp"),)
