"""Active connection model."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class ActiveConnection(Base):
    """Last time a browser session was seen. One row per session id."""

    __tablename__ = "active_connections"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    session_id: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    last_seen: Mapped[datetime] = mapped_column(DateTime, nullable=False)
