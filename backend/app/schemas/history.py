"""Pydantic schemas for vote and temperature history."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class VoteHistoryPoint(BaseModel):
    """Vote counts of one 10-minute bucket."""

    model_config = ConfigDict(populate_by_name=True)

    timestamp: datetime  # Bucket start, UTC
    hot_votes: int = Field(serialization_alias="hotVotes")
    cold_votes: int = Field(serialization_alias="coldVotes")


class TemperatureHistoryPoint(BaseModel):
    """A recorded zone temperature."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    zone_id: str = Field(serialization_alias="zoneId")
    temperature: float
    timestamp: datetime
