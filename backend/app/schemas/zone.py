"""Pydantic schemas for zones, votes and stats, matching the frontend interfaces."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from app.models import Zone

VoteType = Literal["hot", "cold"]


class RecentVoteCounts(BaseModel):
    """Hot/cold tally over the trailing vote window."""

    hot: int = 0
    cold: int = 0

    @property
    def total(self) -> int:
        return self.hot + self.cold


class ZoneResponse(BaseModel):
    """Zone fields as stored."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    name: str
    temperature: float
    hot_votes: int = Field(serialization_alias="hotVotes")
    cold_votes: int = Field(serialization_alias="coldVotes")
    active_voters: int = Field(serialization_alias="activeVoters")
    last_updated: datetime = Field(serialization_alias="lastUpdated")


class ZoneView(ZoneResponse):
    """Zone fields with vote counts replaced by the current window's tally."""

    @classmethod
    def from_zone(cls, zone: Zone, counts: RecentVoteCounts) -> "ZoneView":
        stored = ZoneResponse.model_validate(zone)
        return cls(
            **stored.model_dump(exclude={"hot_votes", "cold_votes"}),
            hot_votes=counts.hot,
            cold_votes=counts.cold,
        )


class VoteRequest(BaseModel):
    """Body of POST /api/vote."""

    model_config = ConfigDict(populate_by_name=True)

    zone_id: str = Field(..., alias="zoneId", description="Zone being voted on")
    vote_type: VoteType = Field(..., alias="voteType", description="'hot' or 'cold'")


class StatsResponse(BaseModel):
    """Aggregate statistics across all zones."""

    model_config = ConfigDict(populate_by_name=True)

    total_votes: int = Field(serialization_alias="totalVotes")
    hot_votes: int = Field(serialization_alias="hotVotes")
    cold_votes: int = Field(serialization_alias="coldVotes")
    average_temperature: float = Field(serialization_alias="averageTemperature")
    connected_users: int = Field(serialization_alias="connectedUsers")
    zones: int
