"""In-memory storage, for development and tests. Nothing survives a restart."""

from datetime import datetime
from uuid import uuid4

from app.exceptions import ZoneNotFoundError
from app.models import ActiveConnection, TemperatureSample, Vote, Zone
from app.schemas.zone import RecentVoteCounts

__all__ = ["MemoryStorage"]


class MemoryStorage:
    """Storage keeping model instances in plain dicts and lists.

    Writes apply immediately, so ``commit`` and ``rollback`` are no-ops.
    """

    def __init__(self):
        self.zones: dict[str, Zone] = {}
        self.votes: list[Vote] = []
        self.temperature_samples: list[TemperatureSample] = []
        self.connections: dict[str, ActiveConnection] = {}  # keyed by session_id

    async def list_zones(self) -> list[Zone]:
        return sorted(self.zones.values(), key=lambda z: z.display_order)

    async def get_zone(self, zone_id: str) -> Zone | None:
        return self.zones.get(zone_id)

    async def add_zone(self, zone: Zone) -> Zone:
        self.zones[zone.id] = zone
        return zone

    async def update_zone_temperature(
        self,
        zone_id: str,
        temperature: float,
        counts: RecentVoteCounts,
        at: datetime,
    ) -> Zone | None:
        zone = self.zones.get(zone_id)
        if zone is None:
            return None
        zone.temperature = temperature
        zone.hot_votes = counts.hot
        zone.cold_votes = counts.cold
        zone.last_updated = at
        return zone

    async def add_vote(self, zone_id: str, vote_type: str, at: datetime) -> Vote:
        self._require_zone(zone_id)
        vote = Vote(id=str(uuid4()), zone_id=zone_id, vote_type=vote_type, timestamp=at)
        self.votes.append(vote)
        return vote

    async def get_votes_since(self, zone_id: str, since: datetime) -> list[Vote]:
        votes = [v for v in self.votes if v.zone_id == zone_id and v.timestamp >= since]
        return sorted(votes, key=lambda v: v.timestamp)

    async def count_votes_since(self, zone_id: str, since: datetime) -> RecentVoteCounts:
        votes = await self.get_votes_since(zone_id, since)
        return RecentVoteCounts(
            hot=sum(1 for v in votes if v.vote_type == "hot"),
            cold=sum(1 for v in votes if v.vote_type == "cold"),
        )

    async def add_temperature_sample(
        self, zone_id: str, temperature: float, at: datetime
    ) -> TemperatureSample:
        self._require_zone(zone_id)
        sample = TemperatureSample(
            id=str(uuid4()), zone_id=zone_id, temperature=temperature, timestamp=at
        )
        self.temperature_samples.append(sample)
        return sample

    async def get_temperature_samples_since(
        self, zone_id: str, since: datetime
    ) -> list[TemperatureSample]:
        samples = [
            s for s in self.temperature_samples if s.zone_id == zone_id and s.timestamp >= since
        ]
        return sorted(samples, key=lambda s: s.timestamp)

    async def touch_connection(self, session_id: str, at: datetime) -> ActiveConnection:
        connection = self.connections.get(session_id)
        if connection is None:
            connection = ActiveConnection(id=str(uuid4()), session_id=session_id, last_seen=at)
            self.connections[session_id] = connection
        else:
            connection.last_seen = at
        return connection

    async def count_connections(self) -> int:
        return len(self.connections)

    async def delete_connections_before(self, cutoff: datetime) -> int:
        stale = [sid for sid, conn in self.connections.items() if conn.last_seen < cutoff]
        for session_id in stale:
            del self.connections[session_id]
        return len(stale)

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass

    def _require_zone(self, zone_id: str) -> None:
        if zone_id not in self.zones:
            raise ZoneNotFoundError(zone_id)
