"""Storage protocol shared by the SQL and in-memory backends."""

from datetime import datetime
from typing import Protocol

from app.models import ActiveConnection, TemperatureSample, Vote, Zone
from app.schemas.zone import RecentVoteCounts


class Storage(Protocol):
    """Zone, vote ledger, temperature history and connection operations.

    Writes become visible to the same storage immediately and durable on
    ``commit()``. Vote and sample writes raise ``ZoneNotFoundError`` for
    unknown zones.
    """

    # Zones

    async def list_zones(self) -> list[Zone]: ...

    async def get_zone(self, zone_id: str) -> Zone | None: ...

    async def add_zone(self, zone: Zone) -> Zone: ...

    async def update_zone_temperature(
        self,
        zone_id: str,
        temperature: float,
        counts: RecentVoteCounts,
        at: datetime,
    ) -> Zone | None: ...

    # Vote ledger

    async def add_vote(self, zone_id: str, vote_type: str, at: datetime) -> Vote: ...

    async def get_votes_since(self, zone_id: str, since: datetime) -> list[Vote]: ...

    async def count_votes_since(self, zone_id: str, since: datetime) -> RecentVoteCounts: ...

    # Temperature history

    async def add_temperature_sample(
        self, zone_id: str, temperature: float, at: datetime
    ) -> TemperatureSample: ...

    async def get_temperature_samples_since(
        self, zone_id: str, since: datetime
    ) -> list[TemperatureSample]: ...

    # Connections

    async def touch_connection(self, session_id: str, at: datetime) -> ActiveConnection: ...

    async def count_connections(self) -> int: ...

    async def delete_connections_before(self, cutoff: datetime) -> int: ...

    # Transactions

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
