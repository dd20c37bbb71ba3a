"""SQLAlchemy-backed storage."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ZoneNotFoundError
from app.models import ActiveConnection, TemperatureSample, Vote, Zone
from app.schemas.zone import RecentVoteCounts

__all__ = ["SqlStorage"]


class SqlStorage:
    """Storage on top of an ``AsyncSession``. One instance per request or job."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_zones(self) -> list[Zone]:
        result = await self.session.execute(select(Zone).order_by(Zone.display_order, Zone.id))
        return list(result.scalars().all())

    async def get_zone(self, zone_id: str) -> Zone | None:
        return await self.session.get(Zone, zone_id)

    async def add_zone(self, zone: Zone) -> Zone:
        self.session.add(zone)
        await self.session.flush()
        return zone

    async def update_zone_temperature(
        self,
        zone_id: str,
        temperature: float,
        counts: RecentVoteCounts,
        at: datetime,
    ) -> Zone | None:
        zone = await self.get_zone(zone_id)
        if zone is None:
            return None
        zone.temperature = temperature
        zone.hot_votes = counts.hot
        zone.cold_votes = counts.cold
        zone.last_updated = at
        await self.session.flush()
        return zone

    async def add_vote(self, zone_id: str, vote_type: str, at: datetime) -> Vote:
        await self._require_zone(zone_id)
        vote = Vote(id=str(uuid4()), zone_id=zone_id, vote_type=vote_type, timestamp=at)
        self.session.add(vote)
        await self.session.flush()
        return vote

    async def get_votes_since(self, zone_id: str, since: datetime) -> list[Vote]:
        result = await self.session.execute(
            select(Vote)
            .where(and_(Vote.zone_id == zone_id, Vote.timestamp >= since))
            .order_by(Vote.timestamp)
        )
        return list(result.scalars().all())

    async def count_votes_since(self, zone_id: str, since: datetime) -> RecentVoteCounts:
        result = await self.session.execute(
            select(Vote.vote_type, func.count(Vote.id))
            .where(and_(Vote.zone_id == zone_id, Vote.timestamp >= since))
            .group_by(Vote.vote_type)
        )
        counts = dict(result.all())
        return RecentVoteCounts(hot=counts.get("hot", 0), cold=counts.get("cold", 0))

    async def add_temperature_sample(
        self, zone_id: str, temperature: float, at: datetime
    ) -> TemperatureSample:
        await self._require_zone(zone_id)
        sample = TemperatureSample(
            id=str(uuid4()), zone_id=zone_id, temperature=temperature, timestamp=at
        )
        self.session.add(sample)
        await self.session.flush()
        return sample

    async def get_temperature_samples_since(
        self, zone_id: str, since: datetime
    ) -> list[TemperatureSample]:
        result = await self.session.execute(
            select(TemperatureSample)
            .where(
                and_(
                    TemperatureSample.zone_id == zone_id,
                    TemperatureSample.timestamp >= since,
                )
            )
            .order_by(TemperatureSample.timestamp)
        )
        return list(result.scalars().all())

    async def touch_connection(self, session_id: str, at: datetime) -> ActiveConnection:
        # Single statement, so two first requests of one session cannot both insert
        await self.session.execute(
            sqlite_insert(ActiveConnection)
            .values(id=str(uuid4()), session_id=session_id, last_seen=at)
            .on_conflict_do_update(index_elements=["session_id"], set_={"last_seen": at})
        )
        result = await self.session.execute(
            select(ActiveConnection)
            .where(ActiveConnection.session_id == session_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

    async def count_connections(self) -> int:
        result = await self.session.execute(select(func.count(ActiveConnection.id)))
        return result.scalar_one()

    async def delete_connections_before(self, cutoff: datetime) -> int:
        result = await self.session.execute(
            delete(ActiveConnection).where(ActiveConnection.last_seen < cutoff)
        )
        return result.rowcount or 0

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    async def _require_zone(self, zone_id: str) -> None:
        # SQLite does not enforce foreign keys unless asked to
        if await self.get_zone(zone_id) is None:
            raise ZoneNotFoundError(zone_id)
