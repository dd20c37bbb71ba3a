"""Background jobs: connection sweep and temperature snapshots."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from app.config import (
    CONNECTION_SWEEP_INTERVAL_SECONDS,
    TEMPERATURE_SNAPSHOT_INTERVAL_SECONDS,
)
from app.services.connection_service import sweep_connections
from app.services.history_service import snapshot_temperatures
from app.storage import storage_session

logger = logging.getLogger(__name__)


class PeriodicTask:
    """Runs an async job every ``interval_seconds`` until stopped.

    The first run happens one interval after ``start()``. A failing run is
    logged and the loop carries on with the next interval.
    """

    def __init__(self, name: str, interval_seconds: float, job: Callable[[], Awaitable[object]]):
        self.name = name
        self.interval_seconds = interval_seconds
        self.job = job
        self._task: asyncio.Task | None = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the loop in the background."""
        if self._running:
            logger.warning(f"{self.name} already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._run_loop(), name=self.name)
        logger.info(f"{self.name} started (every {self.interval_seconds}s)")

    async def stop(self) -> None:
        """Cancel the loop and wait for it to finish."""
        if not self._running:
            return

        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info(f"{self.name} stopped")

    async def run_once(self) -> None:
        """Run the job one time, logging instead of raising on failure."""
        try:
            await self.job()
        except Exception as e:
            logger.error(f"Error in {self.name}: {e}", exc_info=True)

    async def _run_loop(self) -> None:
        while self._running:
            await asyncio.sleep(self.interval_seconds)
            await self.run_once()


async def sweep_stale_connections() -> int:
    async with storage_session() as storage:
        return await sweep_connections(storage)


async def record_temperature_snapshot() -> int:
    async with storage_session() as storage:
        return await snapshot_temperatures(storage)


def create_background_tasks() -> list[PeriodicTask]:
    """The app's periodic jobs, not yet started."""
    return [
        PeriodicTask(
            "connection-sweep",
            CONNECTION_SWEEP_INTERVAL_SECONDS,
            sweep_stale_connections,
        ),
        PeriodicTask(
            "temperature-snapshot",
            TEMPERATURE_SNAPSHOT_INTERVAL_SECONDS,
            record_temperature_snapshot,
        ),
    ]
