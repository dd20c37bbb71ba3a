"""Storage backends and the FastAPI dependency that selects one."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from app.config import STORAGE_BACKEND
from app.database import get_session
from app.storage.base import Storage
from app.storage.memory import MemoryStorage
from app.storage.sql import SqlStorage

__all__ = [
    "Storage",
    "MemoryStorage",
    "SqlStorage",
    "get_storage",
    "storage_session",
]

_memory_storage: MemoryStorage | None = None


def get_memory_storage() -> MemoryStorage:
    """Process-wide in-memory store, created on first use."""
    global _memory_storage
    if _memory_storage is None:
        _memory_storage = MemoryStorage()
    return _memory_storage


@asynccontextmanager
async def storage_session() -> AsyncIterator[Storage]:
    """Storage for use outside of FastAPI routes (startup, background tasks)."""
    if STORAGE_BACKEND == "memory":
        yield get_memory_storage()
        return
    async with get_session() as session:
        yield SqlStorage(session)


async def get_storage() -> AsyncIterator[Storage]:
    """Dependency for getting the configured storage backend."""
    async with storage_session() as storage:
        yield storage
