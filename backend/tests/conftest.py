"""Shared fixtures: seeded storages and an API client bound to in-memory storage."""

import os
import tempfile
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path

# Point the app at throwaway locations before any app module is imported
_TMP_DIR = Path(tempfile.mkdtemp(prefix="thermovote-tests-"))
os.environ["DATABASE_PATH"] = str(_TMP_DIR / "app.db")
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["ENABLE_BACKGROUND_TASKS"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from app.database import Base  # noqa: E402
from app.main import app  # noqa: E402
from app.services.zone_service import seed_default_zones  # noqa: E402
from app.storage import MemoryStorage, SqlStorage, get_storage  # noqa: E402

# 12:07:30 UTC - inside the 12:00 bucket
NOW = datetime(2026, 10, 17, 12, 7, 30)


@asynccontextmanager
async def sqlite_storage(db_path: Path):
    """SQLite-backed storage on a fresh database file."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with session_factory() as session:
            yield SqlStorage(session)
    finally:
        await engine.dispose()


@pytest.fixture
async def memory_storage():
    """In-memory storage with the default zones."""
    storage = MemoryStorage()
    await seed_default_zones(storage, now=NOW)
    return storage


@pytest.fixture(params=["memory", "sql"])
async def storage(request, tmp_path):
    """Seeded storage; each test using it runs once per backend."""
    if request.param == "memory":
        storage = MemoryStorage()
        await seed_default_zones(storage, now=NOW)
        yield storage
        return

    async with sqlite_storage(tmp_path / "test.db") as storage:
        await seed_default_zones(storage, now=NOW)
        yield storage


@pytest.fixture
async def client(memory_storage):
    """API client whose requests all share one seeded in-memory storage."""
    app.dependency_overrides[get_storage] = lambda: memory_storage
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    app.dependency_overrides.clear()
