#!/usr/bin/env python3
"""Seed the default zones into the database."""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.database import get_session
from app.services.zone_service import DEFAULT_ZONES, seed_default_zones
from app.storage import SqlStorage


async def seed_zones() -> None:
    """Seed zones (idempotent)."""
    async with get_session() as session:
        added = await seed_default_zones(SqlStorage(session))
    if added:
        print(f"Seeded {added} of {len(DEFAULT_ZONES)} zones.")
    else:
        print("Zones already seeded, skipping.")


if __name__ == "__main__":
    asyncio.run(seed_zones())
