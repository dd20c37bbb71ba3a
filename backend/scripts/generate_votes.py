#!/usr/bin/env python3
"""Generate a few hours of demo votes so the history charts have something to show."""

import asyncio
import random
import sys
from datetime import timedelta
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.database import get_session
from app.services.bucketing import utc_now
from app.services.vote_service import submit_vote
from app.storage import SqlStorage

# Fixed seed for reproducibility
RANDOM_SEED = 42

HOURS_TO_GENERATE = 6
VOTES_PER_HOUR = 12

# Chance that a vote is "hot", per zone
HOT_BIAS = {
    "standing": 0.5,
    "zone-a": 0.7,  # Runs cold
    "zone-b": 0.3,  # Runs warm
    "zone-c": 0.6,
    "recharge": 0.4,
}


async def generate_votes() -> None:
    """Submit demo votes through the normal ingestion path, oldest first."""
    rng = random.Random(RANDOM_SEED)
    now = utc_now()
    total = HOURS_TO_GENERATE * VOTES_PER_HOUR

    async with get_session() as session:
        storage = SqlStorage(session)
        for zone_id, hot_bias in HOT_BIAS.items():
            offsets = sorted(
                (rng.uniform(0, HOURS_TO_GENERATE * 60) for _ in range(total)), reverse=True
            )
            for minutes_ago in offsets:
                vote_type = "hot" if rng.random() < hot_bias else "cold"
                await submit_vote(
                    storage, zone_id, vote_type, now=now - timedelta(minutes=minutes_ago)
                )
            print(f"Generated {total} votes for {zone_id}.")


if __name__ == "__main__":
    asyncio.run(generate_votes())
