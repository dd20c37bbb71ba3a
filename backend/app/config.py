import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_PATH = os.getenv("DATABASE_PATH", "../data/thermovote.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# "sqlite" (default) or "memory"
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sqlite")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "true").lower() == "true"
ENABLE_BACKGROUND_TASKS = os.getenv("ENABLE_BACKGROUND_TASKS", "true").lower() == "true"

# Voting model - hardcoded for easy tweaking
VOTE_WINDOW_MINUTES = 10
BASE_TEMPERATURE = 22.0
TEMPERATURE_STEP = 0.1

# History grid
BUCKET_MINUTES = 10
DEFAULT_HISTORY_HOURS = 6
DEFAULT_TEMPERATURE_HISTORY_HOURS = 24
MAX_HISTORY_HOURS = 168  # 7 days

# Connection tracking
CONNECTION_STALE_MINUTES = 5
CONNECTION_SWEEP_INTERVAL_SECONDS = 5 * 60
TEMPERATURE_SNAPSHOT_INTERVAL_SECONDS = 10 * 60
