"""Statistics API routes."""

from fastapi import APIRouter, Depends

from app.schemas import StatsResponse
from app.services import get_stats
from app.storage import Storage, get_storage

router = APIRouter(prefix="/api", tags=["stats"])


@router.get("/stats", response_model=StatsResponse)
async def stats(storage: Storage = Depends(get_storage)) -> StatsResponse:
    """Get vote totals (last 10 minutes), average temperature and connected users."""
    return await get_stats(storage)
