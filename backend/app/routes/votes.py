"""Vote API routes."""

from fastapi import APIRouter, Depends

from app.routes.session import resolve_session_id
from app.schemas import VoteRequest, ZoneView
from app.services import get_zone, submit_vote, touch_connection
from app.storage import Storage, get_storage

router = APIRouter(prefix="/api", tags=["votes"])


@router.post("/vote", response_model=ZoneView)
async def vote(
    request: VoteRequest,
    session_id: str = Depends(resolve_session_id),
    storage: Storage = Depends(get_storage),
) -> ZoneView:
    """Submit a hot/cold vote and return the zone with its new temperature."""
    # 404 before the session counts as connected
    await get_zone(storage, request.zone_id)
    await touch_connection(storage, session_id)
    return await submit_vote(storage, request.zone_id, request.vote_type)
