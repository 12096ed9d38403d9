"""
Upload history endpoints.
"""
from fastapi import APIRouter, Depends

from mythdetector.auth import SessionContext, require_session
from mythdetector.orchestration import BaseHistoryRepository
from ..dependencies import get_history
from ..schemas import HistoryEntryResponse, HistoryResponse

router = APIRouter(prefix="/api/history", tags=["History"])


@router.get("", response_model=HistoryResponse)
async def my_history(
    session: SessionContext = Depends(require_session),
    history: BaseHistoryRepository = Depends(get_history),
) -> HistoryResponse:
    """Uploads attributed to the logged-in user."""
    entries = history.list_for(session.identity)
    return HistoryResponse(
        total=len(entries),
        entries=[HistoryEntryResponse.from_entry(e) for e in entries],
    )


@router.get("/all", response_model=HistoryResponse)
async def all_history(
    session: SessionContext = Depends(require_session),
    history: BaseHistoryRepository = Depends(get_history),
) -> HistoryResponse:
    """Engagement view across all users."""
    entries = history.list_all()
    return HistoryResponse(
        total=len(entries),
        entries=[HistoryEntryResponse.from_entry(e) for e in entries],
    )
