"""Dashboard stats route."""

from fastapi import APIRouter, Depends

from ...db import ExerciseRepository
from ...services import SessionReviewService, compute_stats
from ...store.base import RowStore
from ..deps import get_store

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("")
async def dashboard(user_id: int | None = None, store: RowStore = Depends(get_store)):
    sessions = await SessionReviewService(store).list_sessions(user_id)
    return compute_stats(sessions, await ExerciseRepository(store).count())
