"""Workout session routes."""

from fastapi import APIRouter, Depends

from ...models.users import Identity
from ...services import SessionRecorder, SessionReviewService
from ...store.base import RowStore
from ..deps import get_identity, get_store
from ..schemas import SessionIn

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.get("")
async def list_workouts(user_id: int | None = None, store: RowStore = Depends(get_store)):
    """Sessions newest first, optionally for one user."""
    return await SessionReviewService(store).list_sessions(user_id)


@router.post("", status_code=201)
async def log_workout(
    body: SessionIn,
    store: RowStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    """Log a free-form session; typed exercise names are resolved on save."""
    recorder = SessionRecorder(store)
    for item in body.exercises:
        row = recorder.add(item.selection())
        recorder.update(row.temp_id, "sets", item.sets)
        recorder.update(row.temp_id, "reps", item.reps)
        recorder.update(row.temp_id, "target_weight", item.weight)
        recorder.update(row.temp_id, "rpe", item.rpe)
        recorder.update(row.temp_id, "notes", item.notes)
    return await recorder.save(mood=body.mood, notes=body.notes, identity=identity)


@router.get("/{session_id}")
async def get_workout(session_id: int, store: RowStore = Depends(get_store)):
    review = await SessionReviewService(store).load(session_id)
    return {
        "session": review.session,
        "volumes": review.volumes(),
        "total_sets": review.total_sets,
        "total_volume": review.total_volume,
    }


@router.delete("/{session_id}", status_code=204)
async def delete_workout(
    session_id: int,
    store: RowStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    await SessionReviewService(store).delete(session_id)
