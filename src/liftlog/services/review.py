"""Reviewing and deleting logged sessions."""

from dataclasses import dataclass

import structlog

from ..authoring.aggregates import row_volume, total_sets, total_volume
from ..db.repositories import SessionRepository
from ..errors import NotFoundError
from ..models.sessions import SessionExercise, WorkoutSession
from ..store.base import RowStore

logger = structlog.get_logger(__name__)


@dataclass
class SessionReview:
    """A stored session with its rows and derived totals."""

    session: WorkoutSession
    exercises: list[SessionExercise]

    @property
    def total_sets(self) -> int:
        return total_sets(self.exercises)

    @property
    def total_volume(self) -> float:
        return total_volume(self.exercises)

    def volumes(self) -> list[float]:
        """Per-row volume in row order."""
        return [row_volume(e.sets, e.reps_min, e.reps_max, e.weight_kg) for e in self.exercises]


class SessionReviewService:
    """Read-only view over stored sessions, plus cascading delete."""

    def __init__(self, store: RowStore):
        self.sessions = SessionRepository(store)

    async def list_sessions(self, user_id: int | None = None) -> list[WorkoutSession]:
        return await self.sessions.list_all(user_id)

    async def load(self, session_id: int) -> SessionReview:
        session = await self.sessions.get(session_id)
        if session is None:
            raise NotFoundError(f"Workout {session_id} not found")
        exercises = await self.sessions.get_exercises(session_id)
        session.exercises = exercises
        return SessionReview(session=session, exercises=exercises)

    async def delete(self, session_id: int) -> None:
        """Delete the session's exercise rows, then the session itself.

        An unknown id raises NotFoundError before anything is deleted.
        A failure on the rows stops before the header is touched. A failure
        on the header leaves it without rows.
        """
        if await self.sessions.get(session_id) is None:
            raise NotFoundError(f"Workout {session_id} not found")
        removed = await self.sessions.delete_exercises(session_id)
        logger.info("session_rows_deleted", session_id=session_id, rows=removed)
        await self.sessions.delete_header(session_id)
        logger.info("session_deleted", session_id=session_id)
