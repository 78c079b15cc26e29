"""Exercise catalog access with client-side search and filters."""

from typing import Iterable

import structlog

from ..db.repositories import ExerciseRepository
from ..errors import ValidationError
from ..models.exercises import Exercise
from ..models.users import Identity
from ..store.base import RowStore

logger = structlog.get_logger(__name__)

ALL = "all"


def search(exercises: Iterable[Exercise], term: str | None) -> list[Exercise]:
    """Case-insensitive substring match on name or description."""
    exercises = list(exercises)
    if not term or not term.strip():
        return exercises
    needle = term.strip().lower()
    return [
        ex
        for ex in exercises
        if needle in ex.name.lower() or needle in (ex.description or "").lower()
    ]


def _matches(value, wanted) -> bool:
    if wanted is None or wanted == ALL:
        return True
    wanted_value = getattr(wanted, "value", wanted)
    return value.value == wanted_value


def filter_exercises(
    exercises: Iterable[Exercise],
    muscle_group=None,
    difficulty=None,
    equipment=None,
) -> list[Exercise]:
    """Keep exercises matching every given category ("all" or None skips one)."""
    return [
        ex
        for ex in exercises
        if _matches(ex.muscle_group, muscle_group)
        and _matches(ex.difficulty, difficulty)
        and _matches(ex.equipment, equipment)
    ]


class CatalogService:
    """Reads and creates catalog exercises."""

    def __init__(self, store: RowStore):
        self.exercises = ExerciseRepository(store)

    async def list_exercises(self) -> list[Exercise]:
        return await self.exercises.list_all()

    async def browse(
        self,
        term: str | None = None,
        muscle_group=None,
        difficulty=None,
        equipment=None,
    ) -> list[Exercise]:
        """Fetch the catalog, then search and filter it locally."""
        exercises = await self.list_exercises()
        return filter_exercises(
            search(exercises, term),
            muscle_group=muscle_group,
            difficulty=difficulty,
            equipment=equipment,
        )

    async def get(self, exercise_id: int) -> Exercise | None:
        return await self.exercises.get(exercise_id)

    async def find_by_name(self, name: str) -> Exercise | None:
        return await self.exercises.find_by_name(name)

    async def create_exercise(self, exercise: Exercise, identity: Identity | None = None) -> Exercise:
        """Create an exercise from the explicit form."""
        exercise.name = exercise.name.strip()
        if not exercise.name:
            raise ValidationError("Exercise name is required")
        if identity is not None:
            exercise.created_by = identity.user_id
        created = await self.exercises.create(exercise)
        logger.info("exercise_created", exercise_id=created.id, name=created.name)
        return created
