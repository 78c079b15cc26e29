"""Resolve draft rows to catalog exercises at save time."""

from dataclasses import dataclass

import structlog

from ..db.repositories import ExerciseRepository
from ..models.exercises import Difficulty, Equipment, Exercise, MuscleGroup
from ..models.users import Identity
from ..store.base import StoreError
from .rows import ExerciseAuthoringRow

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Resolved:
    """Row already pointed at a catalog exercise."""

    exercise_id: int


@dataclass(frozen=True)
class Created:
    """A new catalog exercise was created for a typed name."""

    exercise_id: int


@dataclass(frozen=True)
class Unresolved:
    """Neither creation nor lookup produced an exercise."""

    name: str
    reason: str


Resolution = Resolved | Created | Unresolved


def custom_exercise(name: str, identity: Identity | None) -> Exercise:
    """Catalog entry created implicitly from free text."""
    return Exercise(
        name=name,
        description="Custom exercise",
        muscle_group=MuscleGroup.OTHER,
        equipment=Equipment.OTHER,
        difficulty=Difficulty.INTERMEDIATE,
        is_public=False,
        created_by=identity.user_id if identity else None,
    )


async def resolve_exercise(
    row: ExerciseAuthoringRow,
    exercises: ExerciseRepository,
    identity: Identity | None = None,
) -> Resolution:
    """Create-or-lookup for rows typed as free text.

    Creation failures (typically a duplicate name) fall back to a
    case-insensitive name lookup.
    """
    if row.exercise_id is not None:
        return Resolved(row.exercise_id)

    try:
        created = await exercises.create(custom_exercise(row.name, identity))
        logger.info("exercise_created", name=row.name, exercise_id=created.id)
        return Created(created.id)
    except StoreError as create_error:
        logger.warning("exercise_create_failed", name=row.name, error=create_error.message)
        try:
            existing = await exercises.find_by_name(row.name)
        except StoreError as lookup_error:
            return Unresolved(row.name, lookup_error.message)
        if existing is None:
            return Unresolved(row.name, create_error.message)
        logger.info("exercise_matched_existing", name=row.name, exercise_id=existing.id)
        return Resolved(existing.id)


async def resolve_rows(
    rows,
    exercises: ExerciseRepository,
    identity: Identity | None = None,
) -> tuple[list[tuple[ExerciseAuthoringRow, int]], list[Unresolved]]:
    """Resolve rows in order.

    Returns the kept rows paired with their exercise id, and the rows that
    were excluded.
    """
    kept: list[tuple[ExerciseAuthoringRow, int]] = []
    unresolved: list[Unresolved] = []
    for row in rows:
        resolution = await resolve_exercise(row, exercises, identity)
        if isinstance(resolution, Unresolved):
            logger.error("exercise_unresolved", name=resolution.name, reason=resolution.reason)
            unresolved.append(resolution)
        else:
            kept.append((row, resolution.exercise_id))
    return kept, unresolved
