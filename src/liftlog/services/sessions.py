"""Logging workout sessions, free-form or by executing a template."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Callable

import structlog

from ..authoring.aggregates import DraftSummary, collapse_row, round_half_up, summarize
from ..authoring.draft import (
    Draft,
    add_row,
    remove_row,
    set_actual_reps,
    set_actual_weight,
    toggle_set,
    update_row,
)
from ..authoring.resolution import Unresolved, resolve_rows
from ..authoring.rows import (
    SESSION_ROW_DEFAULTS,
    ExerciseAuthoringRow,
    ExerciseSelection,
    SetProgress,
)
from ..db.repositories import SessionRepository, TemplateRepository
from ..errors import NotFoundError, ValidationError
from ..models.sessions import Mood, SessionExercise, SessionStatus, WorkoutSession
from ..models.templates import WorkoutTemplate
from ..models.users import Identity
from ..store.base import RowStore

logger = structlog.get_logger(__name__)


@dataclass
class SessionSaveResult:
    """Outcome of a successful session save."""

    session: WorkoutSession
    exercises: list[SessionExercise]
    unresolved: list[Unresolved] = field(default_factory=list)


def rows_from_template(template: WorkoutTemplate) -> tuple[ExerciseAuthoringRow, ...]:
    """One row per template prescription, every set pending at the planned load."""
    rows = []
    for item in template.exercises:
        weight = item.target_weight_kg or 0.0
        rows.append(
            ExerciseAuthoringRow(
                temp_id=f"tpl-{item.id}" if item.id is not None else f"tpl-{item.order_index}",
                name=item.exercise_name,
                exercise_id=item.exercise_id,
                sets=item.sets,
                reps_min=item.reps_min,
                reps_max=item.reps_max,
                target_weight=weight,
                notes=item.notes or "",
                progress=SetProgress.planned(item.sets, weight, item.reps_min),
            )
        )
    return tuple(rows)


class SessionRecorder:
    """Holds the draft of one session being logged and saves it.

    Rows come either from a template (with per-set progress) or are added
    one by one. Nothing is written until save().
    """

    def __init__(self, store: RowStore, clock: Callable[[], datetime] = datetime.now):
        self.sessions = SessionRepository(store)
        self.templates = TemplateRepository(store)
        self.clock = clock
        self.draft = Draft()
        self.template: WorkoutTemplate | None = None
        self.started_at = clock()

    @property
    def rows(self) -> tuple[ExerciseAuthoringRow, ...]:
        return self.draft.rows

    async def load_from_template(self, template_id: int) -> WorkoutTemplate:
        """Seed the draft from a stored template."""
        template = await self.templates.get(template_id)
        if template is None:
            raise NotFoundError(f"Template {template_id} not found")
        self.template = template
        self.draft = Draft(rows=rows_from_template(template))
        self.started_at = self.clock()
        logger.info("session_started_from_template", template_id=template_id, rows=len(self.draft))
        return template

    # Free-form rows

    def add(self, selection: ExerciseSelection | None) -> ExerciseAuthoringRow:
        """Append a row with the session defaults (3 x 10, RPE 7)."""
        self.draft = add_row(self.draft, selection, SESSION_ROW_DEFAULTS)
        return self.draft.rows[-1]

    def update(self, temp_id: str, field_name: str, value) -> None:
        if field_name == "reps":
            # Free-form rows log a single rep value
            self.draft = update_row(self.draft, temp_id, "reps_min", value)
            row = self.draft.find(temp_id)
            if row is not None:
                self.draft = update_row(self.draft, temp_id, "reps_max", row.reps_min)
            return
        self.draft = update_row(self.draft, temp_id, field_name, value)

    def remove(self, temp_id: str) -> None:
        self.draft = remove_row(self.draft, temp_id)

    # Live execution

    def toggle_set(self, temp_id: str, set_index: int) -> None:
        self.draft = toggle_set(self.draft, temp_id, set_index)

    def set_actual_weight(self, temp_id: str, set_index: int, weight) -> None:
        self.draft = set_actual_weight(self.draft, temp_id, set_index, weight)

    def set_actual_reps(self, temp_id: str, set_index: int, reps) -> None:
        self.draft = set_actual_reps(self.draft, temp_id, set_index, reps)

    @property
    def summary(self) -> DraftSummary:
        return summarize(self.draft)

    def reset(self) -> None:
        self.draft = Draft()
        self.template = None
        self.started_at = self.clock()

    async def save(
        self,
        mood: Mood | str = Mood.GOOD,
        notes: str | None = None,
        identity: Identity | None = None,
    ) -> SessionSaveResult:
        """Write the session header, then one row per exercise.

        Not transactional: if the row insert fails the header stays behind
        without rows.
        """
        if self.draft.is_empty:
            raise ValidationError("Add at least one exercise before saving")
        try:
            mood = Mood(mood)
        except ValueError:
            raise ValidationError(f"Unknown mood: {mood}") from None

        finished_at = self.clock()
        duration = max(0, round_half_up((finished_at - self.started_at).total_seconds() / 60))

        header = await self.sessions.create(
            WorkoutSession(
                user_id=identity.user_id if identity else None,
                mood=mood,
                notes=(notes or "").strip() or None,
                status=SessionStatus.COMPLETED,
                started_at=self.started_at,
                finished_at=finished_at,
                duration_minutes=duration,
            )
        )
        logger.info("session_header_created", session_id=header.id)

        kept, unresolved = await resolve_rows(self.draft.rows, self.sessions.exercises, identity)

        rows = []
        for index, (row, exercise_id) in enumerate(kept):
            collapsed = collapse_row(row)
            if row.progress is not None:
                reps_min = reps_max = collapsed.reps
            else:
                reps_min, reps_max = row.reps_min, row.reps_max
            rows.append(
                SessionExercise(
                    workout_id=header.id,
                    exercise_id=exercise_id,
                    sets=collapsed.sets,
                    reps_min=reps_min,
                    reps_max=reps_max,
                    weight_kg=collapsed.weight if collapsed.weight > 0 else None,
                    notes=row.notes or None,
                    order_index=index,
                    exercise_name=row.name,
                )
            )

        stored = await self.sessions.add_exercises(rows)
        stored = [replace(item, exercise_name=row.exercise_name) for item, row in zip(stored, rows)]
        logger.info(
            "session_saved",
            session_id=header.id,
            exercises=len(stored),
            unresolved=len(unresolved),
        )

        header.exercises = stored
        self.reset()
        return SessionSaveResult(session=header, exercises=stored, unresolved=unresolved)
