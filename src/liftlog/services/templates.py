"""Template authoring and management."""

from dataclasses import dataclass, field

import structlog

from ..authoring.draft import Draft, add_row, remove_row, update_row
from ..authoring.resolution import Unresolved, resolve_rows
from ..authoring.rows import TEMPLATE_ROW_DEFAULTS, ExerciseAuthoringRow, ExerciseSelection
from ..db.repositories import TemplateRepository
from ..errors import NotFoundError, ValidationError
from ..models.templates import TemplateExercise, WorkoutTemplate
from ..models.users import Identity
from ..store.base import RowStore

logger = structlog.get_logger(__name__)


@dataclass
class TemplateSaveResult:
    """Outcome of a successful template save."""

    template: WorkoutTemplate
    exercises: list[TemplateExercise]
    unresolved: list[Unresolved] = field(default_factory=list)


class TemplateBuilder:
    """Holds the draft of one template being built and saves it.

    The draft survives a failed save so the user can retry; only a
    successful save clears it.
    """

    def __init__(self, store: RowStore):
        self.templates = TemplateRepository(store)
        self.draft = Draft()

    @property
    def rows(self) -> tuple[ExerciseAuthoringRow, ...]:
        return self.draft.rows

    def add(self, selection: ExerciseSelection | None) -> ExerciseAuthoringRow:
        """Append a row with the template defaults (3 x 8-12, no weight)."""
        self.draft = add_row(self.draft, selection, TEMPLATE_ROW_DEFAULTS)
        return self.draft.rows[-1]

    def update(self, temp_id: str, field_name: str, value) -> None:
        self.draft = update_row(self.draft, temp_id, field_name, value)

    def remove(self, temp_id: str) -> None:
        self.draft = remove_row(self.draft, temp_id)

    def reset(self) -> None:
        self.draft = Draft()

    async def save(
        self,
        name: str,
        description: str | None,
        identity: Identity | None,
    ) -> TemplateSaveResult:
        """Persist the header, resolve typed exercises, then bulk-insert rows.

        The two writes are not transactional: a failed row insert leaves the
        header behind without rows.
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Give the template a name")
        if self.draft.is_empty:
            raise ValidationError("Add at least one exercise")

        header = await self.templates.create(
            WorkoutTemplate(
                name=name,
                description=(description or "").strip() or None,
                user_id=identity.user_id if identity else None,
            )
        )
        logger.info("template_header_created", template_id=header.id, name=name)

        kept, unresolved = await resolve_rows(
            self.draft.rows, self.templates.exercises, identity
        )

        rows = [
            TemplateExercise(
                template_id=header.id,
                exercise_id=exercise_id,
                sets=row.sets,
                reps_min=row.reps_min,
                reps_max=row.reps_max,
                target_weight_kg=row.target_weight if row.target_weight > 0 else None,
                notes=row.notes or None,
                order_index=index,
                exercise_name=row.name,
            )
            for index, (row, exercise_id) in enumerate(kept)
        ]
        stored = await self.templates.add_exercises(rows)
        logger.info(
            "template_saved",
            template_id=header.id,
            exercises=len(stored),
            unresolved=len(unresolved),
        )

        for item, row in zip(stored, rows):
            item.exercise_name = row.exercise_name
        header.exercises = stored
        header.exercise_count = len(stored)

        self.reset()
        return TemplateSaveResult(template=header, exercises=stored, unresolved=unresolved)


class TemplateService:
    """Listing, favoriting and deleting stored templates."""

    def __init__(self, store: RowStore):
        self.templates = TemplateRepository(store)

    async def list_templates(self) -> list[WorkoutTemplate]:
        return await self.templates.list_all()

    async def get_template(self, template_id: int) -> WorkoutTemplate:
        template = await self.templates.get(template_id)
        if template is None:
            raise NotFoundError(f"Template {template_id} not found")
        return template

    async def toggle_favorite(self, template_id: int) -> bool:
        """Flip the favorite flag and return the new value."""
        template = await self.templates.get(template_id, with_exercises=False)
        if template is None:
            raise NotFoundError(f"Template {template_id} not found")
        new_value = not template.is_favorite
        await self.templates.set_favorite(template_id, new_value)
        return new_value

    async def delete_template(self, template_id: int) -> None:
        deleted = await self.templates.delete(template_id)
        if not deleted:
            raise NotFoundError(f"Template {template_id} not found")
        logger.info("template_deleted", template_id=template_id)
