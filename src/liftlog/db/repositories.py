"""Data access layer for liftlog.

Each repository maps one table (plus its joins) onto the dataclass models.
They only talk to the generic RowStore, so any backend implementing it works.
"""

from ..models.exercises import Exercise
from ..models.sessions import SessionExercise, WorkoutSession
from ..models.templates import TemplateExercise, WorkoutTemplate
from ..models.trainers import AIGeneratedWorkout, TrainerProfile
from ..store.base import RowStore, desc, eq, ilike, in_, Order


class ExerciseRepository:
    """Repository for the exercise catalog."""

    table = "exercises"

    def __init__(self, store: RowStore):
        self.store = store

    async def create(self, exercise: Exercise) -> Exercise:
        """Insert an exercise; duplicate names raise StoreError."""
        row = await self.store.insert(self.table, exercise.to_dict())
        return Exercise.from_dict(row)

    async def get(self, exercise_id: int) -> Exercise | None:
        row = await self.store.select_one(self.table, filters=[eq("id", exercise_id)])
        return Exercise.from_dict(row) if row else None

    async def find_by_name(self, name: str) -> Exercise | None:
        """Case-insensitive exact-name lookup."""
        row = await self.store.select_one(self.table, filters=[ilike("name", name)])
        return Exercise.from_dict(row) if row else None

    async def list_all(self) -> list[Exercise]:
        rows = await self.store.select(self.table, order=[Order("name")])
        return [Exercise.from_dict(row) for row in rows]

    async def get_many(self, exercise_ids: list[int]) -> dict[int, Exercise]:
        """Fetch several exercises keyed by id (used for joins)."""
        if not exercise_ids:
            return {}
        rows = await self.store.select(self.table, filters=[in_("id", sorted(set(exercise_ids)))])
        return {row["id"]: Exercise.from_dict(row) for row in rows}

    async def count(self) -> int:
        return await self.store.count(self.table)


class TemplateRepository:
    """Repository for workout templates and their exercise rows."""

    table = "workout_templates"
    rows_table = "template_exercises"

    def __init__(self, store: RowStore):
        self.store = store
        self.exercises = ExerciseRepository(store)

    async def create(self, template: WorkoutTemplate) -> WorkoutTemplate:
        row = await self.store.insert(self.table, template.to_dict())
        return WorkoutTemplate.from_dict(row)

    async def add_exercises(self, rows: list[TemplateExercise]) -> list[TemplateExercise]:
        """Bulk-insert template rows in one call."""
        stored = await self.store.insert_many(self.rows_table, [r.to_dict() for r in rows])
        return [TemplateExercise.from_dict(row) for row in stored]

    async def get(self, template_id: int, with_exercises: bool = True) -> WorkoutTemplate | None:
        row = await self.store.select_one(self.table, filters=[eq("id", template_id)])
        if row is None:
            return None
        template = WorkoutTemplate.from_dict(row)
        if with_exercises:
            template.exercises = await self.get_exercises(template_id)
            template.exercise_count = len(template.exercises)
        return template

    async def get_exercises(self, template_id: int) -> list[TemplateExercise]:
        """Template rows ordered by order_index, joined with exercise names."""
        rows = await self.store.select(
            self.rows_table,
            filters=[eq("template_id", template_id)],
            order=[Order("order_index")],
        )
        catalog = await self.exercises.get_many([row["exercise_id"] for row in rows])
        result = []
        for row in rows:
            item = TemplateExercise.from_dict(row)
            exercise = catalog.get(item.exercise_id)
            item.exercise_name = exercise.name if exercise else ""
            result.append(item)
        return result

    async def list_all(self) -> list[WorkoutTemplate]:
        """Favorites first, then newest, with exercise counts."""
        rows = await self.store.select(
            self.table,
            order=[desc("is_favorite"), desc("created_at"), desc("id")],
        )
        templates = []
        for row in rows:
            template = WorkoutTemplate.from_dict(row)
            template.exercise_count = await self.store.count(
                self.rows_table, filters=[eq("template_id", template.id)]
            )
            templates.append(template)
        return templates

    async def set_favorite(self, template_id: int, is_favorite: bool) -> int:
        return await self.store.update(
            self.table, {"is_favorite": is_favorite}, filters=[eq("id", template_id)]
        )

    async def delete(self, template_id: int) -> int:
        """Delete a template; its rows go with it through the foreign key."""
        return await self.store.delete(self.table, filters=[eq("id", template_id)])


class SessionRepository:
    """Repository for workout sessions and their exercise rows."""

    table = "workout_sessions"
    rows_table = "workout_exercises"

    def __init__(self, store: RowStore):
        self.store = store
        self.exercises = ExerciseRepository(store)

    async def create(self, session: WorkoutSession) -> WorkoutSession:
        row = await self.store.insert(self.table, session.to_dict())
        return WorkoutSession.from_dict(row)

    async def add_exercises(self, rows: list[SessionExercise]) -> list[SessionExercise]:
        """Bulk-insert session rows in one call."""
        stored = await self.store.insert_many(self.rows_table, [r.to_dict() for r in rows])
        return [SessionExercise.from_dict(row) for row in stored]

    async def get(self, session_id: int) -> WorkoutSession | None:
        row = await self.store.select_one(self.table, filters=[eq("id", session_id)])
        return WorkoutSession.from_dict(row) if row else None

    async def get_exercises(self, session_id: int) -> list[SessionExercise]:
        """Session rows ordered by order_index, joined with catalog fields."""
        rows = await self.store.select(
            self.rows_table,
            filters=[eq("workout_id", session_id)],
            order=[Order("order_index")],
        )
        catalog = await self.exercises.get_many([row["exercise_id"] for row in rows])
        result = []
        for row in rows:
            item = SessionExercise.from_dict(row)
            exercise = catalog.get(item.exercise_id)
            if exercise:
                item.exercise_name = exercise.name
                item.muscle_group = exercise.muscle_group.value
                item.equipment = exercise.equipment.value
            result.append(item)
        return result

    async def list_all(self, user_id: int | None = None) -> list[WorkoutSession]:
        """Sessions newest first."""
        filters = [eq("user_id", user_id)] if user_id is not None else []
        rows = await self.store.select(
            self.table, filters=filters, order=[desc("started_at"), desc("id")]
        )
        return [WorkoutSession.from_dict(row) for row in rows]

    async def delete_exercises(self, session_id: int) -> int:
        return await self.store.delete(self.rows_table, filters=[eq("workout_id", session_id)])

    async def delete_header(self, session_id: int) -> int:
        return await self.store.delete(self.table, filters=[eq("id", session_id)])


class TrainerRepository:
    """Repository for trainer personas."""

    table = "trainer_profiles"

    def __init__(self, store: RowStore):
        self.store = store

    async def create(self, trainer: TrainerProfile) -> TrainerProfile:
        row = await self.store.insert(self.table, trainer.to_dict())
        return TrainerProfile.from_dict(row)

    async def get(self, trainer_id: int) -> TrainerProfile | None:
        row = await self.store.select_one(self.table, filters=[eq("id", trainer_id)])
        return TrainerProfile.from_dict(row) if row else None

    async def list_all(self, active_only: bool = False) -> list[TrainerProfile]:
        filters = [eq("is_active", True)] if active_only else []
        rows = await self.store.select(
            self.table, filters=filters, order=[desc("created_at"), desc("id")]
        )
        return [TrainerProfile.from_dict(row) for row in rows]

    async def delete(self, trainer_id: int) -> int:
        return await self.store.delete(self.table, filters=[eq("id", trainer_id)])


class AIWorkoutRepository:
    """Repository for stored AI-generated workouts."""

    table = "ai_generated_workouts"

    def __init__(self, store: RowStore):
        self.store = store

    async def create(self, workout: AIGeneratedWorkout) -> AIGeneratedWorkout:
        row = await self.store.insert(self.table, workout.to_dict())
        return AIGeneratedWorkout.from_dict(row)

    async def get(self, workout_id: int) -> AIGeneratedWorkout | None:
        row = await self.store.select_one(self.table, filters=[eq("id", workout_id)])
        return AIGeneratedWorkout.from_dict(row) if row else None

    async def list_all(self, trainer_id: int | None = None) -> list[AIGeneratedWorkout]:
        filters = [eq("trainer_profile_id", trainer_id)] if trainer_id is not None else []
        rows = await self.store.select(
            self.table, filters=filters, order=[desc("created_at"), desc("id")]
        )
        return [AIGeneratedWorkout.from_dict(row) for row in rows]
