"""Workout template models."""

from dataclasses import dataclass, field
from datetime import datetime


def _parse_timestamp(value) -> datetime | None:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


@dataclass
class TemplateExercise:
    """One ordered prescription inside a template."""

    exercise_id: int
    sets: int = 3
    reps_min: int = 8
    reps_max: int = 12
    target_weight_kg: float | None = None
    notes: str | None = None
    order_index: int = 0
    template_id: int | None = None
    exercise_name: str = ""  # joined from exercises
    id: int | None = None

    @property
    def rep_range(self) -> str:
        if self.reps_min == self.reps_max:
            return str(self.reps_min)
        return f"{self.reps_min}-{self.reps_max}"

    def to_dict(self) -> dict:
        """Convert to a template_exercises row."""
        return {
            "template_id": self.template_id,
            "exercise_id": self.exercise_id,
            "sets": self.sets,
            "reps_min": self.reps_min,
            "reps_max": self.reps_max,
            "target_weight_kg": self.target_weight_kg,
            "notes": self.notes,
            "order_index": self.order_index,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TemplateExercise":
        return cls(
            id=data.get("id"),
            template_id=data.get("template_id"),
            exercise_id=data["exercise_id"],
            sets=data["sets"],
            reps_min=data["reps_min"],
            reps_max=data["reps_max"],
            target_weight_kg=data.get("target_weight_kg"),
            notes=data.get("notes"),
            order_index=data.get("order_index", 0),
            exercise_name=data.get("exercise_name") or "",
        )


@dataclass
class WorkoutTemplate:
    """A named, reusable ordered list of exercise prescriptions."""

    name: str
    user_id: int | None = None
    description: str | None = None
    is_favorite: bool = False
    exercises: list[TemplateExercise] = field(default_factory=list)
    exercise_count: int = 0  # derived from template_exercises
    created_at: datetime | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to a workout_templates row."""
        return {
            "user_id": self.user_id,
            "name": self.name,
            "description": self.description,
            "is_favorite": self.is_favorite,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutTemplate":
        return cls(
            id=data.get("id"),
            user_id=data.get("user_id"),
            name=data["name"],
            description=data.get("description"),
            is_favorite=bool(data.get("is_favorite")),
            created_at=_parse_timestamp(data.get("created_at")),
        )
