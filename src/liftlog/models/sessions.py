"""Workout session models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .templates import _parse_timestamp


class Mood(str, Enum):
    """How the user felt during a session."""

    EXCELLENT = "excellent"
    GOOD = "good"
    NORMAL = "normal"
    TIRED = "tired"
    BAD = "bad"

    @property
    def emoji(self) -> str:
        return _MOOD_EMOJI[self]


_MOOD_EMOJI = {
    Mood.EXCELLENT: "😁",
    Mood.GOOD: "😊",
    Mood.NORMAL: "😐",
    Mood.TIRED: "😴",
    Mood.BAD: "😓",
}


class SessionStatus(str, Enum):
    """Lifecycle status of a stored session."""

    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").capitalize()


@dataclass
class SessionExercise:
    """One exercise row of a logged session."""

    exercise_id: int
    sets: int
    reps_min: int
    reps_max: int
    weight_kg: float | None = None
    notes: str | None = None
    order_index: int = 0
    workout_id: int | None = None
    # Joined from exercises
    exercise_name: str = ""
    muscle_group: str | None = None
    equipment: str | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to a workout_exercises row."""
        return {
            "workout_id": self.workout_id,
            "exercise_id": self.exercise_id,
            "sets": self.sets,
            "reps_min": self.reps_min,
            "reps_max": self.reps_max,
            "weight_kg": self.weight_kg,
            "notes": self.notes,
            "order_index": self.order_index,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SessionExercise":
        return cls(
            id=data.get("id"),
            workout_id=data.get("workout_id"),
            exercise_id=data["exercise_id"],
            sets=data["sets"],
            reps_min=data["reps_min"],
            reps_max=data["reps_max"],
            weight_kg=data.get("weight_kg"),
            notes=data.get("notes"),
            order_index=data.get("order_index", 0),
            exercise_name=data.get("exercise_name") or "",
            muscle_group=data.get("muscle_group"),
            equipment=data.get("equipment"),
        )


@dataclass
class WorkoutSession:
    """A logged workout occurrence."""

    user_id: int | None = None
    mood: Mood = Mood.GOOD
    notes: str | None = None
    status: SessionStatus = SessionStatus.COMPLETED
    started_at: datetime | None = None
    finished_at: datetime | None = None
    duration_minutes: int | None = None
    exercises: list[SessionExercise] = field(default_factory=list)
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to a workout_sessions row."""
        data = {
            "user_id": self.user_id,
            "mood": self.mood.value,
            "notes": self.notes,
            "status": self.status.value,
            "finished_at": self.finished_at.isoformat() if self.finished_at else None,
            "duration_minutes": self.duration_minutes,
        }
        if self.started_at:
            data["started_at"] = self.started_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutSession":
        return cls(
            id=data.get("id"),
            user_id=data.get("user_id"),
            mood=Mood(data.get("mood") or "good"),
            notes=data.get("notes"),
            status=SessionStatus(data.get("status") or "completed"),
            started_at=_parse_timestamp(data.get("started_at")),
            finished_at=_parse_timestamp(data.get("finished_at")),
            duration_minutes=data.get("duration_minutes"),
        )
