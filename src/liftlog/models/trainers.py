"""Trainer personas and AI-generated workouts."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .exercises import Difficulty, Equipment
from .templates import _parse_timestamp


class Intensity(str, Enum):
    """Intensity or volume preference of a trainer."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class Specialty(str, Enum):
    """Trainer specialties offered when creating a persona."""

    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"
    ENDURANCE = "endurance"
    CALISTHENICS = "calisthenics"
    CROSSFIT = "crossfit"
    POWERLIFTING = "powerlifting"


@dataclass
class TrainerProfile:
    """A virtual trainer persona used as prompt material."""

    name: str
    specialty: str = Specialty.HYPERTROPHY.value
    philosophy: str = ""
    training_style: str = ""
    intensity_preference: Intensity = Intensity.MODERATE
    volume_preference: Intensity = Intensity.MODERATE
    rest_time_preference: int = 90  # seconds
    typical_rep_ranges: str = "8-12"
    favorite_exercises: list[str] = field(default_factory=list)
    avoided_exercises: list[str] = field(default_factory=list)
    is_active: bool = True
    created_at: datetime | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "specialty": self.specialty,
            "philosophy": self.philosophy,
            "training_style": self.training_style,
            "intensity_preference": self.intensity_preference.value,
            "volume_preference": self.volume_preference.value,
            "rest_time_preference": self.rest_time_preference,
            "typical_rep_ranges": self.typical_rep_ranges,
            "favorite_exercises": self.favorite_exercises,
            "avoided_exercises": self.avoided_exercises,
            "is_active": self.is_active,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TrainerProfile":
        return cls(
            id=data.get("id"),
            name=data["name"],
            specialty=data.get("specialty") or Specialty.HYPERTROPHY.value,
            philosophy=data.get("philosophy") or "",
            training_style=data.get("training_style") or "",
            intensity_preference=Intensity(data.get("intensity_preference") or "moderate"),
            volume_preference=Intensity(data.get("volume_preference") or "moderate"),
            rest_time_preference=data.get("rest_time_preference") or 90,
            typical_rep_ranges=data.get("typical_rep_ranges") or "8-12",
            favorite_exercises=data.get("favorite_exercises") or [],
            avoided_exercises=data.get("avoided_exercises") or [],
            is_active=bool(data.get("is_active", True)),
            created_at=_parse_timestamp(data.get("created_at")),
        )


DEFAULT_EQUIPMENT = [
    Equipment.BARBELL.value,
    Equipment.DUMBBELL.value,
    Equipment.MACHINE.value,
    Equipment.BODYWEIGHT.value,
]


@dataclass
class WorkoutRequest:
    """What the user asks a trainer for."""

    goal: str
    target_muscle_groups: list[str] = field(default_factory=list)
    duration_minutes: int = 60
    available_equipment: list[str] = field(default_factory=list)
    experience_level: str = Difficulty.INTERMEDIATE.value
    special_requests: str | None = None

    def __post_init__(self):
        if not self.available_equipment:
            self.available_equipment = list(DEFAULT_EQUIPMENT)


@dataclass
class PlanExercise:
    """One prescription in a generated plan."""

    exercise_name: str
    sets: int
    reps: str
    rest_seconds: int | None = None
    notes: str = ""
    intensity_technique: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "PlanExercise":
        return cls(
            exercise_name=str(data.get("exercise_name", "")),
            sets=int(data.get("sets") or 0),
            reps=str(data.get("reps", "")),
            rest_seconds=data.get("rest_seconds"),
            notes=data.get("notes") or "",
            intensity_technique=data.get("intensity_technique"),
        )


@dataclass
class GeneratedPlan:
    """Structured reply of the completion API."""

    workout_name: str
    exercises: list[PlanExercise]
    warm_up: list[str] = field(default_factory=list)
    cool_down: list[str] = field(default_factory=list)
    estimated_duration: int | None = None
    trainer_notes: str = ""
    reasoning: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratedPlan":
        return cls(
            workout_name=str(data.get("workout_name") or "Generated workout"),
            exercises=[PlanExercise.from_dict(ex) for ex in data.get("exercises") or []],
            warm_up=list(data.get("warm_up") or []),
            cool_down=list(data.get("cool_down") or []),
            estimated_duration=data.get("estimated_duration"),
            trainer_notes=data.get("trainer_notes") or "",
            reasoning=data.get("reasoning") or "",
        )


@dataclass
class AIGeneratedWorkout:
    """A generated plan as stored, with its originating trainer and goal."""

    trainer_profile_id: int
    workout_name: str
    goal: str
    workout_structure: dict  # verbatim parsed reply
    duration_minutes: int | None = None
    ai_reasoning: str | None = None
    created_at: datetime | None = None
    id: int | None = None

    @property
    def plan(self) -> GeneratedPlan:
        return GeneratedPlan.from_dict(self.workout_structure)

    def to_dict(self) -> dict:
        return {
            "trainer_profile_id": self.trainer_profile_id,
            "workout_name": self.workout_name,
            "goal": self.goal,
            "duration_minutes": self.duration_minutes,
            "workout_structure": self.workout_structure,
            "ai_reasoning": self.ai_reasoning,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AIGeneratedWorkout":
        return cls(
            id=data.get("id"),
            trainer_profile_id=data["trainer_profile_id"],
            workout_name=data["workout_name"],
            goal=data["goal"],
            workout_structure=data.get("workout_structure") or {},
            duration_minutes=data.get("duration_minutes"),
            ai_reasoning=data.get("ai_reasoning"),
            created_at=_parse_timestamp(data.get("created_at")),
        )
