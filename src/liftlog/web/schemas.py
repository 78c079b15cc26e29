"""Request bodies accepted by the API."""

from pydantic import BaseModel, Field

from ..authoring import ByName, ByReference
from ..authoring.rows import ExerciseSelection
from ..models.exercises import Difficulty, Equipment, MuscleGroup
from ..models.sessions import Mood
from ..models.trainers import Intensity


class Credentials(BaseModel):
    email: str
    password: str


class SignUpRequest(Credentials):
    full_name: str = ""


class ExerciseIn(BaseModel):
    name: str
    muscle_group: MuscleGroup = MuscleGroup.OTHER
    equipment: Equipment = Equipment.OTHER
    difficulty: Difficulty = Difficulty.INTERMEDIATE
    description: str = ""
    video_url: str | None = None
    thumbnail_url: str | None = None
    instructions: list[str] = Field(default_factory=list)
    is_public: bool = True


class RowIn(BaseModel):
    """One exercise row: a catalog id, or a free-text name resolved on save."""

    exercise_id: int | None = None
    name: str = ""

    def selection(self) -> ExerciseSelection:
        if self.exercise_id is not None:
            return ByReference(exercise_id=self.exercise_id, name=self.name)
        return ByName(self.name)


class TemplateRowIn(RowIn):
    sets: int = 3
    reps_min: int = 8
    reps_max: int = 12
    target_weight: float = 0
    notes: str = ""


class TemplateIn(BaseModel):
    name: str
    description: str | None = None
    exercises: list[TemplateRowIn] = Field(default_factory=list)


class SessionRowIn(RowIn):
    sets: int = 3
    reps: int = 10
    weight: float = 0
    rpe: int = 7
    notes: str = ""


class SessionIn(BaseModel):
    mood: Mood = Mood.GOOD
    notes: str | None = None
    exercises: list[SessionRowIn] = Field(default_factory=list)


class SetIn(BaseModel):
    weight: float | None = None
    reps: int | None = None
    completed: bool = False


class ExecutedRowIn(BaseModel):
    """Progress on one template row, addressed by its position."""

    order_index: int
    sets: list[SetIn] = Field(default_factory=list)


class TemplateRunIn(BaseModel):
    mood: Mood = Mood.GOOD
    notes: str | None = None
    rows: list[ExecutedRowIn] = Field(default_factory=list)


class TrainerIn(BaseModel):
    name: str
    specialty: str = "hypertrophy"
    philosophy: str
    training_style: str
    intensity_preference: Intensity = Intensity.MODERATE
    volume_preference: Intensity = Intensity.MODERATE
    rest_time_preference: int = 90
    typical_rep_ranges: str = "8-12"
    favorite_exercises: list[str] = Field(default_factory=list)
    avoided_exercises: list[str] = Field(default_factory=list)


class GenerateIn(BaseModel):
    trainer_id: int
    goal: str
    target_muscle_groups: list[str] = Field(default_factory=list)
    duration_minutes: int = 60
    available_equipment: list[str] = Field(default_factory=list)
    experience_level: str = "intermediate"
    special_requests: str | None = None


class QuestionIn(BaseModel):
    trainer_id: int
    question: str
