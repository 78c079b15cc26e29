"""Exercise catalog definitions."""

from dataclasses import dataclass, field
from enum import Enum


class MuscleGroup(str, Enum):
    """Muscle group categories used by the catalog."""

    CHEST = "chest"
    BACK = "back"
    LEGS = "legs"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    CORE = "core"
    OTHER = "other"


class Equipment(str, Enum):
    """Equipment an exercise needs."""

    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    MACHINE = "machine"
    CABLE = "cable"
    BODYWEIGHT = "bodyweight"
    BANDS = "bands"
    KETTLEBELL = "kettlebell"
    OTHER = "other"


class Difficulty(str, Enum):
    """Exercise difficulty."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass
class Exercise:
    """A catalog exercise."""

    name: str
    muscle_group: MuscleGroup = MuscleGroup.OTHER
    equipment: Equipment = Equipment.OTHER
    difficulty: Difficulty = Difficulty.INTERMEDIATE
    description: str = ""
    video_url: str | None = None
    thumbnail_url: str | None = None
    instructions: list[str] = field(default_factory=list)
    is_public: bool = True
    created_by: int | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "description": self.description,
            "muscle_group": self.muscle_group.value,
            "equipment": self.equipment.value,
            "difficulty": self.difficulty.value,
            "video_url": self.video_url,
            "thumbnail_url": self.thumbnail_url,
            "instructions": self.instructions,
            "is_public": self.is_public,
            "created_by": self.created_by,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from a stored row."""
        return cls(
            id=data.get("id"),
            name=data["name"],
            description=data.get("description") or "",
            muscle_group=MuscleGroup(data.get("muscle_group") or "other"),
            equipment=Equipment(data.get("equipment") or "other"),
            difficulty=Difficulty(data.get("difficulty") or "intermediate"),
            video_url=data.get("video_url"),
            thumbnail_url=data.get("thumbnail_url"),
            instructions=data.get("instructions") or [],
            is_public=bool(data.get("is_public", True)),
            created_by=data.get("created_by"),
        )

    def describe(self) -> str:
        """One-line listing used in prompts and pickers."""
        return (
            f"{self.name} ({self.muscle_group.value}, "
            f"{self.equipment.value}, {self.difficulty.value})"
        )


# Library seeded by `liftlog init`
COMMON_EXERCISES: list[Exercise] = [
    Exercise(
        name="Bench Press",
        muscle_group=MuscleGroup.CHEST,
        equipment=Equipment.BARBELL,
        difficulty=Difficulty.INTERMEDIATE,
        description="Flat barbell press to the mid chest",
    ),
    Exercise(
        name="Incline Dumbbell Press",
        muscle_group=MuscleGroup.CHEST,
        equipment=Equipment.DUMBBELL,
        difficulty=Difficulty.INTERMEDIATE,
        description="Dumbbell press on a 30-45 degree bench",
    ),
    Exercise(
        name="Push Up",
        muscle_group=MuscleGroup.CHEST,
        equipment=Equipment.BODYWEIGHT,
        difficulty=Difficulty.BEGINNER,
        description="Bodyweight horizontal press",
    ),
    Exercise(
        name="Cable Fly",
        muscle_group=MuscleGroup.CHEST,
        equipment=Equipment.CABLE,
        difficulty=Difficulty.BEGINNER,
        description="Standing cable chest fly",
    ),
    Exercise(
        name="Deadlift",
        muscle_group=MuscleGroup.BACK,
        equipment=Equipment.BARBELL,
        difficulty=Difficulty.ADVANCED,
        description="Conventional barbell deadlift from the floor",
    ),
    Exercise(
        name="Barbell Row",
        muscle_group=MuscleGroup.BACK,
        equipment=Equipment.BARBELL,
        difficulty=Difficulty.INTERMEDIATE,
        description="Bent-over barbell row",
    ),
    Exercise(
        name="Pull Up",
        muscle_group=MuscleGroup.BACK,
        equipment=Equipment.BODYWEIGHT,
        difficulty=Difficulty.INTERMEDIATE,
        description="Overhand grip pull up to the bar",
    ),
    Exercise(
        name="Lat Pulldown",
        muscle_group=MuscleGroup.BACK,
        equipment=Equipment.MACHINE,
        difficulty=Difficulty.BEGINNER,
        description="Wide grip cable pulldown",
    ),
    Exercise(
        name="Squat",
        muscle_group=MuscleGroup.LEGS,
        equipment=Equipment.BARBELL,
        difficulty=Difficulty.INTERMEDIATE,
        description="High bar back squat",
    ),
    Exercise(
        name="Leg Press",
        muscle_group=MuscleGroup.LEGS,
        equipment=Equipment.MACHINE,
        difficulty=Difficulty.BEGINNER,
        description="45 degree sled leg press",
    ),
    Exercise(
        name="Romanian Deadlift",
        muscle_group=MuscleGroup.LEGS,
        equipment=Equipment.BARBELL,
        difficulty=Difficulty.INTERMEDIATE,
        description="Hip hinge with soft knees for the hamstrings",
    ),
    Exercise(
        name="Goblet Squat",
        muscle_group=MuscleGroup.LEGS,
        equipment=Equipment.KETTLEBELL,
        difficulty=Difficulty.BEGINNER,
        description="Front-loaded squat holding one kettlebell",
    ),
    Exercise(
        name="Overhead Press",
        muscle_group=MuscleGroup.SHOULDERS,
        equipment=Equipment.BARBELL,
        difficulty=Difficulty.INTERMEDIATE,
        description="Standing strict barbell press",
    ),
    Exercise(
        name="Lateral Raise",
        muscle_group=MuscleGroup.SHOULDERS,
        equipment=Equipment.DUMBBELL,
        difficulty=Difficulty.BEGINNER,
        description="Dumbbell raise to shoulder height",
    ),
    Exercise(
        name="Face Pull",
        muscle_group=MuscleGroup.SHOULDERS,
        equipment=Equipment.CABLE,
        difficulty=Difficulty.BEGINNER,
        description="Rope pull to the face with external rotation",
    ),
    Exercise(
        name="Barbell Curl",
        muscle_group=MuscleGroup.ARMS,
        equipment=Equipment.BARBELL,
        difficulty=Difficulty.BEGINNER,
        description="Standing barbell biceps curl",
    ),
    Exercise(
        name="Triceps Pushdown",
        muscle_group=MuscleGroup.ARMS,
        equipment=Equipment.CABLE,
        difficulty=Difficulty.BEGINNER,
        description="Cable pushdown with a straight bar or rope",
    ),
    Exercise(
        name="Band Pull Apart",
        muscle_group=MuscleGroup.SHOULDERS,
        equipment=Equipment.BANDS,
        difficulty=Difficulty.BEGINNER,
        description="Horizontal band pull apart for the rear delts",
    ),
    Exercise(
        name="Plank",
        muscle_group=MuscleGroup.CORE,
        equipment=Equipment.BODYWEIGHT,
        difficulty=Difficulty.BEGINNER,
        description="Front plank hold",
    ),
    Exercise(
        name="Hanging Leg Raise",
        muscle_group=MuscleGroup.CORE,
        equipment=Equipment.BODYWEIGHT,
        difficulty=Difficulty.ADVANCED,
        description="Leg raise hanging from a bar",
    ),
]
