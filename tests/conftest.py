"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from liftlog.models.exercises import Difficulty, Equipment, Exercise, MuscleGroup
from liftlog.models.trainers import Intensity, TrainerProfile
from liftlog.models.users import Identity
from liftlog.store import SQLiteRowStore, init_db, seed_exercises

from fakes import RecordingStore


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
async def sqlite_store(temp_db_path):
    """An initialized SQLite store with the default exercise library."""
    await init_db(temp_db_path)
    await seed_exercises(temp_db_path)
    return SQLiteRowStore(temp_db_path)


@pytest.fixture
def recording_store():
    return RecordingStore()


@pytest.fixture
def identity():
    return Identity(user_id=1, email="lifter@example.com")


@pytest.fixture
def sample_exercises():
    return [
        Exercise(
            id=1,
            name="Bench Press",
            muscle_group=MuscleGroup.CHEST,
            equipment=Equipment.BARBELL,
            difficulty=Difficulty.INTERMEDIATE,
            description="Flat barbell press for the chest",
        ),
        Exercise(
            id=2,
            name="Squat",
            muscle_group=MuscleGroup.LEGS,
            equipment=Equipment.BARBELL,
            difficulty=Difficulty.INTERMEDIATE,
            description="Back squat",
        ),
        Exercise(
            id=3,
            name="Push Up",
            muscle_group=MuscleGroup.CHEST,
            equipment=Equipment.BODYWEIGHT,
            difficulty=Difficulty.BEGINNER,
            description="Bodyweight press",
        ),
        Exercise(
            id=4,
            name="Plank",
            muscle_group=MuscleGroup.CORE,
            equipment=Equipment.BODYWEIGHT,
            difficulty=Difficulty.BEGINNER,
            description="Isometric core hold",
        ),
    ]


@pytest.fixture
def sample_trainer():
    return TrainerProfile(
        id=7,
        name="Coach Rex",
        specialty="strength",
        philosophy="Heavy compounds, low reps, full recovery.",
        training_style="Linear progression on the big lifts.",
        intensity_preference=Intensity.HIGH,
        volume_preference=Intensity.LOW,
        rest_time_preference=180,
        typical_rep_ranges="3-5",
        favorite_exercises=["Squat", "Deadlift"],
        avoided_exercises=["Leg Extension"],
    )
