"""Tests for data models."""

from datetime import datetime, timedelta

from liftlog.models.exercises import COMMON_EXERCISES, Difficulty, Equipment, Exercise, MuscleGroup
from liftlog.models.sessions import Mood, SessionExercise, SessionStatus, WorkoutSession
from liftlog.models.templates import TemplateExercise, WorkoutTemplate
from liftlog.models.trainers import (
    AIGeneratedWorkout,
    GeneratedPlan,
    Intensity,
    TrainerProfile,
    WorkoutRequest,
)
from liftlog.models.users import AuthSession, Identity, User


class TestExercise:
    """Tests for Exercise model."""

    def test_exercise_to_dict(self):
        """Test exercise serialization."""
        exercise = Exercise(
            name="Bench Press",
            muscle_group=MuscleGroup.CHEST,
            equipment=Equipment.BARBELL,
            difficulty=Difficulty.INTERMEDIATE,
            instructions=["Unrack", "Lower to chest", "Press"],
        )
        data = exercise.to_dict()

        assert data["name"] == "Bench Press"
        assert data["muscle_group"] == "chest"
        assert data["equipment"] == "barbell"
        assert data["difficulty"] == "intermediate"
        assert data["instructions"] == ["Unrack", "Lower to chest", "Press"]
        assert "id" not in data

    def test_exercise_from_dict(self):
        """Test exercise deserialization with missing optional columns."""
        exercise = Exercise.from_dict({"id": 4, "name": "Squat", "muscle_group": "legs"})

        assert exercise.id == 4
        assert exercise.muscle_group == MuscleGroup.LEGS
        assert exercise.equipment == Equipment.OTHER
        assert exercise.difficulty == Difficulty.INTERMEDIATE
        assert exercise.instructions == []

    def test_describe(self):
        exercise = Exercise(
            name="Push Up",
            muscle_group=MuscleGroup.CHEST,
            equipment=Equipment.BODYWEIGHT,
            difficulty=Difficulty.BEGINNER,
        )
        assert exercise.describe() == "Push Up (chest, bodyweight, beginner)"

    def test_common_exercises_populated(self):
        """Test that the default library has the key lifts and unique names."""
        names = [e.name for e in COMMON_EXERCISES]
        assert "Bench Press" in names
        assert "Squat" in names
        assert "Deadlift" in names
        assert len(names) == len(set(names))


class TestTemplateModels:
    def test_rep_range(self):
        assert TemplateExercise(exercise_id=1, reps_min=8, reps_max=12).rep_range == "8-12"
        assert TemplateExercise(exercise_id=1, reps_min=5, reps_max=5).rep_range == "5"

    def test_template_from_row(self):
        template = WorkoutTemplate.from_dict(
            {
                "id": 3,
                "name": "Push Day",
                "user_id": 1,
                "is_favorite": True,
                "created_at": "2026-10-01 08:30:00",
            }
        )
        assert template.id == 3
        assert template.is_favorite is True
        assert template.created_at == datetime(2026, 10, 1, 8, 30)


class TestSessionModels:
    def test_mood_default_and_emoji(self):
        session = WorkoutSession()
        assert session.mood == Mood.GOOD
        assert len(Mood) == 5
        assert all(m.emoji for m in Mood)

    def test_status_label(self):
        assert SessionStatus.COMPLETED.label
        assert SessionStatus("in_progress") == SessionStatus.IN_PROGRESS

    def test_session_to_dict_omits_missing_start(self):
        data = WorkoutSession(mood=Mood.TIRED).to_dict()
        assert "started_at" not in data
        assert data["mood"] == "tired"
        assert data["status"] == "completed"

    def test_session_to_dict_with_times(self):
        start = datetime(2026, 10, 19, 7, 0)
        session = WorkoutSession(started_at=start, finished_at=start + timedelta(minutes=45))
        data = session.to_dict()
        assert data["started_at"] == "2026-10-19T07:00:00"
        assert data["finished_at"] == "2026-10-19T07:45:00"

    def test_session_exercise_row_excludes_joined_fields(self):
        row = SessionExercise(
            exercise_id=2,
            sets=3,
            reps_min=8,
            reps_max=8,
            weight_kg=60,
            exercise_name="Squat",
            muscle_group="legs",
        ).to_dict()
        assert "exercise_name" not in row
        assert "muscle_group" not in row
        assert row["weight_kg"] == 60


class TestTrainerModels:
    def test_trainer_round_trip_defaults(self):
        trainer = TrainerProfile.from_dict({"id": 1, "name": "Ana"})
        assert trainer.rest_time_preference == 90
        assert trainer.typical_rep_ranges == "8-12"
        assert trainer.intensity_preference == Intensity.MODERATE
        assert trainer.is_active is True

    def test_workout_request_default_equipment(self):
        request = WorkoutRequest(goal="Hypertrophy")
        assert request.duration_minutes == 60
        assert request.experience_level == "intermediate"
        assert request.available_equipment == ["barbell", "dumbbell", "machine", "bodyweight"]

    def test_workout_request_keeps_given_equipment(self):
        request = WorkoutRequest(goal="Strength", available_equipment=["kettlebell"])
        assert request.available_equipment == ["kettlebell"]

    def test_generated_plan_from_partial_dict(self):
        plan = GeneratedPlan.from_dict(
            {"workout_name": "Legs", "exercises": [{"exercise_name": "Squat", "sets": "4", "reps": 6}]}
        )
        assert plan.workout_name == "Legs"
        assert plan.exercises[0].sets == 4
        assert plan.exercises[0].reps == "6"
        assert plan.warm_up == []
        assert plan.estimated_duration is None

    def test_ai_workout_plan_property(self):
        workout = AIGeneratedWorkout(
            trainer_profile_id=1,
            workout_name="Upper",
            goal="Strength",
            workout_structure={"workout_name": "Upper", "exercises": []},
        )
        assert workout.plan.workout_name == "Upper"
        assert workout.to_dict()["workout_structure"] == {"workout_name": "Upper", "exercises": []}


class TestUserModels:
    def test_auth_session_expiry(self):
        user = User(id=1, email="a@b.co")
        session = AuthSession(user=user, access_token="t", expires_at=datetime(2026, 1, 1))
        assert session.is_expired(now=datetime(2026, 1, 2))
        assert not session.is_expired(now=datetime(2025, 12, 31))

    def test_auth_session_from_dict(self):
        session = AuthSession.from_dict(
            {
                "user": {"id": 2, "email": "x@y.z", "full_name": "X"},
                "access_token": "abc",
                "expires_at": "2026-10-20T10:00:00",
            }
        )
        assert session.user.full_name == "X"
        assert session.expires_at == datetime(2026, 10, 20, 10, 0)

    def test_identity_of_user(self):
        assert Identity.of(User(id=5, email="e@f.g")) == Identity(user_id=5, email="e@f.g")
