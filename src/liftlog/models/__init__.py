"""Data models for liftlog."""

from .exercises import Difficulty, Equipment, Exercise, MuscleGroup
from .sessions import Mood, SessionExercise, SessionStatus, WorkoutSession
from .templates import TemplateExercise, WorkoutTemplate
from .trainers import (
    AIGeneratedWorkout,
    GeneratedPlan,
    Intensity,
    PlanExercise,
    TrainerProfile,
    WorkoutRequest,
)
from .users import AuthSession, Identity, User

__all__ = [
    "AIGeneratedWorkout",
    "AuthSession",
    "Difficulty",
    "Equipment",
    "Exercise",
    "GeneratedPlan",
    "Identity",
    "Intensity",
    "Mood",
    "MuscleGroup",
    "PlanExercise",
    "SessionExercise",
    "SessionStatus",
    "TemplateExercise",
    "TrainerProfile",
    "User",
    "WorkoutRequest",
    "WorkoutSession",
    "WorkoutTemplate",
]
