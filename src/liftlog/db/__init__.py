"""Database layer for liftlog."""

from .repositories import (
    AIWorkoutRepository,
    ExerciseRepository,
    SessionRepository,
    TemplateRepository,
    TrainerRepository,
)

__all__ = [
    "AIWorkoutRepository",
    "ExerciseRepository",
    "SessionRepository",
    "TemplateRepository",
    "TrainerRepository",
]
