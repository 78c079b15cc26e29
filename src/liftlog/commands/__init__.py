"""CLI commands for liftlog."""

from .ai import ai
from .auth import auth
from .exercises import exercises
from .init import init
from .serve import serve
from .stats import stats
from .templates import templates
from .trainers import trainers
from .workouts import workouts

__all__ = [
    "ai",
    "auth",
    "exercises",
    "init",
    "serve",
    "stats",
    "templates",
    "trainers",
    "workouts",
]
