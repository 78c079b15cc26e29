"""Application services for liftlog."""

from .catalog import CatalogService, filter_exercises, search
from .review import SessionReview, SessionReviewService
from .sessions import SessionRecorder, SessionSaveResult
from .stats import DashboardStats, compute_stats
from .templates import TemplateBuilder, TemplateSaveResult, TemplateService
from .trainers import TrainerService

__all__ = [
    "CatalogService",
    "compute_stats",
    "DashboardStats",
    "filter_exercises",
    "search",
    "SessionRecorder",
    "SessionReview",
    "SessionReviewService",
    "SessionSaveResult",
    "TemplateBuilder",
    "TemplateSaveResult",
    "TemplateService",
    "TrainerService",
]
