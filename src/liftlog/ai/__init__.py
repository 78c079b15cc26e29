"""AI workout generation."""

from .generator import GenerationResult, PlanGenerator, parse_plan, unknown_exercises
from .prompts import build_system_prompt, build_user_prompt

__all__ = [
    "build_system_prompt",
    "build_user_prompt",
    "GenerationResult",
    "parse_plan",
    "PlanGenerator",
    "unknown_exercises",
]
