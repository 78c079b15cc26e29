"""Workout generation through an external completion API (via litellm)."""

import json
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

import litellm
import structlog

from ..config import Settings, get_settings
from ..db.repositories import AIWorkoutRepository
from ..errors import GenerationError, ValidationError
from ..models.exercises import Exercise
from ..models.trainers import AIGeneratedWorkout, GeneratedPlan, TrainerProfile, WorkoutRequest
from ..store.base import RowStore
from .prompts import build_advice_prompt, build_system_prompt, build_user_prompt

logger = structlog.get_logger(__name__)

# Same call shape as litellm.acompletion
CompletionFn = Callable[..., Awaitable[Any]]

NO_ADVICE_REPLY = "I couldn't come up with an answer."


@dataclass
class GenerationResult:
    """Parsed plan plus the raw dict it came from."""

    plan: GeneratedPlan
    raw: dict
    stored: AIGeneratedWorkout | None = None


def extract_content(response: Any) -> str | None:
    """Text of the first choice, or None when the reply is empty."""
    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError, KeyError, TypeError):
        return None
    if not content or not str(content).strip():
        return None
    return str(content)


def parse_plan(content: str | None) -> dict:
    """Parse the reply as one JSON object."""
    if content is None:
        raise GenerationError("The AI returned an empty response")
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise GenerationError(f"The AI response is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise GenerationError("The AI response is not a JSON object")
    return data


def unknown_exercises(plan: GeneratedPlan, catalog: list[Exercise]) -> list[str]:
    """Plan exercise names that are not in the catalog (case-insensitive)."""
    known = {ex.name.lower() for ex in catalog}
    return [ex.exercise_name for ex in plan.exercises if ex.exercise_name.lower() not in known]


class PlanGenerator:
    """Builds trainer-styled prompts and asks the completion API for a plan.

    One attempt per call; failures are not retried.
    """

    def __init__(
        self,
        store: RowStore | None = None,
        completion: CompletionFn | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.completion = completion or litellm.acompletion
        self.workouts = AIWorkoutRepository(store) if store is not None else None

    def _call_kwargs(self) -> dict:
        kwargs: dict = {}
        if self.settings.llm_api_key:
            kwargs["api_key"] = self.settings.llm_api_key
        return kwargs

    async def generate(
        self,
        trainer: TrainerProfile,
        request: WorkoutRequest,
        catalog: list[Exercise],
    ) -> GenerationResult:
        """Ask for one plan as a JSON object and parse it."""
        if not request.goal or not request.goal.strip():
            raise ValidationError("Describe your goal")

        messages = [
            {
                "role": "system",
                "content": build_system_prompt(trainer, catalog, request.available_equipment),
            },
            {"role": "user", "content": build_user_prompt(trainer, request)},
        ]

        logger.info(
            "plan_generation_started",
            trainer=trainer.name,
            model=self.settings.llm_model,
            catalog_size=len(catalog),
        )
        try:
            response = await self.completion(
                model=self.settings.llm_model,
                messages=messages,
                temperature=self.settings.llm_temperature,
                max_tokens=self.settings.llm_max_tokens,
                response_format={"type": "json_object"},
                **self._call_kwargs(),
            )
        except Exception as e:
            # Provider errors come in many types; all of them end this attempt
            logger.error("plan_generation_failed", error=str(e))
            raise GenerationError(f"Workout generation failed: {e}") from e

        raw = parse_plan(extract_content(response))
        try:
            plan = GeneratedPlan.from_dict(raw)
        except (TypeError, ValueError, AttributeError) as e:
            logger.error("plan_shape_invalid", error=str(e))
            raise GenerationError(f"The AI response does not match the plan schema: {e}") from e

        missing = unknown_exercises(plan, catalog)
        if missing:
            logger.warning("plan_uses_unknown_exercises", names=missing)

        logger.info("plan_generated", workout_name=plan.workout_name, exercises=len(plan.exercises))
        return GenerationResult(plan=plan, raw=raw)

    async def generate_and_store(
        self,
        trainer: TrainerProfile,
        request: WorkoutRequest,
        catalog: list[Exercise],
    ) -> GenerationResult:
        """Generate a plan and persist it verbatim with its trainer and goal."""
        if self.workouts is None:
            raise ValueError("PlanGenerator needs a store to save workouts")
        if trainer.id is None:
            raise ValidationError("Trainer must be saved before generating with it")

        result = await self.generate(trainer, request, catalog)
        result.stored = await self.workouts.create(
            AIGeneratedWorkout(
                trainer_profile_id=trainer.id,
                workout_name=result.plan.workout_name,
                goal=request.goal,
                duration_minutes=result.plan.estimated_duration,
                workout_structure=result.raw,
                ai_reasoning=result.plan.reasoning or None,
            )
        )
        logger.info("plan_stored", workout_id=result.stored.id)
        return result

    async def ask_trainer(self, trainer: TrainerProfile, question: str) -> str:
        """Short free-text answer in the trainer's voice."""
        if not question or not question.strip():
            raise ValidationError("Ask a question")

        try:
            response = await self.completion(
                model=self.settings.llm_advice_model,
                messages=[
                    {"role": "system", "content": build_advice_prompt(trainer)},
                    {"role": "user", "content": question.strip()},
                ],
                temperature=0.8,
                max_tokens=300,
                **self._call_kwargs(),
            )
        except Exception as e:
            logger.error("trainer_advice_failed", error=str(e))
            raise GenerationError(f"Could not reach the trainer: {e}") from e

        return extract_content(response) or NO_ADVICE_REPLY
