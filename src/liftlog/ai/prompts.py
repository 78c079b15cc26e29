"""Prompt templates for trainer-styled workout generation."""

from ..models.exercises import Exercise
from ..models.trainers import TrainerProfile, WorkoutRequest

PLAN_SCHEMA = """{
  "workout_name": "Descriptive workout name",
  "warm_up": ["Warm-up item 1", "Warm-up item 2"],
  "exercises": [
    {
      "exercise_name": "Exercise name (must be in the list)",
      "sets": 4,
      "reps": "8-12",
      "rest_seconds": 90,
      "notes": "Technique or execution notes",
      "intensity_technique": "drop set on the last set (optional)"
    }
  ],
  "cool_down": ["Stretch 1", "Stretch 2"],
  "estimated_duration": 60,
  "trainer_notes": "Your professional advice for this workout",
  "reasoning": "Why you chose this structure and these exercises"
}"""


SYSTEM_PROMPT = """You are {name}, a personal trainer specialized in {specialty}.

YOUR PHILOSOPHY:
{philosophy}

YOUR TRAINING STYLE:
{training_style}

PREFERENCES:
- Intensity: {intensity}
- Volume: {volume}
- Typical rest: {rest} seconds
- Typical rep ranges: {rep_ranges}
{preference_lines}
AVAILABLE EXERCISES:
{exercise_list}

INSTRUCTIONS:
1. Build a workout that follows YOUR unique style and philosophy
2. Use ONLY exercises from the available list
3. Adapt the workout to the user's request
4. Be specific about sets, reps and rest
5. Include your reasoning for choosing these exercises

Reply ONLY with one JSON object with this structure:
{schema}"""


USER_PROMPT = """Create a workout with these specifications:

GOAL: {goal}
MUSCLE GROUPS: {muscle_groups}
DESIRED DURATION: {duration} minutes
AVAILABLE EQUIPMENT: {equipment}
EXPERIENCE LEVEL: {level}
{special_requests}
Create the best workout in YOUR unique style as {name}."""


ADVICE_SYSTEM_PROMPT = """You are {name}, a personal trainer specialized in {specialty}.

Your philosophy: {philosophy}
Your style: {training_style}

Answer training questions from YOUR own perspective and experience.
Be concise but useful. 150 words maximum."""


def format_exercise_list(catalog: list[Exercise], equipment: list[str] | None = None) -> str:
    """One line per exercise, optionally keeping only the requested equipment.

    Falls back to the full catalog if the equipment filter leaves nothing.
    """
    exercises = catalog
    if equipment:
        wanted = {e.lower() for e in equipment}
        filtered = [ex for ex in catalog if ex.equipment.value in wanted]
        exercises = filtered or catalog
    return "\n".join(f"- {ex.describe()}" for ex in exercises)


def build_system_prompt(
    trainer: TrainerProfile,
    catalog: list[Exercise],
    equipment: list[str] | None = None,
) -> str:
    preference_lines = ""
    if trainer.favorite_exercises:
        preference_lines += f"- Favorite exercises: {', '.join(trainer.favorite_exercises)}\n"
    if trainer.avoided_exercises:
        preference_lines += f"- You avoid: {', '.join(trainer.avoided_exercises)}\n"

    return SYSTEM_PROMPT.format(
        name=trainer.name,
        specialty=trainer.specialty,
        philosophy=trainer.philosophy,
        training_style=trainer.training_style,
        intensity=trainer.intensity_preference.value,
        volume=trainer.volume_preference.value,
        rest=trainer.rest_time_preference,
        rep_ranges=trainer.typical_rep_ranges,
        preference_lines=preference_lines,
        exercise_list=format_exercise_list(catalog, equipment),
        schema=PLAN_SCHEMA,
    )


def build_user_prompt(trainer: TrainerProfile, request: WorkoutRequest) -> str:
    special = ""
    if request.special_requests and request.special_requests.strip():
        special = f"SPECIAL REQUESTS: {request.special_requests.strip()}\n"

    return USER_PROMPT.format(
        goal=request.goal,
        muscle_groups=", ".join(request.target_muscle_groups) or "any",
        duration=request.duration_minutes,
        equipment=", ".join(request.available_equipment),
        level=request.experience_level,
        special_requests=special,
        name=trainer.name,
    )


def build_advice_prompt(trainer: TrainerProfile) -> str:
    return ADVICE_SYSTEM_PROMPT.format(
        name=trainer.name,
        specialty=trainer.specialty,
        philosophy=trainer.philosophy,
        training_style=trainer.training_style,
    )
