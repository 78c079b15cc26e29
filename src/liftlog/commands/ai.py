"""AI workout generation commands."""

import json

import click
import pyperclip

from ..ai import PlanGenerator, unknown_exercises
from ..db import AIWorkoutRepository
from ..errors import LiftlogError
from ..models.exercises import Difficulty, Equipment, MuscleGroup
from ..models.trainers import GeneratedPlan, WorkoutRequest
from ..services import CatalogService, TrainerService
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    fail,
    format_table,
    get_store,
    truncate,
)


@click.group()
@click.pass_context
def ai(ctx):
    """Generate workouts with your virtual trainers."""
    ensure_initialized(ctx)


def render_plan(plan: GeneratedPlan) -> str:
    """Plain-text rendering of a generated plan."""
    lines = [plan.workout_name, "=" * len(plan.workout_name)]
    if plan.estimated_duration:
        lines.append(f"Estimated duration: {plan.estimated_duration} min")
    if plan.warm_up:
        lines.append("")
        lines.append("Warm-up:")
        lines.extend(f"  - {item}" for item in plan.warm_up)
    lines.append("")
    lines.append("Exercises:")
    for index, ex in enumerate(plan.exercises, 1):
        rest = f", rest {ex.rest_seconds}s" if ex.rest_seconds else ""
        lines.append(f"  {index}. {ex.exercise_name}: {ex.sets} x {ex.reps}{rest}")
        if ex.notes:
            lines.append(f"     {ex.notes}")
        if ex.intensity_technique:
            lines.append(f"     Technique: {ex.intensity_technique}")
    if plan.cool_down:
        lines.append("")
        lines.append("Cool-down:")
        lines.extend(f"  - {item}" for item in plan.cool_down)
    if plan.trainer_notes:
        lines.append("")
        lines.append(f"Trainer notes: {plan.trainer_notes}")
    if plan.reasoning:
        lines.append("")
        lines.append(f"Why: {plan.reasoning}")
    return "\n".join(lines)


@ai.command()
@click.argument("trainer_id", type=int)
@click.argument("goal")
@click.option(
    "--muscle",
    "-m",
    "muscles",
    multiple=True,
    type=click.Choice([m.value for m in MuscleGroup]),
    help="Target muscle group (repeatable)",
)
@click.option("--duration", "-t", default=60, type=click.IntRange(10, 240), help="Minutes")
@click.option(
    "--equipment",
    "-e",
    multiple=True,
    type=click.Choice([e.value for e in Equipment]),
    help="Available equipment (repeatable)",
)
@click.option(
    "--level",
    "-l",
    type=click.Choice([d.value for d in Difficulty]),
    default=Difficulty.INTERMEDIATE.value,
)
@click.option("--request", "-r", "special_requests", help="Anything else the trainer should know")
@click.pass_context
@async_command
async def generate(
    ctx,
    trainer_id: int,
    goal: str,
    muscles: tuple[str, ...],
    duration: int,
    equipment: tuple[str, ...],
    level: str,
    special_requests: str | None,
):
    """Ask a trainer for a workout and save it.

    Examples:

        liftlog ai generate 1 "Hypertrophy, upper body" -m chest -m back

        liftlog ai generate 2 "Full body strength" -t 45 -e barbell -e dumbbell
    """
    store = get_store()
    request = WorkoutRequest(
        goal=goal,
        target_muscle_groups=list(muscles),
        duration_minutes=duration,
        available_equipment=list(equipment),
        experience_level=level,
        special_requests=special_requests,
    )

    try:
        trainer = await TrainerService(store).get(trainer_id)
        catalog = await CatalogService(store).list_exercises()
        click.echo(f"Asking {trainer.name}... (this may take a while)")
        result = await PlanGenerator(store).generate_and_store(trainer, request, catalog)
    except LiftlogError as e:
        fail(ctx, e)
        return

    click.echo()
    click.echo(render_plan(result.plan))
    click.echo()
    missing = unknown_exercises(result.plan, catalog)
    if missing:
        echo_warning(f"Not in your catalog: {', '.join(missing)}")
    echo_success(f"Workout saved (ID: {result.stored.id})")


@ai.command(name="list")
@click.option("--trainer", "-t", "trainer_id", type=int, help="Only this trainer's workouts")
@click.pass_context
@async_command
async def list_generated(ctx, trainer_id: int | None):
    """List generated workouts."""
    try:
        found = await AIWorkoutRepository(get_store()).list_all(trainer_id)
    except LiftlogError as e:
        fail(ctx, e)
        return

    if not found:
        echo_info("No generated workouts yet. Try 'liftlog ai generate'")
        return

    headers = ["ID", "Name", "Goal", "Trainer", "Duration", "Created"]
    rows = [
        [
            str(w.id),
            truncate(w.workout_name),
            truncate(w.goal, 24),
            str(w.trainer_profile_id),
            f"{w.duration_minutes} min" if w.duration_minutes else "-",
            w.created_at.strftime("%Y-%m-%d") if w.created_at else "N/A",
        ]
        for w in found
    ]
    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()


@ai.command()
@click.argument("workout_id", type=int)
@click.option("--json", "as_json", is_flag=True, help="Print the stored JSON")
@click.option("--clipboard", "-c", is_flag=True, help="Copy to clipboard instead of printing")
@click.pass_context
@async_command
async def show(ctx, workout_id: int, as_json: bool, clipboard: bool):
    """Show a generated workout."""
    try:
        workout = await AIWorkoutRepository(get_store()).get(workout_id)
    except LiftlogError as e:
        fail(ctx, e)
        return

    if workout is None:
        echo_error(f"Generated workout {workout_id} not found")
        ctx.exit(1)

    if as_json:
        content = json.dumps(workout.workout_structure, indent=2)
    else:
        content = f"Goal: {workout.goal}\n\n" + render_plan(workout.plan)

    if clipboard:
        try:
            pyperclip.copy(content)
        except pyperclip.PyperclipException as e:
            fail(ctx, f"Could not copy to clipboard: {e}")
            return
        echo_success("Copied to clipboard!")
    else:
        click.echo(content)


@ai.command()
@click.argument("trainer_id", type=int)
@click.argument("question")
@click.pass_context
@async_command
async def ask(ctx, trainer_id: int, question: str):
    """Ask a trainer a quick training question."""
    store = get_store()
    try:
        trainer = await TrainerService(store).get(trainer_id)
        answer = await PlanGenerator(store).ask_trainer(trainer, question)
    except LiftlogError as e:
        fail(ctx, e)
        return

    click.echo()
    click.echo(click.style(f"{trainer.name}:", bold=True))
    click.echo(answer)
