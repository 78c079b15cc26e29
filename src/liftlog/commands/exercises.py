"""Exercise catalog commands."""

import click

from ..errors import LiftlogError
from ..models.exercises import Difficulty, Equipment, Exercise, MuscleGroup
from ..models.users import Identity
from ..services import CatalogService
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    fail,
    format_table,
    get_identity_service,
    get_store,
    truncate,
)

ALL_CHOICE = ["all"]


@click.group()
@click.pass_context
def exercises(ctx):
    """Browse and extend the exercise catalog."""
    ensure_initialized(ctx)


@exercises.command(name="list")
@click.option("--search", "-s", "term", help="Match name or description")
@click.option(
    "--muscle",
    "-m",
    type=click.Choice(ALL_CHOICE + [m.value for m in MuscleGroup]),
    default="all",
)
@click.option(
    "--difficulty",
    "-d",
    type=click.Choice(ALL_CHOICE + [d.value for d in Difficulty]),
    default="all",
)
@click.option(
    "--equipment",
    "-e",
    type=click.Choice(ALL_CHOICE + [e.value for e in Equipment]),
    default="all",
)
@click.pass_context
@async_command
async def list_exercises(ctx, term: str | None, muscle: str, difficulty: str, equipment: str):
    """List catalog exercises, optionally searched and filtered."""
    service = CatalogService(get_store())
    try:
        found = await service.browse(term, muscle_group=muscle, difficulty=difficulty, equipment=equipment)
    except LiftlogError as e:
        fail(ctx, e)
        return

    if not found:
        echo_info("No exercises match")
        return

    headers = ["ID", "Name", "Muscle", "Equipment", "Difficulty"]
    rows = [
        [str(ex.id), truncate(ex.name), ex.muscle_group.value, ex.equipment.value, ex.difficulty.value]
        for ex in found
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(found)} exercise(s)")


@exercises.command()
@click.argument("name")
@click.option("--muscle", "-m", type=click.Choice([m.value for m in MuscleGroup]), default="other")
@click.option("--equipment", "-e", type=click.Choice([e.value for e in Equipment]), default="other")
@click.option(
    "--difficulty",
    "-d",
    type=click.Choice([d.value for d in Difficulty]),
    default="intermediate",
)
@click.option("--description", default="", help="Short description")
@click.option("--private", is_flag=True, help="Only visible to you")
@click.pass_context
@async_command
async def create(ctx, name: str, muscle: str, equipment: str, difficulty: str, description: str, private: bool):
    """Add an exercise to the catalog."""
    store = get_store()
    user = await get_identity_service(store).current_user()

    exercise = Exercise(
        name=name,
        muscle_group=MuscleGroup(muscle),
        equipment=Equipment(equipment),
        difficulty=Difficulty(difficulty),
        description=description,
        is_public=not private,
    )
    try:
        created = await CatalogService(store).create_exercise(
            exercise, identity=Identity.of(user) if user else None
        )
    except LiftlogError as e:
        fail(ctx, e)
        return

    echo_success(f"Exercise created: {created.describe()} (ID: {created.id})")
