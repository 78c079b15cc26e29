"""Trainer persona commands."""

import click
import questionary

from ..errors import LiftlogError
from ..models.trainers import Intensity, Specialty, TrainerProfile
from ..services import TrainerService
from .base import (
    async_command,
    custom_style,
    echo_info,
    echo_success,
    ensure_initialized,
    fail,
    format_table,
    get_store,
    truncate,
)


def _split_names(text: str | None) -> list[str]:
    return [part.strip() for part in (text or "").split(",") if part.strip()]


@click.group()
@click.pass_context
def trainers(ctx):
    """Manage virtual trainer personas used for AI workouts."""
    ensure_initialized(ctx)


@trainers.command(name="list")
@click.option("--active", is_flag=True, help="Only active trainers")
@click.pass_context
@async_command
async def list_trainers(ctx, active: bool):
    """List trainer personas."""
    try:
        found = await TrainerService(get_store()).list_trainers(active_only=active)
    except LiftlogError as e:
        fail(ctx, e)
        return

    if not found:
        echo_info("No trainers yet. Create one with 'liftlog trainers create'")
        return

    headers = ["ID", "Name", "Specialty", "Intensity", "Volume", "Rest", "Reps"]
    rows = [
        [
            str(t.id),
            truncate(t.name, 24),
            t.specialty,
            t.intensity_preference.value,
            t.volume_preference.value,
            f"{t.rest_time_preference}s",
            t.typical_rep_ranges,
        ]
        for t in found
    ]
    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()


@trainers.command()
@click.pass_context
@async_command
async def create(ctx):
    """Interactively create a trainer persona."""
    name = await questionary.text("Trainer name:", style=custom_style).ask_async()
    specialty = await questionary.select(
        "Specialty:",
        choices=[questionary.Choice(s.value.capitalize(), s.value) for s in Specialty],
        style=custom_style,
    ).ask_async()
    philosophy = await questionary.text("Training philosophy:", style=custom_style).ask_async()
    training_style = await questionary.text("Training style:", style=custom_style).ask_async()
    intensity = await questionary.select(
        "Intensity preference:",
        choices=[i.value for i in Intensity],
        default=Intensity.MODERATE.value,
        style=custom_style,
    ).ask_async()
    volume = await questionary.select(
        "Volume preference:",
        choices=[i.value for i in Intensity],
        default=Intensity.MODERATE.value,
        style=custom_style,
    ).ask_async()
    rest = await questionary.text("Rest between sets (seconds):", default="90", style=custom_style).ask_async()
    rep_ranges = await questionary.text("Typical rep ranges:", default="8-12", style=custom_style).ask_async()
    favorites = await questionary.text(
        "Favorite exercises (comma separated, optional):", style=custom_style
    ).ask_async()
    avoided = await questionary.text(
        "Exercises to avoid (comma separated, optional):", style=custom_style
    ).ask_async()

    try:
        rest_seconds = int(rest or 90)
    except ValueError:
        fail(ctx, "Rest time must be a whole number of seconds")
        return

    trainer = TrainerProfile(
        name=name or "",
        specialty=specialty or Specialty.HYPERTROPHY.value,
        philosophy=philosophy or "",
        training_style=training_style or "",
        intensity_preference=Intensity(intensity or "moderate"),
        volume_preference=Intensity(volume or "moderate"),
        rest_time_preference=rest_seconds,
        typical_rep_ranges=rep_ranges or "8-12",
        favorite_exercises=_split_names(favorites),
        avoided_exercises=_split_names(avoided),
    )
    try:
        created = await TrainerService(get_store()).create(trainer)
    except LiftlogError as e:
        fail(ctx, e)
        return

    echo_success(f"Trainer '{created.name}' created (ID: {created.id})")


@trainers.command()
@click.argument("trainer_id", type=int)
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, trainer_id: int, force: bool):
    """Delete a trainer persona."""
    service = TrainerService(get_store())
    try:
        trainer = await service.get(trainer_id)
        if not force:
            click.echo(f"Trainer: {trainer.name}")
            if not click.confirm("Are you sure you want to delete this trainer?"):
                echo_info("Cancelled")
                return
        await service.delete(trainer_id)
    except LiftlogError as e:
        fail(ctx, e)
        return

    echo_success(f"Trainer {trainer_id} deleted")
