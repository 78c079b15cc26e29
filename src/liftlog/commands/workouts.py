"""Workout session commands."""

import click

from ..errors import LiftlogError
from ..services import CatalogService, SessionRecorder, SessionReviewService
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    fail,
    format_table,
    format_weight,
    get_identity_service,
    get_store,
    truncate,
)
from .interactive import record_session


@click.group()
@click.pass_context
def workouts(ctx):
    """Log, review and delete workout sessions."""
    ensure_initialized(ctx)


@workouts.command(name="list")
@click.option("--mine", is_flag=True, help="Only sessions of the signed-in user")
@click.pass_context
@async_command
async def list_workouts(ctx, mine: bool):
    """List logged sessions, newest first."""
    store = get_store()
    try:
        user_id = None
        if mine:
            user_id = (await get_identity_service(store).require_identity()).user_id
        sessions = await SessionReviewService(store).list_sessions(user_id)
    except LiftlogError as e:
        fail(ctx, e)
        return

    if not sessions:
        echo_info("No workouts logged yet. Start one with 'liftlog workouts log'")
        return

    headers = ["ID", "Date", "Mood", "Duration", "Status", "Notes"]
    rows = [
        [
            str(s.id),
            s.started_at.strftime("%Y-%m-%d %H:%M") if s.started_at else "N/A",
            f"{s.mood.emoji} {s.mood.value}",
            f"{s.duration_minutes} min" if s.duration_minutes is not None else "-",
            s.status.label,
            truncate(s.notes, 24),
        ]
        for s in sessions
    ]
    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(sessions)} workout(s)")


@workouts.command()
@click.argument("session_id", type=int)
@click.pass_context
@async_command
async def show(ctx, session_id: int):
    """Show a session with per-exercise volume."""
    try:
        review = await SessionReviewService(get_store()).load(session_id)
    except LiftlogError as e:
        fail(ctx, e)
        return

    session = review.session
    click.echo()
    click.echo("=" * 60)
    started = session.started_at.strftime("%Y-%m-%d %H:%M") if session.started_at else "N/A"
    click.echo(f"Workout {session.id}: {started}")
    click.echo("=" * 60)
    click.echo(f"Mood: {session.mood.emoji} {session.mood.value}")
    if session.duration_minutes is not None:
        click.echo(f"Duration: {session.duration_minutes} min")
    if session.notes:
        click.echo(f"Notes: {session.notes}")
    click.echo()

    headers = ["#", "Exercise", "Muscle", "Sets", "Reps", "Weight", "Volume"]
    rows = []
    for item, volume in zip(review.exercises, review.volumes()):
        reps = str(item.reps_min) if item.reps_min == item.reps_max else f"{item.reps_min}-{item.reps_max}"
        rows.append([
            str(item.order_index + 1),
            item.exercise_name,
            item.muscle_group or "-",
            str(item.sets),
            reps,
            format_weight(item.weight_kg),
            f"{volume:g}",
        ])
    click.echo(format_table(headers, rows) or "(no exercises)")
    click.echo()
    click.echo(f"Total sets: {review.total_sets}    Total volume: {review.total_volume:g} kg")


@workouts.command()
@click.pass_context
@async_command
async def log(ctx):
    """Log a free-form workout interactively."""
    store = get_store()
    try:
        identity = await get_identity_service(store).require_identity()
        catalog = await CatalogService(store).list_exercises()
    except LiftlogError as e:
        fail(ctx, e)
        return

    await record_session(SessionRecorder(store), catalog, identity)


@workouts.command()
@click.argument("session_id", type=int)
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, session_id: int, force: bool):
    """Delete a session and its exercise rows."""
    service = SessionReviewService(get_store())
    try:
        review = await service.load(session_id)
        if not force:
            started = review.session.started_at.strftime("%Y-%m-%d") if review.session.started_at else "N/A"
            click.echo(f"Workout {session_id} from {started} ({len(review.exercises)} exercises)")
            if not click.confirm("Are you sure you want to delete this workout?"):
                echo_info("Cancelled")
                return
        await service.delete(session_id)
    except LiftlogError as e:
        fail(ctx, e)
        return

    echo_success(f"Workout {session_id} deleted")
