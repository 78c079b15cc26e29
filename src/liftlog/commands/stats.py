"""Dashboard stats command."""

import click

from ..db import ExerciseRepository
from ..errors import LiftlogError
from ..services import SessionReviewService, compute_stats
from .base import async_command, ensure_initialized, fail, get_identity_service, get_store


@click.command()
@click.option("--all-users", is_flag=True, help="Count every user's sessions")
@click.pass_context
@async_command
async def stats(ctx, all_users: bool):
    """Show workout counts for this week, this month and overall."""
    ensure_initialized(ctx)
    store = get_store()
    try:
        user_id = None
        if not all_users:
            user = await get_identity_service(store).current_user()
            user_id = user.id if user else None
        sessions = await SessionReviewService(store).list_sessions(user_id)
        exercise_count = await ExerciseRepository(store).count()
    except LiftlogError as e:
        fail(ctx, e)
        return

    result = compute_stats(sessions, exercise_count)
    click.echo()
    click.echo(f"  Workouts this week:   {result.this_week}")
    click.echo(f"  Workouts this month:  {result.this_month}")
    click.echo(f"  Workouts in total:    {result.total_sessions}")
    click.echo(f"  Exercises in catalog: {result.total_exercises}")
    click.echo()
