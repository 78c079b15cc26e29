"""Initialize project command."""

import click

from ..store import get_db_path, init_db, seed_exercises
from .base import async_command, echo_info, echo_success, get_data_dir


@click.command()
@async_command
async def init():
    """Initialize the liftlog data directory and database.

    Creates the SQLite schema and seeds the default exercise library.
    Safe to run again; existing data is kept.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing liftlog in {data_dir}")
    data_dir.mkdir(parents=True, exist_ok=True)

    await init_db(db_path)
    echo_success("Database initialized")

    added = await seed_exercises(db_path)
    echo_success(f"Exercise library populated ({added} new exercises)")

    click.echo()
    click.echo("liftlog is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Create an account:")
    click.echo("     liftlog auth signup")
    click.echo()
    click.echo("  2. Build a template or log a workout:")
    click.echo("     liftlog templates create")
    click.echo("     liftlog workouts log")
