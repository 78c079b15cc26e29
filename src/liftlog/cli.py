"""CLI entry point for liftlog."""

import click

from .commands import ai, auth, exercises, init, serve, stats, templates, trainers, workouts
from .logging_config import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="liftlog")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logs on stderr")
def main(verbose: bool):
    """liftlog: workout templates, session logging and AI-generated plans.

    Example usage:

        # Initialize the project
        liftlog init

        # Create an account
        liftlog auth signup

        # Build a template and run it
        liftlog templates create
        liftlog templates start 1

        # Review your history
        liftlog workouts list
        liftlog workouts show 3
    """
    configure_logging(level="DEBUG" if verbose else None)


main.add_command(init)
main.add_command(auth)
main.add_command(exercises)
main.add_command(templates)
main.add_command(workouts)
main.add_command(trainers)
main.add_command(ai)
main.add_command(stats)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
