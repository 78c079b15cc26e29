"""Account commands."""

import click
import questionary

from ..errors import LiftlogError
from .base import (
    async_command,
    custom_style,
    echo_info,
    echo_success,
    ensure_initialized,
    fail,
    get_identity_service,
)


@click.group()
@click.pass_context
def auth(ctx):
    """Sign up, sign in and out."""
    ensure_initialized(ctx)


@auth.command()
@click.option("--email", "-e", help="Account email")
@click.option("--name", "-n", "full_name", help="Full name")
@click.pass_context
@async_command
async def signup(ctx, email: str | None, full_name: str | None):
    """Create an account and sign in."""
    email = email or await questionary.text("Email:", style=custom_style).ask_async()
    full_name = full_name or await questionary.text("Full name:", style=custom_style).ask_async()
    password = await questionary.password("Password (min 6 characters):", style=custom_style).ask_async()

    service = get_identity_service()
    try:
        session = await service.sign_up(email or "", password or "", full_name or "")
    except LiftlogError as e:
        fail(ctx, e)
        return

    echo_success(f"Welcome, {session.user.full_name or session.user.email}!")


@auth.command()
@click.option("--email", "-e", help="Account email")
@click.pass_context
@async_command
async def login(ctx, email: str | None):
    """Sign in with email and password."""
    email = email or await questionary.text("Email:", style=custom_style).ask_async()
    password = await questionary.password("Password:", style=custom_style).ask_async()

    service = get_identity_service()
    try:
        session = await service.sign_in(email or "", password or "")
    except LiftlogError as e:
        fail(ctx, e)
        return

    echo_success(f"Signed in as {session.user.email}")


@auth.command()
@async_command
async def logout():
    """Sign out and forget the stored session."""
    await get_identity_service().sign_out()
    echo_success("Signed out")


@auth.command()
@async_command
async def whoami():
    """Show the signed-in user."""
    user = await get_identity_service().current_user()
    if user is None:
        echo_info("Not signed in")
        return
    click.echo(f"{user.full_name or '-'} <{user.email}> (ID: {user.id})")
