"""Workout template commands."""

import click
import questionary

from ..errors import LiftlogError
from ..services import CatalogService, SessionRecorder, TemplateBuilder, TemplateService
from .base import (
    async_command,
    custom_style,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    fail,
    format_table,
    format_weight,
    get_identity_service,
    get_store,
    truncate,
)
from .interactive import edit_template, record_session


@click.group()
@click.pass_context
def templates(ctx):
    """Build, browse and run workout templates."""
    ensure_initialized(ctx)


@templates.command(name="list")
@click.pass_context
@async_command
async def list_templates(ctx):
    """List templates, favorites first."""
    try:
        found = await TemplateService(get_store()).list_templates()
    except LiftlogError as e:
        fail(ctx, e)
        return

    if not found:
        echo_info("No templates yet. Create one with 'liftlog templates create'")
        return

    headers = ["ID", "", "Name", "Exercises", "Created"]
    rows = [
        [
            str(t.id),
            "*" if t.is_favorite else "",
            truncate(t.name),
            str(t.exercise_count),
            t.created_at.strftime("%Y-%m-%d") if t.created_at else "N/A",
        ]
        for t in found
    ]
    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(found)} template(s)")


@templates.command()
@click.argument("template_id", type=int)
@click.pass_context
@async_command
async def show(ctx, template_id: int):
    """Show a template with its exercises."""
    try:
        template = await TemplateService(get_store()).get_template(template_id)
    except LiftlogError as e:
        fail(ctx, e)
        return

    click.echo()
    click.echo("=" * 60)
    star = " *" if template.is_favorite else ""
    click.echo(f"Template: {template.name}{star} (ID: {template.id})")
    click.echo("=" * 60)
    if template.description:
        click.echo(template.description)
    click.echo()

    headers = ["#", "Exercise", "Sets", "Reps", "Target", "Notes"]
    rows = [
        [
            str(item.order_index + 1),
            item.exercise_name,
            str(item.sets),
            item.rep_range,
            format_weight(item.target_weight_kg),
            truncate(item.notes, 24),
        ]
        for item in template.exercises
    ]
    click.echo(format_table(headers, rows) or "(no exercises)")


@templates.command()
@click.option("--name", "-n", help="Template name")
@click.option("--description", "-d", help="Optional description")
@click.pass_context
@async_command
async def create(ctx, name: str | None, description: str | None):
    """Interactively build a template.

    Exercises can be picked from the catalog or typed; typed names that are
    not in the catalog are created as custom exercises on save.
    """
    store = get_store()
    try:
        identity = await get_identity_service(store).require_identity()
        catalog = await CatalogService(store).list_exercises()
    except LiftlogError as e:
        fail(ctx, e)
        return

    name = name or await questionary.text("Template name:", style=custom_style).ask_async()
    if description is None:
        description = await questionary.text("Description (optional):", style=custom_style).ask_async()

    builder = TemplateBuilder(store)
    while True:
        if not await edit_template(builder, catalog):
            echo_info("Template discarded")
            return
        try:
            result = await builder.save(name or "", description, identity)
            break
        except LiftlogError as e:
            # The draft is kept; go back to the editor
            echo_error(str(e))
            if not name or not name.strip():
                name = await questionary.text("Template name:", style=custom_style).ask_async()

    for item in result.unresolved:
        echo_warning(f"Skipped '{item.name}': {item.reason}")
    echo_success(
        f"Template '{result.template.name}' saved with {len(result.exercises)} exercise(s)"
        f" (ID: {result.template.id})"
    )


@templates.command()
@click.argument("template_id", type=int)
@click.pass_context
@async_command
async def favorite(ctx, template_id: int):
    """Toggle a template's favorite flag."""
    try:
        is_favorite = await TemplateService(get_store()).toggle_favorite(template_id)
    except LiftlogError as e:
        fail(ctx, e)
        return

    echo_success(f"Template {template_id} {'added to' if is_favorite else 'removed from'} favorites")


@templates.command()
@click.argument("template_id", type=int)
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, template_id: int, force: bool):
    """Delete a template and its exercise rows."""
    service = TemplateService(get_store())
    try:
        template = await service.get_template(template_id)
        if not force:
            click.echo(f"Template: {template.name}")
            if not click.confirm("Are you sure you want to delete this template?"):
                echo_info("Cancelled")
                return
        await service.delete_template(template_id)
    except LiftlogError as e:
        fail(ctx, e)
        return

    echo_success(f"Template {template_id} deleted")


@templates.command()
@click.argument("template_id", type=int)
@click.pass_context
@async_command
async def start(ctx, template_id: int):
    """Run a template as a live workout, set by set."""
    store = get_store()
    recorder = SessionRecorder(store)
    try:
        identity = await get_identity_service(store).require_identity()
        template = await recorder.load_from_template(template_id)
        catalog = await CatalogService(store).list_exercises()
    except LiftlogError as e:
        fail(ctx, e)
        return

    click.echo()
    click.echo(click.style(f"Starting '{template.name}'", bold=True))
    await record_session(recorder, catalog, identity)

