"""Interactive editors shared by the templates and workouts commands."""

import click
import questionary

from ..authoring import ByName, ByReference, ExerciseAuthoringRow
from ..authoring.rows import ExerciseSelection
from ..errors import LiftlogError, ValidationError
from ..models.exercises import Exercise
from ..models.sessions import Mood
from ..models.users import Identity
from ..services import SessionRecorder, TemplateBuilder
from .base import custom_style, echo_error, echo_info, echo_success, echo_warning, format_weight


def selection_for(answer: str | None, catalog: list[Exercise]) -> ExerciseSelection | None:
    """Map a typed answer to a catalog pick, or keep it as free text.

    Returns None when nothing was entered (prompt cancelled).
    """
    if answer is None:
        return None
    wanted = answer.strip().lower()
    for exercise in catalog:
        if exercise.name.lower() == wanted:
            return ByReference(exercise_id=exercise.id, name=exercise.name)
    return ByName(answer)


async def ask_exercise(catalog: list[Exercise]) -> ExerciseSelection | None:
    answer = await questionary.autocomplete(
        "Exercise (pick from the list or type a new name):",
        choices=[ex.name for ex in catalog],
        ignore_case=True,
        match_middle=True,
        style=custom_style,
    ).ask_async()
    return selection_for(answer, catalog)


async def ask_number(message: str, default) -> str | None:
    return await questionary.text(message, default=str(default), style=custom_style).ask_async()


def describe_row(row: ExerciseAuthoringRow) -> str:
    reps = str(row.reps_min) if row.reps_min == row.reps_max else f"{row.reps_min}-{row.reps_max}"
    marker = "" if row.is_resolved else " (new)"
    return f"{row.name}{marker}: {row.sets} x {reps} @ {format_weight(row.target_weight)}"


def describe_sets(row: ExerciseAuthoringRow) -> list[str]:
    progress = row.progress
    if progress is None:
        return []
    lines = []
    for index in range(progress.set_count):
        mark = "x" if progress.is_completed(index) else " "
        lines.append(
            f"    [{mark}] Set {index + 1}: {format_weight(progress.actual_weights[index])}"
            f" x {progress.actual_reps[index]}"
        )
    return lines


async def pick_row(rows: tuple[ExerciseAuthoringRow, ...], message: str) -> ExerciseAuthoringRow | None:
    if not rows:
        echo_warning("No exercises yet")
        return None
    return await questionary.select(
        message,
        choices=[questionary.Choice(describe_row(row), row) for row in rows],
        style=custom_style,
    ).ask_async()


async def edit_template(builder: TemplateBuilder, catalog: list[Exercise]) -> bool:
    """Menu loop over a template draft. Returns True when the user wants to save."""
    while True:
        click.echo()
        for position, row in enumerate(builder.rows, 1):
            click.echo(f"  {position}. {describe_row(row)}")
        if builder.draft.is_empty:
            click.echo("  (no exercises yet)")
        click.echo()

        action = await questionary.select(
            "What next?",
            choices=["Add exercise", "Edit exercise", "Remove exercise", "Save template", "Discard"],
            style=custom_style,
        ).ask_async()

        if action in (None, "Discard"):
            return False
        if action == "Save template":
            return True

        try:
            if action == "Add exercise":
                row = builder.add(await ask_exercise(catalog))
                await _edit_prescription(builder, row)
            elif action == "Edit exercise":
                row = await pick_row(builder.rows, "Which exercise?")
                if row is not None:
                    await _edit_prescription(builder, row)
            elif action == "Remove exercise":
                row = await pick_row(builder.rows, "Remove which exercise?")
                if row is not None:
                    builder.remove(row.temp_id)
        except ValidationError as e:
            echo_error(str(e))


async def _edit_prescription(builder: TemplateBuilder, row: ExerciseAuthoringRow) -> None:
    _set(builder, row.temp_id, "sets", await ask_number("Sets:", row.sets))
    _set(builder, row.temp_id, "reps_min", await ask_number("Reps (min):", row.reps_min))
    _set(builder, row.temp_id, "reps_max", await ask_number("Reps (max):", row.reps_max))
    _set(builder, row.temp_id, "target_weight", await ask_number("Target weight (kg, 0 for none):", row.target_weight))
    notes = await questionary.text("Notes (optional):", default=row.notes, style=custom_style).ask_async()
    _set(builder, row.temp_id, "notes", notes)


async def run_session(recorder: SessionRecorder, catalog: list[Exercise]) -> bool:
    """Menu loop over a live session. Returns True when the user finishes it."""
    while True:
        click.echo()
        for position, row in enumerate(recorder.rows, 1):
            click.echo(f"  {position}. {describe_row(row)}  RPE {row.rpe}")
            for line in describe_sets(row):
                click.echo(line)
        summary = recorder.summary
        if summary.completion_percentage is not None:
            click.echo(
                f"\n  Sets done: {summary.completed_sets}/{summary.planned_sets}"
                f" ({summary.completion_percentage}%)  Planned volume: {summary.volume:g} kg"
            )
        click.echo()

        action = await questionary.select(
            "What next?",
            choices=[
                "Complete / undo a set",
                "Adjust a set",
                "Add exercise",
                "Edit exercise",
                "Remove exercise",
                "Finish workout",
                "Discard",
            ],
            style=custom_style,
        ).ask_async()

        if action in (None, "Discard"):
            return False
        if action == "Finish workout":
            return True

        try:
            if action == "Complete / undo a set":
                row = await pick_row(recorder.rows, "Which exercise?")
                if row is not None:
                    index = await _pick_set(row)
                    if index is not None:
                        recorder.toggle_set(row.temp_id, index)
            elif action == "Adjust a set":
                row = await pick_row(recorder.rows, "Which exercise?")
                if row is not None:
                    index = await _pick_set(row)
                    if index is not None:
                        weights = row.progress.actual_weights if row.progress else ()
                        reps = row.progress.actual_reps if row.progress else ()
                        weight = await ask_number(
                            "Weight (kg):", weights[index] if index < len(weights) else row.target_weight
                        )
                        if weight is not None:
                            recorder.set_actual_weight(row.temp_id, index, weight)
                        done = await ask_number("Reps:", reps[index] if index < len(reps) else row.reps_min)
                        if done is not None:
                            recorder.set_actual_reps(row.temp_id, index, done)
            elif action == "Add exercise":
                row = recorder.add(await ask_exercise(catalog))
                await _edit_free_row(recorder, row)
            elif action == "Edit exercise":
                row = await pick_row(recorder.rows, "Which exercise?")
                if row is not None:
                    await _edit_free_row(recorder, row)
            elif action == "Remove exercise":
                row = await pick_row(recorder.rows, "Remove which exercise?")
                if row is not None:
                    recorder.remove(row.temp_id)
        except ValidationError as e:
            echo_error(str(e))


async def _pick_set(row: ExerciseAuthoringRow) -> int | None:
    return await questionary.select(
        "Which set?",
        choices=[questionary.Choice(f"Set {i + 1}", i) for i in range(row.sets)],
        style=custom_style,
    ).ask_async()


async def _edit_free_row(recorder: SessionRecorder, row: ExerciseAuthoringRow) -> None:
    _set(recorder, row.temp_id, "sets", await ask_number("Sets:", row.sets))
    _set(recorder, row.temp_id, "reps", await ask_number("Reps:", row.reps_min))
    _set(recorder, row.temp_id, "target_weight", await ask_number("Weight (kg):", row.target_weight))
    _set(recorder, row.temp_id, "rpe", await ask_number("RPE (1-10):", row.rpe))


def _set(editor: TemplateBuilder | SessionRecorder, temp_id: str, field_name: str, value) -> None:
    # A cancelled prompt answers None; keep the current value then
    if value is not None:
        editor.update(temp_id, field_name, value)


async def record_session(recorder: SessionRecorder, catalog: list[Exercise], identity: Identity) -> None:
    """Run the live session loop, then ask for mood and notes and save."""
    while True:
        if not await run_session(recorder, catalog):
            echo_info("Workout discarded")
            return

        mood = await questionary.select(
            "How did it feel?",
            choices=[questionary.Choice(f"{m.emoji} {m.value}", m.value) for m in Mood],
            default=Mood.GOOD.value,
            style=custom_style,
        ).ask_async()
        notes = await questionary.text("Notes (optional):", style=custom_style).ask_async()

        try:
            result = await recorder.save(mood=mood or Mood.GOOD, notes=notes, identity=identity)
            break
        except LiftlogError as e:
            # The draft is kept; back to the session
            echo_error(str(e))

    for item in result.unresolved:
        echo_warning(f"Skipped '{item.name}': {item.reason}")
    session = result.session
    echo_success(
        f"Workout saved (ID: {session.id}): {len(result.exercises)} exercise(s),"
        f" {session.duration_minutes} min"
    )
