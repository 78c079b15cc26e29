"""Draft state and its transitions.

A Draft is an immutable ordered tuple of authoring rows. Every user action is
a pure function from (draft, action) to a new draft; invalid actions raise
ValidationError and leave the caller's draft untouched.
"""

from dataclasses import dataclass, replace
from uuid import uuid4

from ..errors import ValidationError
from .rows import (
    TEMPLATE_ROW_DEFAULTS,
    ByName,
    ByReference,
    ExerciseAuthoringRow,
    ExerciseSelection,
    RowDefaults,
    SetProgress,
)

COUNT_FIELDS = frozenset({"sets", "reps_min", "reps_max"})
WEIGHT_FIELDS = frozenset({"target_weight"})
TEXT_FIELDS = frozenset({"notes"})
RPE_FIELD = "rpe"
EDITABLE_FIELDS = COUNT_FIELDS | WEIGHT_FIELDS | TEXT_FIELDS | {RPE_FIELD}


@dataclass(frozen=True)
class Draft:
    """Ordered rows of a template or session being authored."""

    rows: tuple[ExerciseAuthoringRow, ...] = ()

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def find(self, temp_id: str) -> ExerciseAuthoringRow | None:
        for row in self.rows:
            if row.temp_id == temp_id:
                return row
        return None


# Actions


@dataclass(frozen=True)
class AddRow:
    selection: ExerciseSelection | None
    defaults: RowDefaults = TEMPLATE_ROW_DEFAULTS
    temp_id: str | None = None


@dataclass(frozen=True)
class UpdateRow:
    temp_id: str
    field: str
    value: object


@dataclass(frozen=True)
class RemoveRow:
    temp_id: str


@dataclass(frozen=True)
class ToggleSet:
    temp_id: str
    set_index: int


@dataclass(frozen=True)
class SetActualWeight:
    temp_id: str
    set_index: int
    weight: object


@dataclass(frozen=True)
class SetActualReps:
    temp_id: str
    set_index: int
    reps: object


@dataclass(frozen=True)
class Reset:
    pass


Action = AddRow | UpdateRow | RemoveRow | ToggleSet | SetActualWeight | SetActualReps | Reset


# Coercion


def coerce_count(value: object) -> int:
    """Parse a set/rep count; anything invalid or below 1 becomes 1."""
    try:
        parsed = int(float(str(value).strip()))
    except (TypeError, ValueError):
        return 1
    return max(1, parsed)


def coerce_weight(value: object) -> float:
    """Parse a weight; anything invalid or negative becomes 0."""
    try:
        parsed = float(str(value).strip())
    except (TypeError, ValueError):
        return 0.0
    if parsed != parsed:  # NaN
        return 0.0
    return max(0.0, parsed)


def coerce_rpe(value: object) -> int:
    return min(10, coerce_count(value))


def new_temp_id() -> str:
    return f"temp-{uuid4().hex[:12]}"


# Transitions


def add_row(
    draft: Draft,
    selection: ExerciseSelection | None,
    defaults: RowDefaults = TEMPLATE_ROW_DEFAULTS,
    temp_id: str | None = None,
) -> Draft:
    """Append a row for a catalog pick or a typed name."""
    if selection is None:
        raise ValidationError("Select an exercise from the list or type its name")

    if isinstance(selection, ByReference):
        exercise_id = selection.exercise_id
        name = selection.name
    elif isinstance(selection, ByName):
        exercise_id = None
        name = selection.name.strip()
        if not name:
            raise ValidationError("Type the exercise name")
    else:
        raise ValidationError(f"Unsupported exercise selection: {selection!r}")

    row = ExerciseAuthoringRow(
        temp_id=temp_id or new_temp_id(),
        name=name,
        exercise_id=exercise_id,
        sets=defaults.sets,
        reps_min=defaults.reps_min,
        reps_max=defaults.reps_max,
        target_weight=defaults.target_weight,
        rpe=defaults.rpe,
    )
    return replace(draft, rows=draft.rows + (row,))


def update_row(draft: Draft, temp_id: str, field: str, value: object) -> Draft:
    """Set one field of one row, coercing numeric input."""
    if field not in EDITABLE_FIELDS:
        raise ValidationError(f"Field '{field}' cannot be edited")

    if field in COUNT_FIELDS:
        coerced = coerce_count(value)
    elif field in WEIGHT_FIELDS:
        coerced = coerce_weight(value)
    elif field == RPE_FIELD:
        coerced = coerce_rpe(value)
    else:
        coerced = "" if value is None else str(value)

    def apply(row: ExerciseAuthoringRow) -> ExerciseAuthoringRow:
        updated = replace(row, **{field: coerced})
        if field == "sets" and updated.progress is not None:
            updated = replace(
                updated,
                progress=updated.progress.resized(
                    updated.sets, updated.target_weight, updated.reps_min
                ),
            )
        return updated

    return _map_row(draft, temp_id, apply)


def remove_row(draft: Draft, temp_id: str) -> Draft:
    return replace(draft, rows=tuple(r for r in draft.rows if r.temp_id != temp_id))


def toggle_set(draft: Draft, temp_id: str, set_index: int) -> Draft:
    """Flip one set between pending and completed."""
    return _map_progress(draft, temp_id, lambda p: p.toggle(set_index))


def set_actual_weight(draft: Draft, temp_id: str, set_index: int, weight: object) -> Draft:
    value = coerce_weight(weight)
    return _map_progress(draft, temp_id, lambda p: p.with_weight(set_index, value))


def set_actual_reps(draft: Draft, temp_id: str, set_index: int, reps: object) -> Draft:
    value = coerce_count(reps)
    return _map_progress(draft, temp_id, lambda p: p.with_reps(set_index, value))


def reduce(draft: Draft, action: Action) -> Draft:
    """Apply one action to a draft."""
    if isinstance(action, AddRow):
        return add_row(draft, action.selection, action.defaults, action.temp_id)
    if isinstance(action, UpdateRow):
        return update_row(draft, action.temp_id, action.field, action.value)
    if isinstance(action, RemoveRow):
        return remove_row(draft, action.temp_id)
    if isinstance(action, ToggleSet):
        return toggle_set(draft, action.temp_id, action.set_index)
    if isinstance(action, SetActualWeight):
        return set_actual_weight(draft, action.temp_id, action.set_index, action.weight)
    if isinstance(action, SetActualReps):
        return set_actual_reps(draft, action.temp_id, action.set_index, action.reps)
    if isinstance(action, Reset):
        return Draft()
    raise ValidationError(f"Unknown action: {action!r}")


def _map_row(draft, temp_id, fn) -> Draft:
    # Unknown temp ids are a no-op
    return replace(
        draft,
        rows=tuple(fn(row) if row.temp_id == temp_id else row for row in draft.rows),
    )


def _map_progress(draft: Draft, temp_id: str, fn) -> Draft:
    row = draft.find(temp_id)
    if row is None:
        return draft
    progress = row.progress
    if progress is None:
        progress = SetProgress.planned(row.sets, row.target_weight, row.reps_min)
    return _map_row(draft, temp_id, lambda r: replace(r, progress=fn(progress)))
