"""In-memory authoring state for templates and sessions."""

from .aggregates import (
    CollapsedRow,
    DraftSummary,
    collapse_row,
    completion_percentage,
    row_volume,
    summarize,
    total_completed_sets,
    total_planned_sets,
    total_sets,
    total_volume,
)
from .draft import (
    AddRow,
    Draft,
    RemoveRow,
    Reset,
    SetActualReps,
    SetActualWeight,
    ToggleSet,
    UpdateRow,
    add_row,
    reduce,
    remove_row,
    set_actual_reps,
    set_actual_weight,
    toggle_set,
    update_row,
)
from .resolution import Created, Resolved, Unresolved, resolve_exercise, resolve_rows
from .rows import (
    SESSION_ROW_DEFAULTS,
    TEMPLATE_ROW_DEFAULTS,
    ByName,
    ByReference,
    ExerciseAuthoringRow,
    RowDefaults,
    SetProgress,
)

__all__ = [
    "add_row",
    "AddRow",
    "ByName",
    "ByReference",
    "collapse_row",
    "CollapsedRow",
    "completion_percentage",
    "Created",
    "Draft",
    "DraftSummary",
    "ExerciseAuthoringRow",
    "reduce",
    "remove_row",
    "RemoveRow",
    "Reset",
    "resolve_exercise",
    "resolve_rows",
    "Resolved",
    "row_volume",
    "RowDefaults",
    "SESSION_ROW_DEFAULTS",
    "set_actual_reps",
    "set_actual_weight",
    "SetActualReps",
    "SetActualWeight",
    "SetProgress",
    "summarize",
    "TEMPLATE_ROW_DEFAULTS",
    "toggle_set",
    "ToggleSet",
    "total_completed_sets",
    "total_planned_sets",
    "total_sets",
    "total_volume",
    "Unresolved",
    "update_row",
    "UpdateRow",
]
