"""Derived numbers for drafts and stored sessions."""

import math
from dataclasses import dataclass
from typing import Iterable

from .draft import Draft
from .rows import ExerciseAuthoringRow


def round_half_up(value: float) -> int:
    """Round .5 upwards (2.5 -> 3), unlike Python's banker's rounding."""
    return math.floor(value + 0.5)


def row_volume(sets: int, reps_min: float, reps_max: float, weight: float | None) -> float:
    """sets x average reps x weight; a missing weight counts as 0."""
    avg_reps = (reps_min + reps_max) / 2
    return sets * avg_reps * (weight or 0)


def total_volume(rows: Iterable) -> float:
    """Sum of row_volume over rows with sets/reps_min/reps_max/weight_kg."""
    return sum(row_volume(r.sets, r.reps_min, r.reps_max, r.weight_kg) for r in rows)


def total_sets(rows: Iterable) -> int:
    return sum(r.sets for r in rows)


# Draft aggregates


def total_planned_sets(draft: Draft) -> int:
    return sum(row.sets for row in draft)


def total_completed_sets(draft: Draft) -> int:
    return sum(row.progress.completed_count for row in draft if row.progress is not None)


def completion_percentage(draft: Draft) -> int | None:
    """Completed over planned sets as a rounded percentage; None with no sets."""
    planned = total_planned_sets(draft)
    if planned <= 0:
        return None
    return round_half_up(total_completed_sets(draft) / planned * 100)


def draft_volume(draft: Draft) -> float:
    return sum(
        row_volume(row.sets, row.reps_min, row.reps_max, row.target_weight) for row in draft
    )


def average_rpe(draft: Draft) -> float | None:
    if draft.is_empty:
        return None
    return sum(row.rpe for row in draft) / len(draft)


@dataclass(frozen=True)
class CollapsedRow:
    """One exercise row as written to the store."""

    sets: int
    reps: int
    weight: float


def collapse_row(row: ExerciseAuthoringRow) -> CollapsedRow:
    """Reduce per-set progress to one representative sets/reps/weight.

    Weight and reps are the mean over completed sets only (reps rounded).
    With nothing completed, the first set's values stand in and the planned
    set count is kept. Rows without progress keep their prescription.
    """
    progress = row.progress
    if progress is None:
        return CollapsedRow(sets=row.sets, reps=row.reps_min, weight=row.target_weight)

    completed = sorted(progress.completed)
    if completed:
        weight = sum(progress.actual_weights[i] for i in completed) / len(completed)
        reps = round_half_up(sum(progress.actual_reps[i] for i in completed) / len(completed))
        return CollapsedRow(sets=len(completed), reps=reps, weight=weight)

    weight = progress.actual_weights[0] if progress.actual_weights else 0.0
    reps = progress.actual_reps[0] if progress.actual_reps else row.reps_min
    return CollapsedRow(sets=row.sets, reps=reps or row.reps_min, weight=weight or 0.0)


@dataclass(frozen=True)
class DraftSummary:
    """Everything a live session screen shows under the exercise list."""

    exercise_count: int
    planned_sets: int
    completed_sets: int
    completion_percentage: int | None
    volume: float
    average_rpe: float | None


def summarize(draft: Draft) -> DraftSummary:
    return DraftSummary(
        exercise_count=len(draft),
        planned_sets=total_planned_sets(draft),
        completed_sets=total_completed_sets(draft),
        completion_percentage=completion_percentage(draft),
        volume=draft_volume(draft),
        average_rpe=average_rpe(draft),
    )
