"""Tests for draft rows and their transitions."""

import pytest

from liftlog.authoring import (
    SESSION_ROW_DEFAULTS,
    AddRow,
    ByName,
    ByReference,
    Draft,
    RemoveRow,
    Reset,
    SetActualReps,
    SetActualWeight,
    SetProgress,
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
from liftlog.authoring.draft import coerce_count, coerce_rpe, coerce_weight
from liftlog.errors import ValidationError


def draft_with(*selections) -> Draft:
    draft = Draft()
    for index, selection in enumerate(selections):
        draft = add_row(draft, selection, temp_id=f"r{index}")
    return draft


class TestAddRow:
    def test_catalog_pick_uses_template_defaults(self):
        draft = add_row(Draft(), ByReference(exercise_id=5, name="Squat"), temp_id="a")
        row = draft.rows[0]

        assert row.exercise_id == 5
        assert row.name == "Squat"
        assert (row.sets, row.reps_min, row.reps_max) == (3, 8, 12)
        assert row.target_weight == 0
        assert row.notes == ""
        assert row.is_resolved

    def test_typed_name_is_unresolved_and_trimmed(self):
        draft = add_row(Draft(), ByName("  Zercher Squat "))
        row = draft.rows[0]

        assert row.exercise_id is None
        assert row.name == "Zercher Squat"
        assert not row.is_resolved
        assert row.temp_id.startswith("temp-")

    def test_session_defaults(self):
        draft = add_row(Draft(), ByName("Dips"), SESSION_ROW_DEFAULTS)
        row = draft.rows[0]
        assert (row.sets, row.reps_min, row.reps_max, row.rpe) == (3, 10, 10, 7)

    def test_no_selection_rejected(self):
        with pytest.raises(ValidationError, match="Select an exercise"):
            add_row(Draft(), None)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Type the exercise name"):
            add_row(Draft(), ByName("   "))

    def test_rows_keep_insertion_order(self):
        draft = draft_with(ByName("A"), ByName("B"), ByName("C"))
        assert [r.name for r in draft] == ["A", "B", "C"]

    def test_original_draft_untouched(self):
        empty = Draft()
        add_row(empty, ByName("A"))
        assert empty.is_empty


class TestCoercion:
    @pytest.mark.parametrize(
        "value,expected",
        [("5", 5), (4, 4), ("0", 1), ("-3", 1), ("abc", 1), ("", 1), (None, 1), ("7.9", 7)],
    )
    def test_count(self, value, expected):
        assert coerce_count(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [("62.5", 62.5), ("-10", 0.0), ("heavy", 0.0), ("nan", 0.0), (None, 0.0), (40, 40.0)],
    )
    def test_weight(self, value, expected):
        assert coerce_weight(value) == expected

    def test_rpe_capped(self):
        assert coerce_rpe("12") == 10
        assert coerce_rpe("0") == 1


class TestUpdateRow:
    def test_updates_single_field(self):
        draft = update_row(draft_with(ByName("A")), "r0", "sets", "5")
        assert draft.rows[0].sets == 5
        assert draft.rows[0].reps_min == 8

    def test_invalid_numbers_coerced(self):
        draft = draft_with(ByName("A"))
        draft = update_row(draft, "r0", "reps_max", "lots")
        draft = update_row(draft, "r0", "target_weight", "-20")
        assert draft.rows[0].reps_max == 1
        assert draft.rows[0].target_weight == 0

    def test_notes(self):
        draft = update_row(draft_with(ByName("A")), "r0", "notes", "slow eccentric")
        assert draft.rows[0].notes == "slow eccentric"

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            update_row(draft_with(ByName("A")), "r0", "exercise_id", 3)

    def test_unknown_temp_id_is_noop(self):
        draft = draft_with(ByName("A"))
        assert update_row(draft, "missing", "sets", 9) == draft

    def test_changing_sets_resizes_progress(self):
        draft = draft_with(ByName("A"))
        draft = toggle_set(draft, "r0", 2)
        draft = update_row(draft, "r0", "sets", 2)

        progress = draft.rows[0].progress
        assert progress.set_count == 2
        assert progress.completed == frozenset()

        draft = update_row(draft, "r0", "sets", 4)
        assert draft.rows[0].progress.set_count == 4


class TestRemoveRow:
    def test_removes_only_that_row(self):
        draft = remove_row(draft_with(ByName("A"), ByName("B")), "r0")
        assert [r.name for r in draft] == ["B"]

    def test_unknown_temp_id(self):
        draft = draft_with(ByName("A"))
        assert remove_row(draft, "nope") == draft


class TestSetProgress:
    def test_planned(self):
        progress = SetProgress.planned(3, 50.0, 8)
        assert progress.actual_weights == (50.0, 50.0, 50.0)
        assert progress.actual_reps == (8, 8, 8)
        assert progress.completed_count == 0

    def test_toggle_twice_is_identity(self):
        progress = SetProgress.planned(3, 50.0, 8)
        assert progress.toggle(1).toggle(1) == progress

    def test_toggle_marks_completed(self):
        progress = SetProgress.planned(3, 50.0, 8).toggle(0)
        assert progress.is_completed(0)
        assert not progress.is_completed(1)

    def test_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            SetProgress.planned(3, 50.0, 8).toggle(3)
        with pytest.raises(ValidationError):
            SetProgress.planned(3, 50.0, 8).with_weight(-1, 10)


class TestProgressReducers:
    def test_toggle_creates_planned_progress(self):
        draft = toggle_set(draft_with(ByName("A")), "r0", 1)
        progress = draft.rows[0].progress
        assert progress.set_count == 3
        assert progress.completed == frozenset({1})

    def test_actual_weight_and_reps(self):
        draft = draft_with(ByName("A"))
        draft = set_actual_weight(draft, "r0", 0, "52.5")
        draft = set_actual_reps(draft, "r0", 0, "0")
        progress = draft.rows[0].progress
        assert progress.actual_weights[0] == 52.5
        assert progress.actual_reps[0] == 1

    def test_unknown_temp_id_is_noop(self):
        draft = draft_with(ByName("A"))
        assert toggle_set(draft, "zzz", 0) == draft


class TestReduce:
    def test_actions(self):
        draft = Draft()
        draft = reduce(draft, AddRow(ByReference(1, "Bench Press"), temp_id="x"))
        draft = reduce(draft, UpdateRow("x", "target_weight", 60))
        draft = reduce(draft, ToggleSet("x", 0))
        draft = reduce(draft, SetActualWeight("x", 0, 62.5))
        draft = reduce(draft, SetActualReps("x", 0, 9))

        row = draft.find("x")
        assert row.target_weight == 60
        assert row.progress.actual_weights[0] == 62.5
        assert row.progress.actual_reps[0] == 9
        assert row.progress.is_completed(0)

        assert reduce(draft, RemoveRow("x")).is_empty
        assert reduce(draft, Reset()) == Draft()

    def test_unknown_action(self):
        with pytest.raises(ValidationError):
            reduce(Draft(), object())
