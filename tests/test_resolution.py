"""Tests for resolving typed exercise names at save time."""

from liftlog.authoring import ByName, ByReference, Created, Draft, Resolved, Unresolved, add_row
from liftlog.authoring.resolution import resolve_exercise, resolve_rows
from liftlog.db.repositories import ExerciseRepository
from liftlog.models.exercises import Exercise
from liftlog.store.base import StoreError

from fakes import RecordingStore


def rows(*selections):
    draft = Draft()
    for selection in selections:
        draft = add_row(draft, selection)
    return draft.rows


async def test_catalog_pick_needs_no_backend_call():
    store = RecordingStore()
    (row,) = rows(ByReference(3, "Push Up"))

    assert await resolve_exercise(row, ExerciseRepository(store)) == Resolved(3)
    assert store.calls == []


async def test_typed_name_created(identity):
    store = RecordingStore()
    (row,) = rows(ByName("Sled Push"))

    resolution = await resolve_exercise(row, ExerciseRepository(store), identity)

    assert resolution == Created(1)
    assert store.tables["exercises"][0]["created_by"] == identity.user_id


async def test_duplicate_name_falls_back_to_lookup():
    store = RecordingStore()
    store.seed("exercises", Exercise(name="Deadlift").to_dict())
    (row,) = rows(ByName("DEADLIFT"))

    resolution = await resolve_exercise(row, ExerciseRepository(store))

    assert resolution == Resolved(1)
    assert store.calls == [("insert_many", "exercises"), ("select", "exercises")]


async def test_create_and_lookup_both_fail():
    store = RecordingStore(
        fail={
            ("insert_many", "exercises"): StoreError("permission denied"),
            ("select", "exercises"): StoreError("connection reset"),
        }
    )
    (row,) = rows(ByName("Sled Push"))

    resolution = await resolve_exercise(row, ExerciseRepository(store))

    assert resolution == Unresolved("Sled Push", "connection reset")


async def test_no_match_keeps_create_error():
    store = RecordingStore(fail={("insert_many", "exercises"): StoreError("permission denied")})
    (row,) = rows(ByName("Sled Push"))

    resolution = await resolve_exercise(row, ExerciseRepository(store))

    assert resolution == Unresolved("Sled Push", "permission denied")


async def test_resolve_rows_splits_kept_and_unresolved():
    store = RecordingStore(fail={("insert_many", "exercises"): StoreError("permission denied")})
    store.seed("exercises", Exercise(name="Squat").to_dict())
    draft_rows = rows(ByName("Squat"), ByName("Sled Push"), ByReference(9, "Row"))

    kept, unresolved = await resolve_rows(draft_rows, ExerciseRepository(store))

    assert [(row.name, exercise_id) for row, exercise_id in kept] == [("Squat", 1), ("Row", 9)]
    assert [u.name for u in unresolved] == ["Sled Push"]
