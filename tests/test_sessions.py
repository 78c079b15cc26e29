"""Tests for session logging and review."""

from datetime import datetime, timedelta

import pytest

from liftlog.authoring import ByName, ByReference
from liftlog.errors import BackendError, NotFoundError, ValidationError
from liftlog.models.exercises import Exercise, MuscleGroup
from liftlog.models.sessions import Mood, SessionStatus
from liftlog.services import SessionRecorder, SessionReviewService
from liftlog.services.sessions import rows_from_template
from liftlog.store.base import StoreError

from fakes import RecordingStore


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 10, 19, 10, 0))


@pytest.fixture
def store():
    store = RecordingStore()
    store.seed(
        "exercises",
        Exercise(name="Bench Press", muscle_group=MuscleGroup.CHEST).to_dict(),
    )
    store.seed("exercises", Exercise(name="Squat", muscle_group=MuscleGroup.LEGS).to_dict())
    store.seed("workout_templates", {"name": "Push Day", "is_favorite": False})
    store.seed(
        "template_exercises",
        {
            "template_id": 1,
            "exercise_id": 1,
            "sets": 3,
            "reps_min": 8,
            "reps_max": 12,
            "target_weight_kg": 50.0,
            "order_index": 0,
        },
    )
    store.seed(
        "template_exercises",
        {
            "template_id": 1,
            "exercise_id": 2,
            "sets": 2,
            "reps_min": 5,
            "reps_max": 5,
            "target_weight_kg": None,
            "order_index": 1,
        },
    )
    store.calls.clear()
    return store


class TestLoadFromTemplate:
    async def test_rows_prefilled_and_pending(self, store, clock):
        recorder = SessionRecorder(store, clock=clock)
        template = await recorder.load_from_template(1)

        assert template.name == "Push Day"
        bench, squat = recorder.rows
        assert bench.name == "Bench Press"
        assert bench.progress.actual_weights == (50.0, 50.0, 50.0)
        assert bench.progress.actual_reps == (8, 8, 8)
        assert bench.progress.completed == frozenset()
        assert squat.progress.actual_weights == (0.0, 0.0)
        assert bench.temp_id != squat.temp_id

    async def test_missing_template(self, store, clock):
        with pytest.raises(NotFoundError):
            await SessionRecorder(store, clock=clock).load_from_template(42)

    async def test_rows_from_template_preserves_order(self, store, clock):
        recorder = SessionRecorder(store, clock=clock)
        template = await recorder.load_from_template(1)
        assert [r.exercise_id for r in rows_from_template(template)] == [1, 2]


class TestSessionSave:
    async def test_empty_draft_makes_no_calls(self, store, clock, identity):
        with pytest.raises(ValidationError):
            await SessionRecorder(store, clock=clock).save(identity=identity)
        assert store.calls == []

    async def test_unknown_mood_rejected(self, store, clock, identity):
        recorder = SessionRecorder(store, clock=clock)
        recorder.add(ByReference(1, "Bench Press"))
        with pytest.raises(ValidationError):
            await recorder.save(mood="ecstatic", identity=identity)
        assert store.writes() == []

    async def test_collapses_completed_sets(self, store, clock, identity):
        recorder = SessionRecorder(store, clock=clock)
        await recorder.load_from_template(1)
        bench = recorder.rows[0].temp_id
        recorder.set_actual_weight(bench, 1, 52)
        recorder.set_actual_weight(bench, 2, 54)
        recorder.toggle_set(bench, 1)
        recorder.toggle_set(bench, 2)
        clock.advance(minutes=42, seconds=30)

        result = await recorder.save(mood=Mood.EXCELLENT, notes=" felt strong ", identity=identity)

        assert store.writes() == [
            ("insert_many", "workout_sessions"),
            ("insert_many", "workout_exercises"),
        ]
        session = result.session
        assert session.status == SessionStatus.COMPLETED
        assert session.mood == Mood.EXCELLENT
        assert session.notes == "felt strong"
        assert session.user_id == identity.user_id
        assert session.duration_minutes == 43

        bench_row, squat_row = result.exercises
        assert (bench_row.sets, bench_row.reps_min, bench_row.reps_max) == (2, 8, 8)
        assert bench_row.weight_kg == 53
        assert (squat_row.sets, squat_row.reps_min) == (2, 5)
        assert squat_row.weight_kg is None
        assert [r.order_index for r in result.exercises] == [0, 1]
        assert recorder.draft.is_empty

    async def test_free_form_rows(self, store, clock, identity):
        recorder = SessionRecorder(store, clock=clock)
        row = recorder.add(ByName("Farmer Carry"))
        recorder.update(row.temp_id, "sets", 4)
        recorder.update(row.temp_id, "reps", 12)
        recorder.update(row.temp_id, "target_weight", 30)

        result = await recorder.save(identity=identity)

        saved = result.exercises[0]
        assert (saved.sets, saved.reps_min, saved.reps_max, saved.weight_kg) == (4, 12, 12, 30)
        assert store.tables["exercises"][-1]["name"] == "Farmer Carry"
        assert result.session.mood == Mood.GOOD

    async def test_header_failure_keeps_draft(self, store, clock, identity):
        store.fail[("insert_many", "workout_sessions")] = StoreError("offline")
        recorder = SessionRecorder(store, clock=clock)
        recorder.add(ByReference(1, "Bench Press"))

        with pytest.raises(BackendError, match="offline"):
            await recorder.save(identity=identity)
        assert len(recorder.rows) == 1
        assert ("insert_many", "workout_exercises") not in store.calls

    async def test_row_failure_leaves_header(self, store, clock, identity):
        store.fail[("insert_many", "workout_exercises")] = StoreError("bulk insert failed")
        recorder = SessionRecorder(store, clock=clock)
        recorder.add(ByReference(1, "Bench Press"))

        with pytest.raises(BackendError):
            await recorder.save(identity=identity)
        assert len(store.tables["workout_sessions"]) == 1
        assert len(recorder.rows) == 1


class TestSessionReview:
    async def _logged(self, store, clock, identity):
        recorder = SessionRecorder(store, clock=clock)
        row = recorder.add(ByReference(1, "Bench Press"))
        recorder.update(row.temp_id, "sets", 3)
        recorder.update(row.temp_id, "reps", 9)
        recorder.update(row.temp_id, "target_weight", 20)
        recorder.add(ByReference(2, "Squat"))
        return (await recorder.save(identity=identity)).session

    async def test_load_joins_catalog_and_totals(self, store, clock, identity):
        session = await self._logged(store, clock, identity)

        review = await SessionReviewService(store).load(session.id)

        assert [e.exercise_name for e in review.exercises] == ["Bench Press", "Squat"]
        assert review.exercises[0].muscle_group == "chest"
        assert review.volumes() == [540, 0]
        assert review.total_volume == 540
        assert review.total_sets == 6

    async def test_missing_session(self, store):
        with pytest.raises(NotFoundError, match="Workout 5 not found"):
            await SessionReviewService(store).load(5)

    async def test_list_newest_first(self, store, clock, identity):
        first = await self._logged(store, clock, identity)
        clock.advance(days=1)
        second = await self._logged(store, clock, identity)

        sessions = await SessionReviewService(store).list_sessions()

        assert [s.id for s in sessions] == [second.id, first.id]

    async def test_delete_children_first(self, store, clock, identity):
        session = await self._logged(store, clock, identity)
        store.calls.clear()

        await SessionReviewService(store).delete(session.id)

        assert store.writes() == [
            ("delete", "workout_exercises"),
            ("delete", "workout_sessions"),
        ]
        assert store.tables["workout_sessions"] == []
        assert store.tables["workout_exercises"] == []

    async def test_child_failure_stops_before_header(self, store, clock, identity):
        session = await self._logged(store, clock, identity)
        store.fail[("delete", "workout_exercises")] = StoreError("permission denied")

        with pytest.raises(BackendError):
            await SessionReviewService(store).delete(session.id)
        assert ("delete", "workout_sessions") not in store.calls
        assert len(store.tables["workout_sessions"]) == 1

    async def test_delete_missing_session(self, store):
        with pytest.raises(NotFoundError, match="Workout 9999 not found"):
            await SessionReviewService(store).delete(9999)
        assert store.writes() == []
