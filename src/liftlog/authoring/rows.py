"""Transient shapes held while a template or session is being built."""

from dataclasses import dataclass, field, replace

from ..errors import ValidationError


@dataclass(frozen=True)
class ByReference:
    """An exercise picked from the catalog."""

    exercise_id: int
    name: str


@dataclass(frozen=True)
class ByName:
    """An exercise typed as free text; resolved against the catalog on save."""

    name: str


ExerciseSelection = ByReference | ByName


@dataclass(frozen=True)
class RowDefaults:
    """Prescription a freshly added row starts with."""

    sets: int = 3
    reps_min: int = 8
    reps_max: int = 12
    target_weight: float = 0.0
    rpe: int = 7


TEMPLATE_ROW_DEFAULTS = RowDefaults()
SESSION_ROW_DEFAULTS = RowDefaults(reps_min=10, reps_max=10)


@dataclass(frozen=True)
class SetProgress:
    """Per-set completion and actual load for a row being executed.

    A set index is either pending (absent from `completed`) or completed.
    """

    actual_weights: tuple[float, ...]
    actual_reps: tuple[int, ...]
    completed: frozenset[int] = field(default_factory=frozenset)

    @classmethod
    def planned(cls, sets: int, weight: float, reps: int) -> "SetProgress":
        """Every set pending, pre-filled with the planned load."""
        return cls(
            actual_weights=(weight,) * sets,
            actual_reps=(reps,) * sets,
        )

    @property
    def set_count(self) -> int:
        return len(self.actual_weights)

    @property
    def completed_count(self) -> int:
        return len(self.completed)

    def is_completed(self, set_index: int) -> bool:
        return set_index in self.completed

    def toggle(self, set_index: int) -> "SetProgress":
        self._check_index(set_index)
        if set_index in self.completed:
            return replace(self, completed=self.completed - {set_index})
        return replace(self, completed=self.completed | {set_index})

    def with_weight(self, set_index: int, weight: float) -> "SetProgress":
        self._check_index(set_index)
        weights = list(self.actual_weights)
        weights[set_index] = weight
        return replace(self, actual_weights=tuple(weights))

    def with_reps(self, set_index: int, reps: int) -> "SetProgress":
        self._check_index(set_index)
        reps_list = list(self.actual_reps)
        reps_list[set_index] = reps
        return replace(self, actual_reps=tuple(reps_list))

    def resized(self, sets: int, weight: float, reps: int) -> "SetProgress":
        """Grow or shrink to `sets`, padding new sets with the planned load."""
        current = self.set_count
        if sets <= current:
            return SetProgress(
                actual_weights=self.actual_weights[:sets],
                actual_reps=self.actual_reps[:sets],
                completed=frozenset(i for i in self.completed if i < sets),
            )
        extra = sets - current
        return SetProgress(
            actual_weights=self.actual_weights + (weight,) * extra,
            actual_reps=self.actual_reps + (reps,) * extra,
            completed=self.completed,
        )

    def _check_index(self, set_index: int) -> None:
        if not 0 <= set_index < self.set_count:
            raise ValidationError(
                f"Set {set_index + 1} does not exist (exercise has {self.set_count} sets)"
            )


@dataclass(frozen=True)
class ExerciseAuthoringRow:
    """A draft prescription inside a template or session being built."""

    temp_id: str
    name: str
    exercise_id: int | None = None  # None until resolved on save
    sets: int = 3
    reps_min: int = 8
    reps_max: int = 12
    target_weight: float = 0.0
    notes: str = ""
    rpe: int = 7
    progress: SetProgress | None = None  # only while executing a template

    @property
    def is_resolved(self) -> bool:
        return self.exercise_id is not None

    @property
    def selection(self) -> ExerciseSelection:
        if self.exercise_id is not None:
            return ByReference(self.exercise_id, self.name)
        return ByName(self.name)
