from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from liftlog.services.catalog.dto import ExerciseTemplateOut

# ------------------------------ Output DTOs ------------------------------ #


@dataclass(frozen=True, slots=True)
class LoggedExerciseOut:
    """One line item with its catalog template embedded."""

    id: int
    workout_id: int
    exercise_template_id: int
    sets: int
    reps: int
    weight: float | None
    exercise_template: ExerciseTemplateOut


@dataclass(frozen=True, slots=True)
class WorkoutSummaryOut:
    """Derived totals for one workout."""

    total_sets: int
    exercise_count: int
    muscle_groups: list[str]


@dataclass(frozen=True, slots=True)
class WorkoutOut:
    """Workout aggregate with line items in insertion order."""

    id: int
    owner_id: int
    name: str
    completed: bool
    created_at: datetime
    updated_at: datetime
    logged_exercises: list[LoggedExerciseOut]
    summary: WorkoutSummaryOut | None = None


# ------------------------------ Input DTOs ------------------------------- #


@dataclass(frozen=True, slots=True)
class LineItemIn:
    """A requested line item; ``weight`` of ``None`` means unweighted."""

    exercise_template_id: int
    sets: int
    reps: int
    weight: float | None = None


@dataclass(frozen=True, slots=True)
class WorkoutGetIn:
    workout_id: int


@dataclass(frozen=True, slots=True)
class WorkoutListIn:
    """List the workouts owned by a user."""

    owner_id: int | None


@dataclass(frozen=True, slots=True)
class WorkoutCreateIn:
    """Create a workout and its line items in one transaction."""

    owner_id: int | None
    name: str
    line_items: Sequence[LineItemIn] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class WorkoutReplaceIn:
    """Rename a workout and replace its whole line-item set."""

    workout_id: int
    name: str
    line_items: Sequence[LineItemIn] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class WorkoutCompletionIn:
    workout_id: int
    completed: bool


@dataclass(frozen=True, slots=True)
class WorkoutDeleteIn:
    workout_id: int
