"""Workouts service layer: query/command services, DTOs and summaries."""

from __future__ import annotations

from .command import WorkoutCommandService
from .dto import (
    LineItemIn,
    LoggedExerciseOut,
    WorkoutCompletionIn,
    WorkoutCreateIn,
    WorkoutDeleteIn,
    WorkoutGetIn,
    WorkoutListIn,
    WorkoutOut,
    WorkoutReplaceIn,
    WorkoutSummaryOut,
)
from .query import WorkoutQueryService
from .summary import summarize_workout

__all__ = [
    "WorkoutCommandService",
    "WorkoutQueryService",
    "summarize_workout",
    # DTOs
    "LineItemIn",
    "LoggedExerciseOut",
    "WorkoutCompletionIn",
    "WorkoutCreateIn",
    "WorkoutDeleteIn",
    "WorkoutGetIn",
    "WorkoutListIn",
    "WorkoutOut",
    "WorkoutReplaceIn",
    "WorkoutSummaryOut",
]
