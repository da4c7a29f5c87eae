"""Marshmallow schemas for the public API (camelCase on the wire)."""

from __future__ import annotations

from .catalog import ExerciseFilterSchema, ExerciseTemplateSchema, MuscleGroupSchema
from .workout import (
    LineItemSchema,
    LoggedExerciseSchema,
    MessageSchema,
    WorkoutCompletionSchema,
    WorkoutCreateSchema,
    WorkoutListQuerySchema,
    WorkoutReplaceSchema,
    WorkoutSchema,
    WorkoutSummarySchema,
)

__all__ = [
    "ExerciseFilterSchema",
    "ExerciseTemplateSchema",
    "MuscleGroupSchema",
    "LineItemSchema",
    "LoggedExerciseSchema",
    "MessageSchema",
    "WorkoutCompletionSchema",
    "WorkoutCreateSchema",
    "WorkoutListQuerySchema",
    "WorkoutReplaceSchema",
    "WorkoutSchema",
    "WorkoutSummarySchema",
]
