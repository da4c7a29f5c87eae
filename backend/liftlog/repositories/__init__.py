"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from liftlog.repositories.base import BaseRepository, apply_sorting, parse_sort_tokens
from liftlog.repositories.catalog import ExerciseTemplateRepository, MuscleGroupRepository
from liftlog.repositories.user import UserRepository
from liftlog.repositories.workout import WorkoutRepository

__all__ = [
    # Base
    "BaseRepository",
    "apply_sorting",
    "parse_sort_tokens",
    # Domain
    "UserRepository",
    "MuscleGroupRepository",
    "ExerciseTemplateRepository",
    "WorkoutRepository",
]
