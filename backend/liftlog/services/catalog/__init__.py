"""Exercise catalog read service and DTOs."""

from __future__ import annotations

from .dto import ExerciseTemplateListIn, ExerciseTemplateOut, MuscleGroupOut
from .query import CatalogQueryService

__all__ = [
    "CatalogQueryService",
    # DTOs
    "ExerciseTemplateListIn",
    "ExerciseTemplateOut",
    "MuscleGroupOut",
]
