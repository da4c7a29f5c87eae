"""Service layer public API.

Callers import services and DTOs from here without knowing the layout:

- :class:`BaseService`, :class:`ServiceContext` and :func:`translate_exceptions`
- :class:`CatalogQueryService` and the catalog DTOs
- :class:`WorkoutQueryService`, :class:`WorkoutCommandService`, the workout
  DTOs and :func:`summarize_workout`
"""

from __future__ import annotations

from liftlog.services._shared.base import BaseService, ServiceContext, translate_exceptions
from liftlog.services._shared.errors import (
    NotFoundError,
    ServiceError,
    StorageError,
    ValidationError,
)
from liftlog.services.catalog import (
    CatalogQueryService,
    ExerciseTemplateListIn,
    ExerciseTemplateOut,
    MuscleGroupOut,
)
from liftlog.services.workouts import (
    LineItemIn,
    LoggedExerciseOut,
    WorkoutCommandService,
    WorkoutCompletionIn,
    WorkoutCreateIn,
    WorkoutDeleteIn,
    WorkoutGetIn,
    WorkoutListIn,
    WorkoutOut,
    WorkoutQueryService,
    WorkoutReplaceIn,
    WorkoutSummaryOut,
    summarize_workout,
)

__all__ = [
    "BaseService",
    "ServiceContext",
    "translate_exceptions",
    "ServiceError",
    "ValidationError",
    "NotFoundError",
    "StorageError",
    "CatalogQueryService",
    "ExerciseTemplateListIn",
    "ExerciseTemplateOut",
    "MuscleGroupOut",
    "WorkoutQueryService",
    "WorkoutCommandService",
    "summarize_workout",
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
