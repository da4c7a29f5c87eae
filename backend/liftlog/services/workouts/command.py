from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from liftlog.models.base import INT_MAX
from liftlog.models.catalog import ExerciseTemplate
from liftlog.models.workout import WEIGHT_MAX, WEIGHT_PLACES, decimal_places
from liftlog.repositories.catalog import ExerciseTemplateRepository
from liftlog.repositories.workout import WorkoutRepository
from liftlog.services._shared.base import BaseService
from liftlog.services._shared.errors import NotFoundError, ValidationError

from ._converters import workout_to_out
from .dto import (
    LineItemIn,
    WorkoutCompletionIn,
    WorkoutCreateIn,
    WorkoutDeleteIn,
    WorkoutOut,
    WorkoutReplaceIn,
)

logger = logging.getLogger(__name__)


# ------------------------------ Input checks ------------------------------ #


def _require_name(name: str | None) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("name", "must be a non-blank string")
    return name.strip()


def _validate_line_items(items: Iterable[LineItemIn] | None) -> list[LineItemIn]:
    """Check every line item before any row is touched."""
    if items is None:
        raise ValidationError("line_items", "must be a list")

    checked: list[LineItemIn] = []
    for idx, item in enumerate(items):
        where = f"line_items[{idx}]"
        if item.exercise_template_id is None:
            raise ValidationError(f"{where}.exercise_template_id", "is required")
        for name in ("sets", "reps"):
            value = getattr(item, name)
            if value is None or not 0 < value <= INT_MAX:
                raise ValidationError(f"{where}.{name}", f"must be between 1 and {INT_MAX}")
        if item.weight is not None:
            if not 0 <= item.weight <= WEIGHT_MAX:
                raise ValidationError(f"{where}.weight", f"must be between 0 and {WEIGHT_MAX}")
            if decimal_places(item.weight) > WEIGHT_PLACES:
                raise ValidationError(
                    f"{where}.weight", f"must have at most {WEIGHT_PLACES} decimal places"
                )
        checked.append(item)
    return checked


def _resolve_templates(
    repo: ExerciseTemplateRepository, items: Sequence[LineItemIn]
) -> list[dict[str, Any]]:
    """Pair each line item with its loaded template, failing on the first unknown id."""
    found: dict[int, ExerciseTemplate] = repo.get_many(i.exercise_template_id for i in items)
    rows: list[dict[str, Any]] = []
    for item in items:
        template = found.get(item.exercise_template_id)
        if template is None:
            raise NotFoundError("ExerciseTemplate", item.exercise_template_id)
        rows.append(
            {
                "exercise_template": template,
                "sets": item.sets,
                "reps": item.reps,
                "weight": item.weight,
            }
        )
    return rows


class WorkoutCommandService(BaseService):
    """
    Orchestrate workout mutations.

    Every command runs in its own read-write Unit of Work: the workout row and
    its line items are written together or not at all.
    """

    def create(self, dto: WorkoutCreateIn) -> WorkoutOut:
        """
        Create a workout with its line items.

        :param dto: Owner, name and (possibly empty) line items.
        :type dto: :class:`WorkoutCreateIn`
        :returns: The hydrated aggregate.
        :rtype: :class:`WorkoutOut`
        :raises ValidationError: On a blank name, missing owner or bad line item.
        :raises NotFoundError: When the owner or a template does not exist.
        """
        if dto.owner_id is None:
            raise ValidationError("owner_id", "is required")
        name = _require_name(dto.name)
        items = _validate_line_items(dto.line_items)

        with self.storage_boundary("create_workout"):
            with self.rw_uow() as uow:
                if not uow.users.exists(id=dto.owner_id):
                    raise NotFoundError("User", dto.owner_id)
                rows = _resolve_templates(uow.exercise_templates, items)

                repo: WorkoutRepository = uow.workouts
                workout = repo.create_workout(owner_id=dto.owner_id, name=name)
                repo.add_logged_exercises(workout, rows)
                logger.info(
                    "Workout created",
                    extra={
                        "workout_id": workout.id,
                        "owner_id": dto.owner_id,
                        "count": len(rows),
                    },
                )
                return workout_to_out(workout)

    def replace_exercises(self, dto: WorkoutReplaceIn) -> WorkoutOut:
        """
        Rename a workout and swap its entire line-item set.

        The row is locked first (where the dialect supports it). If anything
        fails after the old items are deleted, the rollback restores them.

        :raises ValidationError: On a blank name or bad line item.
        :raises NotFoundError: When the workout or a template does not exist.
        """
        name = _require_name(dto.name)
        items = _validate_line_items(dto.line_items)

        with self.storage_boundary("replace_workout_exercises"):
            with self.rw_uow() as uow:
                repo: WorkoutRepository = uow.workouts
                workout = repo.get_for_update(dto.workout_id)
                if workout is None:
                    raise NotFoundError("Workout", dto.workout_id)
                rows = _resolve_templates(uow.exercise_templates, items)

                repo.assign_updates(workout, {"name": name}, flush=False)
                repo.replace_logged_exercises(workout, rows)
                repo.touch(workout)
                logger.info(
                    "Workout exercises replaced",
                    extra={"workout_id": workout.id, "count": len(rows)},
                )
                return workout_to_out(workout)

    def set_completion(self, dto: WorkoutCompletionIn) -> WorkoutOut:
        """Set the completed flag; repeating the same value is a no-op."""
        with self.storage_boundary("set_workout_completion"):
            with self.rw_uow() as uow:
                repo: WorkoutRepository = uow.workouts
                workout = repo.get_for_update(dto.workout_id)
                if workout is None:
                    raise NotFoundError("Workout", dto.workout_id)

                if workout.completed != dto.completed:
                    repo.assign_updates(workout, {"completed": bool(dto.completed)})
                    logger.info(
                        "Workout completion changed",
                        extra={"workout_id": workout.id, "operation": "set_completion"},
                    )
                return workout_to_out(workout)

    def delete(self, dto: WorkoutDeleteIn) -> None:
        """Delete a workout; its line items go with it."""
        with self.storage_boundary("delete_workout"):
            with self.rw_uow() as uow:
                repo: WorkoutRepository = uow.workouts
                workout = repo.get_for_update(dto.workout_id)
                if workout is None:
                    raise NotFoundError("Workout", dto.workout_id)

                repo.delete(workout)
                logger.info("Workout deleted", extra={"workout_id": dto.workout_id})
