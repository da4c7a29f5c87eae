from __future__ import annotations

import logging

from liftlog.repositories.workout import WorkoutRepository
from liftlog.services._shared.base import BaseService
from liftlog.services._shared.errors import NotFoundError, ValidationError

from ._converters import workout_to_out
from .dto import WorkoutGetIn, WorkoutListIn, WorkoutOut

logger = logging.getLogger(__name__)


class WorkoutQueryService(BaseService):
    """Read-only workout service returning hydrated aggregates."""

    def list_for_user(self, dto: WorkoutListIn) -> list[WorkoutOut]:
        """
        List a user's workouts, newest first.

        :param dto: Owner filter; ``owner_id`` is mandatory.
        :type dto: :class:`WorkoutListIn`
        :returns: Hydrated aggregates. An unknown owner yields ``[]``.
        :rtype: list[:class:`WorkoutOut`]
        :raises ValidationError: When ``owner_id`` is missing.
        """
        if dto.owner_id is None:
            raise ValidationError("owner_id", "is required")

        with self.storage_boundary("list_workouts"):
            with self.ro_uow() as uow:
                repo: WorkoutRepository = uow.workouts
                rows = repo.list_for_owner(dto.owner_id)
                logger.info(
                    "Listed workouts for owner",
                    extra={"owner_id": dto.owner_id, "count": len(rows)},
                )
                return [workout_to_out(row) for row in rows]

    def get(self, dto: WorkoutGetIn) -> WorkoutOut:
        """Fetch one workout or raise :class:`NotFoundError`."""
        with self.storage_boundary("get_workout"):
            with self.ro_uow() as uow:
                repo: WorkoutRepository = uow.workouts
                workout = repo.get(dto.workout_id)
                if workout is None:
                    raise NotFoundError("Workout", dto.workout_id)
                return workout_to_out(workout)
