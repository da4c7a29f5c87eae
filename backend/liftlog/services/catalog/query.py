from __future__ import annotations

import logging

from liftlog.repositories.catalog import ExerciseTemplateRepository, MuscleGroupRepository
from liftlog.services._shared.base import BaseService

from ._converters import exercise_template_to_out, muscle_group_to_out
from .dto import ExerciseTemplateListIn, ExerciseTemplateOut, MuscleGroupOut

logger = logging.getLogger(__name__)


class CatalogQueryService(BaseService):
    """
    Read-only access to the exercise catalog.

    The catalog is global and seeded once, so no ownership checks apply.
    """

    def list_exercise_templates(
        self, dto: ExerciseTemplateListIn | None = None
    ) -> list[ExerciseTemplateOut]:
        """
        List exercise templates sorted by name.

        :param dto: Optional filter. A blank ``muscle_group`` lists everything;
            an unknown one yields an empty list.
        :type dto: :class:`ExerciseTemplateListIn` | None
        :returns: Template projections with sorted muscle groups.
        :rtype: list[:class:`ExerciseTemplateOut`]
        """
        muscle_group = (dto.muscle_group if dto else None) or None
        if muscle_group is not None and not muscle_group.strip():
            muscle_group = None

        with self.storage_boundary("list_exercise_templates"):
            with self.ro_uow() as uow:
                repo: ExerciseTemplateRepository = uow.exercise_templates
                rows = repo.list_by_muscle_group(muscle_group)
                logger.info(
                    "Listed exercise templates",
                    extra={"muscle_group": muscle_group, "count": len(rows)},
                )
                return [exercise_template_to_out(row) for row in rows]

    def list_muscle_groups(self) -> list[MuscleGroupOut]:
        """List every muscle group alphabetically."""
        with self.storage_boundary("list_muscle_groups"):
            with self.ro_uow() as uow:
                repo: MuscleGroupRepository = uow.muscle_groups
                return [muscle_group_to_out(row) for row in repo.list_sorted()]
