"""Repositories for the read-mostly exercise catalog."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, cast

from sqlalchemy import Select, select
from sqlalchemy.orm import InstrumentedAttribute, selectinload

from liftlog.models.base import in_int_range
from liftlog.models.catalog import ExerciseTemplate, MuscleGroup, canonical_muscle_group
from liftlog.repositories.base import BaseRepository, apply_sorting


class MuscleGroupRepository(BaseRepository[MuscleGroup]):
    """Persistence-only repository for :class:`MuscleGroup`."""

    model = MuscleGroup

    def _sortable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        return {"id": self.model.id, "name": self.model.name}

    def _filterable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        return {"id": self.model.id, "name": self.model.name}

    def get_by_name(self, name: str) -> MuscleGroup | None:
        """Look a group up by name, case-insensitively."""
        stmt = select(self.model).where(self.model.name == canonical_muscle_group(name))
        return cast(MuscleGroup | None, self.session.execute(stmt).scalars().first())

    def list_sorted(self) -> list[MuscleGroup]:
        """Return all groups alphabetically."""
        return self.list(sort=["name"])


class ExerciseTemplateRepository(BaseRepository[ExerciseTemplate]):
    """
    Persistence-only repository for :class:`ExerciseTemplate`.

    Templates always come back with their muscle groups eagerly loaded since
    every read path serializes them.
    """

    model = ExerciseTemplate

    def _sortable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        return {"id": self.model.id, "name": self.model.name}

    def _filterable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        return {"id": self.model.id, "name": self.model.name}

    def _default_eagerload(self, stmt: Select[Any]) -> Select[Any]:
        return stmt.options(selectinload(self.model.muscle_groups))

    def get_by_name(self, name: str) -> ExerciseTemplate | None:
        stmt = self._default_eagerload(select(self.model).where(self.model.name == name.strip()))
        return cast(ExerciseTemplate | None, self.session.execute(stmt).scalars().first())

    def list_by_muscle_group(
        self, muscle_group: str | None = None, *, sort: Iterable[str] | None = None
    ) -> list[ExerciseTemplate]:
        """
        List templates, optionally restricted to one muscle group.

        :param muscle_group: Group name in any case; ``None`` lists everything.
        :type muscle_group: str | None
        :param sort: Public sort tokens; defaults to ``["name"]``.
        :type sort: Iterable[str] | None
        :returns: Matching templates with muscle groups loaded.
        :rtype: list[ExerciseTemplate]
        """
        stmt: Select[Any] = select(self.model)
        if muscle_group is not None:
            stmt = stmt.where(
                self.model.muscle_groups.any(
                    MuscleGroup.name == canonical_muscle_group(muscle_group)
                )
            )
        stmt = self._default_eagerload(stmt)
        stmt = apply_sorting(
            stmt, self._sortable_fields(), sort or ["name"], pk_attr=self._pk_attr()
        )
        return list(self.session.execute(stmt).scalars().all())

    def get_many(self, ids: Iterable[int]) -> dict[int, ExerciseTemplate]:
        """Fetch templates by id, keyed by id. Missing ids are simply absent."""
        wanted = {i for i in ids if in_int_range(i)}
        if not wanted:
            return {}
        stmt = self._default_eagerload(select(self.model).where(self.model.id.in_(wanted)))
        return {row.id: row for row in self.session.execute(stmt).scalars().all()}

    def set_muscle_groups(
        self, template: ExerciseTemplate, groups: Iterable[MuscleGroup], *, flush: bool = True
    ) -> ExerciseTemplate:
        """Replace the template's muscle-group links with ``groups``."""
        template.muscle_groups = list(groups)
        if flush:
            self.flush()
        return template
