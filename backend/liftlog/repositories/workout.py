from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.orm import InstrumentedAttribute, selectinload

from liftlog.models.base import in_int_range, utcnow
from liftlog.models.catalog import ExerciseTemplate
from liftlog.models.workout import LoggedExercise, Workout
from liftlog.repositories.base import BaseRepository, apply_sorting


class WorkoutRepository(BaseRepository[Workout]):
    """
    Persistence-only repository for the :class:`Workout` aggregate.

    Logged exercises are only ever touched through their workout: they are
    appended, cleared and replaced here, never fetched on their own.
    """

    model = Workout

    # ---------------------------- Whitelists ----------------------------
    def _sortable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        return {
            "id": self.model.id,
            "name": self.model.name,
            "completed": self.model.completed,
            "created_at": self.model.created_at,
            "updated_at": self.model.updated_at,
        }

    def _filterable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        return {
            "id": self.model.id,
            "owner_id": self.model.owner_id,
            "completed": self.model.completed,
        }

    def _updatable_fields(self) -> set[str]:
        # owner_id is fixed at creation
        return {"name", "completed"}

    # ---------------------------- Eager loading ----------------------------
    def _default_eagerload(self, stmt: Select[Any]) -> Select[Any]:
        return stmt.options(
            selectinload(self.model.logged_exercises)
            .selectinload(LoggedExercise.exercise_template)
            .selectinload(ExerciseTemplate.muscle_groups)
        )

    # ---------------------------- Lookups ----------------------------
    def list_for_owner(self, owner_id: int) -> list[Workout]:
        """Return the owner's workouts, newest first."""
        if not in_int_range(owner_id):
            return []
        stmt = self._default_eagerload(select(self.model).where(self.model.owner_id == owner_id))
        stmt = apply_sorting(
            stmt, self._sortable_fields(), ["-created_at"], pk_attr=self._pk_attr()
        )
        return list(self.session.execute(stmt).scalars().all())

    def count_logged_exercises(self, workout_id: int) -> int:
        stmt = (
            select(func.count())
            .select_from(LoggedExercise)
            .where(LoggedExercise.workout_id == workout_id)
        )
        return int(self.session.execute(stmt).scalar() or 0)

    # ---------------------------- Mutations ----------------------------
    def create_workout(
        self,
        *,
        owner_id: int,
        name: str,
        completed: bool = False,
        flush: bool = True,
    ) -> Workout:
        """Stage a new workout; the model validator strips and checks ``name``."""
        row = self.model(owner_id=owner_id, name=name, completed=completed)
        self.session.add(row)
        if flush:
            self.flush()
        return row

    def add_logged_exercises(
        self,
        workout: Workout,
        items: Iterable[Mapping[str, Any]],
        *,
        flush: bool = True,
    ) -> list[LoggedExercise]:
        """
        Append line items to ``workout`` in iteration order.

        Each item carries ``exercise_template`` (a loaded :class:`ExerciseTemplate`),
        ``sets``, ``reps`` and an optional ``weight``.
        """
        created: list[LoggedExercise] = []
        for item in items:
            row = LoggedExercise(
                exercise_template=item["exercise_template"],
                sets=item["sets"],
                reps=item["reps"],
                weight=item.get("weight"),
            )
            workout.logged_exercises.append(row)
            created.append(row)
        if flush:
            self.flush()
        return created

    def clear_logged_exercises(self, workout: Workout, *, flush: bool = True) -> None:
        """Remove every line item; delete-orphan turns this into DELETEs."""
        workout.logged_exercises.clear()
        if flush:
            self.flush()

    def replace_logged_exercises(
        self,
        workout: Workout,
        items: Iterable[Mapping[str, Any]],
        *,
        flush: bool = True,
    ) -> list[LoggedExercise]:
        """Swap the whole line-item list for ``items`` within the current transaction."""
        self.clear_logged_exercises(workout, flush=flush)
        return self.add_logged_exercises(workout, items, flush=flush)

    def touch(self, workout: Workout, *, flush: bool = True) -> Workout:
        """Bump ``updated_at`` even when only the line items changed."""
        workout.updated_at = utcnow()
        if flush:
            self.flush()
        return workout
