"""Workout aggregate: a session owned by a user plus its logged exercises."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    false,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from liftlog.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .catalog import ExerciseTemplate
    from .user import User

#: ``weight`` is stored as NUMERIC(7, 2)
WEIGHT_MAX = 99999.99
WEIGHT_PLACES = 2


def decimal_places(value: float) -> int:
    """Digits after the decimal point in the shortest repr of ``value``."""
    exponent = Decimal(repr(value)).as_tuple().exponent
    return max(0, -exponent) if isinstance(exponent, int) else 0


class Workout(PKMixin, TimestampMixin, ReprMixin, db.Model):
    """
    Workout session owned by a user.

    The workout is the aggregate root: its logged exercises have no lifecycle
    of their own and are deleted with it, both by the ORM cascade and by the
    ``ON DELETE CASCADE`` foreign key.
    """

    __tablename__ = "workouts"

    owner_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    __table_args__ = (
        Index("ix_workouts_owner_created", "owner_id", "created_at"),
        CheckConstraint("length(name) > 0", name="name_not_empty"),
    )

    owner: Mapped[User] = relationship("User", back_populates="workouts")
    logged_exercises: Mapped[list[LoggedExercise]] = relationship(
        "LoggedExercise",
        back_populates="workout",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="LoggedExercise.id",
        lazy="selectin",
    )

    @validates("name")
    def _strip_name(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Workout name is required.")
        return value.strip()


class LoggedExercise(PKMixin, TimestampMixin, ReprMixin, db.Model):
    """One line item of a workout: a catalog exercise with sets, reps and weight."""

    __tablename__ = "logged_exercises"

    workout_id: Mapped[int] = mapped_column(
        ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False
    )
    exercise_template_id: Mapped[int] = mapped_column(
        ForeignKey("exercise_templates.id", ondelete="RESTRICT"), nullable=False
    )
    sets: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float | None] = mapped_column(Numeric(7, 2, asdecimal=False))

    __table_args__ = (
        Index("ix_logged_exercises_workout", "workout_id"),
        Index("ix_logged_exercises_template", "exercise_template_id"),
        CheckConstraint("sets > 0", name="sets_positive"),
        CheckConstraint("reps > 0", name="reps_positive"),
        CheckConstraint("weight IS NULL OR weight >= 0", name="weight_non_negative"),
    )

    workout: Mapped[Workout] = relationship("Workout", back_populates="logged_exercises")
    exercise_template: Mapped[ExerciseTemplate] = relationship(
        "ExerciseTemplate", lazy="selectin"
    )
