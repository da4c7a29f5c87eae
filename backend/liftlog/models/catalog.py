"""Exercise catalog models: muscle groups and exercise templates."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, ForeignKey, String, Table, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from liftlog.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

# Many-to-many join table; rows go away with either side
exercise_template_muscle_groups = Table(
    "exercise_template_muscle_groups",
    db.metadata,
    Column(
        "exercise_template_id",
        ForeignKey("exercise_templates.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "muscle_group_id",
        ForeignKey("muscle_groups.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class MuscleGroup(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """Named muscle category (e.g. ``CHEST``) stored in canonical uppercase."""

    __tablename__ = "muscle_groups"

    name: Mapped[str] = mapped_column(String(50), nullable=False)

    __table_args__ = (
        UniqueConstraint("name", name="uq_muscle_groups_name"),
        CheckConstraint("length(name) > 0", name="name_not_empty"),
    )

    exercise_templates: Mapped[list[ExerciseTemplate]] = relationship(
        "ExerciseTemplate",
        secondary=exercise_template_muscle_groups,
        back_populates="muscle_groups",
    )

    @validates("name")
    def _canonical_name(self, key: str, value: str) -> str:
        """Trim and upper-case the name so lookups can match case-insensitively."""
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Muscle group name is required.")
        return canonical_muscle_group(value)


class ExerciseTemplate(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """Catalog exercise (e.g. ``Bench Press``) tagged with muscle groups."""

    __tablename__ = "exercise_templates"

    name: Mapped[str] = mapped_column(String(120), nullable=False)

    __table_args__ = (
        UniqueConstraint("name", name="uq_exercise_templates_name"),
        CheckConstraint("length(name) > 0", name="name_not_empty"),
    )

    muscle_groups: Mapped[list[MuscleGroup]] = relationship(
        "MuscleGroup",
        secondary=exercise_template_muscle_groups,
        back_populates="exercise_templates",
        order_by="MuscleGroup.name",
        lazy="selectin",
    )

    @validates("name")
    def _strip_name(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Exercise template name is required.")
        return value.strip()


def canonical_muscle_group(name: str) -> str:
    """Return the stored form of a muscle group name."""
    return name.strip().upper()
