from __future__ import annotations

from dataclasses import dataclass

# ------------------------------ Output DTOs ------------------------------ #


@dataclass(frozen=True, slots=True)
class MuscleGroupOut:
    """Public projection of a muscle group."""

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class ExerciseTemplateOut:
    """Catalog exercise with its muscle groups sorted by name."""

    id: int
    name: str
    muscle_groups: list[MuscleGroupOut]


# ------------------------------ Input DTOs ------------------------------- #


@dataclass(frozen=True, slots=True)
class ExerciseTemplateListIn:
    """List templates, optionally restricted to one muscle group (any case)."""

    muscle_group: str | None = None
