from __future__ import annotations

from operator import attrgetter

from liftlog.models.catalog import ExerciseTemplate, MuscleGroup

from .dto import ExerciseTemplateOut, MuscleGroupOut


def muscle_group_to_out(row: MuscleGroup) -> MuscleGroupOut:
    return MuscleGroupOut(id=row.id, name=row.name)


def exercise_template_to_out(row: ExerciseTemplate) -> ExerciseTemplateOut:
    groups = sorted(row.muscle_groups, key=attrgetter("name", "id"))
    return ExerciseTemplateOut(
        id=row.id,
        name=row.name,
        muscle_groups=[muscle_group_to_out(g) for g in groups],
    )
