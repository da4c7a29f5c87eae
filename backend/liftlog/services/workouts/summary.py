"""Derived per-workout figures shown next to each aggregate."""

from __future__ import annotations

from .dto import WorkoutOut, WorkoutSummaryOut


def summarize_workout(workout: WorkoutOut) -> WorkoutSummaryOut:
    """
    Compute totals over an already hydrated workout.

    :param workout: Aggregate projection; its ``summary`` is ignored.
    :type workout: :class:`WorkoutOut`
    :returns: Total sets, number of distinct templates and the sorted
        distinct muscle-group names.
    :rtype: :class:`WorkoutSummaryOut`
    """
    items = workout.logged_exercises
    template_ids = {item.exercise_template_id for item in items}
    muscle_groups = {
        group.name for item in items for group in item.exercise_template.muscle_groups
    }
    return WorkoutSummaryOut(
        total_sets=sum(item.sets for item in items),
        exercise_count=len(template_ids),
        muscle_groups=sorted(muscle_groups),
    )
