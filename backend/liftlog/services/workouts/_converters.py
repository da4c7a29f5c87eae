from __future__ import annotations

from dataclasses import replace
from operator import attrgetter

from liftlog.models.workout import LoggedExercise, Workout
from liftlog.services.catalog._converters import exercise_template_to_out

from .dto import LoggedExerciseOut, WorkoutOut
from .summary import summarize_workout


def logged_exercise_to_out(row: LoggedExercise) -> LoggedExerciseOut:
    return LoggedExerciseOut(
        id=row.id,
        workout_id=row.workout_id,
        exercise_template_id=row.exercise_template_id,
        sets=row.sets,
        reps=row.reps,
        weight=row.weight,
        exercise_template=exercise_template_to_out(row.exercise_template),
    )


def workout_to_out(row: Workout) -> WorkoutOut:
    items = sorted(row.logged_exercises, key=attrgetter("id"))
    out = WorkoutOut(
        id=row.id,
        owner_id=row.owner_id,
        name=row.name,
        completed=row.completed,
        created_at=row.created_at,
        updated_at=row.updated_at,
        logged_exercises=[logged_exercise_to_out(item) for item in items],
    )
    return replace(out, summary=summarize_workout(out))
