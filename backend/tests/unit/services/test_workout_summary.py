from __future__ import annotations

from datetime import datetime, timezone

from liftlog.services.catalog.dto import ExerciseTemplateOut, MuscleGroupOut
from liftlog.services.workouts import LoggedExerciseOut, WorkoutOut, summarize_workout

NOW = datetime(2024, 5, 1, tzinfo=timezone.utc)
CHEST = MuscleGroupOut(id=1, name="CHEST")
ARMS = MuscleGroupOut(id=2, name="ARMS")
BENCH = ExerciseTemplateOut(id=10, name="Bench Press", muscle_groups=[CHEST])
DIPS = ExerciseTemplateOut(id=11, name="Tricep Dips", muscle_groups=[ARMS, CHEST])


def _item(pk: int, template: ExerciseTemplateOut, sets: int) -> LoggedExerciseOut:
    return LoggedExerciseOut(
        id=pk,
        workout_id=1,
        exercise_template_id=template.id,
        sets=sets,
        reps=10,
        weight=None,
        exercise_template=template,
    )


def _workout(*items: LoggedExerciseOut) -> WorkoutOut:
    return WorkoutOut(
        id=1,
        owner_id=1,
        name="Push",
        completed=False,
        created_at=NOW,
        updated_at=NOW,
        logged_exercises=list(items),
    )


def test_summary_of_empty_workout():
    summary = summarize_workout(_workout())
    assert summary.total_sets == 0
    assert summary.exercise_count == 0
    assert summary.muscle_groups == []


def test_summary_counts_distinct_templates_and_groups():
    summary = summarize_workout(_workout(_item(1, BENCH, 3), _item(2, DIPS, 2), _item(3, BENCH, 4)))
    assert summary.total_sets == 9
    assert summary.exercise_count == 2
    assert summary.muscle_groups == ["ARMS", "CHEST"]
