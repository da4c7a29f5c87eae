from __future__ import annotations

from datetime import datetime, timezone

import pytest
from liftlog.models.workout import LoggedExercise
from liftlog.repositories.workout import WorkoutRepository
from sqlalchemy import func, select

from tests.factories.catalog import ExerciseTemplateFactory
from tests.factories.user import UserFactory
from tests.factories.workout import LoggedExerciseFactory, WorkoutFactory


def _dt(day: int) -> datetime:
    return datetime(2024, 1, day, 9, 0, tzinfo=timezone.utc)


class TestWorkoutRepository:
    @pytest.fixture()
    def repo(self) -> WorkoutRepository:
        return WorkoutRepository()

    def test_create_workout_flushes_pk(self, repo, session):
        owner = UserFactory()
        workout = repo.create_workout(owner_id=owner.id, name=" Legs ")
        assert workout.id is not None
        assert workout.name == "Legs"
        assert workout.completed is False

    def test_list_for_owner_newest_first_and_scoped(self, repo, session):
        owner = UserFactory()
        old = WorkoutFactory(owner=owner, created_at=_dt(1))
        new = WorkoutFactory(owner=owner, created_at=_dt(5))
        mid = WorkoutFactory(owner=owner, created_at=_dt(3))
        WorkoutFactory(created_at=_dt(9))  # someone else's

        rows = repo.list_for_owner(owner.id)
        assert [r.id for r in rows] == [new.id, mid.id, old.id]

    def test_list_for_owner_ties_broken_by_id_desc(self, repo, session):
        owner = UserFactory()
        first = WorkoutFactory(owner=owner, created_at=_dt(2))
        second = WorkoutFactory(owner=owner, created_at=_dt(2))

        rows = repo.list_for_owner(owner.id)
        assert [r.id for r in rows] == [second.id, first.id]

    def test_list_for_unknown_owner_is_empty(self, repo, session):
        assert repo.list_for_owner(987654) == []

    def test_add_logged_exercises_appends_in_order(self, repo, session):
        workout = WorkoutFactory()
        bench, squat = ExerciseTemplateFactory(), ExerciseTemplateFactory()

        rows = repo.add_logged_exercises(
            workout,
            [
                {"exercise_template": bench, "sets": 3, "reps": 10, "weight": None},
                {"exercise_template": squat, "sets": 5, "reps": 5, "weight": 100.0},
            ],
        )

        assert all(r.id is not None for r in rows)
        assert [r.exercise_template_id for r in workout.logged_exercises] == [bench.id, squat.id]
        assert repo.count_logged_exercises(workout.id) == 2

    def test_replace_logged_exercises_swaps_whole_set(self, repo, session):
        workout = WorkoutFactory()
        old_items = LoggedExerciseFactory.create_batch(2, workout=workout)
        old_template_ids = {i.exercise_template_id for i in old_items}
        template = ExerciseTemplateFactory()

        repo.replace_logged_exercises(
            workout, [{"exercise_template": template, "sets": 4, "reps": 6}]
        )

        session.expire(workout, ["logged_exercises"])
        items = workout.logged_exercises
        assert len(items) == 1
        assert (items[0].exercise_template_id, items[0].sets, items[0].reps) == (template.id, 4, 6)
        assert items[0].weight is None
        assert repo.count_logged_exercises(workout.id) == 1
        leftovers = session.execute(
            select(func.count())
            .select_from(LoggedExercise)
            .where(LoggedExercise.exercise_template_id.in_(old_template_ids))
        ).scalar()
        assert leftovers == 0

    def test_clear_logged_exercises(self, repo, session):
        workout = WorkoutFactory()
        LoggedExerciseFactory.create_batch(3, workout=workout)

        repo.clear_logged_exercises(workout)

        assert repo.count_logged_exercises(workout.id) == 0

    def test_touch_bumps_updated_at(self, repo, session):
        workout = WorkoutFactory()
        before = workout.updated_at
        repo.touch(workout)
        assert workout.updated_at >= before

    def test_get_loads_full_aggregate(self, repo, session):
        item = LoggedExerciseFactory()
        workout_id = item.workout_id
        session.expunge_all()

        workout = repo.get(workout_id)
        assert workout is not None
        assert workout.logged_exercises[0].exercise_template.muscle_groups

    def test_keys_beyond_integer_range_match_nothing(self, repo, session):
        WorkoutFactory()
        huge = 2**63

        assert repo.get(huge) is None
        assert repo.get_for_update(-huge) is None
        assert repo.exists(id=huge) is False
        assert repo.list_for_owner(huge) == []
