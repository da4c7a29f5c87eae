from __future__ import annotations

import pytest
from liftlog.models.workout import Workout
from liftlog.uow import SQLAlchemyUnitOfWork

from tests.factories.user import UserFactory


def test_commit_on_clean_exit(session):
    owner = UserFactory()
    session.commit()

    with SQLAlchemyUnitOfWork() as uow:
        workout = uow.workouts.create_workout(owner_id=owner.id, name="Push")
        workout_id = workout.id

    session.expunge_all()
    assert session.get(Workout, workout_id) is not None


def test_rollback_on_exception(session):
    owner = UserFactory()
    session.commit()
    owner_id = owner.id

    with pytest.raises(RuntimeError):
        with SQLAlchemyUnitOfWork() as uow:
            uow.workouts.create_workout(owner_id=owner_id, name="Pull")
            raise RuntimeError("boom")

    assert uow.workouts.list_for_owner(owner_id) == []


def test_repositories_share_the_uow_session(session):
    uow = SQLAlchemyUnitOfWork()
    assert uow.users.session is uow.session
    assert uow.workouts.session is uow.session
    assert uow.exercise_templates.session is uow.session
    assert uow.muscle_groups.session is uow.session
