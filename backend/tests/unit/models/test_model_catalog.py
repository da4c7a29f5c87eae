from __future__ import annotations

import pytest
from liftlog.models.catalog import ExerciseTemplate, MuscleGroup, canonical_muscle_group
from sqlalchemy.exc import IntegrityError

from tests.factories.catalog import ExerciseTemplateFactory, MuscleGroupFactory


class TestMuscleGroupModel:
    def test_name_is_canonical_uppercase(self, session):
        group = MuscleGroupFactory(name="  back ")
        assert group.name == "BACK"

    def test_name_is_unique(self, session):
        MuscleGroupFactory(name="CHEST")
        session.add(MuscleGroup(name="chest"))
        with pytest.raises(IntegrityError):
            session.flush()

    def test_blank_name_is_rejected(self):
        with pytest.raises(ValueError):
            MuscleGroup(name="  ")

    def test_canonical_helper(self):
        assert canonical_muscle_group(" Shoulders ") == "SHOULDERS"


class TestExerciseTemplateModel:
    def test_muscle_groups_load_sorted_by_name(self, session):
        legs = MuscleGroupFactory(name="LEGS")
        back = MuscleGroupFactory(name="BACK")
        template = ExerciseTemplateFactory(name="Deadlift", muscle_groups=[legs, back])
        template_id = template.id
        session.expunge_all()

        reloaded = session.get(ExerciseTemplate, template_id)
        assert [g.name for g in reloaded.muscle_groups] == ["BACK", "LEGS"]

    def test_name_is_stripped_and_unique(self, session):
        template = ExerciseTemplateFactory(name="  Squat ")
        assert template.name == "Squat"

        session.add(ExerciseTemplate(name="Squat"))
        with pytest.raises(IntegrityError):
            session.flush()

    def test_reverse_relationship(self, session):
        chest = MuscleGroupFactory(name="CHEST")
        bench = ExerciseTemplateFactory(name="Bench Press", muscle_groups=[chest])
        assert bench in chest.exercise_templates
