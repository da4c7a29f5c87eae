from __future__ import annotations

import pytest
from liftlog.repositories.catalog import ExerciseTemplateRepository, MuscleGroupRepository

from tests.factories.catalog import ExerciseTemplateFactory, MuscleGroupFactory


@pytest.fixture()
def catalog(session):
    chest = MuscleGroupFactory(name="CHEST")
    back = MuscleGroupFactory(name="BACK")
    legs = MuscleGroupFactory(name="LEGS")
    templates = {
        "Bench Press": ExerciseTemplateFactory(name="Bench Press", muscle_groups=[chest]),
        "Pull Up": ExerciseTemplateFactory(name="Pull Up", muscle_groups=[back]),
        "Deadlift": ExerciseTemplateFactory(name="Deadlift", muscle_groups=[back, legs]),
        "Squat": ExerciseTemplateFactory(name="Squat", muscle_groups=[legs]),
    }
    return {"groups": {"CHEST": chest, "BACK": back, "LEGS": legs}, "templates": templates}


class TestExerciseTemplateRepository:
    @pytest.fixture()
    def repo(self) -> ExerciseTemplateRepository:
        return ExerciseTemplateRepository()

    def test_list_all_sorted_by_name(self, repo, catalog):
        names = [t.name for t in repo.list_by_muscle_group(None)]
        assert names == ["Bench Press", "Deadlift", "Pull Up", "Squat"]

    @pytest.mark.parametrize("raw", ["back", "BACK", "  Back "])
    def test_filter_is_case_insensitive(self, repo, catalog, raw):
        names = [t.name for t in repo.list_by_muscle_group(raw)]
        assert names == ["Deadlift", "Pull Up"]

    def test_unknown_group_yields_empty_list(self, repo, catalog):
        assert repo.list_by_muscle_group("NECK") == []

    def test_get_many_skips_missing_ids(self, repo, catalog):
        bench = catalog["templates"]["Bench Press"]
        found = repo.get_many([bench.id, 999999, 10**20])
        assert list(found) == [bench.id]
        assert repo.get_many([]) == {}

    def test_get_by_name(self, repo, catalog):
        assert repo.get_by_name(" Squat ").id == catalog["templates"]["Squat"].id
        assert repo.get_by_name("Curl") is None

    def test_set_muscle_groups(self, repo, catalog):
        squat = catalog["templates"]["Squat"]
        repo.set_muscle_groups(squat, [catalog["groups"]["BACK"], catalog["groups"]["LEGS"]])
        assert [t.name for t in repo.list_by_muscle_group("back")] == [
            "Deadlift",
            "Pull Up",
            "Squat",
        ]


class TestMuscleGroupRepository:
    @pytest.fixture()
    def repo(self) -> MuscleGroupRepository:
        return MuscleGroupRepository()

    def test_list_sorted(self, repo, catalog):
        assert [g.name for g in repo.list_sorted()] == ["BACK", "CHEST", "LEGS"]

    def test_get_by_name_case_insensitive(self, repo, catalog):
        assert repo.get_by_name("chest").id == catalog["groups"]["CHEST"].id
