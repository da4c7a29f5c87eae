from __future__ import annotations

import pytest
from liftlog.seeds import seed_data
from liftlog.services.catalog import CatalogQueryService, ExerciseTemplateListIn


@pytest.fixture()
def seeded(db, session):
    seed_data.seed_catalog(db)
    return db


@pytest.fixture()
def service() -> CatalogQueryService:
    return CatalogQueryService()


class TestCatalogQueryService:
    def test_filter_by_muscle_group(self, service, seeded):
        rows = service.list_exercise_templates(ExerciseTemplateListIn(muscle_group="back"))
        assert [r.name for r in rows] == ["Bent Over Row", "Deadlift", "Pull Up"]

    def test_templates_carry_sorted_groups(self, service, seeded):
        rows = service.list_exercise_templates(ExerciseTemplateListIn(muscle_group="LEGS"))
        deadlift = next(r for r in rows if r.name == "Deadlift")
        assert [g.name for g in deadlift.muscle_groups] == ["BACK", "LEGS"]

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_filter_lists_everything(self, service, seeded, raw):
        rows = service.list_exercise_templates(ExerciseTemplateListIn(muscle_group=raw))
        names = [r.name for r in rows]
        assert len(names) == len(seed_data.TEMPLATE_FIXTURES)
        assert names == sorted(names)

    def test_no_dto_lists_everything(self, service, seeded):
        assert len(service.list_exercise_templates()) == len(seed_data.TEMPLATE_FIXTURES)

    def test_unknown_group_is_empty(self, service, seeded):
        assert service.list_exercise_templates(ExerciseTemplateListIn(muscle_group="NECK")) == []

    def test_muscle_groups_sorted(self, service, seeded):
        names = [g.name for g in service.list_muscle_groups()]
        assert names == sorted(seed_data.MUSCLE_GROUP_FIXTURES)
