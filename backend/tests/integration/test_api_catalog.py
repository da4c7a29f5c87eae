from __future__ import annotations

import pytest
from liftlog.seeds import seed_data

from tests.helpers.http import build_url


@pytest.fixture()
def seeded(db, session):
    seed_data.seed_catalog(db)


class TestExercisesEndpoint:
    def test_list_all_sorted(self, client, seeded):
        resp = client.get(build_url("/exercises"))

        assert resp.status_code == 200
        names = [t["name"] for t in resp.get_json()]
        assert names == sorted(names)
        assert len(names) == len(seed_data.TEMPLATE_FIXTURES)

    @pytest.mark.parametrize("group", ["back", "BACK", "Back"])
    def test_filter_by_muscle_group_any_case(self, client, seeded, group):
        resp = client.get(build_url("/exercises", muscleGroup=group))

        assert resp.status_code == 200
        assert [t["name"] for t in resp.get_json()] == ["Bent Over Row", "Deadlift", "Pull Up"]

    def test_template_shape(self, client, seeded):
        resp = client.get(build_url("/exercises", muscleGroup="legs"))
        deadlift = next(t for t in resp.get_json() if t["name"] == "Deadlift")
        assert set(deadlift) == {"id", "name", "muscleGroups"}
        assert [g["name"] for g in deadlift["muscleGroups"]] == ["BACK", "LEGS"]

    def test_unknown_group_is_empty(self, client, seeded):
        resp = client.get(build_url("/exercises", muscleGroup="neck"))
        assert resp.status_code == 200
        assert resp.get_json() == []

    def test_empty_filter_lists_everything(self, client, seeded):
        resp = client.get(build_url("/exercises") + "?muscleGroup=")
        assert len(resp.get_json()) == len(seed_data.TEMPLATE_FIXTURES)


def test_muscle_groups_sorted(client, seeded):
    resp = client.get(build_url("/muscle-groups"))

    assert resp.status_code == 200
    assert [g["name"] for g in resp.get_json()] == sorted(seed_data.MUSCLE_GROUP_FIXTURES)
