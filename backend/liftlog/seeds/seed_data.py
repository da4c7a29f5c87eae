"""Idempotent seed data: the exercise catalog and a development user."""

from __future__ import annotations

import logging
from typing import Any, cast

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.orm import Session

from liftlog.models.catalog import ExerciseTemplate, MuscleGroup
from liftlog.models.user import User
from liftlog.repositories.catalog import ExerciseTemplateRepository, MuscleGroupRepository
from liftlog.repositories.user import UserRepository

LOGGER = logging.getLogger(__name__)

MUSCLE_GROUP_FIXTURES: list[str] = [
    "CHEST",
    "BACK",
    "LEGS",
    "SHOULDERS",
    "ARMS",
    "ABS",
    "GLUTES",
    "CALVES",
]

TEMPLATE_FIXTURES: list[dict[str, Any]] = [
    {"name": "Bench Press", "muscle_groups": ["CHEST"]},
    {"name": "Incline Bench Press", "muscle_groups": ["CHEST"]},
    {"name": "Push Up", "muscle_groups": ["CHEST"]},
    {"name": "Deadlift", "muscle_groups": ["BACK", "LEGS"]},
    {"name": "Pull Up", "muscle_groups": ["BACK"]},
    {"name": "Bent Over Row", "muscle_groups": ["BACK"]},
    {"name": "Squat", "muscle_groups": ["LEGS"]},
    {"name": "Leg Press", "muscle_groups": ["LEGS"]},
    {"name": "Leg Curl", "muscle_groups": ["LEGS"]},
    {"name": "Shoulder Press", "muscle_groups": ["SHOULDERS"]},
    {"name": "Lateral Raise", "muscle_groups": ["SHOULDERS"]},
    {"name": "Bicep Curl", "muscle_groups": ["ARMS"]},
    {"name": "Tricep Dips", "muscle_groups": ["ARMS"]},
]

USER_FIXTURES: list[str] = ["test@example.com"]


def _session(database: SQLAlchemy) -> Session:
    """Return the current SQLAlchemy session."""
    return cast(Session, database.session)


def _touch(summary: dict[str, dict[str, int]], table: str, created: bool) -> None:
    """Update summary counters for the given table."""
    entry = summary.setdefault(table, {"created": 0, "existing": 0})
    if created:
        entry["created"] += 1
    else:
        entry["existing"] += 1


def seed_catalog(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Create muscle groups, exercise templates and their links."""
    if verbose:
        LOGGER.info("Seeding exercise catalog...")
    session = _session(database)
    group_repo = MuscleGroupRepository(session)
    template_repo = ExerciseTemplateRepository(session)
    summary: dict[str, dict[str, int]] = {}
    groups: dict[str, MuscleGroup] = {}

    with session.begin():
        for name in MUSCLE_GROUP_FIXTURES:
            group = group_repo.get_by_name(name)
            created = group is None
            if group is None:
                group = group_repo.add(MuscleGroup(name=name))
            groups[name] = group
            _touch(summary, "muscle_groups", created)

        for fixture in TEMPLATE_FIXTURES:
            template = template_repo.get_by_name(fixture["name"])
            created = template is None
            if template is None:
                template = template_repo.add(ExerciseTemplate(name=fixture["name"]))
            # Add missing links only; links made outside the seed are kept
            linked = template.muscle_groups
            missing = [groups[g] for g in fixture["muscle_groups"] if groups[g] not in linked]
            if missing:
                template_repo.set_muscle_groups(template, [*linked, *missing])
            _touch(summary, "exercise_templates", created)

    return summary


def seed_users(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Create the development users that own sample workouts."""
    if verbose:
        LOGGER.info("Seeding users...")
    session = _session(database)
    repo = UserRepository(session)
    summary: dict[str, dict[str, int]] = {}

    with session.begin():
        for email in USER_FIXTURES:
            created = repo.get_by_email(email) is None
            if created:
                repo.add(User(email=email))
            _touch(summary, "users", created)

    return summary


def run_all(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Run all seeders in foreign-key order and merge their summaries."""
    if verbose:
        LOGGER.info("Running full seed pipeline...")
    combined: dict[str, dict[str, int]] = {}
    for func in (seed_catalog, seed_users):
        result = func(database, verbose=verbose)
        for table, counters in result.items():
            entry = combined.setdefault(table, {"created": 0, "existing": 0})
            entry["created"] += counters.get("created", 0)
            entry["existing"] += counters.get("existing", 0)
    return combined


__all__ = [
    "MUSCLE_GROUP_FIXTURES",
    "TEMPLATE_FIXTURES",
    "USER_FIXTURES",
    "seed_catalog",
    "seed_users",
    "run_all",
]
