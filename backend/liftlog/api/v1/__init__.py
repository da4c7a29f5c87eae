"""API v1 blueprint package bundling versioned routes."""

from __future__ import annotations

from flask import Blueprint

API_VERSION = "v1"

# Import blueprints *only here* to keep imports localized and avoid cycles.
from .exercises import bp as exercises_bp  # noqa: E402
from .health import bp as health_bp  # noqa: E402
from .muscle_groups import bp as muscle_groups_bp  # noqa: E402
from .workouts import bp as workouts_bp  # noqa: E402

# Each tuple: (blueprint, url_prefix_relative_to_version)
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),  # -> /api/v1
    (workouts_bp, "/workouts"),
    (exercises_bp, "/exercises"),
    (muscle_groups_bp, "/muscle-groups"),
]
