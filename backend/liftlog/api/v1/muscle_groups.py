"""Muscle group endpoints."""

from __future__ import annotations

from flask import Blueprint

from liftlog.api.deps import json_response, service_context, service_errors, timing
from liftlog.schemas import MuscleGroupSchema
from liftlog.services.catalog import CatalogQueryService

bp = Blueprint("muscle_groups", __name__, url_prefix="/muscle-groups")

muscle_group_list_schema = MuscleGroupSchema(many=True)


@bp.get("")
@timing
@service_errors
def list_muscle_groups():
    """Return every muscle group sorted by name."""

    service = CatalogQueryService(ctx=service_context())
    return json_response(muscle_group_list_schema.dump(service.list_muscle_groups()))
