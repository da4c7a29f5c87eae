"""Exercise catalog endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from liftlog.api.deps import json_response, service_context, service_errors, timing
from liftlog.schemas import ExerciseFilterSchema, ExerciseTemplateSchema
from liftlog.services.catalog import CatalogQueryService, ExerciseTemplateListIn

bp = Blueprint("exercises", __name__, url_prefix="/exercises")

template_list_schema = ExerciseTemplateSchema(many=True)
exercise_filter_schema = ExerciseFilterSchema()


@bp.get("")
@timing
@service_errors
def list_exercise_templates():
    """Return templates sorted by name, optionally filtered by ``muscleGroup``."""

    filters = exercise_filter_schema.load(request.args)
    service = CatalogQueryService(ctx=service_context())
    rows = service.list_exercise_templates(
        ExerciseTemplateListIn(muscle_group=filters["muscle_group"])
    )
    return json_response(template_list_schema.dump(rows))
