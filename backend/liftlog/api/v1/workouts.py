"""Workout endpoints."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, request

from liftlog.api.deps import json_response, service_context, service_errors, timing
from liftlog.schemas import (
    MessageSchema,
    WorkoutCompletionSchema,
    WorkoutCreateSchema,
    WorkoutListQuerySchema,
    WorkoutReplaceSchema,
    WorkoutSchema,
)
from liftlog.services.workouts import (
    LineItemIn,
    WorkoutCommandService,
    WorkoutCompletionIn,
    WorkoutCreateIn,
    WorkoutDeleteIn,
    WorkoutGetIn,
    WorkoutListIn,
    WorkoutQueryService,
    WorkoutReplaceIn,
)

bp = Blueprint("workouts", __name__, url_prefix="/workouts")

workout_schema = WorkoutSchema()
workout_list_schema = WorkoutSchema(many=True)
workout_create_schema = WorkoutCreateSchema()
workout_replace_schema = WorkoutReplaceSchema()
workout_completion_schema = WorkoutCompletionSchema()
workout_list_query_schema = WorkoutListQuerySchema()
message_schema = MessageSchema()


def _line_items(raw: list[dict[str, Any]]) -> tuple[LineItemIn, ...]:
    return tuple(LineItemIn(**item) for item in raw)


@bp.get("")
@timing
@service_errors
def list_workouts():
    """Return the workouts of ``userId``, newest first."""

    query = workout_list_query_schema.load(request.args)
    service = WorkoutQueryService(ctx=service_context())
    rows = service.list_for_user(WorkoutListIn(owner_id=query["user_id"]))
    return json_response(workout_list_schema.dump(rows))


@bp.post("")
@timing
@service_errors
def create_workout():
    """Create a workout together with its logged exercises."""

    payload = workout_create_schema.load(request.get_json(silent=True) or {})
    service = WorkoutCommandService(ctx=service_context())
    workout = service.create(
        WorkoutCreateIn(
            owner_id=payload["user_id"],
            name=payload["name"],
            line_items=_line_items(payload["exercises"]),
        )
    )
    return json_response(workout_schema.dump(workout), status=201)


@bp.get("/<int:workout_id>")
@timing
@service_errors
def get_workout(workout_id: int):
    """Return one workout aggregate."""

    service = WorkoutQueryService(ctx=service_context())
    return json_response(workout_schema.dump(service.get(WorkoutGetIn(workout_id=workout_id))))


@bp.put("/<int:workout_id>")
@timing
@service_errors
def replace_workout(workout_id: int):
    """Rename the workout and replace all of its logged exercises."""

    payload = workout_replace_schema.load(request.get_json(silent=True) or {})
    service = WorkoutCommandService(ctx=service_context())
    workout = service.replace_exercises(
        WorkoutReplaceIn(
            workout_id=workout_id,
            name=payload["name"],
            line_items=_line_items(payload["exercises"]),
        )
    )
    return json_response(workout_schema.dump(workout))


@bp.patch("/<int:workout_id>")
@timing
@service_errors
def set_workout_completion(workout_id: int):
    """Set the ``completed`` flag."""

    payload = workout_completion_schema.load(request.get_json(silent=True) or {})
    service = WorkoutCommandService(ctx=service_context())
    workout = service.set_completion(
        WorkoutCompletionIn(workout_id=workout_id, completed=payload["completed"])
    )
    return json_response(workout_schema.dump(workout))


@bp.delete("/<int:workout_id>")
@timing
@service_errors
def delete_workout(workout_id: int):
    """Delete the workout and, by cascade, its logged exercises."""

    service = WorkoutCommandService(ctx=service_context())
    service.delete(WorkoutDeleteIn(workout_id=workout_id))
    return json_response(message_schema.dump({"message": "Workout deleted successfully"}))
