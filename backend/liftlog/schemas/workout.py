"""Workout resource schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate

from liftlog.models.base import INT_MAX
from liftlog.models.workout import WEIGHT_MAX, WEIGHT_PLACES, decimal_places

from .catalog import ExerciseTemplateSchema

POSITIVE_ID = validate.Range(min=1, max=INT_MAX)


def _not_blank(value: str) -> None:
    if not value.strip():
        raise ValidationError("Must not be blank.")


def _weight_precision(value: float) -> None:
    if decimal_places(value) > WEIGHT_PLACES:
        raise ValidationError(f"At most {WEIGHT_PLACES} decimal places.")


class LineItemSchema(Schema):
    """One requested line item."""

    class Meta:
        unknown = EXCLUDE

    exercise_template_id = fields.Integer(
        required=True, data_key="exerciseTemplateId", validate=POSITIVE_ID
    )
    sets = fields.Integer(required=True, validate=POSITIVE_ID)
    reps = fields.Integer(required=True, validate=POSITIVE_ID)
    # 0 is a valid (bodyweight) load; only null/absent means "no weight"
    weight = fields.Float(
        load_default=None,
        allow_none=True,
        validate=[validate.Range(min=0, max=WEIGHT_MAX), _weight_precision],
    )


class WorkoutReplaceSchema(Schema):
    """Payload replacing a workout's name and line items."""

    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=[validate.Length(max=120), _not_blank])
    exercises = fields.List(fields.Nested(LineItemSchema), required=True)


class WorkoutCreateSchema(WorkoutReplaceSchema):
    """Payload for creating a workout."""

    user_id = fields.Integer(required=True, data_key="userId", validate=POSITIVE_ID)


class WorkoutCompletionSchema(Schema):
    """Payload toggling the completion flag."""

    class Meta:
        unknown = EXCLUDE

    completed = fields.Boolean(required=True)


class WorkoutListQuerySchema(Schema):
    """Query parameters accepted by the workouts list endpoint."""

    class Meta:
        unknown = EXCLUDE

    # Unbounded: an id no row can hold lists as an unknown user
    user_id = fields.Integer(required=True, data_key="userId")
    # Not range-checked: an id no row can have simply matches nothing


class LoggedExerciseSchema(Schema):
    """Representation of a logged exercise line item."""

    id = fields.Integer(required=True)
    sets = fields.Integer(required=True)
    reps = fields.Integer(required=True)
    weight = fields.Float(allow_none=True)
    workout_id = fields.Integer(required=True, data_key="workoutId")
    exercise_template_id = fields.Integer(required=True, data_key="exerciseTemplateId")
    exercise_template = fields.Nested(
        ExerciseTemplateSchema, required=True, data_key="exerciseTemplate"
    )


class WorkoutSummarySchema(Schema):
    """Derived totals attached to every workout."""

    total_sets = fields.Integer(required=True, data_key="totalSets")
    exercise_count = fields.Integer(required=True, data_key="exerciseCount")
    muscle_groups = fields.List(fields.String(), required=True, data_key="muscleGroups")


class WorkoutSchema(Schema):
    """Representation of the workout aggregate."""

    id = fields.Integer(required=True)
    name = fields.String(required=True)
    completed = fields.Boolean(required=True)
    created_at = fields.DateTime(required=True, data_key="createdAt")
    updated_at = fields.DateTime(required=True, data_key="updatedAt")
    owner_id = fields.Integer(required=True, data_key="userId")
    logged_exercises = fields.List(
        fields.Nested(LoggedExerciseSchema), required=True, data_key="loggedExercises"
    )
    summary = fields.Nested(WorkoutSummarySchema, allow_none=True)


class MessageSchema(Schema):
    """Plain acknowledgement body."""

    message = fields.String(required=True)
