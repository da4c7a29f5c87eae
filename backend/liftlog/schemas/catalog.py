"""Exercise catalog schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields


class ExerciseFilterSchema(Schema):
    """Query parameters accepted by the exercises list endpoint."""

    class Meta:
        unknown = EXCLUDE

    muscle_group = fields.String(load_default=None, data_key="muscleGroup")


class MuscleGroupSchema(Schema):
    """Representation of a muscle group."""

    id = fields.Integer(required=True)
    name = fields.String(required=True)


class ExerciseTemplateSchema(Schema):
    """Representation of an exercise template with its muscle groups."""

    id = fields.Integer(required=True)
    name = fields.String(required=True)
    muscle_groups = fields.List(
        fields.Nested(MuscleGroupSchema), required=True, data_key="muscleGroups"
    )
