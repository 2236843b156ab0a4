from marshmallow import EXCLUDE, fields, validate

from cybele.extensions import ma
from cybele.models.workout import WORKOUT_CATEGORIES
from .fields import RoundedInteger, Timestamp, TrimmedString


class ExerciseSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Integer(dump_only=True)
    workout_id = fields.Integer(dump_only=True, data_key="workoutId")
    name = TrimmedString(required=True, validate=validate.Length(min=1, max=100))
    sets = RoundedInteger(required=True, validate=validate.Range(min=1))
    reps = RoundedInteger(required=True, validate=validate.Range(min=1))
    weight = RoundedInteger(required=True, validate=validate.Range(min=0))


class WorkoutSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Integer(dump_only=True)
    user_id = fields.Integer(dump_only=True, data_key="userId")
    name = TrimmedString(
        required=True,
        validate=validate.OneOf(WORKOUT_CATEGORIES, error="Must be one of: {choices}."),
    )
    date = Timestamp(required=True)
    duration = RoundedInteger(load_default=None, allow_none=True, validate=validate.Range(min=1))
    created_at = Timestamp(dump_only=True, data_key="createdAt")
