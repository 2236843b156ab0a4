from marshmallow import ValidationError as SchemaValidationError

from cybele.errors import ValidationError
from .fields import isoformat_utc
from .user import UserSchema, LoginSchema
from .workout import WorkoutSchema, ExerciseSchema
from .run import RunSchema, PeriodSummarySchema

user_schema = UserSchema()
login_schema = LoginSchema()
workout_schema = WorkoutSchema()
workouts_schema = WorkoutSchema(many=True)
exercise_schema = ExerciseSchema()
exercises_schema = ExerciseSchema(many=True)
run_schema = RunSchema()
runs_schema = RunSchema(many=True)
period_summary_schema = PeriodSummarySchema()
period_totals_schema = PeriodSummarySchema(exclude=("runs",))


def validate_payload(schema, data):
    """Load untrusted input through ``schema``.

    Returns the normalized dict keyed by attribute name, or raises
    :class:`cybele.errors.ValidationError` carrying the per-field messages.
    """
    try:
        return schema.load(data)
    except SchemaValidationError as err:
        raise ValidationError(err.messages) from err


__all__ = [
    "UserSchema", "LoginSchema", "WorkoutSchema",
    "ExerciseSchema", "RunSchema", "PeriodSummarySchema",
    "user_schema", "login_schema", "workout_schema", "workouts_schema",
    "exercise_schema", "exercises_schema",
    "run_schema", "runs_schema", "period_summary_schema", "period_totals_schema",
    "validate_payload", "isoformat_utc",
]
