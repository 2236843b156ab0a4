from marshmallow import EXCLUDE, fields, validate

from cybele.extensions import ma
from .fields import RoundedInteger, Timestamp


class RunSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Integer(dump_only=True)
    user_id = fields.Integer(dump_only=True, data_key="userId")
    # Kilometres, whole numbers only; 0.4 rounds to 0 and is rejected.
    distance = RoundedInteger(required=True, validate=validate.Range(min=1))
    date = Timestamp(load_default=None)
    duration = RoundedInteger(load_default=None, allow_none=True, validate=validate.Range(min=1))
    created_at = Timestamp(dump_only=True, data_key="createdAt")


class PeriodSummarySchema(ma.Schema):
    period = fields.String()
    runs = fields.List(fields.Nested(RunSchema))
    total_distance = fields.Integer(data_key="totalDistance")
    run_count = fields.Integer(data_key="runCount")
    average_pace = fields.Float(allow_none=True, data_key="averagePace")
    target_distance = fields.Integer(allow_none=True, data_key="targetDistance")
    target_reached = fields.Boolean(allow_none=True, data_key="targetReached")
    start_date = Timestamp(data_key="startDate")
    end_date = Timestamp(data_key="endDate")
