from marshmallow import EXCLUDE, ValidationError, fields, validates_schema

from cybele.extensions import ma


class WorkoutListQuerySchema(ma.Schema):
    """``?today=true`` or ``?date=YYYY-MM-DD`` narrow the list to one day."""

    class Meta:
        unknown = EXCLUDE

    today = fields.Boolean(load_default=False)
    date = fields.Date(load_default=None)


class AnchorQuerySchema(ma.Schema):
    """Optional ``?date=YYYY-MM-DD`` anchoring period statistics."""

    class Meta:
        unknown = EXCLUDE

    date = fields.Date(load_default=None)


class RunRangeQuerySchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    start = fields.Date(load_default=None, data_key="from")
    end = fields.Date(load_default=None, data_key="to")

    @validates_schema
    def validate_order(self, data, **kwargs):
        start, end = data.get("start"), data.get("end")
        if start and end and start > end:
            raise ValidationError("'from' must not be after 'to'.", "from")


workout_list_query_schema = WorkoutListQuerySchema()
anchor_query_schema = AnchorQuerySchema()
run_range_query_schema = RunRangeQuerySchema()
