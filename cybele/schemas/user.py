from datetime import date

from marshmallow import EXCLUDE, ValidationError, fields, validate, validates

from cybele.extensions import ma
from .fields import RoundedInteger, Timestamp, TrimmedString


class UserSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Integer(dump_only=True)
    username = TrimmedString(required=True, validate=validate.Length(min=1, max=80))
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=1))
    full_name = TrimmedString(
        required=True, data_key="fullName", validate=validate.Length(min=1, max=150)
    )
    date_of_birth = fields.Date(required=True, data_key="dateOfBirth")
    target_distance = RoundedInteger(
        required=True, data_key="targetDistance", validate=validate.Range(min=1)
    )
    created_at = Timestamp(dump_only=True, data_key="createdAt")

    @validates("date_of_birth")
    def validate_date_of_birth(self, value, **kwargs):
        if value > date.today():
            raise ValidationError("Date of birth cannot be in the future.")


class LoginSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    username = TrimmedString(required=True, validate=validate.Length(min=1))
    password = fields.String(required=True, validate=validate.Length(min=1))
