import math
from datetime import date, datetime, time, timezone

from marshmallow import fields

# Largest value an INTEGER column holds on every supported database.
MAX_INTEGER = 2**31 - 1


def to_utc_naive(value):
    """Normalize a datetime to naive UTC, the form every row is stored in."""
    # may raise OverflowError near datetime.min / datetime.max
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def isoformat_utc(value):
    if value is None:
        return None
    return to_utc_naive(value).isoformat() + "Z"


class TrimmedString(fields.String):
    """String with surrounding whitespace removed before validation."""

    def _deserialize(self, value, attr, data, **kwargs):
        return super()._deserialize(value, attr, data, **kwargs).strip()


class RoundedInteger(fields.Float):
    """Integer that accepts numeric strings and fractional input.

    Fractions are rounded half up, so ``"10.5"`` loads as ``11``. Magnitudes
    beyond ``MAX_INTEGER`` are rejected before any rounding.
    """

    default_error_messages = {
        "invalid": "Not a valid number.",
        "too_large": "Must be between -{max} and {max}.",
    }

    def _deserialize(self, value, attr, data, **kwargs):
        number = super()._deserialize(value, attr, data, **kwargs)
        if abs(number) > MAX_INTEGER:
            raise self.make_error("too_large", max=MAX_INTEGER)
        return int(math.floor(number + 0.5))

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return int(value)


class Timestamp(fields.Field):
    """ISO-8601 date or datetime, loaded as a naive UTC datetime."""

    default_error_messages = {"invalid": "Not a valid ISO-8601 date or datetime."}

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime.combine(value, time.min)
        elif isinstance(value, str):
            text = value.strip()
            if text[-1:] in ("Z", "z"):
                text = text[:-1] + "+00:00"
            try:
                parsed = datetime.fromisoformat(text)
            except ValueError as err:
                raise self.make_error("invalid") from err
        else:
            raise self.make_error("invalid")
        try:
            return to_utc_naive(parsed)
        except OverflowError as err:
            raise self.make_error("invalid") from err

    def _serialize(self, value, attr, obj, **kwargs):
        return isoformat_utc(value)
