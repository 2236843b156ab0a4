from datetime import date, datetime, timedelta

import pytest

from cybele.errors import ValidationError
from cybele.schemas import (
    exercise_schema,
    login_schema,
    run_schema,
    user_schema,
    validate_payload,
    workout_schema,
)


def fields_of(excinfo):
    return excinfo.value.fields


class TestRunSchema:
    def test_integer_distance(self):
        data = validate_payload(run_schema, {"distance": 10, "date": "2024-01-10T00:00:00Z"})
        assert data["distance"] == 10
        assert data["date"] == datetime(2024, 1, 10)

    @pytest.mark.parametrize("raw, expected", [
        ("10", 10),
        ("10.4", 10),
        (10.5, 11),
        (0.5, 1),
        (" 7 ", 7),
    ])
    def test_distance_is_rounded(self, raw, expected):
        assert validate_payload(run_schema, {"distance": raw})["distance"] == expected

    @pytest.mark.parametrize("raw", [0, -3, 0.4, "abc", "", True, None, "nan", [5]])
    def test_invalid_distance(self, raw):
        with pytest.raises(ValidationError) as excinfo:
            validate_payload(run_schema, {"distance": raw})
        assert fields_of(excinfo) == ["distance"]

    def test_missing_distance(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_payload(run_schema, {"date": "2024-01-10"})
        assert "distance" in excinfo.value.messages

    def test_date_is_optional(self):
        assert validate_payload(run_schema, {"distance": 3})["date"] is None

    def test_offset_is_converted_to_utc(self):
        data = validate_payload(run_schema, {"distance": 3, "date": "2024-01-10T05:00:00+02:00"})
        assert data["date"] == datetime(2024, 1, 10, 3, 0)
        assert data["date"].tzinfo is None

    def test_invalid_date(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_payload(run_schema, {"distance": 3, "date": "yesterday"})
        assert fields_of(excinfo) == ["date"]

    @pytest.mark.parametrize("raw", ["0001-01-01T00:30:00+01:00", "9999-12-31T23:30:00-01:00"])
    def test_date_outside_representable_range(self, raw):
        with pytest.raises(ValidationError) as excinfo:
            validate_payload(run_schema, {"distance": 3, "date": raw})
        assert fields_of(excinfo) == ["date"]

    @pytest.mark.parametrize("raw", [1e19, 2**31, "99999999999999999999", "1e400"])
    def test_distance_too_large(self, raw):
        with pytest.raises(ValidationError) as excinfo:
            validate_payload(run_schema, {"distance": raw})
        assert fields_of(excinfo) == ["distance"]

    def test_largest_distance(self):
        assert validate_payload(run_schema, {"distance": 2**31 - 1})["distance"] == 2**31 - 1

    def test_duration(self):
        assert validate_payload(run_schema, {"distance": 5, "duration": "27"})["duration"] == 27
        with pytest.raises(ValidationError):
            validate_payload(run_schema, {"distance": 5, "duration": 0})

    def test_unknown_keys_are_ignored(self):
        data = validate_payload(run_schema, {"distance": 5, "userId": 99, "id": 3})
        assert data == {"distance": 5, "date": None, "duration": None}

    def test_non_object_input(self):
        with pytest.raises(ValidationError):
            validate_payload(run_schema, ["distance", 5])
        with pytest.raises(ValidationError):
            validate_payload(run_schema, None)


class TestWorkoutSchema:
    def test_valid_workout(self):
        data = validate_payload(
            workout_schema, {"name": "Running", "duration": "30", "date": "2024-01-10"}
        )
        assert data == {"name": "Running", "duration": 30, "date": datetime(2024, 1, 10)}

    def test_earlier_variant_without_duration(self):
        data = validate_payload(workout_schema, {"name": "Boxing", "date": "2024-01-10T18:30:00Z"})
        assert data["duration"] is None

    def test_category_must_be_known(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_payload(workout_schema, {"name": "Knitting", "date": "2024-01-10"})
        assert fields_of(excinfo) == ["name"]

    def test_missing_fields_are_all_reported(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_payload(workout_schema, {})
        assert fields_of(excinfo) == ["date", "name"]

    def test_negative_duration(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_payload(workout_schema, {"name": "Yoga", "date": "2024-01-10", "duration": -5})
        assert fields_of(excinfo) == ["duration"]


class TestExerciseSchema:
    def test_coerces_numbers(self):
        data = validate_payload(
            exercise_schema, {"name": "Squat", "sets": "3", "reps": 10, "weight": "60"}
        )
        assert data == {"name": "Squat", "sets": 3, "reps": 10, "weight": 60}

    def test_bodyweight_is_allowed(self):
        data = validate_payload(exercise_schema, {"name": "Push-up", "sets": 3, "reps": 20, "weight": 0})
        assert data["weight"] == 0

    def test_rejects_blank_name_and_zero_sets(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_payload(exercise_schema, {"name": "   ", "sets": 0, "reps": 10, "weight": -1})
        assert fields_of(excinfo) == ["name", "sets", "weight"]

    def test_rejects_out_of_range_numbers(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_payload(exercise_schema, {"name": "Squat", "sets": 3, "reps": 1e12, "weight": "5e9"})
        assert fields_of(excinfo) == ["reps", "weight"]


class TestUserSchema:
    def test_camel_case_input(self):
        data = validate_payload(user_schema, {
            "username": "alex",
            "password": "x",
            "fullName": " Alex ",
            "dateOfBirth": "1990-01-01",
            "targetDistance": "5",
        })
        assert data == {
            "username": "alex",
            "password": "x",
            "full_name": "Alex",
            "date_of_birth": date(1990, 1, 1),
            "target_distance": 5,
        }

    def test_future_birth_date(self):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        with pytest.raises(ValidationError) as excinfo:
            validate_payload(user_schema, {
                "username": "alex", "password": "x", "fullName": "Alex",
                "dateOfBirth": tomorrow, "targetDistance": 5,
            })
        assert fields_of(excinfo) == ["dateOfBirth"]

    def test_password_is_never_dumped(self):
        class Stub:
            id = 1
            username = "alex"
            password = "x"
            password_hash = "pbkdf2:sha256:..."
            full_name = "Alex"
            date_of_birth = date(1990, 1, 1)
            target_distance = 5
            created_at = datetime(2024, 1, 1, 12, 0)

        dumped = user_schema.dump(Stub())
        assert "password" not in dumped
        assert "password_hash" not in dumped
        assert dumped["fullName"] == "Alex"
        assert dumped["dateOfBirth"] == "1990-01-01"
        assert dumped["createdAt"] == "2024-01-01T12:00:00Z"

    def test_login_requires_both_fields(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_payload(login_schema, {"username": "alex"})
        assert fields_of(excinfo) == ["password"]
