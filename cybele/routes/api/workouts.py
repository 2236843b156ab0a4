from datetime import datetime

from flask import current_app, jsonify, request

from cybele.errors import NotFound
from cybele.schemas import (
    exercise_schema,
    exercises_schema,
    validate_payload,
    workout_schema,
    workouts_schema,
)
from cybele.schemas.query import workout_list_query_schema
from cybele.services.run_stats import day_bounds
from cybele.storage import get_storage
from cybele.utils.decorators import login_required

from . import api_bp


def get_owned_workout(storage, workout_id, user):
    """Fetch a workout the user owns.

    Someone else's workout is reported exactly like a missing one so the
    response never confirms that the id exists.
    """
    workout = storage.get_workout(workout_id)
    if workout is None or workout.user_id != user.id:
        raise NotFound("Workout not found")
    return workout


# =========================================================
# Workouts
# =========================================================

@api_bp.route("/workouts", methods=["POST"])
@login_required
def create_workout(current_user):
    data = validate_payload(workout_schema, request.get_json(silent=True))
    workout = get_storage().create_workout(current_user.id, data)
    current_app.logger.info(f"User {current_user.id} created workout {workout.id}")
    return jsonify(workout_schema.dump(workout)), 201


@api_bp.route("/workouts", methods=["GET"])
@login_required
def list_workouts(current_user):
    query = validate_payload(workout_list_query_schema, request.args)
    storage = get_storage()

    day = query["date"] or (datetime.utcnow().date() if query["today"] else None)
    if day is None:
        workouts = storage.get_workouts(current_user.id)
    else:
        workouts = storage.get_workouts_in_range(current_user.id, *day_bounds(day))
    return jsonify(workouts_schema.dump(workouts))


@api_bp.route("/workouts/<int:workout_id>", methods=["GET"])
@login_required
def get_workout(current_user, workout_id):
    storage = get_storage()
    workout = get_owned_workout(storage, workout_id, current_user)
    payload = workout_schema.dump(workout)
    payload["exercises"] = exercises_schema.dump(storage.get_exercises(workout.id))
    return jsonify(payload)


@api_bp.route("/workouts/<int:workout_id>", methods=["DELETE"])
@login_required
def delete_workout(current_user, workout_id):
    storage = get_storage()
    get_owned_workout(storage, workout_id, current_user)
    if not storage.delete_workout(workout_id):
        raise NotFound("Workout not found")
    current_app.logger.info(f"User {current_user.id} deleted workout {workout_id}")
    return jsonify({"message": "Workout deleted"}), 200


# =========================================================
# Exercises
# =========================================================

@api_bp.route("/workouts/<int:workout_id>/exercises", methods=["POST"])
@login_required
def create_exercise(current_user, workout_id):
    storage = get_storage()
    workout = get_owned_workout(storage, workout_id, current_user)
    data = validate_payload(exercise_schema, request.get_json(silent=True))
    exercise = storage.create_exercise(workout.id, data)
    return jsonify(exercise_schema.dump(exercise)), 201


@api_bp.route("/workouts/<int:workout_id>/exercises", methods=["GET"])
@login_required
def list_exercises(current_user, workout_id):
    storage = get_storage()
    workout = get_owned_workout(storage, workout_id, current_user)
    return jsonify(exercises_schema.dump(storage.get_exercises(workout.id)))
