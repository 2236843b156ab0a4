import logging
import sqlite3
from functools import wraps

from sqlalchemy import desc, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from cybele.errors import NotFound, StorageError, ValidationError
from cybele.extensions import db
from cybele.models import Exercise, Run, User, Workout
from .base import Storage

logger = logging.getLogger(__name__)


def guarded(method):
    """Roll back and raise StorageError when the database call fails."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception(f"Storage failure in {method.__name__}")
            raise StorageError() from e
    return wrapper


@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite leaves FK constraints (and ON DELETE CASCADE) off per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class DatabaseStorage(Storage):
    """Storage backed by the Flask-SQLAlchemy session; one commit per write."""

    def _require_user(self, user_id):
        if db.session.get(User, user_id) is None:
            raise NotFound("User not found")

    @guarded
    def create_user(self, data):
        user = User(
            username=data["username"],
            password_hash=data["password_hash"],
            full_name=data["full_name"],
            date_of_birth=data["date_of_birth"],
            target_distance=data["target_distance"],
        )
        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            raise ValidationError({"username": ["Username already exists."]}) from e
        return user

    @guarded
    def get_user_by_id(self, user_id):
        return db.session.get(User, user_id)

    @guarded
    def get_user_by_username(self, username):
        return User.query.filter(User.username == username).first()

    @guarded
    def create_workout(self, owner_id, data):
        self._require_user(owner_id)
        workout = Workout(
            user_id=owner_id,
            name=data["name"],
            date=data["date"],
            duration=data.get("duration"),
        )
        db.session.add(workout)
        db.session.commit()
        return workout

    @guarded
    def get_workouts(self, owner_id):
        return Workout.query.filter_by(user_id=owner_id).order_by(
            desc(Workout.date), desc(Workout.id)
        ).all()

    @guarded
    def get_workouts_in_range(self, owner_id, start, end):
        return Workout.query.filter(
            Workout.user_id == owner_id,
            Workout.date >= start,
            Workout.date <= end,
        ).order_by(desc(Workout.date), desc(Workout.id)).all()

    @guarded
    def get_workout(self, workout_id):
        return db.session.get(Workout, workout_id)

    @guarded
    def delete_workout(self, workout_id):
        workout = db.session.get(Workout, workout_id)
        if workout is None:
            return False
        # exercises go with it through the delete-orphan cascade
        db.session.delete(workout)
        db.session.commit()
        return True

    @guarded
    def create_exercise(self, workout_id, data):
        if db.session.get(Workout, workout_id) is None:
            raise NotFound("Workout not found")
        exercise = Exercise(
            workout_id=workout_id,
            name=data["name"],
            sets=data["sets"],
            reps=data["reps"],
            weight=data["weight"],
        )
        db.session.add(exercise)
        db.session.commit()
        return exercise

    @guarded
    def get_exercises(self, workout_id):
        return Exercise.query.filter_by(workout_id=workout_id).order_by(Exercise.id).all()

    @guarded
    def create_run(self, owner_id, data):
        self._require_user(owner_id)
        run = Run(
            user_id=owner_id,
            distance=data["distance"],
            date=data["date"],
            duration=data.get("duration"),
        )
        db.session.add(run)
        db.session.commit()
        return run

    @guarded
    def get_runs(self, owner_id, start, end):
        return Run.query.filter(
            Run.user_id == owner_id,
            Run.date.between(start, end),
        ).order_by(Run.date, Run.id).all()
