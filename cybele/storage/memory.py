import itertools
import threading
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from cybele.errors import NotFound, ValidationError
from .base import Storage


@dataclass(frozen=True)
class UserRecord:
    id: int
    username: str
    password_hash: str
    full_name: str
    date_of_birth: date
    target_distance: int
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True)
class WorkoutRecord:
    id: int
    user_id: int
    name: str
    date: datetime
    duration: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True)
class ExerciseRecord:
    id: int
    workout_id: int
    name: str
    sets: int
    reps: int
    weight: int


@dataclass(frozen=True)
class RunRecord:
    id: int
    user_id: int
    distance: int
    date: datetime
    duration: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)


class MemoryStorage(Storage):
    """Process-local storage backed by dicts.

    Every public call holds the lock for its whole body, so individual calls
    are atomic. Ids come from per-entity counters and are never reused.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users = {}
        self._workouts = {}
        self._exercises = {}
        self._runs = {}
        self._ids = {
            "user": itertools.count(1),
            "workout": itertools.count(1),
            "exercise": itertools.count(1),
            "run": itertools.count(1),
        }

    def _next_id(self, kind):
        return next(self._ids[kind])

    def _require_user(self, user_id):
        # caller holds the lock
        if user_id not in self._users:
            raise NotFound("User not found")

    # ------- users -------
    def create_user(self, data):
        with self._lock:
            if any(u.username == data["username"] for u in self._users.values()):
                raise ValidationError({"username": ["Username already exists."]})
            user = UserRecord(
                id=self._next_id("user"),
                username=data["username"],
                password_hash=data["password_hash"],
                full_name=data["full_name"],
                date_of_birth=data["date_of_birth"],
                target_distance=data["target_distance"],
            )
            self._users[user.id] = user
            return user

    def get_user_by_id(self, user_id):
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username):
        with self._lock:
            return next((u for u in self._users.values() if u.username == username), None)

    # ------- workouts -------
    def create_workout(self, owner_id, data):
        with self._lock:
            self._require_user(owner_id)
            workout = WorkoutRecord(
                id=self._next_id("workout"),
                user_id=owner_id,
                name=data["name"],
                date=data["date"],
                duration=data.get("duration"),
            )
            self._workouts[workout.id] = workout
            return workout

    def get_workouts(self, owner_id):
        with self._lock:
            workouts = [w for w in self._workouts.values() if w.user_id == owner_id]
        return sorted(workouts, key=lambda w: (w.date, w.id), reverse=True)

    def get_workouts_in_range(self, owner_id, start, end):
        with self._lock:
            workouts = [
                w for w in self._workouts.values()
                if w.user_id == owner_id and start <= w.date <= end
            ]
        return sorted(workouts, key=lambda w: (w.date, w.id), reverse=True)

    def get_workout(self, workout_id):
        with self._lock:
            return self._workouts.get(workout_id)

    def delete_workout(self, workout_id):
        with self._lock:
            if self._workouts.pop(workout_id, None) is None:
                return False
            orphaned = [eid for eid, e in self._exercises.items() if e.workout_id == workout_id]
            for exercise_id in orphaned:
                del self._exercises[exercise_id]
            return True

    # ------- exercises -------
    def create_exercise(self, workout_id, data):
        with self._lock:
            if workout_id not in self._workouts:
                raise NotFound("Workout not found")
            exercise = ExerciseRecord(
                id=self._next_id("exercise"),
                workout_id=workout_id,
                name=data["name"],
                sets=data["sets"],
                reps=data["reps"],
                weight=data["weight"],
            )
            self._exercises[exercise.id] = exercise
            return exercise

    def get_exercises(self, workout_id):
        with self._lock:
            exercises = [e for e in self._exercises.values() if e.workout_id == workout_id]
        return sorted(exercises, key=lambda e: e.id)

    # ------- runs -------
    def create_run(self, owner_id, data):
        with self._lock:
            self._require_user(owner_id)
            run = RunRecord(
                id=self._next_id("run"),
                user_id=owner_id,
                distance=data["distance"],
                date=data["date"],
                duration=data.get("duration"),
            )
            self._runs[run.id] = run
            return run

    def get_runs(self, owner_id, start, end):
        with self._lock:
            runs = [
                r for r in self._runs.values()
                if r.user_id == owner_id and start <= r.date <= end
            ]
        return sorted(runs, key=lambda r: (r.date, r.id))
