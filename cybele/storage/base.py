from abc import ABC, abstractmethod


class Storage(ABC):
    """CRUD access to users, workouts, exercises and runs.

    Implementations assign identifiers on creation and may raise
    :class:`cybele.errors.StorageError` from any call when the backend is
    unavailable. Date ranges are closed: ``start <= date <= end``.

    Creating a workout or run for an unknown user, or an exercise for an
    unknown workout, raises :class:`cybele.errors.NotFound`.
    """

    # Users
    @abstractmethod
    def create_user(self, data):
        """``data`` holds username, password_hash and the profile fields."""

    @abstractmethod
    def get_user_by_id(self, user_id):
        ...

    @abstractmethod
    def get_user_by_username(self, username):
        """Exact, case-sensitive match."""

    # Workouts
    @abstractmethod
    def create_workout(self, owner_id, data):
        ...

    @abstractmethod
    def get_workouts(self, owner_id):
        ...

    @abstractmethod
    def get_workouts_in_range(self, owner_id, start, end):
        ...

    @abstractmethod
    def get_workout(self, workout_id):
        ...

    @abstractmethod
    def delete_workout(self, workout_id):
        """Delete a workout and its exercises. Returns False if it did not exist."""

    # Exercises
    @abstractmethod
    def create_exercise(self, workout_id, data):
        ...

    @abstractmethod
    def get_exercises(self, workout_id):
        ...

    # Runs
    @abstractmethod
    def create_run(self, owner_id, data):
        ...

    @abstractmethod
    def get_runs(self, owner_id, start, end):
        ...
