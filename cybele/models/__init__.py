from .user import User
from .workout import Workout, WORKOUT_CATEGORIES
from .exercise import Exercise
from .run import Run

__all__ = [
    "User", "Workout", "Exercise", "Run", "WORKOUT_CATEGORIES",
]
