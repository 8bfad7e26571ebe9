"""Data models for synergym."""

from .coach import CoachResponse
from .exercise import DEFAULT_CATEGORY, Exercise
from .like import ExerciseLike
from .routine import Routine, RoutineExercise, RoutineExerciseSpec, RoutineSpec
from .user import User

__all__ = [
    "CoachResponse",
    "DEFAULT_CATEGORY",
    "Exercise",
    "ExerciseLike",
    "Routine",
    "RoutineExercise",
    "RoutineExerciseSpec",
    "RoutineSpec",
    "User",
]
