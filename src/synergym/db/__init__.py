"""Database layer for synergym."""

from .engine import get_db_path, init_db, transaction
from .repositories import (
    ExerciseLikeRepository,
    ExerciseRepository,
    RoutineExerciseRepository,
    RoutineRepository,
    UserRepository,
)

__all__ = [
    "ExerciseLikeRepository",
    "ExerciseRepository",
    "get_db_path",
    "init_db",
    "RoutineExerciseRepository",
    "RoutineRepository",
    "transaction",
    "UserRepository",
]
