"""Service layer for synergym."""

from .exercises import ExerciseService
from .likes import ExerciseLikeService
from .routines import RoutineService
from .users import UserService

__all__ = [
    "ExerciseLikeService",
    "ExerciseService",
    "RoutineService",
    "UserService",
]
