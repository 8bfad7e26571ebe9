"""Entity lookups that raise NotFoundError instead of returning None."""

import aiosqlite

from ..db.models import DBExercise, DBRoutine, DBUser
from ..db.repositories import ExerciseRepository, RoutineRepository, UserRepository
from ..errors import NotFoundError


async def require_user(db: aiosqlite.Connection, user_id: int) -> DBUser:
    user = await UserRepository(db).get(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


async def require_exercise(db: aiosqlite.Connection, exercise_id: int) -> DBExercise:
    exercise = await ExerciseRepository(db).get(exercise_id)
    if exercise is None:
        raise NotFoundError("Exercise", exercise_id)
    return exercise


async def require_routine(db: aiosqlite.Connection, routine_id: int) -> DBRoutine:
    """Resolve a routine; soft-deleted routines count as missing."""
    routine = await RoutineRepository(db).get(routine_id)
    if routine is None:
        raise NotFoundError("Routine", routine_id)
    return routine
