"""Conversions from database rows to the views services return."""

from ..db.models import DBExercise, DBExerciseLike, DBRoutine, DBRoutineExercise, DBUser
from ..models.exercise import DEFAULT_CATEGORY, Exercise
from ..models.like import ExerciseLike
from ..models.routine import Routine, RoutineExercise
from ..models.user import User


def to_exercise(row: DBExercise) -> Exercise:
    return Exercise(
        id=row.id,
        name=row.name,
        category=row.category or DEFAULT_CATEGORY,
        description=row.description,
        difficulty=row.difficulty,
        posture=row.posture,
        body_part=row.body_part,
        thumbnail_url=row.thumbnail_url,
        url=row.url,
    )


def to_user(row: DBUser) -> User:
    return User(
        id=row.id,
        email=row.email,
        name=row.name,
        goal=row.goal,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


def to_like(row: DBExerciseLike) -> ExerciseLike:
    return ExerciseLike(
        id=row.id,
        user_id=row.user_id,
        exercise_id=row.exercise_id,
        created_at=row.created_at,
    )


def to_routine_exercise(row: DBRoutineExercise) -> RoutineExercise:
    return RoutineExercise(
        id=row.id,
        routine_id=row.routine_id,
        exercise_id=row.exercise_id,
        order=row.exercise_order,
        exercise=to_exercise(row.exercise) if row.exercise else None,
    )


def to_routine(row: DBRoutine, members: list[DBRoutineExercise] | None = None) -> Routine:
    """Compose a routine view.

    Members are sorted by their order column so the view never depends on
    the order rows came back from storage.
    """
    if members is None:
        members = row.exercises
    ordered = sorted(members, key=lambda member: member.exercise_order)
    return Routine(
        id=row.id,
        name=row.name,
        description=row.description,
        user_id=row.user_id,
        exercises=[to_routine_exercise(member) for member in ordered],
        deleted=row.deleted,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
