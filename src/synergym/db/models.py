"""Database row definitions returned by the repositories."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class DBUser:
    """Database representation of a user."""

    id: int
    email: str
    name: str
    password_hash: str | None
    goal: str | None
    created_at: datetime | None


@dataclass
class DBExercise:
    """Database representation of a catalog exercise."""

    id: int
    name: str
    category: str | None
    description: str | None
    difficulty: str | None
    posture: str | None
    body_part: str | None
    thumbnail_url: str | None
    url: str | None


@dataclass
class DBRoutineExercise:
    """Database representation of a routine member.

    ``exercise`` is filled when the row was loaded through a join.
    """

    id: int
    routine_id: int
    exercise_id: int
    exercise_order: int
    exercise: DBExercise | None = None


@dataclass
class DBRoutine:
    """Database representation of a routine.

    ``exercises`` is only populated by joined list queries.
    """

    id: int
    user_id: int
    name: str
    description: str
    deleted: bool
    created_at: datetime | None
    updated_at: datetime | None
    exercises: list[DBRoutineExercise] = field(default_factory=list)


@dataclass
class DBExerciseLike:
    """Database representation of an exercise like."""

    id: int
    user_id: int
    exercise_id: int
    created_at: datetime | None
