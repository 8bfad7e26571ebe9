"""Data access layer for synergym.

Every repository works on a connection handed in by the caller, so that
several repositories can share one ``transaction()``.
"""

from datetime import datetime

import aiosqlite

from ..models.exercise import Exercise
from .models import DBExercise, DBExerciseLike, DBRoutine, DBRoutineExercise, DBUser

# Exercise columns selected alongside routine members in joined queries
_JOINED_EXERCISE_COLUMNS = """
    e.name AS exercise_name, e.category AS exercise_category,
    e.description AS exercise_description, e.difficulty AS exercise_difficulty,
    e.posture AS exercise_posture, e.body_part AS exercise_body_part,
    e.thumbnail_url AS exercise_thumbnail_url, e.url AS exercise_url
"""


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def _row_to_joined_exercise(row: aiosqlite.Row, exercise_id: int) -> DBExercise | None:
    """Convert the ``exercise_*`` columns of a joined row to a DBExercise."""
    if row["exercise_name"] is None:
        return None
    return DBExercise(
        id=exercise_id,
        name=row["exercise_name"],
        category=row["exercise_category"],
        description=row["exercise_description"],
        difficulty=row["exercise_difficulty"],
        posture=row["exercise_posture"],
        body_part=row["exercise_body_part"],
        thumbnail_url=row["exercise_thumbnail_url"],
        url=row["exercise_url"],
    )


class UserRepository:
    """Repository for user accounts."""

    def __init__(self, db: aiosqlite.Connection):
        self.db = db

    async def create(
        self,
        email: str,
        name: str,
        goal: str | None = None,
        password_hash: str | None = None,
    ) -> int:
        """Create a new user."""
        cursor = await self.db.execute(
            """
            INSERT INTO users (email, name, password_hash, goal)
            VALUES (?, ?, ?, ?)
            """,
            (email, name, password_hash, goal),
        )
        return cursor.lastrowid

    async def get(self, user_id: int) -> DBUser | None:
        """Get a user by ID."""
        cursor = await self.db.execute("SELECT * FROM users WHERE id = ?", (user_id,))
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_user(row)

    async def get_by_email(self, email: str) -> DBUser | None:
        """Get a user by email address."""
        cursor = await self.db.execute("SELECT * FROM users WHERE email = ?", (email,))
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_user(row)

    async def list_all(self) -> list[DBUser]:
        """List all users."""
        cursor = await self.db.execute("SELECT * FROM users ORDER BY id")
        rows = await cursor.fetchall()
        return [self._row_to_user(row) for row in rows]

    def _row_to_user(self, row: aiosqlite.Row) -> DBUser:
        """Convert a database row to a DBUser."""
        return DBUser(
            id=row["id"],
            email=row["email"],
            name=row["name"],
            password_hash=row["password_hash"],
            goal=row["goal"],
            created_at=_parse_timestamp(row["created_at"]),
        )


class ExerciseRepository:
    """Repository for the exercise catalog."""

    def __init__(self, db: aiosqlite.Connection):
        self.db = db

    async def get(self, exercise_id: int) -> DBExercise | None:
        """Get an exercise by ID."""
        cursor = await self.db.execute(
            "SELECT * FROM exercises WHERE id = ?", (exercise_id,)
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_exercise(row)

    async def list_all(self, category: str | None = None) -> list[DBExercise]:
        """List all exercises, optionally limited to one category."""
        if category:
            cursor = await self.db.execute(
                "SELECT * FROM exercises WHERE category = ? ORDER BY id", (category,)
            )
        else:
            cursor = await self.db.execute("SELECT * FROM exercises ORDER BY id")
        rows = await cursor.fetchall()
        return [self._row_to_exercise(row) for row in rows]

    async def search(self, query: str) -> list[DBExercise]:
        """Search exercises by name substring."""
        cursor = await self.db.execute(
            "SELECT * FROM exercises WHERE name LIKE ? ORDER BY name",
            (f"%{query}%",),
        )
        rows = await cursor.fetchall()
        return [self._row_to_exercise(row) for row in rows]

    async def categories(self) -> list[tuple[str, int]]:
        """List (category, exercise count) pairs."""
        cursor = await self.db.execute(
            """
            SELECT category, COUNT(*) AS total FROM exercises
            GROUP BY category ORDER BY category
            """
        )
        rows = await cursor.fetchall()
        return [(row["category"], row["total"]) for row in rows]

    async def count(self) -> int:
        """Count catalog entries."""
        cursor = await self.db.execute("SELECT COUNT(*) FROM exercises")
        row = await cursor.fetchone()
        return row[0]

    async def add(self, exercise: Exercise) -> int:
        """Add a new exercise."""
        cursor = await self.db.execute(
            """
            INSERT INTO exercises
            (name, category, description, difficulty, posture, body_part, thumbnail_url, url)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            self._exercise_params(exercise),
        )
        return cursor.lastrowid

    async def add_many(self, exercises: list[Exercise]) -> int:
        """Bulk-insert exercises and return how many were written."""
        await self.db.executemany(
            """
            INSERT INTO exercises
            (name, category, description, difficulty, posture, body_part, thumbnail_url, url)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [self._exercise_params(exercise) for exercise in exercises],
        )
        return len(exercises)

    async def reset_id_sequence(self) -> None:
        """Restart exercise ids at 1 (only meaningful on an empty table)."""
        await self.db.execute("DELETE FROM sqlite_sequence WHERE name = 'exercises'")

    def _exercise_params(self, exercise: Exercise) -> tuple:
        return (
            exercise.name,
            exercise.category,
            exercise.description,
            exercise.difficulty,
            exercise.posture,
            exercise.body_part,
            exercise.thumbnail_url,
            exercise.url,
        )

    def _row_to_exercise(self, row: aiosqlite.Row) -> DBExercise:
        """Convert a database row to a DBExercise."""
        return DBExercise(
            id=row["id"],
            name=row["name"],
            category=row["category"],
            description=row["description"],
            difficulty=row["difficulty"],
            posture=row["posture"],
            body_part=row["body_part"],
            thumbnail_url=row["thumbnail_url"],
            url=row["url"],
        )


class RoutineRepository:
    """Repository for routines."""

    def __init__(self, db: aiosqlite.Connection):
        self.db = db

    async def create(self, user_id: int, name: str, description: str = "") -> int:
        """Create a new routine with no members."""
        cursor = await self.db.execute(
            "INSERT INTO routines (user_id, name, description) VALUES (?, ?, ?)",
            (user_id, name, description),
        )
        return cursor.lastrowid

    async def get(self, routine_id: int, include_deleted: bool = False) -> DBRoutine | None:
        """Get a routine by ID. Soft-deleted routines are hidden by default."""
        cursor = await self.db.execute(
            "SELECT * FROM routines WHERE id = ?", (routine_id,)
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        routine = self._row_to_routine(row)
        if routine.deleted and not include_deleted:
            return None
        return routine

    async def update(self, routine_id: int, name: str, description: str) -> None:
        """Update a routine's name and description."""
        await self.db.execute(
            """
            UPDATE routines SET
                name = ?, description = ?, updated_at = CURRENT_TIMESTAMP
            WHERE id = ?
            """,
            (name, description, routine_id),
        )

    async def soft_delete(self, routine_id: int) -> None:
        """Flag a routine as deleted, keeping its row."""
        await self.db.execute(
            """
            UPDATE routines SET deleted = 1, updated_at = CURRENT_TIMESTAMP
            WHERE id = ?
            """,
            (routine_id,),
        )

    async def list_with_exercises(
        self,
        user_id: int | None = None,
        name: str | None = None,
    ) -> list[DBRoutine]:
        """List non-deleted routines with their members in a single query.

        Routines, their members and the members' exercises are fetched with
        one LEFT JOIN, so the cost does not grow with the number of routines.
        Routines without members come back with an empty ``exercises`` list.
        """
        conditions = ["r.deleted = 0"]
        params: list = []
        if user_id is not None:
            conditions.append("r.user_id = ?")
            params.append(user_id)
        if name is not None:
            conditions.append("r.name = ?")
            params.append(name)

        cursor = await self.db.execute(
            f"""
            SELECT r.*,
                   re.id AS member_id, re.exercise_id AS member_exercise_id,
                   re.exercise_order,
                   {_JOINED_EXERCISE_COLUMNS}
            FROM routines r
            LEFT JOIN routine_exercises re ON re.routine_id = r.id
            LEFT JOIN exercises e ON e.id = re.exercise_id
            WHERE {" AND ".join(conditions)}
            ORDER BY r.id, re.exercise_order
            """,
            params,
        )
        rows = await cursor.fetchall()

        routines: dict[int, DBRoutine] = {}
        for row in rows:
            routine = routines.get(row["id"])
            if routine is None:
                routine = self._row_to_routine(row)
                routines[routine.id] = routine
            if row["member_id"] is None:
                continue
            routine.exercises.append(
                DBRoutineExercise(
                    id=row["member_id"],
                    routine_id=routine.id,
                    exercise_id=row["member_exercise_id"],
                    exercise_order=row["exercise_order"],
                    exercise=_row_to_joined_exercise(row, row["member_exercise_id"]),
                )
            )
        return list(routines.values())

    def _row_to_routine(self, row: aiosqlite.Row) -> DBRoutine:
        """Convert a database row to a DBRoutine."""
        return DBRoutine(
            id=row["id"],
            user_id=row["user_id"],
            name=row["name"],
            description=row["description"] or "",
            deleted=bool(row["deleted"]),
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )


class RoutineExerciseRepository:
    """Repository for the ordered members of a routine."""

    def __init__(self, db: aiosqlite.Connection):
        self.db = db

    async def create(self, routine_id: int, exercise_id: int, order: int) -> int:
        """Insert one member at the given order."""
        cursor = await self.db.execute(
            """
            INSERT INTO routine_exercises (routine_id, exercise_id, exercise_order)
            VALUES (?, ?, ?)
            """,
            (routine_id, exercise_id, order),
        )
        return cursor.lastrowid

    async def get(self, member_id: int) -> DBRoutineExercise | None:
        """Get one member by ID, with its exercise."""
        cursor = await self.db.execute(
            f"""
            SELECT re.*, {_JOINED_EXERCISE_COLUMNS}
            FROM routine_exercises re
            LEFT JOIN exercises e ON e.id = re.exercise_id
            WHERE re.id = ?
            """,
            (member_id,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_member(row)

    async def list_by_routine(self, routine_id: int) -> list[DBRoutineExercise]:
        """List a routine's members in order, with their exercises."""
        cursor = await self.db.execute(
            f"""
            SELECT re.*, {_JOINED_EXERCISE_COLUMNS}
            FROM routine_exercises re
            LEFT JOIN exercises e ON e.id = re.exercise_id
            WHERE re.routine_id = ?
            ORDER BY re.exercise_order
            """,
            (routine_id,),
        )
        rows = await cursor.fetchall()
        return [self._row_to_member(row) for row in rows]

    async def count_by_routine(self, routine_id: int) -> int:
        """Count a routine's members."""
        cursor = await self.db.execute(
            "SELECT COUNT(*) FROM routine_exercises WHERE routine_id = ?",
            (routine_id,),
        )
        row = await cursor.fetchone()
        return row[0]

    async def shift_orders(self, routine_id: int, from_order: int, delta: int) -> None:
        """Add ``delta`` to the order of every member at or after ``from_order``."""
        await self.db.execute(
            """
            UPDATE routine_exercises SET exercise_order = exercise_order + ?
            WHERE routine_id = ? AND exercise_order >= ?
            """,
            (delta, routine_id, from_order),
        )

    async def delete(self, member_id: int) -> None:
        """Delete one member."""
        await self.db.execute("DELETE FROM routine_exercises WHERE id = ?", (member_id,))

    async def delete_by_routine(self, routine_id: int) -> int:
        """Delete every member of a routine."""
        cursor = await self.db.execute(
            "DELETE FROM routine_exercises WHERE routine_id = ?", (routine_id,)
        )
        return cursor.rowcount

    def _row_to_member(self, row: aiosqlite.Row) -> DBRoutineExercise:
        """Convert a database row to a DBRoutineExercise."""
        return DBRoutineExercise(
            id=row["id"],
            routine_id=row["routine_id"],
            exercise_id=row["exercise_id"],
            exercise_order=row["exercise_order"],
            exercise=_row_to_joined_exercise(row, row["exercise_id"]),
        )


class ExerciseLikeRepository:
    """Repository for exercise likes."""

    def __init__(self, db: aiosqlite.Connection):
        self.db = db

    async def create(self, user_id: int, exercise_id: int) -> int:
        """Insert a like. Raises aiosqlite.IntegrityError on a duplicate pair."""
        cursor = await self.db.execute(
            "INSERT INTO exercise_likes (user_id, exercise_id) VALUES (?, ?)",
            (user_id, exercise_id),
        )
        return cursor.lastrowid

    async def exists(self, user_id: int, exercise_id: int) -> bool:
        """Check whether the user likes the exercise."""
        cursor = await self.db.execute(
            "SELECT 1 FROM exercise_likes WHERE user_id = ? AND exercise_id = ?",
            (user_id, exercise_id),
        )
        return await cursor.fetchone() is not None

    async def delete(self, user_id: int, exercise_id: int) -> int:
        """Delete the like for a pair, returning the number of rows removed."""
        cursor = await self.db.execute(
            "DELETE FROM exercise_likes WHERE user_id = ? AND exercise_id = ?",
            (user_id, exercise_id),
        )
        return cursor.rowcount

    async def list_by_user(self, user_id: int) -> list[DBExerciseLike]:
        """List a user's likes."""
        cursor = await self.db.execute(
            "SELECT * FROM exercise_likes WHERE user_id = ? ORDER BY id", (user_id,)
        )
        rows = await cursor.fetchall()
        return [self._row_to_like(row) for row in rows]

    async def list_by_exercise(self, exercise_id: int) -> list[DBExerciseLike]:
        """List the likes an exercise has received."""
        cursor = await self.db.execute(
            "SELECT * FROM exercise_likes WHERE exercise_id = ? ORDER BY id",
            (exercise_id,),
        )
        rows = await cursor.fetchall()
        return [self._row_to_like(row) for row in rows]

    async def count_by_exercise(self, exercise_id: int) -> int:
        """Count the likes an exercise has received."""
        cursor = await self.db.execute(
            "SELECT COUNT(*) FROM exercise_likes WHERE exercise_id = ?",
            (exercise_id,),
        )
        row = await cursor.fetchone()
        return row[0]

    def _row_to_like(self, row: aiosqlite.Row) -> DBExerciseLike:
        """Convert a database row to a DBExerciseLike."""
        return DBExerciseLike(
            id=row["id"],
            user_id=row["user_id"],
            exercise_id=row["exercise_id"],
            created_at=_parse_timestamp(row["created_at"]),
        )
