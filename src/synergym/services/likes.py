"""Exercise likes."""

import logging
from pathlib import Path

import aiosqlite

from ..db.engine import get_db_path, transaction
from ..db.repositories import ExerciseLikeRepository
from ..errors import ConflictError
from ..models.like import ExerciseLike
from .lookups import require_exercise, require_user
from .mapping import to_like

logger = logging.getLogger(__name__)


class ExerciseLikeService:
    """Service for user likes on exercises.

    Every operation resolves the user and/or exercise first, so asking about
    a nonexistent user or exercise raises NotFoundError rather than
    answering "not liked".
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def add(self, user_id: int, exercise_id: int) -> ExerciseLike:
        """Like an exercise.

        Raises:
            NotFoundError: If the user or exercise is missing.
            ConflictError: If the user already likes the exercise.
        """
        async with transaction(self.db_path) as db:
            await require_user(db, user_id)
            await require_exercise(db, exercise_id)

            likes = ExerciseLikeRepository(db)
            if await likes.exists(user_id, exercise_id):
                raise ConflictError(
                    f"User {user_id} already likes exercise {exercise_id}"
                )
            try:
                like_id = await likes.create(user_id, exercise_id)
            except aiosqlite.IntegrityError as e:
                # A concurrent request inserted the same pair after our check
                raise ConflictError(
                    f"User {user_id} already likes exercise {exercise_id}"
                ) from e

        logger.info(f"User {user_id} liked exercise {exercise_id}")
        return ExerciseLike(id=like_id, user_id=user_id, exercise_id=exercise_id)

    async def delete(self, user_id: int, exercise_id: int) -> bool:
        """Remove a like. Returns False when there was nothing to remove."""
        async with transaction(self.db_path) as db:
            await require_user(db, user_id)
            await require_exercise(db, exercise_id)
            removed = await ExerciseLikeRepository(db).delete(user_id, exercise_id)

        if removed:
            logger.info(f"User {user_id} unliked exercise {exercise_id}")
        return removed > 0

    async def is_liked(self, user_id: int, exercise_id: int) -> bool:
        """Check whether a user likes an exercise."""
        async with transaction(self.db_path) as db:
            await require_user(db, user_id)
            await require_exercise(db, exercise_id)
            return await ExerciseLikeRepository(db).exists(user_id, exercise_id)

    async def get_by_user(self, user_id: int) -> list[ExerciseLike]:
        """List a user's likes."""
        async with transaction(self.db_path) as db:
            await require_user(db, user_id)
            rows = await ExerciseLikeRepository(db).list_by_user(user_id)
        return [to_like(row) for row in rows]

    async def get_by_exercise(self, exercise_id: int) -> list[ExerciseLike]:
        """List the likes an exercise has received."""
        async with transaction(self.db_path) as db:
            await require_exercise(db, exercise_id)
            rows = await ExerciseLikeRepository(db).list_by_exercise(exercise_id)
        return [to_like(row) for row in rows]

    async def count_by_exercise(self, exercise_id: int) -> int:
        """Count the likes an exercise has received."""
        async with transaction(self.db_path) as db:
            await require_exercise(db, exercise_id)
            return await ExerciseLikeRepository(db).count_by_exercise(exercise_id)
