"""Exercise catalog queries."""

from pathlib import Path

from ..db.engine import get_db_path, transaction
from ..db.repositories import ExerciseRepository
from ..models.exercise import Exercise
from .lookups import require_exercise
from .mapping import to_exercise


class ExerciseService:
    """Read-only access to the exercise catalog."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get_exercise(self, exercise_id: int) -> Exercise:
        async with transaction(self.db_path) as db:
            return to_exercise(await require_exercise(db, exercise_id))

    async def list_exercises(self, category: str | None = None) -> list[Exercise]:
        async with transaction(self.db_path) as db:
            rows = await ExerciseRepository(db).list_all(category=category)
        return [to_exercise(row) for row in rows]

    async def search(self, query: str) -> list[Exercise]:
        async with transaction(self.db_path) as db:
            rows = await ExerciseRepository(db).search(query.strip())
        return [to_exercise(row) for row in rows]

    async def categories(self) -> dict[str, int]:
        """Map each category to its number of exercises."""
        async with transaction(self.db_path) as db:
            pairs = await ExerciseRepository(db).categories()
        return {category: total for category, total in pairs}
