"""Exercise catalog loader from JSON."""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any

from ..db.engine import get_db_path, transaction
from ..db.repositories import ExerciseRepository
from ..models.exercise import DEFAULT_CATEGORY, Exercise
from ..settings import get_settings

logger = logging.getLogger(__name__)

# Optional text fields where a blank string means "absent"
_OPTIONAL_FIELDS = {
    "description": "description",
    "difficulty": "difficulty",
    "posture": "posture",
    "body_part": "bodyPart",
    "thumbnail_url": "thumbnail_url",
    "url": "url",
}


def get_exercises_json_path() -> Path:
    """Get the path to the exercise seed file."""
    override = get_settings().seed_path
    if override is not None:
        return override
    return Path(__file__).parent / "exercises.json"


def _clean(value: Any) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def record_to_exercise(record: dict[str, Any]) -> Exercise | None:
    """Validate one raw seed record.

    Returns None when the record has no usable name. A missing or blank
    category becomes DEFAULT_CATEGORY; blank optional fields become None.
    """
    name = _clean(record.get("name"))
    if name is None:
        return None
    optional = {field: _clean(record.get(key)) for field, key in _OPTIONAL_FIELDS.items()}
    return Exercise(
        name=name,
        category=_clean(record.get("category")) or DEFAULT_CATEGORY,
        **optional,
    )


def load_exercise_records(json_path: Path | None = None) -> list[Exercise]:
    """Load exercises from a JSON array of records.

    Invalid records are skipped with a warning.

    Raises:
        ValueError: If the file does not contain a JSON array.
    """
    if json_path is None:
        json_path = get_exercises_json_path()

    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of exercises in {json_path}")

    exercises = []
    skipped = 0
    for record in data:
        exercise = record_to_exercise(record) if isinstance(record, dict) else None
        if exercise is None:
            logger.warning(f"Skipping invalid exercise record: {record!r}")
            skipped += 1
            continue
        exercises.append(exercise)

    logger.info(f"Loaded {len(exercises)} exercises from {json_path} ({skipped} skipped)")
    return exercises


async def seed_exercises(db_path: Path | None = None, json_path: Path | None = None) -> int:
    """Seed the exercise catalog if it is empty.

    Args:
        db_path: Optional database path. Uses default if not provided.
        json_path: Optional seed file. Uses the configured file if not provided.

    Returns:
        Number of exercises inserted (0 when the catalog was already populated)
    """
    if db_path is None:
        db_path = get_db_path()

    async with transaction(db_path) as db:
        repo = ExerciseRepository(db)
        if await repo.count() > 0:
            logger.info("Exercise catalog already populated; skipping seed")
            return 0

        exercises = load_exercise_records(json_path)
        await repo.reset_id_sequence()
        count = await repo.add_many(exercises)

    categories = Counter(exercise.category for exercise in exercises)
    logger.info(f"Seeded {count} exercises")
    for category, total in sorted(categories.items()):
        logger.info(f"  {category}: {total} exercises")
    return count
