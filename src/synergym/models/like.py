"""Exercise like model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class ExerciseLike:
    """A user's endorsement of one exercise. Unique per (user, exercise)."""

    user_id: int
    exercise_id: int
    id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "exercise_id": self.exercise_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
