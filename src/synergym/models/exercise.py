"""Exercise catalog model."""

from dataclasses import dataclass

# Category assigned to catalog entries that arrive without one ("other")
DEFAULT_CATEGORY = "기타"


@dataclass
class Exercise:
    """A catalog exercise. Reference data, never owned by a user."""

    name: str
    category: str = DEFAULT_CATEGORY
    description: str | None = None
    difficulty: str | None = None
    posture: str | None = None
    body_part: str | None = None
    thumbnail_url: str | None = None
    url: str | None = None  # Source page for the exercise
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "description": self.description,
            "difficulty": self.difficulty,
            "posture": self.posture,
            "body_part": self.body_part,
            "thumbnail_url": self.thumbnail_url,
            "url": self.url,
        }
