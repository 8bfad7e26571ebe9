"""User account model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Account identity referenced by routines and likes."""

    email: str
    name: str
    goal: str | None = None
    password_hash: str | None = None
    id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses (never exposes the hash)."""
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "goal": self.goal,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
