"""Routine aggregate models."""

from dataclasses import dataclass, field
from datetime import datetime

from .exercise import Exercise


@dataclass
class RoutineExerciseSpec:
    """One requested member of a routine, as supplied by a caller."""

    exercise_id: int


@dataclass
class RoutineSpec:
    """Caller-supplied description of a routine.

    The position of each entry in ``exercises`` becomes its order.
    """

    name: str
    description: str = ""
    exercises: list[RoutineExerciseSpec] = field(default_factory=list)


@dataclass
class RoutineExercise:
    """An ordered member of a routine, with its exercise resolved."""

    routine_id: int
    exercise_id: int
    order: int  # Position within the routine, contiguous from 0
    exercise: Exercise | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "id": self.id,
            "routine_id": self.routine_id,
            "exercise_id": self.exercise_id,
            "order": self.order,
            "exercise": self.exercise.to_dict() if self.exercise else None,
        }


@dataclass
class Routine:
    """A user-owned, named, ordered list of exercises."""

    name: str
    user_id: int
    description: str = ""
    exercises: list[RoutineExercise] = field(default_factory=list)
    deleted: bool = False
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def exercise_ids(self) -> list[int]:
        """Exercise ids in routine order."""
        return [member.exercise_id for member in self.exercises]

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "user_id": self.user_id,
            "exercises": [member.to_dict() for member in self.exercises],
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def get_summary(self) -> str:
        """Get a human-readable summary of the routine."""
        lines = [f"{self.name} (ID: {self.id}, user {self.user_id})"]
        if self.description:
            lines.append(self.description)
        if not self.exercises:
            lines.append("  (no exercises)")
        for member in self.exercises:
            name = member.exercise.name if member.exercise else f"exercise {member.exercise_id}"
            lines.append(f"  {member.order + 1}. {name}")
        return "\n".join(lines)
