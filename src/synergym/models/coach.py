"""AI coach response model."""

from dataclasses import dataclass
from typing import Any

COACH_RESPONSE_TYPE = "ai_coach"


@dataclass
class CoachResponse:
    """Reply from the AI coach, reshaped into the domain's response shape.

    ``exercise_info`` is passed through from the upstream reply unmodified.
    """

    response: str
    exercise_info: dict[str, Any] | None = None
    type: str = COACH_RESPONSE_TYPE

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "type": self.type,
            "response": self.response,
            "exercise_info": self.exercise_info,
        }

    @classmethod
    def from_upstream(cls, data: dict) -> "CoachResponse":
        """Build from the upstream JSON object.

        Raises:
            ValueError: If ``response`` is missing or not a string, or
                ``exercise_info`` is present but not an object.
        """
        response = data.get("response")
        if not isinstance(response, str):
            raise ValueError("Coach reply has no 'response' string")
        exercise_info = data.get("exercise_info")
        if exercise_info is not None and not isinstance(exercise_info, dict):
            raise ValueError("Coach reply 'exercise_info' is not an object")
        return cls(response=response, exercise_info=exercise_info)
