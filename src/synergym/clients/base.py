"""Base protocol for the AI coach gateway."""

from typing import Any, Protocol, runtime_checkable

from ..models.coach import CoachResponse


@runtime_checkable
class CoachGateway(Protocol):
    """Protocol for AI coach backends."""

    async def ask(self, payload: dict[str, Any]) -> CoachResponse:
        """Forward a free-form request to the coach.

        Args:
            payload: JSON-serializable request body

        Returns:
            The coach's reply in the domain response shape

        Raises:
            UpstreamError: On a non-2xx status, a transport failure, or an
                unusable reply
        """
        ...
