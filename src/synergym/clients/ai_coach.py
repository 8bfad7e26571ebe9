"""HTTP client for the external AI coach service."""

import logging
from typing import Any

import httpx

from ..errors import UpstreamError
from ..models.coach import CoachResponse
from ..settings import get_settings

logger = logging.getLogger(__name__)

COACH_PATH = "/ai-coach"


class HttpCoachClient:
    """Forwards coach requests to ``POST {base_url}/ai-coach``.

    No retries and no fallback: any failure is raised as UpstreamError.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self._base_url = (base_url or settings.ai_coach_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.ai_coach_timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self._base_url}{COACH_PATH}"

    async def ask(self, payload: dict[str, Any]) -> CoachResponse:
        """Send a request to the coach and reshape its reply."""
        logger.debug(f"AI coach request: {payload}")
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(self.url, json=payload)
        except httpx.TimeoutException as e:
            logger.error(f"AI coach timeout after {self._timeout}s: {e}")
            raise UpstreamError(f"AI coach request timed out after {self._timeout}s") from e
        except httpx.HTTPError as e:
            logger.error(f"AI coach unavailable at {self._base_url}: {e}")
            raise UpstreamError(f"AI coach is not available at {self._base_url}") from e

        if not response.is_success:
            logger.error(
                f"AI coach error: {response.status_code} - {response.text} "
                f"(request: {payload})"
            )
            raise UpstreamError(
                f"AI coach returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(
                "AI coach reply is not valid JSON",
                status_code=response.status_code,
                body=response.text,
            ) from e
        if not isinstance(data, dict):
            raise UpstreamError(
                "AI coach reply is not a JSON object",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            reply = CoachResponse.from_upstream(data)
        except ValueError as e:
            raise UpstreamError(
                str(e), status_code=response.status_code, body=response.text
            ) from e

        if reply.exercise_info is None:
            logger.debug("AI coach reply carried no exercise_info")
        return reply
