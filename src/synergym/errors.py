"""Error types raised by synergym services and clients."""

from typing import Any


class SynergymError(Exception):
    """Base class for all synergym errors."""


class NotFoundError(SynergymError):
    """A referenced user, exercise, routine or routine member does not exist."""

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class ConflictError(SynergymError):
    """The requested write would duplicate an existing record."""


class UpstreamError(SynergymError):
    """The AI coach service failed or returned an unusable reply.

    ``status_code`` is None for transport failures (connection refused,
    timeout). ``body`` holds the raw response text when one was received.
    """

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class PartialOperationError(SynergymError):
    """A two-phase operation committed its first phase but failed the second.

    ``routine`` is the view committed by the first phase; the failure of the
    second phase is chained as ``__cause__``.
    """

    def __init__(self, message: str, routine):
        self.routine = routine
        super().__init__(message)
