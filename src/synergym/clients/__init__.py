"""Clients for external services."""

from .ai_coach import HttpCoachClient
from .base import CoachGateway

__all__ = ["CoachGateway", "HttpCoachClient"]
