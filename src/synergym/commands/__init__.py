"""CLI commands for synergym."""

from .coach import coach
from .exercises import exercises
from .init import init
from .likes import likes
from .routines import routines
from .serve import serve
from .users import users

__all__ = [
    "coach",
    "exercises",
    "init",
    "likes",
    "routines",
    "serve",
    "users",
]
