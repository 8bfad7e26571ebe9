"""User accounts."""

import logging
from pathlib import Path

import aiosqlite

from ..db.engine import get_db_path, transaction
from ..db.repositories import UserRepository
from ..errors import ConflictError
from ..models.user import User
from .lookups import require_user
from .mapping import to_user

logger = logging.getLogger(__name__)


class UserService:
    """Service for registering and looking up users."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def register(
        self,
        email: str,
        name: str,
        goal: str | None = None,
        password_hash: str | None = None,
    ) -> User:
        """Create a user. Raises ConflictError if the email is taken."""
        email = email.strip().lower()
        async with transaction(self.db_path) as db:
            users = UserRepository(db)
            if await users.get_by_email(email) is not None:
                raise ConflictError(f"Email already registered: {email}")
            try:
                user_id = await users.create(email, name, goal, password_hash)
            except aiosqlite.IntegrityError as e:
                raise ConflictError(f"Email already registered: {email}") from e
            user = await users.get(user_id)

        logger.info(f"Registered user {user_id}")
        return to_user(user)

    async def get_user(self, user_id: int) -> User:
        async with transaction(self.db_path) as db:
            return to_user(await require_user(db, user_id))

    async def list_users(self) -> list[User]:
        async with transaction(self.db_path) as db:
            rows = await UserRepository(db).list_all()
        return [to_user(row) for row in rows]
