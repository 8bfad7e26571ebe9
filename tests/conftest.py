"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from pathlib import Path

import pytest

from synergym.data.exercise_loader import seed_exercises
from synergym.db import init_db
from synergym.services import UserService
from synergym.settings import get_settings


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def seeded_db(temp_db_path):
    """An initialized database with the bundled exercise catalog."""

    async def setup():
        await init_db(temp_db_path)
        await seed_exercises(temp_db_path)

    asyncio.run(setup())
    return temp_db_path


@pytest.fixture
def user_id(seeded_db):
    """ID of a registered user in the seeded database."""
    user = asyncio.run(
        UserService(seeded_db).register("kim@example.com", "Kim", "Health Management")
    )
    return user.id


@pytest.fixture
def other_user_id(seeded_db):
    user = asyncio.run(UserService(seeded_db).register("lee@example.com", "Lee"))
    return user.id


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Point settings at a throwaway data directory for every test."""
    monkeypatch.setenv("SYNERGYM_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("SYNERGYM_SEED_PATH", raising=False)
    monkeypatch.delenv("SYNERGYM_AI_COACH_URL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
