"""Tests for the database engine."""

import aiosqlite
import pytest

from synergym.db import UserRepository, init_db, transaction


class TestInitDb:
    @pytest.mark.asyncio
    async def test_migrates_older_schema(self, temp_db_path):
        """Older databases gain the category, url and deleted columns."""
        async with aiosqlite.connect(temp_db_path) as db:
            await db.execute(
                "CREATE TABLE exercises (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT NOT NULL)"
            )
            await db.execute(
                """
                CREATE TABLE routines (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER NOT NULL,
                    name TEXT NOT NULL,
                    description TEXT DEFAULT '',
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
                """
            )
            await db.commit()

        await init_db(temp_db_path)

        async with aiosqlite.connect(temp_db_path) as db:
            cursor = await db.execute("PRAGMA table_info(exercises)")
            exercise_columns = {row[1] for row in await cursor.fetchall()}
            cursor = await db.execute("PRAGMA table_info(routines)")
            routine_columns = {row[1] for row in await cursor.fetchall()}

        assert {"category", "url"} <= exercise_columns
        assert "deleted" in routine_columns

    @pytest.mark.asyncio
    async def test_init_is_idempotent(self, temp_db_path):
        await init_db(temp_db_path)
        await init_db(temp_db_path)


class TestTransaction:
    """Tests for the transaction context manager."""

    @pytest.mark.asyncio
    async def test_commits_on_success(self, temp_db_path):
        await init_db(temp_db_path)
        async with transaction(temp_db_path) as db:
            await UserRepository(db).create("kim@example.com", "Kim")

        async with transaction(temp_db_path) as db:
            assert len(await UserRepository(db).list_all()) == 1

    @pytest.mark.asyncio
    async def test_rolls_back_on_error(self, temp_db_path):
        await init_db(temp_db_path)
        with pytest.raises(RuntimeError):
            async with transaction(temp_db_path) as db:
                await UserRepository(db).create("kim@example.com", "Kim")
                raise RuntimeError("abort")

        async with transaction(temp_db_path) as db:
            assert await UserRepository(db).list_all() == []

    @pytest.mark.asyncio
    async def test_enforces_foreign_keys(self, temp_db_path):
        await init_db(temp_db_path)
        with pytest.raises(aiosqlite.IntegrityError):
            async with transaction(temp_db_path) as db:
                await db.execute(
                    "INSERT INTO exercise_likes (user_id, exercise_id) VALUES (1, 1)"
                )
