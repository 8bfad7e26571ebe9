"""Database engine setup, initialization and unit of work."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import aiosqlite

from ..settings import get_settings

logger = logging.getLogger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    settings = get_settings()
    if data_dir is None:
        data_dir = settings.data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / settings.db_filename


@asynccontextmanager
async def transaction(db_path: Path | None = None) -> AsyncIterator[aiosqlite.Connection]:
    """Open a connection and run the enclosed block as one transaction.

    The transaction begins IMMEDIATE, so reads made inside the block hold
    the write lock together with the writes that depend on them. Commits
    when the block exits normally and rolls back every write made through
    the connection when it raises.
    """
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        db.row_factory = aiosqlite.Row
        # Must run before BEGIN; SQLite ignores it inside a transaction
        await db.execute("PRAGMA foreign_keys = ON")
        await db.execute("BEGIN IMMEDIATE")
        try:
            yield db
        except BaseException:
            await db.rollback()
            raise
        await db.commit()


async def _column_names(db: aiosqlite.Connection, table: str) -> set[str]:
    cursor = await db.execute(f"PRAGMA table_info({table})")
    columns = await cursor.fetchall()
    return {col[1] for col in columns}


async def _run_migrations(db: aiosqlite.Connection) -> None:
    """Run database migrations for schema updates."""
    # Older exercise tables predate the category and url columns
    exercise_columns = await _column_names(db, "exercises")
    if "category" not in exercise_columns:
        logger.info("Adding 'category' column to exercises")
        await db.execute("ALTER TABLE exercises ADD COLUMN category TEXT")
    if "url" not in exercise_columns:
        logger.info("Adding 'url' column to exercises")
        await db.execute("ALTER TABLE exercises ADD COLUMN url TEXT")

    routine_columns = await _column_names(db, "routines")
    if "deleted" not in routine_columns:
        logger.info("Adding 'deleted' column to routines")
        await db.execute(
            "ALTER TABLE routines ADD COLUMN deleted INTEGER NOT NULL DEFAULT 0"
        )

    await db.commit()


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Accounts
        await db.execute("""
            CREATE TABLE IF NOT EXISTS users (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                email TEXT UNIQUE NOT NULL,
                name TEXT NOT NULL,
                password_hash TEXT,
                goal TEXT,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Exercise catalog
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                category TEXT,
                description TEXT,
                difficulty TEXT,
                posture TEXT,
                body_part TEXT,
                thumbnail_url TEXT,
                url TEXT
            )
        """)

        # Routines are soft-deleted; the row is kept with deleted = 1
        await db.execute("""
            CREATE TABLE IF NOT EXISTS routines (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                name TEXT NOT NULL,
                description TEXT DEFAULT '',
                deleted INTEGER NOT NULL DEFAULT 0,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (user_id) REFERENCES users(id)
            )
        """)

        # Ordered routine members, owned by their routine
        await db.execute("""
            CREATE TABLE IF NOT EXISTS routine_exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                routine_id INTEGER NOT NULL,
                exercise_id INTEGER NOT NULL,
                exercise_order INTEGER NOT NULL,
                FOREIGN KEY (routine_id) REFERENCES routines(id) ON DELETE CASCADE,
                FOREIGN KEY (exercise_id) REFERENCES exercises(id)
            )
        """)

        # Likes, at most one per (user, exercise)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercise_likes (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                exercise_id INTEGER NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                UNIQUE (user_id, exercise_id),
                FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE,
                FOREIGN KEY (exercise_id) REFERENCES exercises(id) ON DELETE CASCADE
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_routines_user
            ON routines(user_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_routine_exercises_routine
            ON routine_exercises(routine_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercise_likes_user
            ON exercise_likes(user_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercise_likes_exercise
            ON exercise_likes(exercise_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercises_name
            ON exercises(name)
        """)

        await db.commit()

        # Run migrations for existing databases
        await _run_migrations(db)
