"""Database engine setup and initialization."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import aiosqlite

from ..config import config

# Largest value an INTEGER column or bound parameter can hold
SQLITE_MAX_INTEGER = 2**63 - 1


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path.

    ROUTINE_TRACKER_DB wins when set; otherwise the file lives in the data
    directory, which is created if missing.
    """
    if data_dir is None:
        if config.DATABASE_PATH:
            return Path(config.DATABASE_PATH)
        data_dir = config.DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "routine_tracker.db"


@asynccontextmanager
async def connect(db_path: Path) -> AsyncIterator[aiosqlite.Connection]:
    """Open a connection with foreign keys enforced and rows addressable by name."""
    async with aiosqlite.connect(db_path, timeout=config.DB_TIMEOUT) as db:
        await db.execute("PRAGMA foreign_keys = ON")
        db.row_factory = aiosqlite.Row
        yield db


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with connect(db_path) as db:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS routines (
                routine_id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id TEXT NOT NULL,
                date TIMESTAMP NOT NULL,
                description TEXT NOT NULL,
                is_completed INTEGER NOT NULL DEFAULT 0
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                exercise_id INTEGER PRIMARY KEY AUTOINCREMENT,
                routine_id INTEGER NOT NULL,
                name TEXT NOT NULL,
                muscle TEXT NOT NULL,
                FOREIGN KEY (routine_id) REFERENCES routines(routine_id)
            )
        """)

        # One row per logged set of an exercise
        await db.execute("""
            CREATE TABLE IF NOT EXISTS routine_exercises (
                routine_exercise_id INTEGER PRIMARY KEY AUTOINCREMENT,
                exercise_id INTEGER NOT NULL,
                repetitions INTEGER NOT NULL,
                weight REAL NOT NULL,
                weight_measure TEXT NOT NULL,
                FOREIGN KEY (exercise_id) REFERENCES exercises(exercise_id)
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_routines_user
            ON routines(user_id, is_completed, date)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercises_routine
            ON exercises(routine_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_routine_exercises_exercise
            ON routine_exercises(exercise_id)
        """)

        await db.commit()
