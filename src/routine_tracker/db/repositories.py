"""Data access layer for routine-tracker."""

from datetime import datetime, timezone
from pathlib import Path

import aiosqlite

from ..models.routine import Exercise, Routine, RoutineExercise
from .engine import connect, get_db_path


class RoutineRepository:
    """Repository for routines, including the cascade over their exercises."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, routine: Routine) -> int:
        """Create a new routine. The date defaults to the current UTC time."""
        date = routine.date or datetime.now(timezone.utc)
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO routines (user_id, date, description, is_completed)
                VALUES (?, ?, ?, ?)
                """,
                (
                    routine.user_id,
                    date.isoformat(timespec="microseconds"),
                    routine.description,
                    int(routine.is_completed),
                ),
            )
            await db.commit()
            return cursor.lastrowid

    async def get(self, routine_id: int) -> Routine | None:
        """Get a routine by ID."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM routines WHERE routine_id = ?", (routine_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_routine(row)

    async def list_by_user(
        self, user_id: str, limit: int, offset: int = 0
    ) -> list[Routine]:
        """List a user's routines, incomplete first, then newest first."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT * FROM routines
                WHERE user_id = ?
                ORDER BY is_completed ASC, date DESC, routine_id DESC
                LIMIT ? OFFSET ?
                """,
                (user_id, limit, offset),
            )
            rows = await cursor.fetchall()
            return [self._row_to_routine(row) for row in rows]

    async def count_by_user(self, user_id: str) -> int:
        """Count a user's routines."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT COUNT(*) FROM routines WHERE user_id = ?", (user_id,)
            )
            row = await cursor.fetchone()
            return row[0]

    async def set_completed(
        self, routine_id: int, user_id: str, is_completed: bool
    ) -> bool:
        """Set the completion flag of a routine owned by user_id.

        Returns False when no routine matched both ids.
        """
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                UPDATE routines SET is_completed = ?
                WHERE routine_id = ? AND user_id = ?
                """,
                (int(is_completed), routine_id, user_id),
            )
            await db.commit()
            return cursor.rowcount > 0

    async def delete_cascade(self, routine_id: int, user_id: str) -> bool:
        """Delete a routine owned by user_id along with its exercises and sets.

        Runs as one IMMEDIATE transaction so no exercise can be added to the
        routine while it is being removed. Any failure rolls back every step.
        Returns False, without touching anything, when the user does not own
        the routine.
        """
        async with connect(self.db_path) as db:
            await db.execute("BEGIN IMMEDIATE")
            try:
                cursor = await db.execute(
                    "SELECT routine_id FROM routines WHERE routine_id = ? AND user_id = ?",
                    (routine_id, user_id),
                )
                if await cursor.fetchone() is None:
                    await db.rollback()
                    return False

                cursor = await db.execute(
                    "SELECT exercise_id FROM exercises WHERE routine_id = ?",
                    (routine_id,),
                )
                exercise_ids = [row["exercise_id"] for row in await cursor.fetchall()]

                if exercise_ids:
                    placeholders = ", ".join("?" for _ in exercise_ids)
                    await db.execute(
                        f"DELETE FROM routine_exercises WHERE exercise_id IN ({placeholders})",
                        exercise_ids,
                    )
                    await db.execute(
                        "DELETE FROM exercises WHERE routine_id = ?", (routine_id,)
                    )

                await db.execute(
                    "DELETE FROM routines WHERE routine_id = ?", (routine_id,)
                )
                await db.commit()
            except BaseException:
                await db.rollback()
                raise
            return True

    def _row_to_routine(self, row: aiosqlite.Row) -> Routine:
        """Convert a database row to a Routine."""
        return Routine.from_dict(dict(row))


class ExerciseRepository:
    """Repository for the exercises of a routine."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, exercise: Exercise) -> int:
        """Add an exercise to its routine."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "INSERT INTO exercises (routine_id, name, muscle) VALUES (?, ?, ?)",
                (exercise.routine_id, exercise.name, exercise.muscle),
            )
            await db.commit()
            return cursor.lastrowid

    async def get(self, exercise_id: int) -> Exercise | None:
        """Get an exercise by ID."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE exercise_id = ?", (exercise_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return Exercise.from_dict(dict(row))

    async def list_by_routine(self, routine_id: int) -> list[Exercise]:
        """List the exercises of a routine in insertion order."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE routine_id = ? ORDER BY exercise_id",
                (routine_id,),
            )
            rows = await cursor.fetchall()
            return [Exercise.from_dict(dict(row)) for row in rows]


class RoutineExerciseRepository:
    """Repository for the sets logged against an exercise."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, entry: RoutineExercise) -> int:
        """Log a set against its exercise."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO routine_exercises
                (exercise_id, repetitions, weight, weight_measure)
                VALUES (?, ?, ?, ?)
                """,
                (
                    entry.exercise_id,
                    entry.repetitions,
                    entry.weight,
                    entry.weight_measure,
                ),
            )
            await db.commit()
            return cursor.lastrowid

    async def list_by_exercise(self, exercise_id: int) -> list[RoutineExercise]:
        """List the sets logged against an exercise in insertion order."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT * FROM routine_exercises
                WHERE exercise_id = ?
                ORDER BY routine_exercise_id
                """,
                (exercise_id,),
            )
            rows = await cursor.fetchall()
            return [RoutineExercise.from_dict(dict(row)) for row in rows]
