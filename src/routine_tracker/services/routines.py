"""Routine store service: validated CRUD over routines, exercises and sets."""

import logging
from functools import wraps
from pathlib import Path

import aiosqlite

from ..config import config
from ..db.engine import SQLITE_MAX_INTEGER
from ..db.repositories import (
    ExerciseRepository,
    RoutineExerciseRepository,
    RoutineRepository,
)
from ..errors import (
    InternalError,
    NotFoundError,
    RoutineStoreError,
    StoreError,
    ValidationError,
)
from ..models.routine import (
    Exercise,
    ExerciseDetail,
    Routine,
    RoutineDetail,
    RoutineExercise,
    RoutinePage,
)

logger = logging.getLogger(__name__)


def store_operation(f):
    """Normalize failures of a service coroutine into RoutineStoreError.

    Errors already in the taxonomy pass through, database errors become
    StoreError carrying the database message, and anything else is logged
    and replaced by a generic InternalError.
    """

    @wraps(f)
    async def wrapper(*args, **kwargs):
        try:
            return await f(*args, **kwargs)
        except RoutineStoreError:
            raise
        except aiosqlite.Error as e:
            logger.warning("%s failed in the store: %s", f.__name__, e)
            raise StoreError(str(e)) from e
        except Exception as e:
            logger.exception("Unexpected error in %s", f.__name__)
            raise InternalError() from e

    return wrapper


def _require_user_id(user_id: str | None) -> str:
    if user_id is None or not str(user_id).strip():
        raise ValidationError("Missing userId parameter")
    return str(user_id)


class RoutineService:
    """Operations exposed by the API, one coroutine per endpoint."""

    def __init__(self, db_path: Path | None = None):
        self.routines = RoutineRepository(db_path)
        self.exercises = ExerciseRepository(db_path)
        self.routine_exercises = RoutineExerciseRepository(db_path)

    @store_operation
    async def create_routine(
        self,
        user_id: str,
        description: str,
        is_completed: bool | None = None,
    ) -> int:
        """Create a routine dated now. Completion defaults to False."""
        user_id = _require_user_id(user_id)
        routine = Routine(
            user_id=user_id,
            description=description,
            is_completed=bool(is_completed) if is_completed is not None else False,
        )
        routine_id = await self.routines.create(routine)
        logger.info("Created routine %s for user %s", routine_id, user_id)
        return routine_id

    @store_operation
    async def get_routines(
        self,
        user_id: str,
        page: int = 1,
        page_size: int | None = None,
    ) -> RoutinePage:
        """Get one page of a user's routines.

        Incomplete routines come first, newest first within each group.
        The total counts only this user's routines.
        """
        user_id = _require_user_id(user_id)
        if page_size is None:
            page_size = config.DEFAULT_PAGE_SIZE
        if page < 1:
            raise ValidationError("page must be a positive integer")
        if page_size < 1 or page_size > config.MAX_PAGE_SIZE:
            raise ValidationError(
                f"pageSize must be between 1 and {config.MAX_PAGE_SIZE}"
            )

        offset = (page - 1) * page_size
        if offset > SQLITE_MAX_INTEGER:
            # No table can hold that many rows, so the page is empty
            routines = []
        else:
            routines = await self.routines.list_by_user(
                user_id, limit=page_size, offset=offset
            )
        total = await self.routines.count_by_user(user_id)
        return RoutinePage(
            routines=routines,
            current_page=page,
            page_size=page_size,
            total_results=total,
        )

    @store_operation
    async def update_routine(
        self, routine_id: int, user_id: str, is_completed: bool
    ) -> int:
        """Set the completion flag of a routine the user owns."""
        user_id = _require_user_id(user_id)
        updated = await self.routines.set_completed(routine_id, user_id, is_completed)
        if not updated:
            logger.info("Routine %s not found for user %s", routine_id, user_id)
            raise NotFoundError("Routine not found")
        return routine_id

    @store_operation
    async def delete_routine(self, user_id: str, routine_id: int) -> int:
        """Delete a routine the user owns, with all its exercises and sets."""
        user_id = _require_user_id(user_id)
        deleted = await self.routines.delete_cascade(routine_id, user_id)
        if not deleted:
            logger.info("Routine %s not found for user %s", routine_id, user_id)
            raise NotFoundError("Routine not found")
        logger.info("Deleted routine %s for user %s", routine_id, user_id)
        return routine_id

    @store_operation
    async def create_exercise(self, routine_id: int, name: str, muscle: str) -> int:
        """Add an exercise to a routine.

        A missing routine is reported by the foreign key as a StoreError.
        """
        exercise_id = await self.exercises.create(
            Exercise(routine_id=routine_id, name=name, muscle=muscle)
        )
        logger.info("Created exercise %s in routine %s", exercise_id, routine_id)
        return exercise_id

    @store_operation
    async def get_exercises(self, routine_id: int) -> RoutineDetail:
        exercises = await self.exercises.list_by_routine(routine_id)
        routine = await self.routines.get(routine_id)
        if routine is None:
            raise NotFoundError("Routine not found")
        return RoutineDetail(
            description=routine.description,
            is_completed=routine.is_completed,
            exercises=exercises,
        )

    @store_operation
    async def create_routine_exercise(
        self,
        exercise_id: int,
        repetitions: int,
        weight: float,
        weight_measure: str,
    ) -> int:
        """Log a set against an exercise."""
        entry_id = await self.routine_exercises.create(
            RoutineExercise(
                exercise_id=exercise_id,
                repetitions=repetitions,
                weight=weight,
                weight_measure=weight_measure,
            )
        )
        logger.info("Logged routine exercise %s for exercise %s", entry_id, exercise_id)
        return entry_id

    @store_operation
    async def get_routine_exercises(self, exercise_id: int) -> ExerciseDetail:
        exercise = await self.exercises.get(exercise_id)
        if exercise is None:
            raise NotFoundError("Exercise not found")
        entries = await self.routine_exercises.list_by_exercise(exercise_id)
        return ExerciseDetail(
            name=exercise.name,
            muscle=exercise.muscle,
            routine_exercises=entries,
        )
