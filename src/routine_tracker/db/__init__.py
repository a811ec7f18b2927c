"""Database layer for routine-tracker."""

from .engine import SQLITE_MAX_INTEGER, connect, get_db_path, init_db
from .repositories import (
    ExerciseRepository,
    RoutineExerciseRepository,
    RoutineRepository,
)

__all__ = [
    "connect",
    "ExerciseRepository",
    "get_db_path",
    "init_db",
    "RoutineExerciseRepository",
    "RoutineRepository",
    "SQLITE_MAX_INTEGER",
]
