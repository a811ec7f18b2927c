"""Data models for routine-tracker."""

from .routine import (
    Exercise,
    ExerciseDetail,
    Routine,
    RoutineDetail,
    RoutineExercise,
    RoutinePage,
)

__all__ = [
    "Exercise",
    "ExerciseDetail",
    "Routine",
    "RoutineDetail",
    "RoutineExercise",
    "RoutinePage",
]
