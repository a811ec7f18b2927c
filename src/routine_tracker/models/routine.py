"""Routine, exercise and logged-set models."""

import math
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class RoutineExercise:
    """A logged set of an exercise: repetitions at a given weight."""

    exercise_id: int
    repetitions: int
    weight: float
    weight_measure: str
    id: int | None = None

    def to_dict(self) -> dict:
        return {
            "routine_exercise_id": self.id,
            "repetitions": self.repetitions,
            "weight": self.weight,
            "weight_measure": self.weight_measure,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RoutineExercise":
        return cls(
            id=data.get("routine_exercise_id"),
            exercise_id=data["exercise_id"],
            repetitions=data["repetitions"],
            weight=data["weight"],
            weight_measure=data["weight_measure"],
        )


@dataclass
class Exercise:
    """A named movement inside a routine, targeting one muscle group."""

    routine_id: int
    name: str
    muscle: str
    id: int | None = None

    def to_dict(self) -> dict:
        return {
            "exercise_id": self.id,
            "name": self.name,
            "muscle": self.muscle,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        return cls(
            id=data.get("exercise_id"),
            routine_id=data["routine_id"],
            name=data["name"],
            muscle=data["muscle"],
        )


@dataclass
class Routine:
    """A dated workout plan owned by a user.

    The date is assigned when the routine is stored; callers creating a
    routine leave it unset.
    """

    user_id: str
    description: str
    is_completed: bool = False
    date: datetime | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        return {
            "routine_id": self.id,
            "user_id": self.user_id,
            "date": self.date.isoformat() if self.date else None,
            "description": self.description,
            "is_completed": self.is_completed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Routine":
        date = data.get("date")
        if isinstance(date, str):
            date = datetime.fromisoformat(date)
        return cls(
            id=data.get("routine_id"),
            user_id=data["user_id"],
            description=data["description"],
            is_completed=bool(data.get("is_completed", False)),
            date=date,
        )


@dataclass
class RoutinePage:
    """One page of a user's routines."""

    routines: list[Routine]
    current_page: int
    page_size: int
    total_results: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_results / self.page_size)

    def to_dict(self) -> dict:
        return {
            "routines": [r.to_dict() for r in self.routines],
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalResults": self.total_results,
        }


@dataclass
class RoutineDetail:
    """A routine's description and status together with its exercises."""

    description: str
    is_completed: bool
    exercises: list[Exercise] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "isCompleted": self.is_completed,
            "exercises": [e.to_dict() for e in self.exercises],
        }


@dataclass
class ExerciseDetail:
    """An exercise's name and muscle together with its logged sets."""

    name: str
    muscle: str
    routine_exercises: list[RoutineExercise] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "muscle": self.muscle,
            "routineExercises": [entry.to_dict() for entry in self.routine_exercises],
        }
