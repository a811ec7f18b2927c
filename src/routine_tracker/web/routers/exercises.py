"""Exercise and logged-set routes."""

from fastapi import APIRouter, Depends, Path

from ...db.engine import SQLITE_MAX_INTEGER
from ...services.routines import RoutineService
from ..dependencies import get_service
from ..schemas import ExerciseCreate, RoutineExerciseCreate

router = APIRouter(tags=["exercises"])


@router.post("/routines/{routine_id}/exercises", status_code=201)
async def create_exercise(
    body: ExerciseCreate,
    routine_id: int = Path(le=SQLITE_MAX_INTEGER),
    service: RoutineService = Depends(get_service),
):
    """Add an exercise to a routine."""
    exercise_id = await service.create_exercise(routine_id, body.name, body.muscle)
    return {"exerciseId": exercise_id}


@router.get("/routines/{routine_id}/exercises")
async def list_exercises(
    routine_id: int = Path(le=SQLITE_MAX_INTEGER),
    service: RoutineService = Depends(get_service),
):
    """Get a routine's description and status with its exercises."""
    detail = await service.get_exercises(routine_id)
    return detail.to_dict()


@router.post("/exercises/{exercise_id}/routine-exercises", status_code=201)
async def create_routine_exercise(
    body: RoutineExerciseCreate,
    exercise_id: int = Path(le=SQLITE_MAX_INTEGER),
    service: RoutineService = Depends(get_service),
):
    """Log a set against an exercise."""
    entry_id = await service.create_routine_exercise(
        exercise_id, body.repetitions, body.weight, body.weight_measure
    )
    return {"routineExerciseId": entry_id}


@router.get("/exercises/{exercise_id}/routine-exercises")
async def list_routine_exercises(
    exercise_id: int = Path(le=SQLITE_MAX_INTEGER),
    service: RoutineService = Depends(get_service),
):
    """Get an exercise's name and muscle with its logged sets."""
    detail = await service.get_routine_exercises(exercise_id)
    return detail.to_dict()
