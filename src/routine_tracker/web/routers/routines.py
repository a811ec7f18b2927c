"""Routine routes, scoped to the owning user."""

from fastapi import APIRouter, Depends, Path, Query

from ...db.engine import SQLITE_MAX_INTEGER
from ...services.routines import RoutineService
from ..dependencies import get_service
from ..schemas import RoutineCreate, RoutineUpdate

router = APIRouter(prefix="/users/{user_id}/routines", tags=["routines"])


@router.post("", status_code=201)
async def create_routine(
    user_id: str,
    body: RoutineCreate,
    service: RoutineService = Depends(get_service),
):
    """Create a routine for a user."""
    routine_id = await service.create_routine(
        user_id, body.description, body.is_completed
    )
    return {"routineId": routine_id}


@router.get("")
async def list_routines(
    user_id: str,
    page: int = Query(1, le=SQLITE_MAX_INTEGER),
    page_size: int | None = Query(None, alias="pageSize"),
    service: RoutineService = Depends(get_service),
):
    """List a user's routines, paginated."""
    result = await service.get_routines(user_id, page=page, page_size=page_size)
    return result.to_dict()


@router.api_route("/{routine_id}", methods=["PUT", "PATCH"])
async def update_routine(
    user_id: str,
    body: RoutineUpdate,
    routine_id: int = Path(le=SQLITE_MAX_INTEGER),
    service: RoutineService = Depends(get_service),
):
    """Mark a routine as completed or not."""
    updated_id = await service.update_routine(routine_id, user_id, body.is_completed)
    return {"id": updated_id}


@router.delete("/{routine_id}")
async def delete_routine(
    user_id: str,
    routine_id: int = Path(le=SQLITE_MAX_INTEGER),
    service: RoutineService = Depends(get_service),
):
    """Delete a routine with its exercises and logged sets."""
    deleted_id = await service.delete_routine(user_id, routine_id)
    return {"id": deleted_id}
