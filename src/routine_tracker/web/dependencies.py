"""FastAPI dependencies."""

from fastapi import Request

from ..services.routines import RoutineService


def get_service(request: Request) -> RoutineService:
    """Build a service bound to the app's database."""
    return RoutineService(request.app.state.db_path)
