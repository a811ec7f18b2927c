"""Service layer for routine-tracker."""

from .routines import RoutineService, store_operation

__all__ = ["RoutineService", "store_operation"]
