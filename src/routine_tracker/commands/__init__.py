"""CLI commands for routine-tracker."""

from .init import init
from .routines import routines
from .serve import serve

__all__ = [
    "init",
    "routines",
    "serve",
]
