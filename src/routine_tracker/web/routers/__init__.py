"""API routers."""

from . import exercises, routines

__all__ = ["exercises", "routines"]
