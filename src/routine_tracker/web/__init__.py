"""Web API for routine-tracker."""

from .app import create_app

__all__ = ["create_app"]
