"""routine-tracker: REST API for workout routines."""

__version__ = "0.1.0"
