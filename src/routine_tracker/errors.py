"""Error types raised by the routine store."""


class RoutineStoreError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(RoutineStoreError):
    """Required input is missing or out of range."""

    status_code = 400


class NotFoundError(RoutineStoreError):
    """No row matched the given ids."""

    status_code = 404


class StoreError(RoutineStoreError):
    """The database rejected or failed an operation."""

    status_code = 400


class InternalError(RoutineStoreError):
    """Unexpected failure. The message never carries the underlying detail."""

    status_code = 500

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message)
