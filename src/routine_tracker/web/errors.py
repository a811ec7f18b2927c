"""Exception handlers mapping errors onto {"error": message} responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..errors import InternalError, RoutineStoreError

logger = logging.getLogger(__name__)


def routine_store_error_handler(request: Request, exc: RoutineStoreError):
    """Report a service error with its own status and message."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}",
        extra={"status_code": exc.status_code},
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed input as 400 with the first problem found."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.warning(
        f"{request.method} {request.url.path} -> 400: {message}",
        extra={"status_code": 400},
    )
    return JSONResponse(status_code=400, content={"error": message})


def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Report routing errors (unknown path, wrong method) in the same shape."""
    logger.warning(
        f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}",
        extra={"status_code": exc.status_code},
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


def unhandled_exception_handler(request: Request, exc: Exception):
    """Log the traceback and answer 500 without exposing any detail."""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}",
        exc_info=exc,
        extra={"status_code": 500},
    )
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers above on the application."""
    app.add_exception_handler(RoutineStoreError, routine_store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
