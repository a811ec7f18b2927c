"""FastAPI application for the routine-tracker API."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import config
from ..db.engine import get_db_path, init_db
from ..logging_config import configure_logging
from .errors import register_error_handlers
from .routers import exercises, routines


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - ensures the schema exists on startup."""
    await init_db(app.state.db_path)
    yield


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging()

    app = FastAPI(
        title="routine-tracker",
        description="Workout routines, their exercises and logged sets",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_path = db_path or get_db_path()

    @app.middleware("http")
    async def answer_options(request: Request, call_next):
        """Answer OPTIONS requests without routing them.

        Full CORS preflights are answered by CORSMiddleware, which wraps
        this one; anything else sent with OPTIONS gets an empty 204.
        """
        if request.method == "OPTIONS":
            return Response(status_code=204)
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_error_handlers(app)

    app.include_router(routines.router)
    app.include_router(exercises.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
