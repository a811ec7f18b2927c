"""Web server command."""

import click

from ..config import config
from .base import ensure_initialized


@click.command()
@click.option("--host", default=config.HOST, help=f"Host to bind to (default: {config.HOST})")
@click.option("--port", "-p", default=config.PORT, type=int, help=f"Port to bind to (default: {config.PORT})")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the API server.

    Examples:

        # Start on default port
        routine-tracker serve

        # Expose to network (all interfaces)
        routine-tracker serve --host 0.0.0.0

        # Development mode with auto-reload
        routine-tracker serve --reload
    """
    ensure_initialized(ctx)

    import uvicorn

    from ..web import create_app

    click.echo(click.style("Starting routine-tracker API...", fg="green"))
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo("Press Ctrl+C to stop the server.")

    uvicorn.run(
        create_app() if not reload else "routine_tracker.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
        log_config=None,
    )
