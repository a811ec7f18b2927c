"""Initialize database command."""

import click

from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Create the data directory and the database schema.

    Running it again on an existing database is harmless.
    """
    db_path = get_db_path()
    echo_info(f"Initializing database at {db_path}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("Start the API with:")
    click.echo("  routine-tracker serve")
