"""CLI entry point for routine-tracker."""

import click

from . import __version__
from .commands import init, routines, serve
from .logging_config import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="routine-tracker")
@click.option("--log-level", default=None, help="Override LOG_LEVEL for this run")
def main(log_level: str | None):
    """routine-tracker: REST API for workout routines.

    Example usage:

        # Create the database
        routine-tracker init

        # Serve the API
        routine-tracker serve --port 8000

        # Inspect a user's routines
        routine-tracker routines list alice
    """
    configure_logging(log_level)


main.add_command(init)
main.add_command(serve)
main.add_command(routines)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
