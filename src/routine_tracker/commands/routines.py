"""Routine management commands."""

import click

from ..config import config
from ..db import get_db_path
from ..errors import RoutineStoreError
from ..services import RoutineService
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized, format_table


@click.group()
@click.pass_context
def routines(ctx):
    """Inspect and delete stored routines."""
    ensure_initialized(ctx)


@routines.command(name="list")
@click.argument("user_id")
@click.option("--page", default=1, type=int, help="Page number (default: 1)")
@click.option("--page-size", default=config.DEFAULT_PAGE_SIZE, type=int, help="Routines per page")
@click.pass_context
@async_command
async def list_routines(ctx, user_id: str, page: int, page_size: int):
    """List a user's routines, incomplete first."""
    service = RoutineService(get_db_path())
    try:
        result = await service.get_routines(user_id, page=page, page_size=page_size)
    except RoutineStoreError as e:
        echo_error(e.message)
        ctx.exit(1)

    if not result.routines:
        echo_info(f"No routines found for user {user_id}")
        return

    headers = ["ID", "Date", "Done", "Description"]
    rows = []
    for routine in result.routines:
        description = routine.description
        rows.append([
            str(routine.id),
            routine.date.strftime("%Y-%m-%d %H:%M") if routine.date else "N/A",
            "yes" if routine.is_completed else "no",
            description[:40] + "..." if len(description) > 40 else description,
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(
        f"Page {result.current_page} of {result.total_pages} "
        f"({result.total_results} routine(s))"
    )


@routines.command()
@click.argument("routine_id", type=int)
@click.pass_context
@async_command
async def show(ctx, routine_id: int):
    """Show a routine with its exercises and logged sets."""
    service = RoutineService(get_db_path())
    try:
        detail = await service.get_exercises(routine_id)
        entries = {
            exercise.id: await service.get_routine_exercises(exercise.id)
            for exercise in detail.exercises
        }
    except RoutineStoreError as e:
        echo_error(e.message)
        ctx.exit(1)

    status = "completed" if detail.is_completed else "pending"
    click.echo()
    click.echo(f"Routine {routine_id}: {detail.description} ({status})")
    click.echo("-" * 40)
    if not detail.exercises:
        click.echo("No exercises yet.")
    for exercise in detail.exercises:
        click.echo(f"{exercise.name} [{exercise.muscle}]")
        for entry in entries[exercise.id].routine_exercises:
            click.echo(f"  - {entry.repetitions} x {entry.weight:g} {entry.weight_measure}")


@routines.command()
@click.argument("user_id")
@click.argument("routine_id", type=int)
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, user_id: str, routine_id: int, force: bool):
    """Delete a routine with its exercises and logged sets."""
    if not force and not click.confirm(
        f"Delete routine {routine_id} and everything logged under it?"
    ):
        echo_info("Cancelled")
        return

    service = RoutineService(get_db_path())
    try:
        await service.delete_routine(user_id, routine_id)
    except RoutineStoreError as e:
        echo_error(e.message)
        ctx.exit(1)

    echo_success(f"Routine {routine_id} deleted")
