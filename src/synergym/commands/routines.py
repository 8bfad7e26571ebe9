"""Routine management commands."""

import click

from ..models.routine import RoutineExerciseSpec, RoutineSpec
from ..services import RoutineService
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    reports_errors,
    truncate,
)


@click.group()
@click.pass_context
def routines(ctx):
    """Manage workout routines.

    Commands for creating, listing, viewing, and deleting routines.
    """
    ensure_initialized(ctx)


@routines.command(name="list")
@click.option("--user", "-u", "user_id", type=int, help="Only routines owned by this user")
@click.option("--name", "-n", help="Only routines with exactly this name")
@async_command
@reports_errors
async def list_routines(user_id: int | None, name: str | None):
    """List routines."""
    service = RoutineService()
    if user_id is not None:
        found = await service.get_routines_by_user(user_id)
        if name is not None:
            found = [r for r in found if r.name == name]
    elif name is not None:
        found = await service.get_routines_by_name(name)
    else:
        found = await service.get_all_routines()

    if not found:
        echo_info("No routines found. Create one with 'synergym routines create'")
        return

    rows = [
        [str(r.id), truncate(r.name), str(r.user_id), str(len(r.exercises))]
        for r in found
    ]
    click.echo()
    click.echo(format_table(["ID", "Name", "User", "Exercises"], rows))
    click.echo()
    click.echo(f"Total: {len(found)} routine(s)")


@routines.command()
@click.argument("routine_id", type=int)
@async_command
@reports_errors
async def show(routine_id: int):
    """Show a routine and its exercises in order."""
    routine = await RoutineService().get_routine_details(routine_id)
    click.echo()
    click.echo(routine.get_summary())


@routines.command()
@click.argument("name")
@click.option("--user", "-u", "user_id", type=int, required=True, help="Owner user ID")
@click.option("--description", "-d", default="", help="Routine description")
@click.option(
    "--exercise",
    "-e",
    "exercise_ids",
    type=int,
    multiple=True,
    help="Exercise ID; repeat in the order the exercises should run",
)
@async_command
@reports_errors
async def create(name: str, user_id: int, description: str, exercise_ids: tuple[int, ...]):
    """Create a routine."""
    spec = RoutineSpec(
        name=name,
        description=description,
        exercises=[RoutineExerciseSpec(exercise_id=i) for i in exercise_ids],
    )
    routine = await RoutineService().create_routine(spec, user_id)
    echo_success(f"Routine saved with ID: {routine.id}")
    click.echo(routine.get_summary())


@routines.command(name="add-exercise")
@click.argument("routine_id", type=int)
@click.argument("exercise_id", type=int)
@click.option("--order", "-o", type=int, default=None, help="Position (default: end)")
@async_command
@reports_errors
async def add_exercise(routine_id: int, exercise_id: int, order: int | None):
    """Insert an exercise into a routine."""
    service = RoutineService()
    if order is None:
        routine = await service.get_routine_details(routine_id)
        order = len(routine.exercises)
    member = await service.add_exercise(routine_id, exercise_id, order)
    echo_success(f"Exercise {exercise_id} added at position {member.order + 1}")


@routines.command()
@click.argument("routine_id", type=int)
@click.confirmation_option(prompt="Are you sure you want to delete this routine?")
@async_command
@reports_errors
async def delete(routine_id: int):
    """Delete a routine."""
    await RoutineService().delete_routine(routine_id)
    echo_success(f"Routine {routine_id} deleted")
