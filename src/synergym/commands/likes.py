"""Exercise like commands."""

import click

from ..services import ExerciseLikeService
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    reports_errors,
)


@click.group()
@click.pass_context
def likes(ctx):
    """Like and unlike exercises."""
    ensure_initialized(ctx)


@likes.command()
@click.argument("user_id", type=int)
@click.argument("exercise_id", type=int)
@async_command
@reports_errors
async def add(user_id: int, exercise_id: int):
    """Like an exercise."""
    await ExerciseLikeService().add(user_id, exercise_id)
    echo_success(f"User {user_id} now likes exercise {exercise_id}")


@likes.command()
@click.argument("user_id", type=int)
@click.argument("exercise_id", type=int)
@async_command
@reports_errors
async def remove(user_id: int, exercise_id: int):
    """Remove a like."""
    if await ExerciseLikeService().delete(user_id, exercise_id):
        echo_success(f"User {user_id} no longer likes exercise {exercise_id}")
    else:
        echo_info(f"User {user_id} did not like exercise {exercise_id}")


@likes.command(name="list")
@click.option("--user", "-u", "user_id", type=int, help="Likes given by this user")
@click.option("--exercise", "-e", "exercise_id", type=int, help="Likes received by this exercise")
@click.pass_context
@async_command
@reports_errors
async def list_likes(ctx: click.Context, user_id: int | None, exercise_id: int | None):
    """List likes by user or by exercise."""
    if (user_id is None) == (exercise_id is None):
        echo_error("Pass exactly one of --user or --exercise")
        ctx.exit(1)

    service = ExerciseLikeService()
    if user_id is not None:
        found = await service.get_by_user(user_id)
    else:
        found = await service.get_by_exercise(exercise_id)

    if not found:
        echo_info("No likes found")
        return

    rows = [[str(like.user_id), str(like.exercise_id)] for like in found]
    click.echo()
    click.echo(format_table(["User", "Exercise"], rows))
