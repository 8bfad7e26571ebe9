"""Exercise catalog commands."""

import click

from ..services import ExerciseLikeService, ExerciseService
from .base import (
    async_command,
    echo_info,
    ensure_initialized,
    format_table,
    reports_errors,
    truncate,
)


@click.group()
@click.pass_context
def exercises(ctx):
    """Browse the exercise catalog."""
    ensure_initialized(ctx)


def _print_exercises(items) -> None:
    rows = [
        [str(e.id), truncate(e.name), e.category, e.difficulty or "", e.body_part or ""]
        for e in items
    ]
    click.echo()
    click.echo(format_table(["ID", "Name", "Category", "Difficulty", "Body Part"], rows))
    click.echo()
    click.echo(f"Total: {len(items)} exercise(s)")


@exercises.command(name="list")
@click.option("--category", "-c", help="Only show exercises in this category")
@async_command
async def list_exercises(category: str | None):
    """List catalog exercises."""
    items = await ExerciseService().list_exercises(category)
    if not items:
        echo_info("No exercises found. Run 'synergym init' to seed the catalog")
        return
    _print_exercises(items)


@exercises.command()
@click.argument("query")
@async_command
async def search(query: str):
    """Search exercises by name."""
    items = await ExerciseService().search(query)
    if not items:
        echo_info(f"No exercises matching '{query}'")
        return
    _print_exercises(items)


@exercises.command()
@click.argument("exercise_id", type=int)
@async_command
@reports_errors
async def show(exercise_id: int):
    """Show one exercise and how many likes it has."""
    exercise = await ExerciseService().get_exercise(exercise_id)
    likes = await ExerciseLikeService().count_by_exercise(exercise_id)

    click.echo()
    click.echo(f"{exercise.name} (ID: {exercise.id})")
    click.echo("-" * 40)
    click.echo(f"Category:   {exercise.category}")
    click.echo(f"Difficulty: {exercise.difficulty or 'N/A'}")
    click.echo(f"Posture:    {exercise.posture or 'N/A'}")
    click.echo(f"Body part:  {exercise.body_part or 'N/A'}")
    click.echo(f"Likes:      {likes}")
    if exercise.description:
        click.echo()
        click.echo(exercise.description)
    if exercise.url:
        click.echo()
        click.echo(exercise.url)
