"""Initialize database command."""

from pathlib import Path

import click

from ..data.exercise_loader import get_exercises_json_path, seed_exercises
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@click.option(
    "--seed-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON array of exercises to seed the catalog with",
)
@async_command
async def init(seed_file: Path | None):
    """Initialize the synergym database.

    Creates the SQLite schema (patching older databases in place) and, if
    the exercise catalog is empty, seeds it from the bundled JSON file.
    """
    db_path = get_db_path()
    echo_info(f"Initializing synergym database at {db_path}")

    await init_db(db_path)
    echo_success("Database initialized")

    count = await seed_exercises(db_path, seed_file)
    if count:
        source = seed_file or get_exercises_json_path()
        echo_success(f"Exercise catalog populated ({count} exercises from {source.name})")
    else:
        echo_info("Exercise catalog already populated")

    click.echo()
    click.echo("Next steps:")
    click.echo("  synergym users add you@example.com 'Your Name'")
    click.echo("  synergym routines create 'Leg Day' --user 1 -e 1 -e 3")
    click.echo("  synergym serve")
