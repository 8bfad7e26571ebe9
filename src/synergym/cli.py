"""CLI entry point for synergym."""

import logging

import click

from . import __version__
from .commands import coach, exercises, init, likes, routines, serve, users
from .settings import get_settings


@click.group()
@click.version_option(version=__version__, prog_name="synergym")
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level")
def main(verbose: bool):
    """synergym: workout routines, exercise catalog, and AI coaching.

    Example usage:

        # Create the database and seed the exercise catalog
        synergym init

        # Register a user and build a routine
        synergym users add kim@example.com Kim
        synergym routines create "Leg Day" --user 1 -e 1 -e 3

        # Serve the REST API
        synergym serve
    """
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(init)
main.add_command(users)
main.add_command(exercises)
main.add_command(routines)
main.add_command(likes)
main.add_command(coach)
main.add_command(serve)


if __name__ == "__main__":
    main()
