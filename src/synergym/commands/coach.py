"""AI coach command."""

import json

import click

from ..clients import HttpCoachClient
from .base import async_command, echo_error, reports_errors


@click.group()
def coach():
    """Talk to the AI coach service."""
    pass


@coach.command()
@click.argument("message")
@click.option("--user-id", "-u", type=int, help="Include the asking user's ID")
@click.option(
    "--extra",
    "-x",
    help="Additional JSON object fields merged into the request",
)
@click.pass_context
@async_command
@reports_errors
async def ask(ctx: click.Context, message: str, user_id: int | None, extra: str | None):
    """Send a message to the AI coach.

    Example:

        synergym coach ask "How do I squat safely?" -u 1
    """
    payload: dict = {"message": message}
    if user_id is not None:
        payload["user_id"] = user_id
    if extra:
        try:
            fields = json.loads(extra)
        except json.JSONDecodeError as e:
            echo_error(f"--extra is not valid JSON: {e}")
            ctx.exit(1)
        if not isinstance(fields, dict):
            echo_error("--extra must be a JSON object")
            ctx.exit(1)
        payload.update(fields)

    reply = await HttpCoachClient().ask(payload)

    click.echo()
    click.echo(reply.response)
    if reply.exercise_info:
        click.echo()
        click.echo(click.style("Exercise info:", bold=True))
        for key, value in reply.exercise_info.items():
            click.echo(f"  {key}: {value}")
