"""User management commands."""

import click

from ..services import UserService
from .base import async_command, echo_info, echo_success, ensure_initialized, format_table, reports_errors


@click.group()
@click.pass_context
def users(ctx):
    """Manage user accounts."""
    ensure_initialized(ctx)


@users.command(name="add")
@click.argument("email")
@click.argument("name")
@click.option("--goal", "-g", help="Training goal, e.g. 'Health Management'")
@async_command
@reports_errors
async def add_user(email: str, name: str, goal: str | None):
    """Register a user."""
    user = await UserService().register(email, name, goal)
    echo_success(f"User saved with ID: {user.id}")


@users.command(name="list")
@async_command
async def list_users():
    """List all users."""
    all_users = await UserService().list_users()
    if not all_users:
        echo_info("No users found. Add one with 'synergym users add'")
        return

    rows = [[str(u.id), u.email, u.name, u.goal or ""] for u in all_users]
    click.echo()
    click.echo(format_table(["ID", "Email", "Name", "Goal"], rows))
    click.echo()
    click.echo(f"Total: {len(all_users)} user(s)")
