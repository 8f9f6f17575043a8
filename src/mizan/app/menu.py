"""Blocking menu loop — read a choice, dispatch a command, repeat."""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger
from rich.panel import Panel

from mizan import __version__
from mizan.core.exceptions import AuthenticationError

from .commands import Command, build_commands
from .context import AppContext

EXIT_KEY = 9


def render_menu(ctx: AppContext, commands: Mapping[int, Command]) -> None:
    ctx.say("\nMain Menu:")
    for key, command in commands.items():
        ctx.say(f"{key}. {command.title}")
    ctx.say(f"{EXIT_KEY}. Exit")


def dispatch(ctx: AppContext, commands: Mapping[int, Command], raw_choice: str) -> bool:
    """Handle one menu choice.

    Returns:
        False when the user asked to exit, True otherwise.
    """
    try:
        choice = int(raw_choice.strip())
    except ValueError:
        ctx.say(f"Invalid input! Please enter a number 1-{EXIT_KEY}.")
        return True

    if choice == EXIT_KEY:
        ctx.say("\nThank you for using the system. Goodbye!")
        return False

    command = commands.get(choice)
    if command is None:
        ctx.say(f"Invalid choice! Please select 1-{EXIT_KEY}.")
        return True

    if command.requires_auth:
        try:
            ctx.session.require_login()
        except AuthenticationError as e:
            ctx.say(str(e))
            return True

    logger.debug(f"Running command {command.key}: {command.title}")
    command.run(ctx)
    return True


def run_menu(ctx: AppContext, commands: Mapping[int, Command] | None = None) -> None:
    """Run the interactive loop until exit, EOF, or Ctrl+C."""
    commands = commands if commands is not None else build_commands()

    ctx.console.print(Panel(f"Investment Management System\nVersion {__version__}", title="Mizan"))

    running = True
    while running:
        render_menu(ctx, commands)
        try:
            running = dispatch(ctx, commands, ctx.prompt("Choose an option: "))
        except (EOFError, KeyboardInterrupt):
            ctx.say("\nGoodbye!")
            break
