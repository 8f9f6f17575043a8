"""Interactive menu shell — command table, shared context, and loop."""

from .commands import Command, build_commands
from .context import AppContext
from .menu import dispatch, run_menu

__all__ = [
    "AppContext",
    "Command",
    "build_commands",
    "dispatch",
    "run_menu",
]
