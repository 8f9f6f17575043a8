"""Mizan CLI — entry point for the interactive shell."""

import click

from mizan import __version__


@click.group()
@click.version_option(version=__version__, package_name="mizan")
def main() -> None:
    """Mizan — track investments and calculate zakat."""


# Register subcommands
from .shell_cmd import shell

main.add_command(shell)
