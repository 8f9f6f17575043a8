"""mizan shell — interactive investment menu."""

from __future__ import annotations

from pathlib import Path

import click

DEFAULT_CONFIG_PATH = Path.home() / ".mizan" / "config.yaml"


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(DEFAULT_CONFIG_PATH),
    show_default=True,
    help="YAML or JSON config file. Missing files fall back to defaults.",
)
@click.option("--log-level", default=None, help="Override logging.level (DEBUG, INFO, WARNING, ...).")
@click.option("--currency", default=None, help="Override display.currency, e.g. '€'.")
def shell(config_path: str, log_level: str | None, currency: str | None) -> None:
    """Start the interactive menu in the terminal."""
    from mizan.app import AppContext, run_menu
    from mizan.core.config import load_settings
    from mizan.core.exceptions import ConfigurationError
    from mizan.core.utils.logging import setup_logging

    overrides = {"logging.level": log_level, "display.currency": currency}
    try:
        settings = load_settings(config_file=config_path, overrides=overrides)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(settings.logging)

    run_menu(AppContext.from_settings(settings))
