"""Shared state handed to every menu command.

Replaces process-wide singletons: the shell builds one ``AppContext`` and
passes it to each handler, so tests can build as many as they like.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

import click
from rich.console import Console

from mizan.accounts.connections import MIN_API_KEY_LENGTH
from mizan.accounts.users import Session, UserRegistry
from mizan.core.config_schema import MizanConfig
from mizan.portfolio.store import PortfolioStore
from mizan.portfolio.zakat import StandardZakatCalculator, ZakatCalculator


class Prompt(Protocol):
    def __call__(self, label: str, *, password: bool = False) -> str: ...


def terminal_prompt(label: str, *, password: bool = False) -> str:
    """Read one line from the terminal; secrets are not echoed.

    Raises:
        EOFError: Input closed or the user pressed Ctrl+C.
    """
    try:
        return click.prompt(label, default="", show_default=False, prompt_suffix="", hide_input=password)
    except click.Abort:
        raise EOFError from None


@dataclass
class AppContext:
    console: Console
    prompt: Prompt
    users: UserRegistry = field(default_factory=UserRegistry)
    session: Session = field(default_factory=Session)
    portfolio: PortfolioStore = field(default_factory=PortfolioStore)
    zakat_calculator: ZakatCalculator = field(default_factory=StandardZakatCalculator)
    currency: str = "$"
    min_api_key_length: int = MIN_API_KEY_LENGTH

    @classmethod
    def from_settings(
        cls,
        settings: MizanConfig,
        console: Console | None = None,
        prompt: Prompt | None = None,
    ) -> AppContext:
        """Build a fresh context (empty registry, session, portfolio) from settings."""
        console = console or Console()
        return cls(
            console=console,
            prompt=prompt or terminal_prompt,
            currency=settings.display.currency,
            min_api_key_length=settings.connections.min_api_key_length,
        )

    def say(self, message: str = "") -> None:
        """Print plain text; user-supplied names are never treated as markup."""
        self.console.print(message, markup=False, highlight=False)
