"""Shared test fixtures for mizan."""

import io
import os
import tempfile
from datetime import date

import pytest
from rich.console import Console

from mizan.app.context import AppContext
from mizan.portfolio.models import Asset, AssetCategory
from mizan.portfolio.store import PortfolioStore


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "display": {"currency": "€"},
        "logging": {"level": "debug"},
        "connections": {"min_api_key_length": 8},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f, allow_unicode=True)
    return config_path


@pytest.fixture
def aapl():
    return Asset("AAPL", 10, AssetCategory.STOCKS, date(2023, 1, 1), 1500.0)


@pytest.fixture
def btc():
    return Asset("BTC", 0.5, AssetCategory.CRYPTO, date(2023, 2, 1), 20000.0)


@pytest.fixture
def store():
    return PortfolioStore()


class ScriptedPrompt:
    """Feeds canned answers to prompts; raises EOFError once exhausted."""

    def __init__(self, answers):
        self._answers = list(answers)
        self.labels: list[str] = []

    def __call__(self, label, *, password=False):
        self.labels.append(label)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)


@pytest.fixture
def make_ctx():
    """Build an AppContext whose output is captured and input is scripted.

    Returns a factory: ``ctx, output = make_ctx(["answer", ...])`` where
    ``output()`` returns everything printed so far.
    """

    def _make(answers=(), **kwargs):
        buffer = io.StringIO()
        console = Console(file=buffer, width=120, force_terminal=False, color_system=None)
        ctx = AppContext(console=console, prompt=ScriptedPrompt(answers), **kwargs)
        return ctx, buffer.getvalue

    return _make
