"""Tests for the CLI entry point."""

import os

from click.testing import CliRunner
from loguru import logger

from mizan.core.cli import main


class TestCliGroup:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Mizan" in result.output
        assert "shell" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestShellCommand:
    def test_shell_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["shell", "--help"])
        assert result.exit_code == 0
        assert "interactive menu" in result.output

    def test_exit_immediately(self, tmp_dir):
        runner = CliRunner()
        result = runner.invoke(main, ["shell", "--config", os.path.join(tmp_dir, "none.yaml")], input="9\n")
        logger.remove()
        assert result.exit_code == 0
        assert "Main Menu:" in result.output
        assert "Goodbye!" in result.output

    def test_zakat_session_with_currency(self, tmp_dir):
        script = "\n".join(
            [
                "1", "amina", "Secret123",
                "2", "amina", "Secret123",
                "3", "Gold", "2", "gold", "2024-05-01", "4000",
                "5",
                "9",
            ]
        )
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["shell", "--config", os.path.join(tmp_dir, "none.yaml"), "--currency", "€"],
            input=script + "\n",
        )
        logger.remove()
        assert result.exit_code == 0
        assert "Total Zakat Due: €100.00" in result.output

    def test_bad_config_file(self, tmp_dir):
        path = os.path.join(tmp_dir, "config.yaml")
        with open(path, "w") as f:
            f.write("display: [unclosed\n")
        runner = CliRunner()
        result = runner.invoke(main, ["shell", "--config", path])
        assert result.exit_code != 0
        assert "Could not parse" in result.output

    def test_bad_log_level(self, tmp_dir):
        runner = CliRunner()
        result = runner.invoke(
            main, ["shell", "--config", os.path.join(tmp_dir, "none.yaml"), "--log-level", "LOUD"]
        )
        assert result.exit_code != 0
        assert "log level" in result.output
