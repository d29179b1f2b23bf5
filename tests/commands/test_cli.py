"""Tests for the top-level command group."""

import logging

from click.testing import CliRunner

from pyenv_bootstrap.cli.cli import cli, configure_logging
from pyenv_bootstrap.version import __version__


def test_version_option() -> None:
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert f"pyenv-bootstrap, version {__version__}" in result.output


def test_help_lists_commands() -> None:
    result = CliRunner().invoke(cli, ["-h"])

    assert result.exit_code == 0
    assert "install" in result.output
    assert "config" in result.output


def test_configure_logging_without_debug_leaves_root_logger(monkeypatch) -> None:
    monkeypatch.delenv("PYENV_BOOTSTRAP_DEBUG", raising=False)
    root = logging.getLogger()
    handlers_before = list(root.handlers)

    configure_logging(False)

    assert root.handlers == handlers_before
