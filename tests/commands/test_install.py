"""Tests for the install command using fakes."""

import json
from pathlib import Path

from click.testing import CliRunner

from pyenv_bootstrap.cli.cli import cli
from tests.fakes.git import FakeGit
from tests.fakes.pip import FakePip
from tests.fakes.pyenv import FakePyenv
from tests.test_utils.builders import build_context


def test_install_succeeds_and_prints_summary(tmp_path: Path) -> None:
    runner = CliRunner()
    pip = FakePip()
    ctx = build_context(tmp_path, git=FakeGit(create_clone_dirs=True), pip=pip)

    result = runner.invoke(cli, ["install"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Bootstrap Complete" in result.output
    assert pip.install_calls == [(ctx.config.python_bin_dir, "virtualenv")]


def test_install_json_report(tmp_path: Path) -> None:
    runner = CliRunner()
    ctx = build_context(tmp_path)

    result = runner.invoke(cli, ["install", "--json"], obj=ctx)

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["http_client"] == "curl"
    assert data["bin_dir_on_path"] is False
    assert [step["name"] for step in data["steps"]] == [
        "pyenv",
        "PATH",
        "downloader",
        "python",
        "virtualenv",
    ]


def test_clone_failure_exit_code_propagates(tmp_path: Path) -> None:
    runner = CliRunner()
    pyenv = FakePyenv()
    ctx = build_context(tmp_path, git=FakeGit(clone_exit_code=128), pyenv=pyenv)

    result = runner.invoke(cli, ["install"], obj=ctx)

    assert result.exit_code == 128
    assert "Error: Failed to clone https://github.com/pyenv/pyenv.git" in result.output
    assert pyenv.install_calls == []


def test_build_failure_exit_code_propagates(tmp_path: Path) -> None:
    runner = CliRunner()
    ctx = build_context(tmp_path, pyenv=FakePyenv(build_exit_code=2))

    result = runner.invoke(cli, ["install"], obj=ctx)

    assert result.exit_code == 2
    assert "Failed to build pyenv native extension" in result.output


def test_runtime_install_failure_exit_code_propagates(tmp_path: Path) -> None:
    runner = CliRunner()
    pip = FakePip()
    ctx = build_context(tmp_path, pyenv=FakePyenv(install_exit_code=5), pip=pip)

    result = runner.invoke(cli, ["install"], obj=ctx)

    assert result.exit_code == 5
    assert pip.upgrade_calls == []
    assert pip.install_calls == []


def test_virtualenv_install_failure_exit_code_propagates(tmp_path: Path) -> None:
    runner = CliRunner()
    ctx = build_context(tmp_path, pip=FakePip(install_exit_code=1))

    result = runner.invoke(cli, ["install"], obj=ctx)

    assert result.exit_code == 1
    assert "Failed to install virtualenv with pip" in result.output


def test_missing_http_client_exits_1(tmp_path: Path) -> None:
    runner = CliRunner()
    ctx = build_context(tmp_path, installed_tools={})

    result = runner.invoke(cli, ["install"], obj=ctx)

    assert result.exit_code == 1
    assert "No HTTP client found" in result.output
