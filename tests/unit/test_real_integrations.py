"""Tests for the subprocess-backed integrations.

The command wrappers are patched so no git, pyenv or pip is needed; the
shell lookups run against small executables created in tmp_path.
"""

import stat
from pathlib import Path
from unittest.mock import patch

from pyenv_bootstrap.core.git import RealGit
from pyenv_bootstrap.core.pip import RealPip
from pyenv_bootstrap.core.pyenv import RealPyenv
from pyenv_bootstrap.core.shell import RealShell


def _write_executable(path: Path, body: str) -> Path:
    path.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def test_real_git_clone_and_checkout_commands() -> None:
    env = {"PATH": "/usr/bin"}
    with patch("pyenv_bootstrap.core.git.real.run_subprocess_with_context") as mock_run:
        git = RealGit()
        git.clone("https://github.com/pyenv/pyenv.git", Path("/home/u/.pyenv"), env=env)
        git.checkout_new_branch(Path("/home/u/.pyenv"), "pinned", "v1.2.9", env=env)

    clone_call, checkout_call = mock_run.call_args_list
    assert clone_call.args[0] == [
        "git",
        "clone",
        "https://github.com/pyenv/pyenv.git",
        "/home/u/.pyenv",
    ]
    assert clone_call.kwargs["capture_output"] is False
    assert checkout_call.args[0] == ["git", "checkout", "-b", "pinned", "v1.2.9"]
    assert checkout_call.kwargs["cwd"] == Path("/home/u/.pyenv")


def test_real_pyenv_build_runs_configure_then_make() -> None:
    with patch("pyenv_bootstrap.core.pyenv.real.run_subprocess_with_context") as mock_run:
        RealPyenv().build_native_extension(Path("/home/u/.pyenv"), env={})

    commands = [call.args[0] for call in mock_run.call_args_list]
    assert commands == [["/home/u/.pyenv/src/configure"], ["make", "-C", "src"]]
    assert all(call.kwargs["cwd"] == Path("/home/u/.pyenv") for call in mock_run.call_args_list)


def test_real_pyenv_install_skips_existing() -> None:
    env = {"PATH": "/home/u/.pyenv/bin", "PYENV_ROOT": "/home/u/.pyenv"}
    with patch("pyenv_bootstrap.core.pyenv.real.run_subprocess_with_context") as mock_run:
        RealPyenv().install_version("3.7.2", env=env)

    assert mock_run.call_args.args[0] == ["pyenv", "install", "--skip-existing", "3.7.2"]
    assert mock_run.call_args.kwargs["env"] == env


def test_real_pip_uses_runtime_pip() -> None:
    bin_dir = Path("/home/u/.pyenv/versions/3.7.2/bin")
    with patch("pyenv_bootstrap.core.pip.real.run_subprocess_with_context") as mock_run:
        pip = RealPip()
        pip.upgrade_pip(bin_dir, env={})
        pip.install_package(bin_dir, "virtualenv", env={})

    commands = [call.args[0] for call in mock_run.call_args_list]
    assert commands == [
        [str(bin_dir / "pip"), "install", "--upgrade", "pip"],
        [str(bin_dir / "pip"), "install", "virtualenv"],
    ]


def test_real_shell_resolves_only_on_given_path(tmp_path: Path) -> None:
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    tool = _write_executable(bin_dir / "pyenv", "exit 0")
    shell = RealShell()

    assert shell.get_installed_tool_path("pyenv", str(bin_dir)) == str(tool)
    assert shell.get_installed_tool_path("pyenv", str(tmp_path / "elsewhere")) is None


def test_real_shell_version_output(tmp_path: Path) -> None:
    wget = _write_executable(tmp_path / "wget", 'echo "GNU Wget 1.21.4 built on linux-gnu."')
    broken = _write_executable(tmp_path / "broken", "exit 3")
    shell = RealShell()

    assert shell.get_tool_version_output(str(wget)) == "GNU Wget 1.21.4 built on linux-gnu.\n"
    assert shell.get_tool_version_output(str(broken)) is None
    assert shell.get_tool_version_output(str(tmp_path / "missing")) is None


def test_real_shell_version_output_tolerates_invalid_utf8(tmp_path: Path) -> None:
    wget = _write_executable(tmp_path / "wget", r"printf 'GNU Wget 1.21 \377\n'")
    shell = RealShell()

    output = shell.get_tool_version_output(str(wget))

    assert output is not None
    assert output.startswith("GNU Wget 1.21 ")
    assert "\ufffd" in output
