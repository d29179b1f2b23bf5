"""Builders for configs and contexts used across tests."""

import dataclasses
from pathlib import Path
from typing import Any

from pyenv_bootstrap.core.config import InstallerConfig, load_installer_config
from pyenv_bootstrap.core.context import BootstrapContext
from tests.fakes.shell import FakeShell

CURL_ONLY = {"curl": "/usr/bin/curl"}


def build_config(home: Path, **overrides: Any) -> InstallerConfig:
    """Default InstallerConfig rooted at home, with optional field overrides.

    Example:
        >>> config = build_config(tmp_path, suppress_path_hints=True)
    """
    config = load_installer_config(
        environ={}, home=home, config_path=home / ".pyenv-bootstrap" / "config.toml"
    )
    return dataclasses.replace(config, **overrides)


def build_context(
    home: Path,
    *,
    search_path: str = "/usr/bin:/bin",
    installed_tools: dict[str, str] | None = None,
    config: InstallerConfig | None = None,
    **integrations: Any,
) -> BootstrapContext:
    """BootstrapContext for a machine whose home directory is home.

    Args:
        home: Home directory (usually tmp_path)
        search_path: PATH the process was "started" with
        installed_tools: Tools FakeShell resolves. Defaults to curl only.
        config: Config to use instead of build_config(home)
        **integrations: Passed through to BootstrapContext.for_test()
    """
    if "shell" not in integrations:
        tools = installed_tools if installed_tools is not None else dict(CURL_ONLY)
        integrations["shell"] = FakeShell(installed_tools=tools)

    return BootstrapContext.for_test(
        config=config if config is not None else build_config(home),
        environ={"PATH": search_path, "HOME": str(home)},
        **integrations,
    )
