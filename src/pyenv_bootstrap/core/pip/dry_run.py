"""No-op wrapper for pip operations."""

from collections.abc import Mapping
from pathlib import Path

from pyenv_bootstrap.cli.output import dry_run_notice
from pyenv_bootstrap.core.pip.abc import Pip


class DryRunPip(Pip):
    """Prints the pip commands that would run instead of running them."""

    def upgrade_pip(self, bin_dir: Path, *, env: Mapping[str, str]) -> None:
        dry_run_notice([str(bin_dir / "pip"), "install", "--upgrade", "pip"])

    def install_package(self, bin_dir: Path, package: str, *, env: Mapping[str, str]) -> None:
        dry_run_notice([str(bin_dir / "pip"), "install", package])
