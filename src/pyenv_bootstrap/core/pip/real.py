"""Production pip operations via subprocess."""

from collections.abc import Mapping
from pathlib import Path

from pyenv_bootstrap.core.pip.abc import Pip
from pyenv_bootstrap.core.subprocess import run_subprocess_with_context


class RealPip(Pip):
    """pip operations run with the runtime's own pip executable."""

    def upgrade_pip(self, bin_dir: Path, *, env: Mapping[str, str]) -> None:
        run_subprocess_with_context(
            [str(bin_dir / "pip"), "install", "--upgrade", "pip"],
            operation_context=f"upgrade pip in {bin_dir}",
            env=env,
            capture_output=False,
        )

    def install_package(self, bin_dir: Path, package: str, *, env: Mapping[str, str]) -> None:
        run_subprocess_with_context(
            [str(bin_dir / "pip"), "install", package],
            operation_context=f"install {package} with pip",
            env=env,
            capture_output=False,
        )
