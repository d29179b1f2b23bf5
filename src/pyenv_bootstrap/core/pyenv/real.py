"""Production pyenv operations via subprocess."""

from collections.abc import Mapping
from pathlib import Path

from pyenv_bootstrap.core.pyenv.abc import Pyenv
from pyenv_bootstrap.core.subprocess import run_subprocess_with_context


class RealPyenv(Pyenv):
    """pyenv operations backed by the pyenv CLI and its build scripts."""

    def build_native_extension(self, pyenv_root: Path, *, env: Mapping[str, str]) -> None:
        run_subprocess_with_context(
            [str(pyenv_root / "src" / "configure")],
            operation_context="configure pyenv native extension",
            cwd=pyenv_root,
            env=env,
        )
        run_subprocess_with_context(
            ["make", "-C", "src"],
            operation_context="build pyenv native extension",
            cwd=pyenv_root,
            env=env,
        )

    def install_version(self, version: str, *, env: Mapping[str, str]) -> None:
        # Not captured: python-build prints download and compile progress
        run_subprocess_with_context(
            ["pyenv", "install", "--skip-existing", version],
            operation_context=f"install Python {version} with pyenv",
            env=env,
            capture_output=False,
        )
