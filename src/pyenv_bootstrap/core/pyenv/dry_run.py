"""No-op wrapper for pyenv operations."""

from collections.abc import Mapping
from pathlib import Path

from pyenv_bootstrap.cli.output import dry_run_notice
from pyenv_bootstrap.core.pyenv.abc import Pyenv


class DryRunPyenv(Pyenv):
    """Prints the pyenv commands that would run instead of running them."""

    def build_native_extension(self, pyenv_root: Path, *, env: Mapping[str, str]) -> None:
        dry_run_notice([str(pyenv_root / "src" / "configure")])
        dry_run_notice(["make", "-C", str(pyenv_root / "src")])

    def install_version(self, version: str, *, env: Mapping[str, str]) -> None:
        dry_run_notice(["pyenv", "install", "--skip-existing", version])
