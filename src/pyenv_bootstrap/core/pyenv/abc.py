"""Version manager (pyenv) operations interface."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path


class Pyenv(ABC):
    """Abstract pyenv operations for dependency injection."""

    @abstractmethod
    def build_native_extension(self, pyenv_root: Path, *, env: Mapping[str, str]) -> None:
        """Build pyenv's bundled native helper inside a fresh clone.

        Runs `src/configure` followed by `make -C src` from the clone root.

        Args:
            pyenv_root: Root of the pyenv clone
            env: Environment for the build processes

        Raises:
            CommandFailedError: If either build command exits non-zero
        """
        ...

    @abstractmethod
    def install_version(self, version: str, *, env: Mapping[str, str]) -> None:
        """Install a Python version, skipping it if already installed.

        Runs `pyenv install --skip-existing <version>`. The pyenv executable
        is resolved through the PATH in env.

        Args:
            version: Python version identifier (e.g. "3.7.2")
            env: Environment carrying PYENV_ROOT and the exported PATH

        Raises:
            CommandFailedError: If the install exits non-zero
            CommandNotFoundError: If pyenv does not resolve
        """
        ...
