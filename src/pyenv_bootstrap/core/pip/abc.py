"""Package installer (pip) operations interface.

Every operation targets the pip that ships inside one runtime's bin
directory, never whatever pip happens to be first on PATH.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path


class Pip(ABC):
    """Abstract pip operations for dependency injection."""

    @abstractmethod
    def upgrade_pip(self, bin_dir: Path, *, env: Mapping[str, str]) -> None:
        """Upgrade the pip bundled with the runtime in bin_dir.

        Raises:
            CommandFailedError: If pip exits non-zero
        """
        ...

    @abstractmethod
    def install_package(self, bin_dir: Path, package: str, *, env: Mapping[str, str]) -> None:
        """Install a package into the runtime in bin_dir.

        Args:
            bin_dir: Runtime bin directory containing pip
            package: Requirement to install (unpinned name or specifier)
            env: Environment for the pip process

        Raises:
            CommandFailedError: If pip exits non-zero
        """
        ...
