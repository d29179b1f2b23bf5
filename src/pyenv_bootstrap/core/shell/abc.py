"""Shell lookups for tool discovery.

Read-only operations only: which executables resolve on a search path and
what version they report. Mutating commands live in the git, pyenv and pip
integrations.
"""

from abc import ABC, abstractmethod


class Shell(ABC):
    """Abstract shell lookups for dependency injection."""

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str, search_path: str) -> str | None:
        """Resolve an executable on the given search path.

        Args:
            tool_name: Executable name (e.g. "pyenv", "curl")
            search_path: os.pathsep separated directories to search

        Returns:
            Absolute path to the executable, or None if it does not resolve
        """
        ...

    @abstractmethod
    def get_tool_version_output(self, tool_path: str) -> str | None:
        """Run `<tool> --version` and return its stdout.

        Args:
            tool_path: Path to the executable

        Returns:
            stdout of the version command, or None if the tool could not be
            run or exited non-zero
        """
        ...
