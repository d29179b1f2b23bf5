"""Git operations interface.

Only the two operations needed to fetch a pinned pyenv checkout.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path


class Git(ABC):
    """Abstract git operations for dependency injection."""

    @abstractmethod
    def clone(self, url: str, destination: Path, *, env: Mapping[str, str]) -> None:
        """Clone a remote repository into destination.

        Args:
            url: Remote repository URL
            destination: Directory to clone into (must not exist)
            env: Environment for the git process

        Raises:
            CommandFailedError: If git exits non-zero
            CommandNotFoundError: If git is not installed
        """
        ...

    @abstractmethod
    def checkout_new_branch(
        self, repo_dir: Path, branch: str, revision: str, *, env: Mapping[str, str]
    ) -> None:
        """Create branch at revision and switch to it (`git checkout -b`).

        Args:
            repo_dir: Root of the local clone
            branch: Name of the local branch to create
            revision: Commit, tag or other revision to start the branch at
            env: Environment for the git process

        Raises:
            CommandFailedError: If the branch exists or revision is unknown
        """
        ...
