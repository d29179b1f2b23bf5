"""Fake implementation of Git for testing."""

from collections.abc import Mapping
from pathlib import Path

from pyenv_bootstrap.core.git.abc import Git
from tests.fakes.failures import command_failure


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    Constructor Injection:
    - All state is provided via constructor parameters
    - Calls are recorded for test assertions

    Examples:
        # Clone fails the way `git clone` does on a network error
        >>> git = FakeGit(clone_exit_code=128)

        # Clone creates the destination directory, like the real one
        >>> git = FakeGit(create_clone_dirs=True)
    """

    def __init__(
        self,
        *,
        clone_exit_code: int = 0,
        checkout_exit_code: int = 0,
        create_clone_dirs: bool = False,
    ) -> None:
        """Initialize fake with predetermined exit codes.

        Args:
            clone_exit_code: Exit code clone() behaves as if git returned
            checkout_exit_code: Exit code checkout_new_branch() behaves as if
                git returned
            create_clone_dirs: Whether clone() creates the destination on disk
        """
        self._clone_exit_code = clone_exit_code
        self._checkout_exit_code = checkout_exit_code
        self._create_clone_dirs = create_clone_dirs
        self._clone_calls: list[tuple[str, Path]] = []
        self._checkout_calls: list[tuple[Path, str, str]] = []

    def clone(self, url: str, destination: Path, *, env: Mapping[str, str]) -> None:
        self._clone_calls.append((url, destination))
        if self._clone_exit_code != 0:
            raise command_failure(
                ["git", "clone", url, str(destination)],
                f"clone {url}",
                self._clone_exit_code,
                stderr="fatal: unable to access remote",
            )
        if self._create_clone_dirs:
            destination.mkdir(parents=True)

    def checkout_new_branch(
        self, repo_dir: Path, branch: str, revision: str, *, env: Mapping[str, str]
    ) -> None:
        self._checkout_calls.append((repo_dir, branch, revision))
        if self._checkout_exit_code != 0:
            raise command_failure(
                ["git", "checkout", "-b", branch, revision],
                f"check out revision '{revision}' as branch '{branch}'",
                self._checkout_exit_code,
            )

    @property
    def clone_calls(self) -> list[tuple[str, Path]]:
        """Get the list of (url, destination) clone() calls.

        This property is for test assertions only.
        """
        return self._clone_calls.copy()

    @property
    def checkout_calls(self) -> list[tuple[Path, str, str]]:
        """Get the list of (repo_dir, branch, revision) checkout_new_branch() calls.

        This property is for test assertions only.
        """
        return self._checkout_calls.copy()
