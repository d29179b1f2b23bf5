"""No-op wrapper for git operations."""

from collections.abc import Mapping
from pathlib import Path

from pyenv_bootstrap.cli.output import dry_run_notice
from pyenv_bootstrap.core.git.abc import Git


class DryRunGit(Git):
    """Prints the git commands that would run instead of running them.

    Usage:
        noop_git = DryRunGit()

        # Prints "[DRY RUN] Would run git clone ..." and returns
        noop_git.clone(url, destination, env=env)
    """

    def clone(self, url: str, destination: Path, *, env: Mapping[str, str]) -> None:
        dry_run_notice(["git", "clone", url, str(destination)])

    def checkout_new_branch(
        self, repo_dir: Path, branch: str, revision: str, *, env: Mapping[str, str]
    ) -> None:
        dry_run_notice(["git", "-C", str(repo_dir), "checkout", "-b", branch, revision])
