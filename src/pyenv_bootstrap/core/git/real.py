"""Production git operations via subprocess."""

from collections.abc import Mapping
from pathlib import Path

from pyenv_bootstrap.core.git.abc import Git
from pyenv_bootstrap.core.subprocess import run_subprocess_with_context


class RealGit(Git):
    """Git operations backed by the git CLI."""

    def clone(self, url: str, destination: Path, *, env: Mapping[str, str]) -> None:
        # Not captured so clone progress reaches the terminal
        run_subprocess_with_context(
            ["git", "clone", url, str(destination)],
            operation_context=f"clone {url}",
            env=env,
            capture_output=False,
        )

    def checkout_new_branch(
        self, repo_dir: Path, branch: str, revision: str, *, env: Mapping[str, str]
    ) -> None:
        run_subprocess_with_context(
            ["git", "checkout", "-b", branch, revision],
            operation_context=f"check out revision '{revision}' as branch '{branch}'",
            cwd=repo_dir,
            env=env,
        )
