"""Application context with dependency injection."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from pyenv_bootstrap.core.config import InstallerConfig, load_installer_config
from pyenv_bootstrap.core.git import DryRunGit, Git, RealGit
from pyenv_bootstrap.core.pip import DryRunPip, Pip, RealPip
from pyenv_bootstrap.core.pyenv import DryRunPyenv, Pyenv, RealPyenv
from pyenv_bootstrap.core.shell import RealShell, Shell
from pyenv_bootstrap.core.user_feedback import (
    InteractiveFeedback,
    SuppressedFeedback,
    UserFeedback,
)


@dataclass(frozen=True)
class BootstrapContext:
    """Immutable context holding all dependencies for a bootstrap run.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    Note: environ is a snapshot of the process environment at startup. Steps
    build child-process environments from it instead of mutating os.environ,
    so the exported search path never leaks back into this process.
    """

    git: Git
    pyenv: Pyenv
    pip: Pip
    shell: Shell
    feedback: UserFeedback
    config: InstallerConfig
    environ: Mapping[str, str]
    dry_run: bool

    @property
    def startup_search_path(self) -> str:
        """The PATH value this process was started with."""
        return self.environ.get("PATH", os.defpath)

    @staticmethod
    def for_test(
        git: Git | None = None,
        pyenv: Pyenv | None = None,
        pip: Pip | None = None,
        shell: Shell | None = None,
        feedback: UserFeedback | None = None,
        config: InstallerConfig | None = None,
        environ: Mapping[str, str] | None = None,
        dry_run: bool = False,
    ) -> "BootstrapContext":
        """Create test context with optional pre-configured integration classes.

        Any integration not given is replaced by its empty fake. Paths in the
        default config live under /test/home so tests never touch a real
        pyenv installation by accident.

        Args:
            git: Optional Git implementation. If None, creates empty FakeGit.
            pyenv: Optional Pyenv implementation. If None, creates empty FakePyenv.
            pip: Optional Pip implementation. If None, creates empty FakePip.
            shell: Optional Shell implementation. If None, creates FakeShell
                with no tools installed.
            feedback: Optional UserFeedback. If None, creates FakeUserFeedback.
            config: Optional InstallerConfig. If None, uses defaults rooted at
                Path("/test/home").
            environ: Optional startup environment. If None, uses a minimal
                environment with PATH="/usr/bin:/bin".
            dry_run: Whether to enable dry-run mode (default False).

        Returns:
            Frozen BootstrapContext for use in tests

        Example:
            >>> shell = FakeShell(installed_tools={"curl": "/usr/bin/curl"})
            >>> ctx = BootstrapContext.for_test(shell=shell)
        """
        from tests.fakes.git import FakeGit
        from tests.fakes.pip import FakePip
        from tests.fakes.pyenv import FakePyenv
        from tests.fakes.shell import FakeShell
        from tests.fakes.user_feedback import FakeUserFeedback

        if environ is None:
            environ = {"PATH": "/usr/bin:/bin", "HOME": "/test/home"}
        if config is None:
            config = load_installer_config(
                environ={},
                home=Path("/test/home"),
                config_path=Path("/test/home/.pyenv-bootstrap/missing.toml"),
            )

        return BootstrapContext(
            git=git if git is not None else FakeGit(),
            pyenv=pyenv if pyenv is not None else FakePyenv(),
            pip=pip if pip is not None else FakePip(),
            shell=shell if shell is not None else FakeShell(),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
            config=config,
            environ=environ,
            dry_run=dry_run,
        )


def create_context(
    *, config: InstallerConfig, dry_run: bool, quiet: bool = False
) -> BootstrapContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        config: Effective installer configuration
        dry_run: If True, use dry-run integrations that print intended
            commands without executing them
        quiet: If True, suppress everything but errors

    Returns:
        BootstrapContext with real implementations, or dry-run ones for
        git, pyenv and pip if dry_run=True
    """
    git: Git
    pyenv: Pyenv
    pip: Pip
    if dry_run:
        git, pyenv, pip = DryRunGit(), DryRunPyenv(), DryRunPip()
    else:
        git, pyenv, pip = RealGit(), RealPyenv(), RealPip()

    feedback: UserFeedback = SuppressedFeedback() if quiet else InteractiveFeedback()

    return BootstrapContext(
        git=git,
        pyenv=pyenv,
        pip=pip,
        shell=RealShell(),
        feedback=feedback,
        config=config,
        environ=dict(os.environ),
        dry_run=dry_run,
    )
