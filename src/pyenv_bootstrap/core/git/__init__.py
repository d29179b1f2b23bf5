from pyenv_bootstrap.core.git.abc import Git
from pyenv_bootstrap.core.git.dry_run import DryRunGit
from pyenv_bootstrap.core.git.real import RealGit

__all__ = ["DryRunGit", "Git", "RealGit"]
