from pyenv_bootstrap.core.pyenv.abc import Pyenv
from pyenv_bootstrap.core.pyenv.dry_run import DryRunPyenv
from pyenv_bootstrap.core.pyenv.real import RealPyenv

__all__ = ["DryRunPyenv", "Pyenv", "RealPyenv"]
