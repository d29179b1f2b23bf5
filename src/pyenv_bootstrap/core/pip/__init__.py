from pyenv_bootstrap.core.pip.abc import Pip
from pyenv_bootstrap.core.pip.dry_run import DryRunPip
from pyenv_bootstrap.core.pip.real import RealPip

__all__ = ["DryRunPip", "Pip", "RealPip"]
