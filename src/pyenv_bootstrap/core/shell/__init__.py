from pyenv_bootstrap.core.shell.abc import Shell
from pyenv_bootstrap.core.shell.real import RealShell

__all__ = ["RealShell", "Shell"]
