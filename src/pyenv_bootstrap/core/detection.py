"""Detection of an existing version manager installation."""

import logging

from pyenv_bootstrap.core.shell import Shell

logger = logging.getLogger(__name__)

PYENV_EXECUTABLE = "pyenv"


def version_manager_installed(shell: Shell, search_path: str) -> bool:
    """Check whether the pyenv executable resolves on search_path."""
    tool_path = shell.get_installed_tool_path(PYENV_EXECUTABLE, search_path)
    logger.debug("pyenv lookup on %s: %s", search_path, tool_path)
    return tool_path is not None
