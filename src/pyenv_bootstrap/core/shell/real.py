"""Production shell lookups using shutil.which and subprocess."""

import logging
import shutil
import subprocess

from pyenv_bootstrap.core.shell.abc import Shell

logger = logging.getLogger(__name__)


class RealShell(Shell):
    """Production implementation backed by the real filesystem."""

    def get_installed_tool_path(self, tool_name: str, search_path: str) -> str | None:
        return shutil.which(tool_name, path=search_path)

    def get_tool_version_output(self, tool_path: str) -> str | None:
        """Run `<tool> --version`, returning None when the tool cannot report one."""
        try:
            result = subprocess.run(
                [tool_path, "--version"],
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
                timeout=10,
            )
        except (FileNotFoundError, PermissionError, subprocess.TimeoutExpired) as e:
            logger.debug("Could not query version of %s: %s", tool_path, e)
            return None

        if result.returncode != 0:
            return None
        return result.stdout
