"""Verification that an HTTP download tool is available.

python-build downloads Python sources with whichever of curl, aria2c or wget
it finds. wget only works with the TLS setup of the download hosts from
1.14 onwards, so older wget releases are rejected.
"""

import logging
import re

from pyenv_bootstrap.core.errors import MissingHttpClientError
from pyenv_bootstrap.core.shell import Shell

logger = logging.getLogger(__name__)

ACCEPTED_DOWNLOADERS = ("curl", "aria2c")
WGET = "wget"
MINIMUM_WGET_VERSION = (1, 14)

_WGET_VERSION_PATTERN = re.compile(r"GNU Wget (\d+)\.(\d+)")


def parse_wget_version(version_output: str) -> tuple[int, int] | None:
    """Extract (major, minor) from `wget --version` output.

    Returns:
        Version tuple, or None if the output is not a GNU Wget banner
    """
    match = _WGET_VERSION_PATTERN.search(version_output)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def wget_is_supported(version_output: str) -> bool:
    """Check whether a wget is new enough, given its --version output.

    A wget whose version cannot be read is given the benefit of the doubt.
    """
    version = parse_wget_version(version_output)
    if version is None:
        return True
    return version >= MINIMUM_WGET_VERSION


def verify_http_client(shell: Shell, search_path: str) -> str:
    """Find a usable download tool on search_path.

    Args:
        shell: Shell used for executable lookup and version queries
        search_path: PATH value to search

    Returns:
        Name of the accepted tool

    Raises:
        MissingHttpClientError: If no acceptable tool is installed
    """
    for tool in ACCEPTED_DOWNLOADERS:
        if shell.get_installed_tool_path(tool, search_path) is not None:
            logger.debug("Using %s for downloads", tool)
            return tool

    wget_path = shell.get_installed_tool_path(WGET, search_path)
    if wget_path is None:
        raise MissingHttpClientError(
            "No HTTP client found. Install curl, aria2c or wget 1.14+ "
            "so Python sources can be downloaded."
        )

    version_output = shell.get_tool_version_output(wget_path) or ""
    if not wget_is_supported(version_output):
        found = version_output.splitlines()[0] if version_output else WGET
        raise MissingHttpClientError(
            f"{found} is too old to download Python sources over HTTPS. "
            "Install curl, aria2c or wget 1.14+."
        )

    logger.debug("Using wget at %s for downloads", wget_path)
    return WGET
