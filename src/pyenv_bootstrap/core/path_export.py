"""Process-local search path handling.

Nothing here touches os.environ or any shell startup file. The exported
search path only reaches child processes through the environment mappings
built by build_child_environment(); the user is told which line to add to
their shell startup file instead.
"""

import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from pyenv_bootstrap.core.config import InstallerConfig
from pyenv_bootstrap.core.user_feedback import UserFeedback


def split_search_path(search_path: str) -> list[str]:
    """Split a PATH value into its non-empty entries."""
    return [entry for entry in search_path.split(os.pathsep) if entry]


def _normalize(entry: str | Path) -> str:
    return os.path.normpath(os.path.expanduser(str(entry)))


def is_on_search_path(search_path: str, directory: Path) -> bool:
    """Check whether directory is an entry of search_path.

    Entries are compared after normalization, so trailing slashes and
    redundant separators do not matter.
    """
    target = _normalize(directory)
    return any(_normalize(entry) == target for entry in split_search_path(search_path))


def prepend_search_path(search_path: str, directories: Sequence[Path]) -> str:
    """Return a new PATH value with directories first, in the given order.

    Existing occurrences of the directories are removed from the rest of the
    path so repeated exports do not grow it.
    """
    front = [str(directory) for directory in directories]
    front_normalized = {_normalize(entry) for entry in front}
    rest = [
        entry
        for entry in split_search_path(search_path)
        if _normalize(entry) not in front_normalized
    ]
    return os.pathsep.join(front + rest)


def export_line(directories: Sequence[Path]) -> str:
    """Shell line that puts directories on PATH, for a shell startup file."""
    joined = os.pathsep.join(str(directory) for directory in directories)
    return f'export PATH="{joined}{os.pathsep}$PATH"'


def build_child_environment(
    environ: Mapping[str, str], *, search_path: str, pyenv_root: Path
) -> dict[str, str]:
    """Environment for child processes: the startup environment plus PATH and PYENV_ROOT."""
    env = dict(environ)
    env["PATH"] = search_path
    env["PYENV_ROOT"] = str(pyenv_root)
    return env


def advise_pyenv_export(
    feedback: UserFeedback, config: InstallerConfig, startup_search_path: str
) -> None:
    """Recommend persisting pyenv's directories when the startup PATH lacks them."""
    if config.suppress_path_hints:
        return

    missing = [
        directory
        for directory in config.pyenv_bin_dirs
        if not is_on_search_path(startup_search_path, directory)
    ]
    if not missing:
        return

    feedback.advice(
        "pyenv is only on PATH for this run. To keep it, add these lines to your "
        "shell startup file:"
    )
    feedback.advice(f'  export PYENV_ROOT="{config.pyenv_root}"')
    feedback.advice(f"  {export_line(missing)}")


def report_bin_dir_path_status(
    feedback: UserFeedback, config: InstallerConfig, *, bin_dir_on_path: bool
) -> None:
    """Tell the user whether the runtime's bin directory needs exporting.

    Prints nothing when path hints are suppressed.
    """
    if config.suppress_path_hints:
        return

    if bin_dir_on_path:
        feedback.success(
            f"{config.python_bin_dir} is already on your PATH, no action needed."
        )
        return

    feedback.advice(
        f"To use Python {config.python_version} directly, add this line to your "
        "shell startup file:"
    )
    feedback.advice(f"  {export_line([config.python_bin_dir])}")
