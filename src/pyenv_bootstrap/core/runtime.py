"""Install the pinned Python runtime and upgrade its pip."""

import logging
from collections.abc import Mapping

from pyenv_bootstrap.core.context import BootstrapContext
from pyenv_bootstrap.core.path_export import is_on_search_path, report_bin_dir_path_status
from pyenv_bootstrap.core.types import RuntimeOutcome, StepOutcome, StepStatus

logger = logging.getLogger(__name__)

STEP_NAME = "python"


def install_runtime(ctx: BootstrapContext, *, env: Mapping[str, str]) -> RuntimeOutcome:
    """Install the configured Python version with pyenv, then upgrade its pip.

    pyenv skips versions that are already installed. pip is upgraded either
    way. Whether the runtime's bin directory is on PATH only changes the
    message printed, never what gets installed.

    Args:
        ctx: Bootstrap context
        env: Environment carrying PYENV_ROOT and the exported PATH

    Raises:
        CommandFailedError: If the install or the pip upgrade exits non-zero
    """
    config = ctx.config
    bin_dir = config.python_bin_dir
    already_installed = bin_dir.exists()

    ctx.feedback.info(f"Installing Python {config.python_version}...")
    ctx.pyenv.install_version(config.python_version, env=env)

    bin_dir_on_path = is_on_search_path(ctx.startup_search_path, bin_dir)
    logger.debug("%s on startup PATH: %s", bin_dir, bin_dir_on_path)
    report_bin_dir_path_status(ctx.feedback, config, bin_dir_on_path=bin_dir_on_path)

    ctx.feedback.info(f"Upgrading pip for Python {config.python_version}...")
    ctx.pip.upgrade_pip(bin_dir, env=env)

    if already_installed:
        step = StepOutcome(
            name=STEP_NAME,
            status=StepStatus.SKIPPED,
            detail=f"{config.python_version} already installed, pip upgraded",
        )
    else:
        step = StepOutcome(
            name=STEP_NAME,
            status=StepStatus.COMPLETED,
            detail=f"installed {config.python_version}, pip upgraded",
        )

    return RuntimeOutcome(step=step, bin_dir=bin_dir, bin_dir_on_path=bin_dir_on_path)
