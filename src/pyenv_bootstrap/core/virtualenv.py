"""Install the virtual-environment tool into the new runtime."""

from collections.abc import Mapping

from pyenv_bootstrap.core.context import BootstrapContext
from pyenv_bootstrap.core.types import StepOutcome, StepStatus

STEP_NAME = "virtualenv"


def install_virtualenv_tool(ctx: BootstrapContext, *, env: Mapping[str, str]) -> StepOutcome:
    """Install the configured package with the runtime's own pip.

    Raises:
        CommandFailedError: If pip exits non-zero
    """
    config = ctx.config
    ctx.feedback.info(f"Installing {config.virtualenv_package}...")
    ctx.pip.install_package(config.python_bin_dir, config.virtualenv_package, env=env)
    return StepOutcome(
        name=STEP_NAME,
        status=StepStatus.COMPLETED,
        detail=f"installed {config.virtualenv_package} into Python {config.python_version}",
    )
