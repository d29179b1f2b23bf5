"""Bootstrap orchestration.

Runs the steps strictly in order:

1. detect pyenv on the startup PATH
2. clone and build pyenv if it was not found, then make sure the pyenv root
   exists either way
3. export pyenv's directories on a process-local PATH
4. verify an HTTP download tool is available
5. install the Python runtime and upgrade its pip
6. install the virtual-environment tool

Every step either completes or raises BootstrapError, which stops the run.
Nothing is rolled back or retried.
"""

import logging

from pyenv_bootstrap.core.context import BootstrapContext
from pyenv_bootstrap.core.detection import version_manager_installed
from pyenv_bootstrap.core.http_client import verify_http_client
from pyenv_bootstrap.core.path_export import (
    advise_pyenv_export,
    build_child_environment,
    prepend_search_path,
)
from pyenv_bootstrap.core.repository import ensure_installation_root, fetch_version_manager
from pyenv_bootstrap.core.runtime import install_runtime
from pyenv_bootstrap.core.types import BootstrapReport, StepOutcome, StepStatus
from pyenv_bootstrap.core.virtualenv import install_virtualenv_tool

logger = logging.getLogger(__name__)


def run_bootstrap(ctx: BootstrapContext) -> BootstrapReport:
    """Run the whole bootstrap procedure.

    Args:
        ctx: Bootstrap context with integrations and configuration

    Returns:
        BootstrapReport describing every step in execution order

    Raises:
        BootstrapError: On the first failing step
    """
    config = ctx.config
    startup_path = ctx.startup_search_path
    steps: list[StepOutcome] = []

    logger.debug("Bootstrapping with config: %s", config)

    pyenv_found = version_manager_installed(ctx.shell, startup_path)
    if pyenv_found:
        ctx.feedback.info("pyenv is already installed, skipping clone.")
        steps.append(
            StepOutcome(name="pyenv", status=StepStatus.SKIPPED, detail="already on PATH")
        )
    else:
        startup_env = build_child_environment(
            ctx.environ, search_path=startup_path, pyenv_root=config.pyenv_root
        )
        steps.append(fetch_version_manager(ctx, env=startup_env))
    ensure_installation_root(ctx)

    search_path = prepend_search_path(startup_path, config.pyenv_bin_dirs)
    env = build_child_environment(
        ctx.environ, search_path=search_path, pyenv_root=config.pyenv_root
    )
    logger.debug("Exported PATH for child processes: %s", search_path)
    # A pyenv found on PATH already has its own setup; don't point users at ours
    if not pyenv_found:
        advise_pyenv_export(ctx.feedback, config, startup_path)
    steps.append(
        StepOutcome(
            name="PATH",
            status=StepStatus.COMPLETED,
            detail=f"exported {config.pyenv_root}/bin and shims for this run",
        )
    )

    http_client = verify_http_client(ctx.shell, search_path)
    steps.append(
        StepOutcome(name="downloader", status=StepStatus.COMPLETED, detail=f"using {http_client}")
    )

    runtime = install_runtime(ctx, env=env)
    steps.append(runtime.step)

    steps.append(install_virtualenv_tool(ctx, env=env))

    return BootstrapReport(
        steps=steps,
        http_client=http_client,
        search_path=search_path,
        bin_dir_on_path=runtime.bin_dir_on_path,
    )
