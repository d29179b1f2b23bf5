"""Install command - bootstraps pyenv, Python and the virtualenv tool."""

import logging
import os
import time
from pathlib import Path

import click
from rich.console import Console

from pyenv_bootstrap.cli.error_boundary import cli_error_boundary
from pyenv_bootstrap.cli.json_output import emit_json
from pyenv_bootstrap.cli.json_schemas import InstallCommandResponse
from pyenv_bootstrap.cli.output import user_output
from pyenv_bootstrap.cli.summary import format_bootstrap_summary
from pyenv_bootstrap.core.config import (
    DEFAULT_PYTHON_VERSION,
    ENV_PYENV_ROOT,
    ENV_PYTHON_BIN_DIR,
    ENV_PYTHON_VERSION,
    ENV_SUPPRESS_PATH_HINTS,
    load_installer_config,
)
from pyenv_bootstrap.core.context import BootstrapContext, create_context
from pyenv_bootstrap.core.orchestrator import run_bootstrap

logger = logging.getLogger(__name__)


@click.command("install")
@click.option(
    "--python-version",
    default=None,
    help=f"Python version to install. [env: {ENV_PYTHON_VERSION}; default: "
    f"{DEFAULT_PYTHON_VERSION}]",
)
@click.option(
    "--pyenv-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help=f"pyenv installation root and clone target. [env: {ENV_PYENV_ROOT}; "
    "default: ~/.pyenv]",
)
@click.option(
    "--bin-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help=f"Bin directory of the installed Python. [env: {ENV_PYTHON_BIN_DIR}; "
    "default: <root>/versions/<version>/bin]",
)
@click.option(
    "--suppress-path-hints/--show-path-hints",
    default=None,
    help=f"Suppress PATH export advice. [env: {ENV_SUPPRESS_PATH_HINTS}]",
)
@click.option("--dry-run", is_flag=True, help="Print commands instead of running them.")
@click.option("--quiet", "-q", is_flag=True, help="Only print errors.")
@click.option("--json", "output_json", is_flag=True, help="Print a JSON report on stdout.")
@click.pass_context
@cli_error_boundary
def install_cmd(
    click_ctx: click.Context,
    python_version: str | None,
    pyenv_root: Path | None,
    bin_dir: Path | None,
    suppress_path_hints: bool | None,
    dry_run: bool,
    quiet: bool,
    output_json: bool,
) -> None:
    """Install pyenv, a pinned Python version and virtualenv.

    Every step stops the run on failure, and the command exits with the
    failing step's exit code.
    """
    # Only create context if not already provided (e.g., by tests)
    if click_ctx.obj is None:
        config = load_installer_config(
            environ=os.environ,
            home=Path.home(),
            python_version=python_version,
            pyenv_root=pyenv_root,
            python_bin_dir=bin_dir,
            suppress_path_hints=suppress_path_hints,
        )
        click_ctx.obj = create_context(config=config, dry_run=dry_run, quiet=quiet)

    ctx: BootstrapContext = click_ctx.obj
    if ctx.dry_run:
        user_output(click.style("Dry run: no commands will be executed.", fg="yellow"))

    start_time = time.time()
    report = run_bootstrap(ctx)
    duration = time.time() - start_time
    logger.debug("Bootstrap finished in %.1fs", duration)

    if output_json:
        response = InstallCommandResponse.from_report(report, duration_seconds=duration)
        emit_json(response.model_dump(mode="json"))
    elif not quiet:
        Console(stderr=True).print(format_bootstrap_summary(report, duration))
