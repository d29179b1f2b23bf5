"""Config commands - inspect and initialize the installer configuration."""

import os
from pathlib import Path

import click

from pyenv_bootstrap.cli.error_boundary import cli_error_boundary
from pyenv_bootstrap.cli.json_output import emit_json
from pyenv_bootstrap.cli.json_schemas import ConfigShowResponse
from pyenv_bootstrap.cli.output import user_output
from pyenv_bootstrap.core.config import (
    installer_config_path,
    load_installer_config,
    save_installer_config,
)


@click.group("config")
def config_group() -> None:
    """Inspect or create the pyenv-bootstrap config file."""
    pass


@config_group.command("show")
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@cli_error_boundary
def show_cmd(output_json: bool) -> None:
    """Print the effective configuration (file, environment and defaults)."""
    config_path = installer_config_path(Path.home())
    config = load_installer_config(environ=os.environ, home=Path.home(), config_path=config_path)

    if output_json:
        response = ConfigShowResponse.from_config(
            config,
            config_path=str(config_path),
            config_file_exists=config_path.exists(),
        )
        emit_json(response.model_dump(mode="json"))
        return

    source = str(config_path) if config_path.exists() else f"{config_path} (not found)"
    user_output(click.style("Config file: ", bold=True) + source)
    user_output(f"  python_version={config.python_version}")
    user_output(f"  pyenv_root={config.pyenv_root}")
    user_output(f"  python_bin_dir={config.python_bin_dir}")
    user_output(f"  suppress_path_hints={str(config.suppress_path_hints).lower()}")
    user_output(f"  repository_url={config.repository_url}")
    user_output(f"  pinned_revision={config.pinned_revision}")
    user_output(f"  pinned_branch={config.pinned_branch}")
    user_output(f"  virtualenv_package={config.virtualenv_package}")


@config_group.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
@cli_error_boundary
def init_cmd(force: bool) -> None:
    """Write the current effective configuration to the config file."""
    config_path = installer_config_path(Path.home())
    if config_path.exists() and not force:
        user_output(
            click.style("Error: ", fg="red")
            + f"{config_path} already exists. Use --force to overwrite it."
        )
        raise SystemExit(1)

    config = load_installer_config(environ=os.environ, home=Path.home(), config_path=config_path)
    save_installer_config(config, config_path)
    user_output(click.style("✓ ", fg="green") + f"Wrote {config_path}")
