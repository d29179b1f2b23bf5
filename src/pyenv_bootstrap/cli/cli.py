import logging
import os

import click

from pyenv_bootstrap.cli.commands.config import config_group
from pyenv_bootstrap.cli.commands.install import install_cmd
from pyenv_bootstrap.core.config import ENV_DEBUG
from pyenv_bootstrap.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def configure_logging(debug: bool) -> None:
    """Enable debug logging if --debug is given or PYENV_BOOTSTRAP_DEBUG is set."""
    if debug or os.environ.get(ENV_DEBUG):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="pyenv-bootstrap")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
def cli(debug: bool) -> None:
    """Bootstrap pyenv, a pinned Python version and virtualenv."""
    configure_logging(debug)


cli.add_command(config_group)
cli.add_command(install_cmd)


def main() -> None:
    """CLI entry point used by the `pyenv-bootstrap` console script."""
    cli()
