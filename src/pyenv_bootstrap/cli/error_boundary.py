"""Error boundary handling for CLI commands.

Catches well-known exceptions at CLI entry points and displays clean error
messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any

import click

from pyenv_bootstrap.cli.output import user_output
from pyenv_bootstrap.core.errors import BootstrapError


def cli_error_boundary[T: Callable[..., Any]](func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - BootstrapError: exits with the error's own exit code, so a failed
          sub-process's status becomes the status of the whole run
        - PermissionError: exits with code 1

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except BootstrapError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(e.exit_code) from None
        except PermissionError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
