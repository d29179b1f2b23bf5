"""Helpers for making fakes fail the way real sub-processes do."""

from pyenv_bootstrap.core.errors import CommandFailedError
from pyenv_bootstrap.core.types import CommandResult


def command_failure(
    command: list[str], operation_context: str, exit_code: int, stderr: str = ""
) -> CommandFailedError:
    """Build the CommandFailedError a real integration raises for command."""
    result = CommandResult(command=tuple(command), returncode=exit_code, stdout="", stderr=stderr)
    return CommandFailedError(operation_context, result)
