"""Typed errors for the bootstrap procedure.

Every failure that should stop the run is a BootstrapError carrying the exit
code the process ends with. The CLI error boundary is the only place these are
turned into SystemExit.
"""

from collections.abc import Sequence

from pyenv_bootstrap.core.types import CommandResult

# Shell convention for "command not found"
COMMAND_NOT_FOUND_EXIT_CODE = 127

# Shell convention for "killed by signal N": 128 + N
SIGNAL_EXIT_CODE_BASE = 128


def exit_code_for_returncode(returncode: int) -> int:
    """Map a subprocess returncode to the exit code a shell would report.

    subprocess reports death by signal N as -N, which is not a valid process
    exit status.
    """
    if returncode < 0:
        return SIGNAL_EXIT_CODE_BASE - returncode
    return returncode


class BootstrapError(Exception):
    """Base error for a fatal bootstrap failure.

    Attributes:
        exit_code: Process exit code to terminate with (1-255)
    """

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class CommandFailedError(BootstrapError):
    """A sub-process exited with a non-zero status."""

    def __init__(self, operation_context: str, result: CommandResult) -> None:
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {result.command_line}"
        error_msg += f"\nExit code: {result.returncode}"

        stderr_stripped = result.stderr.strip()
        if stderr_stripped:
            error_msg += f"\nstderr: {stderr_stripped}"

        super().__init__(error_msg, exit_code=exit_code_for_returncode(result.returncode))
        self.operation_context = operation_context
        self.result = result


class CommandNotFoundError(BootstrapError):
    """The executable for a sub-process could not be found."""

    def __init__(self, operation_context: str, cmd: Sequence[str]) -> None:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        super().__init__(error_msg, exit_code=COMMAND_NOT_FOUND_EXIT_CODE)
        self.executable = str(cmd[0])


class MissingHttpClientError(BootstrapError):
    """No acceptable HTTP download tool is installed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, exit_code=1)


class ConfigError(BootstrapError):
    """Invalid configuration value or config file."""

    def __init__(self, message: str) -> None:
        super().__init__(message, exit_code=1)
