"""Subprocess execution with rich error context.

All integrations run their commands through run_subprocess_with_context so
that a failed command surfaces as a typed BootstrapError carrying the
command's own exit code.
"""

import logging
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from pyenv_bootstrap.core.errors import CommandFailedError, CommandNotFoundError
from pyenv_bootstrap.core.types import CommandResult

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    capture_output: bool = True,
    check: bool = True,
) -> CommandResult:
    """Execute subprocess and return a structured result.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation, used as
            "Failed to <operation_context>" in error messages
        cwd: Working directory for command execution
        env: Full environment for the child process (None inherits ours)
        capture_output: Whether to capture stdout/stderr. Long-running
            commands pass False so their progress streams to the terminal.
        check: Whether to raise CommandFailedError on non-zero exit

    Returns:
        CommandResult with exit code and captured output

    Raises:
        CommandFailedError: If check is True and the command exits non-zero
        CommandNotFoundError: If the command binary is not found
    """
    cmd_list = [str(arg) for arg in cmd]
    logger.debug("Running %s (cwd=%s)", " ".join(cmd_list), cwd)

    try:
        completed = subprocess.run(
            cmd_list,
            cwd=cwd,
            env=dict(env) if env is not None else None,
            capture_output=capture_output,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except FileNotFoundError as e:
        raise CommandNotFoundError(operation_context, cmd_list) from e

    result = CommandResult(
        command=tuple(cmd_list),
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
    logger.debug("Exit code %d from %s", result.returncode, result.command_line)

    if check and not result.success:
        raise CommandFailedError(operation_context, result)

    return result
