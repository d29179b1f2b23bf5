"""Output utilities for CLI commands with clear intent.

user_output() is for human-readable messages and goes to stderr.
machine_output() is for data meant to be parsed (JSON) and goes to stdout.
Keeping the two apart lets `--json` output be piped safely.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a human-readable message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write machine-readable data to stdout."""
    click.echo(message, nl=nl)


def format_duration(seconds: float) -> str:
    """Format a duration as a short human string (e.g. "1m 23s", "4.2s")."""
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, secs = divmod(int(seconds), 60)
    if minutes < 60:
        return f"{minutes}m {secs}s"
    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes}m"


def dry_run_notice(command: list[str]) -> None:
    """Announce a command that dry-run mode is not executing."""
    user_output(click.style("[DRY RUN] ", fg="yellow") + f"Would run {' '.join(command)}")
