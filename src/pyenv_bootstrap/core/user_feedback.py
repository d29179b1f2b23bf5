"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod

import click

from pyenv_bootstrap.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output that's mode-aware.

    Steps call ctx.feedback methods instead of printing, so quiet mode and
    tests do not need a flag threaded through every function signature.

    Two modes:
    - Interactive: Show all diagnostics (info, advice, success)
    - Quiet: Show nothing; errors still reach the user through the CLI
      error boundary
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def advice(self, message: str) -> None:
        """Show a recommendation the user should act on (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def advice(self, message: str) -> None:
        """Show recommendation in yellow."""
        user_output(click.style(message, fg="yellow"))

    def success(self, message: str) -> None:
        """Show success message in green."""
        user_output(click.style(message, fg="green"))


class SuppressedFeedback(UserFeedback):
    """Feedback for --quiet runs (nothing shown)."""

    def info(self, message: str) -> None:
        pass

    def advice(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass
