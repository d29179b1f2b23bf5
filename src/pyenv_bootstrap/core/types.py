"""Type definitions shared by the bootstrap steps and integrations."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class CommandResult:
    """Result from running a subprocess command.

    Attributes:
        command: Command and arguments that were executed
        returncode: Exit status of the process
        stdout: Standard output from the command ("" when not captured)
        stderr: Standard error from the command ("" when not captured)
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        """True if the command exited with code 0."""
        return self.returncode == 0

    @property
    def command_line(self) -> str:
        return " ".join(self.command)


class StepStatus(Enum):
    COMPLETED = "completed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class StepOutcome:
    """What a single bootstrap step did.

    Attributes:
        name: Short step name shown in the summary
        status: Whether the step did work or found nothing to do
        detail: One-line human description of the outcome
    """

    name: str
    status: StepStatus
    detail: str


@dataclass(frozen=True)
class RuntimeOutcome:
    """Outcome of the runtime install step.

    Attributes:
        step: Generic step outcome for the summary
        bin_dir: Runtime bin directory that pip was run from
        bin_dir_on_path: Whether bin_dir was on the search path at startup
    """

    step: StepOutcome
    bin_dir: Path
    bin_dir_on_path: bool


@dataclass(frozen=True)
class BootstrapReport:
    """Everything the orchestrator did, in order.

    Attributes:
        steps: Step outcomes in execution order
        http_client: Name of the download tool that was accepted
        search_path: Process-local search path used for sub-processes
        bin_dir_on_path: Whether the runtime bin dir was already on the
            search path when the run started
    """

    steps: list[StepOutcome]
    http_client: str
    search_path: str
    bin_dir_on_path: bool
