"""Tests for the install summary panel and JSON schema."""

from rich.console import Console

from pyenv_bootstrap.cli.json_schemas import InstallCommandResponse
from pyenv_bootstrap.cli.output import format_duration
from pyenv_bootstrap.cli.summary import format_bootstrap_summary
from pyenv_bootstrap.core.types import BootstrapReport, StepOutcome, StepStatus

REPORT = BootstrapReport(
    steps=[
        StepOutcome(name="pyenv", status=StepStatus.SKIPPED, detail="already on PATH"),
        StepOutcome(name="python", status=StepStatus.COMPLETED, detail="installed 3.7.2"),
    ],
    http_client="curl",
    search_path="/a:/b",
    bin_dir_on_path=True,
)


def test_format_duration() -> None:
    assert format_duration(4.23) == "4.2s"
    assert format_duration(83) == "1m 23s"
    assert format_duration(3725) == "1h 2m"


def test_summary_lists_every_step() -> None:
    console = Console(record=True, width=100)

    console.print(format_bootstrap_summary(REPORT, 83.0))

    text = console.export_text()
    assert "Bootstrap Complete" in text
    assert "pyenv: already on PATH" in text
    assert "python: installed 3.7.2" in text
    assert "Duration: 1m 23s" in text


def test_install_response_from_report() -> None:
    response = InstallCommandResponse.from_report(REPORT, duration_seconds=1.5)

    data = response.model_dump(mode="json")
    assert data["steps"][0] == {"name": "pyenv", "status": "skipped", "detail": "already on PATH"}
    assert data["duration_seconds"] == 1.5
