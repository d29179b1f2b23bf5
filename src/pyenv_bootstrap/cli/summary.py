"""Final summary panel for an install run."""

from rich.panel import Panel
from rich.text import Text

from pyenv_bootstrap.cli.output import format_duration
from pyenv_bootstrap.core.types import BootstrapReport, StepStatus


def format_bootstrap_summary(report: BootstrapReport, total_duration: float) -> Panel:
    """Format the summary box listing every step and the total time.

    Args:
        report: Report returned by run_bootstrap()
        total_duration: Total execution time in seconds

    Returns:
        Rich Panel with formatted summary

    Example:
        >>> panel = format_bootstrap_summary(report, 123.45)
        >>> console.print(panel)
    """
    lines: list[Text] = []

    for step in report.steps:
        if step.status is StepStatus.COMPLETED:
            lines.append(Text(f"✅ {step.name}: {step.detail}", style="green"))
        else:
            lines.append(Text(f"⏭  {step.name}: {step.detail}", style="dim"))

    lines.append(Text(""))
    lines.append(Text(f"⏱  Duration: {format_duration(total_duration)}"))

    return Panel(
        Text("\n").join(lines),
        title="Bootstrap Complete",
        border_style="green",
        padding=(1, 2),
    )
