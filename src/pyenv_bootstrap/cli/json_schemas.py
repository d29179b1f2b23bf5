"""Pydantic models for JSON output schemas.

These models validate the JSON printed by commands that support --json.
"""

from pydantic import BaseModel, ConfigDict, Field

from pyenv_bootstrap.core.config import InstallerConfig
from pyenv_bootstrap.core.types import BootstrapReport


class ConfigShowResponse(BaseModel):
    """JSON response schema for `pyenv-bootstrap config show --json`.

    Attributes:
        config_path: Location of the config file that was consulted
        config_file_exists: Whether that file exists
        python_version: Python version to install
        pyenv_root: pyenv installation root and clone target
        python_bin_dir: Bin directory of the installed runtime
        suppress_path_hints: Whether PATH advice is suppressed
        repository_url: pyenv repository to clone
        pinned_revision: Revision the clone is checked out at
        pinned_branch: Local branch created at the pinned revision
        virtualenv_package: Package installed into the runtime
    """

    model_config = ConfigDict(strict=True)

    config_path: str
    config_file_exists: bool
    python_version: str = Field(..., min_length=1)
    pyenv_root: str
    python_bin_dir: str
    suppress_path_hints: bool
    repository_url: str
    pinned_revision: str
    pinned_branch: str
    virtualenv_package: str

    @classmethod
    def from_config(
        cls, config: InstallerConfig, *, config_path: str, config_file_exists: bool
    ) -> "ConfigShowResponse":
        return cls(
            config_path=config_path,
            config_file_exists=config_file_exists,
            python_version=config.python_version,
            pyenv_root=str(config.pyenv_root),
            python_bin_dir=str(config.python_bin_dir),
            suppress_path_hints=config.suppress_path_hints,
            repository_url=config.repository_url,
            pinned_revision=config.pinned_revision,
            pinned_branch=config.pinned_branch,
            virtualenv_package=config.virtualenv_package,
        )


class StepInfo(BaseModel):
    """One step of an install run."""

    model_config = ConfigDict(strict=True)

    name: str
    status: str = Field(..., pattern="^(completed|skipped)$")
    detail: str


class InstallCommandResponse(BaseModel):
    """JSON response schema for `pyenv-bootstrap install --json`.

    Attributes:
        steps: Step outcomes in execution order
        http_client: Download tool that was accepted
        search_path: PATH used for child processes
        bin_dir_on_path: Whether the runtime bin dir was already on PATH
        duration_seconds: Wall-clock duration of the run
    """

    model_config = ConfigDict(strict=True)

    steps: list[StepInfo]
    http_client: str
    search_path: str
    bin_dir_on_path: bool
    duration_seconds: float = Field(..., ge=0)

    @classmethod
    def from_report(
        cls, report: BootstrapReport, *, duration_seconds: float
    ) -> "InstallCommandResponse":
        return cls(
            steps=[
                StepInfo(name=step.name, status=step.status.value, detail=step.detail)
                for step in report.steps
            ],
            http_client=report.http_client,
            search_path=report.search_path,
            bin_dir_on_path=report.bin_dir_on_path,
            duration_seconds=duration_seconds,
        )
