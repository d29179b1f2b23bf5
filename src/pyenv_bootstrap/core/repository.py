"""Fetch a pinned pyenv checkout and build its native extension."""

import logging
from collections.abc import Mapping

from pyenv_bootstrap.core.context import BootstrapContext
from pyenv_bootstrap.core.types import StepOutcome, StepStatus

logger = logging.getLogger(__name__)

STEP_NAME = "pyenv"


def fetch_version_manager(ctx: BootstrapContext, *, env: Mapping[str, str]) -> StepOutcome:
    """Clone pyenv at the pinned revision into the pyenv root and build it.

    Does nothing if the pyenv root already exists, whatever state it is in.
    A previous run that failed after cloning therefore needs the directory
    removed before it can be retried.

    Args:
        ctx: Bootstrap context
        env: Environment for the git and build processes

    Returns:
        StepOutcome, SKIPPED when the directory already existed

    Raises:
        CommandFailedError: If clone, checkout or build exits non-zero
    """
    config = ctx.config
    repo_dir = config.pyenv_root

    if repo_dir.exists():
        logger.debug("Clone target %s exists, skipping clone", repo_dir)
        ctx.feedback.info(f"{repo_dir} already exists, skipping clone.")
        return StepOutcome(
            name=STEP_NAME,
            status=StepStatus.SKIPPED,
            detail=f"{repo_dir} already exists",
        )

    if not ctx.dry_run:
        repo_dir.parent.mkdir(parents=True, exist_ok=True)

    ctx.feedback.info(f"Cloning {config.repository_url} into {repo_dir}...")
    ctx.git.clone(config.repository_url, repo_dir, env=env)

    logger.debug("Checking out %s as %s", config.pinned_revision, config.pinned_branch)
    ctx.git.checkout_new_branch(
        repo_dir, config.pinned_branch, config.pinned_revision, env=env
    )

    ctx.feedback.info("Building pyenv native extension...")
    ctx.pyenv.build_native_extension(repo_dir, env=env)

    return StepOutcome(
        name=STEP_NAME,
        status=StepStatus.COMPLETED,
        detail=f"cloned {config.pinned_revision} into {repo_dir}",
    )


def ensure_installation_root(ctx: BootstrapContext) -> None:
    """Create the pyenv root if it is still absent.

    The root is also the clone target, so after a fresh clone this is a
    no-op. It matters when pyenv was found elsewhere on PATH and the clone
    was skipped: pyenv still installs Python versions under this root.
    """
    root = ctx.config.pyenv_root
    if root.exists():
        return

    if ctx.dry_run:
        ctx.feedback.info(f"[DRY RUN] Would create {root}")
        return

    logger.debug("Creating pyenv root %s", root)
    root.mkdir(parents=True)
