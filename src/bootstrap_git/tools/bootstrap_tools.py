"""Bootstrap tool implementations.

These functions wire the configured template and target roots to a
``GitOrchestrator`` backed by local git and ``cp`` commands, and translate
the outcome into a result dictionary.  A failed step is reported as
``{"ok": False, "step": ..., "error": ...}`` rather than raised.
"""

from __future__ import annotations

import logging

from .. import state
from ..config import Config
from ..git.client import GitClient
from ..git.orchestrator import GitOrchestrator, OrchestratorDefaults, StepFailure
from ..runner.backend import CommandError, LocalBackend
from ..seeding.file_seeder import CommandFileSeeder

logger = logging.getLogger(__name__)


def _git_env(config: Config) -> dict[str, str]:
    return {
        "GIT_AUTHOR_NAME": config.git_author_name,
        "GIT_AUTHOR_EMAIL": config.git_author_email,
        "GIT_COMMITTER_NAME": config.git_author_name,
        "GIT_COMMITTER_EMAIL": config.git_author_email,
    }


def build_orchestrator(
    config: Config | None = None,
    defaults: OrchestratorDefaults | None = None,
) -> tuple[GitOrchestrator, GitClient]:
    """Return an orchestrator for ``config`` and the git client it drives.

    The client creates the same primary branch the orchestrator checks out.
    """
    config = config or state.CONFIG
    defaults = defaults or OrchestratorDefaults()
    backend = LocalBackend(env=_git_env(config))
    client = GitClient(backend, config.target_root, initial_branch=defaults.primary_branch)
    orchestrator = GitOrchestrator(
        config.orchestrator_config(),
        vcs=client,
        seeder=CommandFileSeeder(backend),
        defaults=defaults,
    )
    return orchestrator, client


def _failure(exc: StepFailure) -> dict[str, object]:
    result: dict[str, object] = {"ok": False, "step": exc.step, "error": str(exc.cause)}
    if isinstance(exc.cause, CommandError):
        result["exit_code"] = exc.cause.exit_code
        result["stderr"] = exc.cause.stderr
    return result


def _run(operation: str, commits: bool) -> dict[str, object]:
    orchestrator, client = build_orchestrator()
    try:
        getattr(orchestrator, operation)()
    except StepFailure as exc:
        logger.error("Bootstrap operation failed at %s: %s", exc.step, exc.cause)
        return _failure(exc)

    result: dict[str, object] = {"ok": True}
    if commits:
        try:
            result["commit_sha"] = client.head_sha()
        except CommandError as exc:
            logger.error("Could not read the new commit: %s", exc)
            return _failure(StepFailure("head_sha", exc))
    return result


def git_init() -> dict[str, object]:
    """Initialize the target repository with the boilerplate commit."""
    return _run("init", commits=True)


def git_checkout() -> dict[str, object]:
    """Check out the primary branch and remove untracked files."""
    return _run("checkout", commits=False)


def git_commit_all() -> dict[str, object]:
    """Commit the whole generated project as the bootstrap commit."""
    return _run("commit_all", commits=True)
