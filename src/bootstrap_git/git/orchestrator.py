"""Version-control sequences for a freshly scaffolded project.

``GitOrchestrator`` drives three short pipelines against a VCS client and a
file seeder:

* ``init``: init the repository, seed ``.gitignore`` and ``README.md`` from
  the template root, commit both as the boilerplate commit.
* ``checkout``: check out the primary branch, then remove untracked files
  and directories.
* ``commit_all``: stage every change in the tree and commit it as the
  bootstrap commit.

Steps run strictly in order and the first failure stops the pipeline.  It is
raised as ``StepFailure`` naming the step, with the collaborator's exception
as ``cause``.  Nothing that already ran is undone.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..config import OrchestratorConfig
from ..constants import (
    BOILERPLATE_COMMIT_MESSAGE,
    BOOTSTRAP_COMMIT_MESSAGE,
    GITIGNORE_TEMPLATE,
    PRIMARY_BRANCH,
    README_TEMPLATE,
)
from ..seeding.file_seeder import FileSeeder
from .client import StageOptions, VCSClient

logger = logging.getLogger(__name__)

Step = tuple[str, Callable[[], object]]


class StepFailure(Exception):
    """A pipeline step failed; ``cause`` is the collaborator's error."""

    def __init__(self, step: str, cause: BaseException) -> None:
        self.step = step
        self.cause = cause
        super().__init__(f"Step '{step}' failed: {cause}")


@dataclass(frozen=True)
class OrchestratorDefaults:
    """Branch, commit messages and template layout used by the pipelines."""

    primary_branch: str = PRIMARY_BRANCH
    boilerplate_message: str = BOILERPLATE_COMMIT_MESSAGE
    bootstrap_message: str = BOOTSTRAP_COMMIT_MESSAGE
    gitignore_template: tuple[str, ...] = GITIGNORE_TEMPLATE
    readme_template: tuple[str, ...] = README_TEMPLATE


def run_pipeline(operation: str, steps: Sequence[Step]) -> None:
    """Run ``steps`` in order, stopping at the first one that raises."""
    for name, action in steps:
        logger.debug("%s: running step %s", operation, name)
        try:
            action()
        except Exception as exc:
            logger.warning("%s: step %s failed: %s", operation, name, exc)
            raise StepFailure(name, exc) from exc


class GitOrchestrator:
    """Brings a target directory under version control."""

    def __init__(
        self,
        config: OrchestratorConfig,
        vcs: VCSClient,
        seeder: FileSeeder,
        defaults: OrchestratorDefaults | None = None,
    ) -> None:
        self.config = config
        self.vcs = vcs
        self.seeder = seeder
        self.defaults = defaults or OrchestratorDefaults()
        initial_branch = getattr(vcs, "initial_branch", self.defaults.primary_branch)
        if initial_branch != self.defaults.primary_branch:
            raise ValueError(
                f"VCS client creates branch '{initial_branch}' but the primary branch is "
                f"'{self.defaults.primary_branch}'"
            )

    def init(self) -> None:
        """Create the repository and its boilerplate commit."""
        logger.info("Initializing the %s branch", self.defaults.primary_branch)

        template_root = self.config.template_root
        target_root = self.config.target_root
        gitignore = template_root.joinpath(*self.defaults.gitignore_template)
        readme = template_root.joinpath(*self.defaults.readme_template)
        files = [
            str(target_root / ".gitignore"),
            str(target_root / "README.md"),
        ]

        run_pipeline("init", [
            ("init", self.vcs.init),
            ("copy_gitignore", lambda: self.seeder.copy_file(gitignore, target_root / ".gitignore")),
            ("copy_readme", lambda: self.seeder.copy_file(readme, target_root)),
            ("commit_boilerplate",
             lambda: self.vcs.stage_and_commit(files, self.defaults.boilerplate_message, None)),
        ])

    def checkout(self) -> None:
        """Check out the primary branch and drop untracked content."""
        logger.info("Checking out the %s branch", self.defaults.primary_branch)
        run_pipeline("checkout", [
            ("checkout", lambda: self.vcs.checkout(self.defaults.primary_branch)),
            ("clean", self.vcs.clean_untracked),
        ])

    def commit_all(self) -> None:
        """Commit everything in the working tree as the bootstrap commit."""
        logger.info("Adding and committing files on the %s branch", self.defaults.primary_branch)
        run_pipeline("commit_all", [
            ("commit_all",
             lambda: self.vcs.stage_and_commit(
                 [], self.defaults.bootstrap_message, StageOptions(all_paths=True))),
        ])
