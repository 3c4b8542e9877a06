"""Git operations for the project being bootstrapped.

Each operation builds a git argv list and executes it through a command
backend in the target directory.  A non-zero exit raises ``CommandError``
carrying the backend result, which the orchestrator treats as a failed step.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from ..constants import GIT_COMMAND_TIMEOUT_S, PRIMARY_BRANCH
from ..runner.backend import CommandBackend, run_checked


@dataclass(frozen=True)
class StageOptions:
    """Options for the staging half of ``stage_and_commit``.

    ``all_paths`` stages every change in the working tree, removals
    included (``git add --all``).
    """

    all_paths: bool = False


class VCSClient(Protocol):
    """Version-control operations the orchestrator sequences."""

    def init(self) -> None:
        ...

    def checkout(self, branch_name: str) -> None:
        ...

    def clean_untracked(self) -> None:
        ...

    def stage_and_commit(
        self,
        paths: Sequence[str],
        message: str,
        options: StageOptions | None = None,
    ) -> None:
        ...


class GitClient:
    """Runs git commands in a single repository directory."""

    def __init__(
        self,
        backend: CommandBackend,
        repo_root: str | Path,
        initial_branch: str = PRIMARY_BRANCH,
        timeout_s: int = GIT_COMMAND_TIMEOUT_S,
    ) -> None:
        self.backend = backend
        self.repo_root = Path(repo_root)
        self.initial_branch = initial_branch
        self.timeout_s = timeout_s

    def _git(self, *args: str) -> str:
        argv = ["git", *args]
        result = run_checked(self.backend, argv, self.repo_root, self.timeout_s)
        return str(result.get("stdout", "") or "")

    def init(self) -> None:
        """Create a repository whose first branch is ``initial_branch``."""
        self._git("init", f"--initial-branch={self.initial_branch}")

    def checkout(self, branch_name: str) -> None:
        self._git("checkout", branch_name)

    def clean_untracked(self) -> None:
        """Remove untracked files and directories; ignored content is kept."""
        self._git("clean", "-d", "-f")

    def stage_and_commit(
        self,
        paths: Sequence[str],
        message: str,
        options: StageOptions | None = None,
    ) -> None:
        """Stage ``paths`` and commit them with ``message``.

        With ``options.all_paths`` every change in the tree is staged and
        ``paths`` only narrows the pathspec when non-empty.
        """
        add_args = ["add"]
        if options is not None and options.all_paths:
            add_args.append("--all")
        if paths:
            add_args.append("--")
            add_args.extend(str(p) for p in paths)
        self._git(*add_args)
        self._git("commit", "-m", message)

    def head_sha(self) -> str:
        """Return the SHA of ``HEAD``."""
        return self._git("rev-parse", "HEAD").strip()
