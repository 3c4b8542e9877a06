"""Command backends.

This module defines the backend abstraction used by the git client and the
file seeder to run commands.  A backend hides how a command is executed; the
``LocalBackend`` runs it as a subprocess on the host.

Results of ``run`` include exit_code, stdout, stderr, duration_ms and
timed_out fields.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import time
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Protocol

from ..constants import GIT_COMMAND_TIMEOUT_S, TIMEOUT_EXIT_CODE

logger = logging.getLogger(__name__)


class CommandError(RuntimeError):
    """A command exited with a non-zero status or timed out."""

    def __init__(self, argv: Sequence[str], result: Mapping[str, object]) -> None:
        self.argv = list(argv)
        self.result = dict(result)
        self.exit_code = int(self.result.get("exit_code", 1))
        self.stderr = str(self.result.get("stderr", "") or "")
        self.stdout = str(self.result.get("stdout", "") or "")
        detail = (self.stderr or self.stdout).strip()
        super().__init__(f"`{shlex.join(self.argv)}` failed with exit code {self.exit_code}: {detail}")


class CommandBackend(Protocol):
    """Interface for a command backend."""

    def run(self, argv: Sequence[str], cwd: str | Path, timeout_s: int) -> dict[str, object]:
        ...


class LocalBackend:
    """Backend that executes commands as local subprocesses.

    ``env`` is layered on top of the current process environment for every
    command, which is how git author identity is supplied.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self.env = dict(env or {})

    def run(self, argv: Sequence[str], cwd: str | Path, timeout_s: int) -> dict[str, object]:
        """Run a command locally in ``cwd``."""
        logger.debug("Running %s in %s", shlex.join(argv), cwd)

        timed_out = False
        start_ns = time.time_ns()

        try:
            proc = subprocess.run(
                list(argv),
                cwd=str(cwd),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                shell=False,
                timeout=timeout_s,
                text=True,
                errors="replace",
                env={**os.environ, "GIT_TERMINAL_PROMPT": "0", **self.env},
            )
            stdout = proc.stdout or ""
            stderr = proc.stderr or ""
            exit_code = proc.returncode
        except subprocess.TimeoutExpired:
            timed_out = True
            stdout = ""
            stderr = "Command timed out"
            exit_code = TIMEOUT_EXIT_CODE
        except OSError as exc:
            # Missing executable or working directory
            stdout = ""
            stderr = str(exc)
            exit_code = 1

        duration_ms = int((time.time_ns() - start_ns) / 1_000_000)

        return {
            "exit_code": exit_code,
            "stdout": stdout,
            "stderr": stderr,
            "duration_ms": duration_ms,
            "timed_out": timed_out,
        }


def check_result(argv: Sequence[str], result: Mapping[str, object]) -> Mapping[str, object]:
    """Return ``result`` or raise ``CommandError`` if the command failed."""
    if result.get("timed_out", False) or int(result.get("exit_code", 1)) != 0:
        raise CommandError(argv, result)
    return result


def run_checked(
    backend: CommandBackend,
    argv: Sequence[str],
    cwd: str | Path,
    timeout_s: int = GIT_COMMAND_TIMEOUT_S,
) -> Mapping[str, object]:
    """Run ``argv`` through ``backend`` and raise on failure."""
    return check_result(argv, backend.run(argv, cwd, timeout_s))
