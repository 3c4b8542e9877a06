"""Copy boilerplate files into the project being bootstrapped."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from ..constants import GIT_COMMAND_TIMEOUT_S
from ..runner.backend import CommandBackend, run_checked

logger = logging.getLogger(__name__)


class FileSeeder(Protocol):
    """Places a file from the template tree into the target tree."""

    def copy_file(self, source: str | Path, destination: str | Path) -> None:
        ...


class CommandFileSeeder:
    """Copies files with ``cp`` through a command backend.

    ``destination`` may be a file path or an existing directory, in which
    case the source file name is kept.
    """

    def __init__(self, backend: CommandBackend, timeout_s: int = GIT_COMMAND_TIMEOUT_S) -> None:
        self.backend = backend
        self.timeout_s = timeout_s

    def copy_file(self, source: str | Path, destination: str | Path) -> None:
        source = Path(source)
        destination = Path(destination)
        logger.debug("Copying %s to %s", source, destination)
        cwd = destination if destination.is_dir() else destination.parent
        run_checked(self.backend, ["cp", str(source), str(destination)], cwd, self.timeout_s)
