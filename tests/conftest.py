"""Pytest configuration and fixtures for bootstrap-git tests.

This module provides fake collaborators that record every call into a shared
event log, so tests can assert on the exact order of pipeline steps without
running git.

IMPORTANT: Environment variables must be set BEFORE importing bootstrap_git
modules, as the state module loads configuration at import time.
"""

from __future__ import annotations

import os

# Set environment variables BEFORE any bootstrap_git imports
os.environ.setdefault("BOOTSTRAP_TEMPLATE_ROOT", "/tmp/bootstrap-git-test/template")
os.environ.setdefault("BOOTSTRAP_TARGET_ROOT", "/tmp/bootstrap-git-test/target")

import shutil
from collections.abc import Sequence
from pathlib import Path

import pytest

from bootstrap_git.config import OrchestratorConfig
from bootstrap_git.git.client import StageOptions

GITIGNORE_CONTENT = "node_modules/\ndist/\n*.log\n"
README_CONTENT = "# Component\n\nGenerated by TheSmiths.\n"


class FakeVCS:
    """A fake VCS client that records calls and fails on demand.

    ``failures`` maps a method name to the exception that method raises.
    """

    def __init__(self, events: list[tuple], failures: dict[str, Exception] | None = None) -> None:
        self.events = events
        self.failures = failures or {}

    def _record(self, name: str, *args: object) -> None:
        self.events.append((name, *args))
        if name in self.failures:
            raise self.failures[name]

    def init(self) -> None:
        self._record("init")

    def checkout(self, branch_name: str) -> None:
        self._record("checkout", branch_name)

    def clean_untracked(self) -> None:
        self._record("clean_untracked")

    def stage_and_commit(
        self,
        paths: Sequence[str],
        message: str,
        options: StageOptions | None = None,
    ) -> None:
        self._record("stage_and_commit", list(paths), message, options)

    def count(self, name: str) -> int:
        return sum(1 for event in self.events if event[0] == name)


class FakeSeeder:
    """A fake file seeder; ``fail_on_call`` makes the n-th copy (1-based) raise."""

    def __init__(
        self,
        events: list[tuple],
        fail_on_call: int | None = None,
        error: Exception | None = None,
    ) -> None:
        self.events = events
        self.fail_on_call = fail_on_call
        self.error = error or OSError("copy failed")
        self.calls = 0

    def copy_file(self, source: str | Path, destination: str | Path) -> None:
        self.calls += 1
        self.events.append(("copy_file", Path(source), Path(destination)))
        if self.calls == self.fail_on_call:
            raise self.error


class RecordingBackend:
    """A backend that records argv lists and returns canned results.

    ``results`` maps a git subcommand (or the executable name for non-git
    commands) to a result dictionary; unmatched commands succeed.
    """

    def __init__(self, results: dict[str, dict[str, object]] | None = None) -> None:
        self.results = results or {}
        self.calls: list[tuple[list[str], str]] = []

    def run(self, argv: Sequence[str], cwd: str | Path, timeout_s: int) -> dict[str, object]:
        argv = list(argv)
        self.calls.append((argv, str(cwd)))
        key = argv[1] if argv[0] == "git" and len(argv) > 1 else argv[0]
        default = {"exit_code": 0, "stdout": "", "stderr": "", "duration_ms": 0, "timed_out": False}
        return {**default, **self.results.get(key, {})}


@pytest.fixture
def events() -> list[tuple]:
    return []


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Create a template tree holding the boilerplate sources."""
    root = tmp_path / "template"
    (root / "project_files").mkdir(parents=True)
    (root / "component_files").mkdir(parents=True)
    (root / "project_files" / "gitignore").write_text(GITIGNORE_CONTENT, encoding="utf-8")
    (root / "component_files" / "README.md").write_text(README_CONTENT, encoding="utf-8")
    return root


@pytest.fixture
def target_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def orchestrator_config(template_root: Path, target_root: Path) -> OrchestratorConfig:
    return OrchestratorConfig(template_root=template_root, target_root=target_root)


@pytest.fixture
def git_env(monkeypatch, tmp_path: Path) -> dict[str, str]:
    """Git identity and isolation from the user's global git configuration."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    env = {
        "GIT_AUTHOR_NAME": "Test",
        "GIT_AUTHOR_EMAIL": "test@test.com",
        "GIT_COMMITTER_NAME": "Test",
        "GIT_COMMITTER_EMAIL": "test@test.com",
    }
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", os.devnull)
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    return env


@pytest.fixture
def make_vcs(events):
    def _make(**failures: Exception) -> FakeVCS:
        return FakeVCS(events, failures)

    return _make


@pytest.fixture
def make_seeder(events):
    def _make(fail_on_call: int | None = None, error: Exception | None = None) -> FakeSeeder:
        return FakeSeeder(events, fail_on_call=fail_on_call, error=error)

    return _make


@pytest.fixture
def make_backend():
    def _make(**results: dict[str, object]) -> RecordingBackend:
        return RecordingBackend(results)

    return _make
