"""Command execution backends."""

from .backend import CommandBackend, CommandError, LocalBackend, check_result, run_checked

__all__ = ["CommandBackend", "CommandError", "LocalBackend", "check_result", "run_checked"]
