"""Shared state module for bootstrap-git.

This module provides a single shared instance of configuration used by the
tool modules.  All tool modules should import CONFIG from this module
instead of loading their own.
"""

from __future__ import annotations

from .config import Config

# Single shared configuration loaded once at import time
CONFIG: Config = Config.load_from_env()
