"""Tool module exports for bootstrap-git.

Each submodule exposes functions that the server registers as tools.  Tool
functions return JSON-serializable dictionaries.

Usage:

    from bootstrap_git.tools import bootstrap_tools
    bootstrap_tools.git_init()
"""

from . import bootstrap_tools  # noqa: F401

__all__ = ["bootstrap_tools"]
