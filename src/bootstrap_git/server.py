"""MCP stdio server entrypoint for bootstrap-git.

The server runs over standard input/output using the Model Context Protocol.
It registers the bootstrap operations as tools so the scaffolding pipeline
can invoke them as discrete stages.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

from mcp.server.fastmcp import FastMCP

from . import state
from .tools import bootstrap_tools


def build_tools_dispatch() -> dict[str, Callable[..., dict[str, Any]]]:
    """Return a mapping from tool names to callables."""
    return {
        "git_init": bootstrap_tools.git_init,
        "git_checkout": bootstrap_tools.git_checkout,
        "git_commit_all": bootstrap_tools.git_commit_all,
    }


def main() -> None:
    """Entrypoint for the bootstrap-git MCP server."""
    # Configure logging to stderr (stdout is used for MCP protocol)
    logging.basicConfig(
        level=getattr(logging, state.CONFIG.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)
    logger.info("Starting bootstrap-git MCP server")

    mcp = FastMCP("bootstrap-git")

    dispatch = build_tools_dispatch()
    for name, func in dispatch.items():
        mcp.add_tool(func, name=name)

    logger.info("Registered %d tools", len(dispatch))

    # Blocks until the client disconnects
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
