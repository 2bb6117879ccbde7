# trash-mcp/server.py
# Purpose: MCP service shell exposing the registered trash tools over fastmcp.
from __future__ import annotations

import logging
from typing import Any, Optional

from fastmcp import FastMCP
from mcp.types import ToolAnnotations

from tool_registry import ToolRegistry, autodiscover_tools
from tools._delegate import install_trash

__version__ = "0.1.0"

SERVER_NAME = "trash-mcp"
INSTRUCTIONS = (
    "Cross-platform trash/recycle bin operations. "
    "Safely delete files with recovery option."
)

log = logging.getLogger(__name__)


def build_server(tool_registry: Optional[ToolRegistry] = None) -> FastMCP:
    """Create a FastMCP server with one MCP tool per registered ToolSpec.

    The trash backend is resolved here so a bad TRASH_BACKEND fails at startup.
    """
    tool_registry = tool_registry or autodiscover_tools("tools")
    install_trash()
    mcp = FastMCP(name=SERVER_NAME, instructions=INSTRUCTIONS, version=__version__)
    for spec in tool_registry.specs():
        mcp.tool(
            spec.handler,
            name=spec.name,
            description=spec.description,
            annotations=ToolAnnotations(
                readOnlyHint=spec.read_only,
                destructiveHint=not spec.read_only,
            ),
        )
    return mcp


async def serve(transport: str = "stdio", **transport_kwargs: Any) -> None:
    mcp = build_server()
    log.info("Starting %s %s (%s transport)", SERVER_NAME, __version__, transport)
    try:
        await mcp.run_async(transport=transport, show_banner=False, **transport_kwargs)
    finally:
        log.info("%s stopped", SERVER_NAME)
