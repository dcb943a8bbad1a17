# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Publishes every tool in core/catalog.py through a FastMCP server.  Each
#   tool is a thin wrapper: it logs the call, hands the raw arguments to
#   core.dispatcher.dispatch(), and converts the ToolResult into MCP content.
#
# HOW IT WORKS (the flow):
#   1. The agent lists tools; FastMCP answers from the DocsTool instances
#      registered below (name, description, JSON input schema).
#   2. The agent calls a tool by name with arguments.
#   3. DocsTool.run() forwards to dispatch(), which validates, issues ONE
#      GET against the docs API, and normalizes the outcome.
#   4. Success  →  text content holding the pretty-printed JSON.
#      Failure  →  ToolError carrying the same text, which FastMCP reports
#                  to the agent as a result with isError=true.
#
# TOOL REGISTRATION:
#   Tools are DocsTool instances, not @mcp.tool() functions.  The input
#   schema comes from the catalog, and arguments reach core/validation.py
#   untouched (extra keys on list_docs are ignored, not rejected).
#
# RUNNING THIS SERVER:
#   a) Run standalone:  python -m tools.mcp_server
#   b) Via main.py / the atlas-docs-mcp console script (stdio transport)
# =============================================================================

import json
import logging
import sys
from typing import Any

import httpx
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import TextContent

from core.catalog import input_schema, list_tools
from core.config import Settings, load_settings
from core.dispatcher import dispatch

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT is the MCP transport, and anything else written
# there would corrupt the JSON-RPC stream.
#
#   CYAN    →  incoming tool calls with their arguments
#   GREEN   →  successful responses
#   YELLOW  →  status / error lines
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

_MAX_LOGGED_CHARS = 500

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, arguments: Any) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    if isinstance(arguments, dict):
        param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    else:
        param_str = repr(arguments)
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the tool response as compact JSON in GREEN, then return it."""
    try:
        compact = json.dumps(json.loads(text), separators=(",", ":"), ensure_ascii=False)
    except ValueError:
        compact = text
    if len(compact) > _MAX_LOGGED_CHARS:
        compact = compact[:_MAX_LOGGED_CHARS] + "…"
    logging.info(f"{_GREEN}  ← {tool_name} response: {compact}{_RESET}")
    return text


# =============================================================================
# DocsTool — one MCP tool per catalog entry
# =============================================================================
class DocsTool(Tool):
    """MCP tool that forwards its call to the dispatcher.

    Arguments reach core/validation.py exactly as the caller sent them, so
    validation errors and ignored extra keys behave the same for every tool.
    """

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        _log_request(self.name, arguments)

        result = await dispatch(
            self.name,
            arguments,
            settings=_current_settings(),
            client=_HTTP_CLIENT,
        )
        if result.is_error:
            _log_status(result.text)
            raise ToolError(result.text)

        text = _log_response(self.name, result.text)
        return MCPToolResult(content=[TextContent(type="text", text=text)])


_SETTINGS: Settings | None = None
_HTTP_CLIENT: httpx.AsyncClient | None = None


def _current_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = load_settings()
    return _SETTINGS


def configure(
    settings: Settings | None,
    client: httpx.AsyncClient | None = None,
) -> None:
    """Override the settings and HTTP client used by every tool.

    Passing None for settings re-reads the environment on the next call;
    passing None for client opens a fresh client per call.
    """
    global _SETTINGS, _HTTP_CLIENT
    _SETTINGS = settings
    _HTTP_CLIENT = client


def create_server(name: str = "atlas-docs-mcp-server") -> FastMCP:
    """Build a FastMCP server with every catalog tool registered."""
    server = FastMCP(name)
    for descriptor in list_tools():
        server.add_tool(
            DocsTool(
                name=descriptor.name,
                description=descriptor.description,
                parameters=input_schema(descriptor),
            )
        )
    return server


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = create_server()


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
