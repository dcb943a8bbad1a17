# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains the tool-dispatch logic for the Atlas docs server:
# data models, argument validation, the tool catalog, the HTTP client for
# the documentation API, and the dispatcher that ties them together.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or the MCP SDK.  The dispatcher
#   speaks in ToolResult objects; tools/mcp_server.py translates those into
#   protocol messages.
# =============================================================================
