# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the MCP protocol and core/.
#   It registers one MCP tool per catalog entry, logs each call, and turns
#   a ToolResult into MCP content (or a ToolError when is_error is set).
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate arguments or build URLs (core/ does)
#   - They do NOT talk HTTP (core/docs_api.py does)
# =============================================================================
