# =============================================================================
# main.py  —  Entry Point for the Atlas Docs MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py          (or the atlas-docs-mcp console script)
#
# WHAT HAPPENS:
#   1. Loads .env so ATLAS_API_URL can live in a local file
#   2. Builds the FastMCP server with every catalog tool (tools/mcp_server.py)
#   3. Serves MCP over stdin/stdout until the client closes the stream
#
# EXIT CODES:
#   0  →  the transport closed normally
#   1  →  the server could not be started
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

# Load .env BEFORE anything reads the environment.
load_dotenv()

from tools.mcp_server import mcp  # noqa: E402


def main() -> None:
    """Run the documentation server over stdio."""
    try:
        logging.info("Documentation MCP Server running on stdio")
        mcp.run()
    except Exception:
        logging.exception("Error during server setup")
        sys.exit(1)


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
