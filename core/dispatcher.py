# =============================================================================
# core/dispatcher.py  —  Tool Dispatch (the single normalization point)
# =============================================================================
#
# HOW A CALL FLOWS:
#   1. Look the tool up in the catalog        (unknown  → "Unknown tool: x")
#   2. Validate the arguments                 (invalid  → "Error: Invalid ...")
#   3. Map the invocation to one ApiRequest
#   4. Issue exactly one GET                  (failure  → "Error: <message>")
#   5. Wrap the JSON body as pretty-printed text
#
# Every step below raises; dispatch() catches at ONE place and turns any
# failure into a ToolResult with is_error=True.  Nothing but task
# cancellation escapes, so a bad call can never take the server down.
# =============================================================================

import json
import logging
from typing import Any

import httpx

from core.catalog import build_request, get_tool
from core.config import Settings, load_settings
from core.docs_api import fetch_json
from core.exceptions import DocsError, RemoteError, UnknownToolError
from core.models import ToolInvocation, ToolResult
from core.validation import validate_arguments

logger = logging.getLogger(__name__)


def format_json(body: Any) -> str:
    """Serialize a remote JSON body the way it is shown to the caller."""
    return json.dumps(body, indent=2, ensure_ascii=False)


async def dispatch(
    name: str,
    arguments: Any = None,
    *,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> ToolResult:
    """Run one tool invocation and return its ToolResult.

    Args:
        name: Tool name as sent by the caller.
        arguments: Raw arguments (any JSON value, usually a dict).
        settings: API settings; read from the environment when omitted.
        client: Optional shared httpx client (tests inject a mock transport).

    Returns:
        A ToolResult.  This function does not raise for tool failures.
    """
    invocation = ToolInvocation(name=name, arguments=arguments)
    try:
        body = await _run(invocation, settings or load_settings(), client)
    except UnknownToolError as e:
        logger.warning("Rejected call to unknown tool %r", name)
        return ToolResult.text_result(e.message, is_error=True)
    except RemoteError as e:
        logger.warning("%s: documentation API returned %s: %s", name, e.http_status, e.message)
        return ToolResult.text_result(f"Error: {e.message}", is_error=True)
    except DocsError as e:
        return ToolResult.text_result(f"Error: {e.message}", is_error=True)
    except Exception as e:
        logger.exception("Unexpected failure while running %s", name)
        return ToolResult.text_result(f"Error: {e}", is_error=True)

    return ToolResult.text_result(format_json(body))


async def _run(
    invocation: ToolInvocation,
    settings: Settings,
    client: httpx.AsyncClient | None,
) -> Any:
    tool = get_tool(invocation.name)
    if tool is None:
        raise UnknownToolError(invocation.name)

    arguments = validate_arguments(tool.argument_schema, invocation.arguments)
    request = build_request(tool.name, arguments, root_page_paths=settings.root_page_paths)
    return await fetch_json(request, settings, client=client)
