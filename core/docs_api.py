# =============================================================================
# core/docs_api.py  —  Remote Documentation API Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Issues ONE asynchronous GET per ApiRequest and returns the parsed JSON
#   body.  Everything else (which path, how to present the result) belongs
#   to the catalog and the dispatcher.
#
# FAILURE MODES:
#   - non-2xx status      →  RemoteError  (message from the body's "error"
#                                          field, else "API request failed")
#   - network failure     →  TransportError
#   - 2xx but not JSON    →  TransportError
#
# No retries and no timeout override: a failed call surfaces immediately and
# latency is bounded by httpx's default timeout.
# =============================================================================

import logging
from typing import Any

import httpx

from core.config import Settings
from core.exceptions import RemoteError, TransportError
from core.models import ApiRequest

logger = logging.getLogger(__name__)

GENERIC_API_ERROR = "API request failed"


async def fetch_json(
    request: ApiRequest,
    settings: Settings,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """Perform the request against the configured API and decode its JSON.

    Args:
        request: Path and method to issue.
        settings: Supplies the API base URL.
        client: Optional shared client.  When omitted a client is opened and
            closed around this single call.

    Returns:
        The decoded JSON body.

    Raises:
        RemoteError: the API answered with a non-2xx status.
        TransportError: the request failed or the body was not JSON.
    """
    url = f"{settings.api_url}{request.path}"
    if client is None:
        async with httpx.AsyncClient() as own_client:
            return await _request_json(own_client, request.method, url)
    return await _request_json(client, request.method, url)


async def _request_json(client: httpx.AsyncClient, method: str, url: str) -> Any:
    logger.debug("%s %s", method, url)
    try:
        resp = await client.request(method, url)
    except httpx.RequestError as e:
        raise TransportError(str(e) or type(e).__name__) from e

    if not resp.is_success:
        message = _error_message(resp)
        raise RemoteError(message, http_status=resp.status_code)

    try:
        return resp.json()
    except ValueError as e:
        raise TransportError(f"Invalid JSON from documentation API: {e}") from e


def _error_message(resp: httpx.Response) -> str:
    """Pull the API's ``{"error": ...}`` message out of an error response."""
    try:
        body = resp.json()
    except ValueError:
        return GENERIC_API_ERROR
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return GENERIC_API_ERROR
