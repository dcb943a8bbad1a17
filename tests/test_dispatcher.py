import asyncio
import json

import httpx
import pytest

from core.catalog import list_tools
from core.config import Settings
from core.dispatcher import dispatch
from tests.conftest import API_URL


def test_unknown_tool_makes_no_request(docs_api):
    result = docs_api.call("delete_docs", {"docName": "react"})

    assert result.is_error
    assert result.text == "Unknown tool: delete_docs"
    assert docs_api.requests == []


@pytest.mark.parametrize("tool", [t for t in list_tools() if t.name != "list_docs"])
def test_missing_required_argument_makes_no_request(docs_api, tool):
    result = docs_api.call(tool.name, {})

    assert result.is_error
    assert result.text.startswith("Error: Invalid arguments: ")
    assert "docName: Required" in result.text
    assert docs_api.requests == []


def test_list_docs_hits_docs_endpoint(docs_api):
    docs_api.respond(200, [{"name": "react"}])

    result = docs_api.call("list_docs")

    assert not result.is_error
    assert len(docs_api.requests) == 1
    request = docs_api.requests[0]
    assert request.method == "GET"
    assert str(request.url) == f"{API_URL}/docs"
    assert json.loads(result.text) == [{"name": "react"}]


def test_list_docs_ignores_unexpected_arguments(docs_api):
    result = docs_api.call("list_docs", {"verbose": True, "limit": 3})

    assert not result.is_error
    assert len(docs_api.requests) == 1


def test_get_docs_page_encodes_page_path(docs_api):
    docs_api.call("get_docs_page", {"docName": "react", "pagePath": "/guides/hooks"})

    assert len(docs_api.requests) == 1
    assert docs_api.requests[0].url.raw_path == b"/api/docs/react/pages/%2Fguides%2Fhooks"


def test_get_docs_index_uses_reserved_page(docs_api):
    docs_api.call("get_docs_index", {"docName": "react"})

    assert docs_api.requests[0].url.raw_path == b"/api/docs/react/pages/%2Fllms.txt"


def test_search_docs_encodes_query(docs_api):
    docs_api.call("search_docs", {"docName": "react", "query": "use state"})

    request = docs_api.requests[0]
    assert request.url.raw_path == b"/api/docs/react/search?q=use%20state"
    assert request.url.params["q"] == "use state"


def test_root_page_paths_setting_is_honoured(docs_api):
    settings = Settings(api_url=API_URL, root_page_paths=True)

    docs_api.call("get_docs_page", {"docName": "react", "pagePath": "hooks"}, settings=settings)

    assert docs_api.requests[0].url.raw_path == b"/api/docs/react/pages/%2Fhooks"


def test_success_is_pretty_printed_json(docs_api):
    docs_api.respond(200, {"title": "x"})

    result = docs_api.call("get_docs_full", {"docName": "react"})

    assert not result.is_error
    assert result.text == json.dumps({"title": "x"}, indent=2)
    assert json.loads(result.text) == {"title": "x"}
    assert result.content == [{"type": "text", "text": result.text}]


def test_non_ascii_is_kept_readable(docs_api):
    docs_api.respond(200, {"title": "Überblick"})

    result = docs_api.call("list_docs")

    assert "Überblick" in result.text


def test_remote_error_message_is_surfaced(docs_api):
    docs_api.respond(404, {"error": "not found"})

    result = docs_api.call("get_docs_index", {"docName": "nope"})

    assert result.is_error
    assert result.text == "Error: not found"


def test_remote_error_without_json_is_generic(docs_api):
    docs_api.respond(500, raw=b"<html>Internal Server Error</html>")

    result = docs_api.call("list_docs")

    assert result.is_error
    assert result.text == "Error: API request failed"


def test_remote_error_without_error_field_is_generic(docs_api):
    docs_api.respond(503, {"message": "maintenance"})

    result = docs_api.call("list_docs")

    assert result.text == "Error: API request failed"


def test_network_failure_is_normalized(docs_api):
    docs_api.fail_with(httpx.ConnectError("connection refused"))

    result = docs_api.call("list_docs")

    assert result.is_error
    assert result.text == "Error: connection refused"
    assert len(docs_api.requests) == 1


def test_malformed_success_body_is_normalized(docs_api):
    docs_api.respond(200, raw=b"not json")

    result = docs_api.call("list_docs")

    assert result.is_error
    assert result.text.startswith("Error: Invalid JSON from documentation API")


def test_unexpected_exception_is_normalized(docs_api):
    docs_api.fail_with(RuntimeError("kaboom"))

    result = docs_api.call("list_docs")

    assert result.is_error
    assert result.text == "Error: kaboom"


def test_invocations_do_not_block_each_other():
    finished: list[bytes] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        if b"/slow/" in request.url.raw_path:
            await asyncio.sleep(0.2)
        finished.append(request.url.raw_path)
        return httpx.Response(200, json={"path": request.url.raw_path.decode()})

    async def go():
        settings = Settings(api_url=API_URL)
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await asyncio.gather(
                dispatch("get_docs_index", {"docName": "slow"}, settings=settings, client=client),
                dispatch("get_docs_index", {"docName": "fast"}, settings=settings, client=client),
            )

    slow, fast = asyncio.run(go())

    assert finished == [
        b"/api/docs/fast/pages/%2Fllms.txt",
        b"/api/docs/slow/pages/%2Fllms.txt",
    ]
    assert json.loads(slow.text) == {"path": "/api/docs/slow/pages/%2Fllms.txt"}
    assert json.loads(fast.text) == {"path": "/api/docs/fast/pages/%2Fllms.txt"}


def test_cancelled_call_propagates_without_a_result():
    async def go():
        started = asyncio.Event()

        async def handler(request: httpx.Request) -> httpx.Response:
            started.set()
            await asyncio.sleep(10)
            return httpx.Response(200, json={})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            task = asyncio.create_task(
                dispatch("list_docs", settings=Settings(api_url=API_URL), client=client)
            )
            await started.wait()
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task
            return task

    task = asyncio.run(go())

    assert task.cancelled()
