# =============================================================================
# core/catalog.py  —  Tool Catalog & Remote Path Mapping
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   1. Declares the static set of tools advertised to the caller
#      (name, LLM-facing description, argument schema).
#   2. Renders each argument schema as a portable JSON schema.
#   3. Maps a validated invocation to exactly one remote resource path:
#
#        list_docs       →  GET /docs
#        get_docs_index  →  GET /docs/{docName}/pages/{INDEX_PAGE_ID}
#        get_docs_full   →  GET /docs/{docName}/pages/{FULL_PAGE_ID}
#        get_docs_page   →  GET /docs/{docName}/pages/{pagePath}
#        search_docs     →  GET /docs/{docName}/search?q={query}
#
# The catalog never reflects live state from the API.  It does not know
# which documentation sets exist.
#
# ENCODING:
#   Every value taken from the caller is percent-encoded with NO safe
#   characters.  A pagePath like "/guides/hooks" must travel as ONE path
#   segment ("%2Fguides%2Fhooks"), and a query like "use state" must not
#   break the query string.
# =============================================================================

from typing import Any
from urllib.parse import quote

from core.exceptions import UnknownToolError
from core.models import ApiRequest, ToolDescriptor
from core.schemas import (
    GetDocsFullArgs,
    GetDocsIndexArgs,
    GetDocsPageArgs,
    ListDocsArgs,
    SearchDocsArgs,
)

# Reserved page identifiers.  These are not real documents: the API serves
# the condensed index and the consolidated full text under these names.
INDEX_PAGE_ID = "/llms.txt"
FULL_PAGE_ID = "/llms-full.txt"


# =============================================================================
# The catalog
# =============================================================================
# Descriptions are read by the LLM to decide WHEN to call a tool, so each one
# names the situation it fits and the tool to reach for next.
# =============================================================================
TOOL_CATALOG: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name="list_docs",
        description=(
            "Lists all available documentation libraries and frameworks. Use "
            "this first to discover what documentation is available and get "
            "basic metadata about each documentation set. Returns a list of "
            "documentation sets with their names, descriptions, and types. "
            "Follow up with get_docs_index to explore one of them."
        ),
        argument_schema=ListDocsArgs,
    ),
    ToolDescriptor(
        name="get_docs_index",
        description=(
            "Retrieves a condensed, LLM-friendly index of a documentation set. "
            "Use this when you need a high-level understanding of what topics "
            "and concepts are covered in a library's documentation. This is "
            "ideal for initial exploration or when you need to determine which "
            "parts of the documentation are relevant to a user's query. Use "
            "get_docs_page next to read a specific page from the index."
        ),
        argument_schema=GetDocsIndexArgs,
    ),
    ToolDescriptor(
        name="get_docs_full",
        description=(
            "Retrieves the complete documentation content in a single "
            "consolidated file. Use this when you need comprehensive knowledge "
            "about a library or when you need to search through the entire "
            "documentation for specific details. Note that this returns a "
            "larger volume of text; prefer search_docs or get_docs_page when "
            "you only need one topic."
        ),
        argument_schema=GetDocsFullArgs,
    ),
    ToolDescriptor(
        name="get_docs_page",
        description=(
            "Retrieves a specific documentation page's content. Use this when "
            "you already know which page contains the information you need, "
            "or after using search_docs or get_docs_index to identify relevant "
            "pages. This provides detailed information about a specific topic, "
            "function, or feature."
        ),
        argument_schema=GetDocsPageArgs,
    ),
    ToolDescriptor(
        name="search_docs",
        description=(
            "Searches a documentation set for pages matching a query. Use this "
            "when you are looking for a specific concept, API, or error and do "
            "not know which page covers it. Returns matching pages with their "
            "paths; pass a path to get_docs_page to read the full page."
        ),
        argument_schema=SearchDocsArgs,
    ),
)

_BY_NAME: dict[str, ToolDescriptor] = {tool.name: tool for tool in TOOL_CATALOG}


def list_tools() -> tuple[ToolDescriptor, ...]:
    """Return every advertised tool, in catalog order."""
    return TOOL_CATALOG


def get_tool(name: str) -> ToolDescriptor | None:
    """Look up a tool by name, or None when it is not in the catalog."""
    return _BY_NAME.get(name)


def input_schema(tool: ToolDescriptor) -> dict[str, Any]:
    """Render a tool's argument model as a JSON schema object."""
    return tool.argument_schema.model_json_schema()


def encode_segment(value: str) -> str:
    """Percent-encode a value as a single URL path segment or query value."""
    return quote(value, safe="")


def build_request(
    name: str,
    arguments: dict[str, Any],
    root_page_paths: bool = False,
) -> ApiRequest:
    """Map a validated invocation to its ApiRequest.

    Args:
        name: Tool name.
        arguments: Arguments already passed through validate_arguments().
        root_page_paths: When True, a pagePath without a leading "/" is
            treated as root-relative (bare page names from the older tool
            surface address the same page).

    Raises:
        UnknownToolError: if ``name`` is not in the catalog.
    """
    if name == "list_docs":
        return ApiRequest(path="/docs")

    if name not in _BY_NAME:
        raise UnknownToolError(name)

    doc = encode_segment(arguments["docName"])

    if name == "get_docs_index":
        return ApiRequest(path=f"/docs/{doc}/pages/{encode_segment(INDEX_PAGE_ID)}")

    if name == "get_docs_full":
        return ApiRequest(path=f"/docs/{doc}/pages/{encode_segment(FULL_PAGE_ID)}")

    if name == "get_docs_page":
        page_path = arguments["pagePath"]
        if root_page_paths and not page_path.startswith("/"):
            page_path = "/" + page_path
        return ApiRequest(path=f"/docs/{doc}/pages/{encode_segment(page_path)}")

    # search_docs
    return ApiRequest(path=f"/docs/{doc}/search?q={encode_segment(arguments['query'])}")
