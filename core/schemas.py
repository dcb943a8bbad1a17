# =============================================================================
# core/schemas.py  —  Tool Argument Models
# =============================================================================
#
# One pydantic model per tool.  Each model is used twice:
#   - model_validate()      →  checks the caller's arguments (core/validation.py)
#   - model_json_schema()   →  the input schema advertised on "list tools"
#
# Undeclared keys are ignored rather than rejected, so a tool without
# arguments accepts whatever the caller sends.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field

DOC_NAME_DESCRIPTION = (
    "The unique identifier or name of the documentation set you want to "
    "explore. Get this from list_docs first if you're unsure."
)

PAGE_PATH_DESCRIPTION = (
    "The root-relative path of the page within the documentation set "
    "(e.g. \"/guides/hooks\"). Get the available pages from get_docs_index "
    "first if you're unsure."
)

QUERY_DESCRIPTION = "Free-text search query, e.g. \"use state\" or \"routing\"."


class ToolArguments(BaseModel):
    """Base for every tool's arguments."""

    model_config = ConfigDict(extra="ignore")


class ListDocsArgs(ToolArguments):
    pass


class DocSetArgs(ToolArguments):
    docName: str = Field(..., min_length=1, description=DOC_NAME_DESCRIPTION)


class GetDocsIndexArgs(DocSetArgs):
    pass


class GetDocsFullArgs(DocSetArgs):
    pass


class GetDocsPageArgs(DocSetArgs):
    pagePath: str = Field(..., min_length=1, description=PAGE_PATH_DESCRIPTION)


class SearchDocsArgs(DocSetArgs):
    query: str = Field(..., min_length=1, description=QUERY_DESCRIPTION)
