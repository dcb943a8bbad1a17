# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the dispatch layer)
# =============================================================================
#
# These dataclasses describe every piece of information that flows between
# the MCP server and the remote documentation API:
#
#   ToolDescriptor  →  what the caller sees on "list tools"
#   ToolInvocation  →  one "call tool" request (name + raw arguments)
#   ApiRequest      →  the single HTTP GET derived from an invocation
#   ToolResult      →  what goes back to the caller (text + error flag)
#
# Descriptors and schemas are FROZEN: they are built once at import time and
# shared by every concurrent invocation.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any

from core.schemas import ListDocsArgs, ToolArguments


@dataclass(frozen=True)
class ToolDescriptor:
    """A tool advertised to callers on discovery."""

    name: str                          # Unique across the catalog
    description: str                   # Written for an LLM reader
    argument_schema: type[ToolArguments] = ListDocsArgs  # pydantic model


@dataclass
class ToolInvocation:
    """One "call tool" request, before validation."""

    name: str
    arguments: Any = field(default_factory=dict)


@dataclass(frozen=True)
class ApiRequest:
    """The HTTP request a validated invocation maps to."""

    path: str                          # "/docs/react/pages/%2Fguides%2Fhooks"
    method: str = "GET"


# -----------------------------------------------------------------------------
# ToolResult — the protocol content envelope
# -----------------------------------------------------------------------------
# Success: text is the remote JSON, pretty-printed.
# Failure: text is a human-readable message and is_error is True.
# -----------------------------------------------------------------------------
@dataclass
class ToolResult:
    """Outcome of a tool invocation in MCP content form."""

    content: list[dict[str, str]] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def text_result(cls, text: str, is_error: bool = False) -> "ToolResult":
        return cls(content=[{"type": "text", "text": text}], is_error=is_error)

    @property
    def text(self) -> str:
        """Concatenated text of all content items."""
        return "".join(item.get("text", "") for item in self.content)
