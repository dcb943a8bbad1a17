"""Error taxonomy for tool dispatch.

Every failure raised inside the dispatch layer derives from DocsError, so the
dispatcher has a single place to turn it into an error ToolResult.
"""


class DocsError(Exception):
    """Base class for dispatch errors.

    Attributes:
        message: Human-readable text surfaced to the caller.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DocsError):
    """Arguments do not satisfy the tool's schema."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("Invalid arguments: " + "; ".join(self.problems))


class RemoteError(DocsError):
    """The documentation API answered with a non-2xx status."""

    def __init__(self, message: str, http_status: int):
        self.http_status = http_status
        super().__init__(message)


class TransportError(DocsError):
    """Network failure or a response body that is not valid JSON."""


class UnknownToolError(DocsError):
    """The requested tool is not in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")
