"""
Exception hierarchy for pylot-content.

Every failure the adapter reports is a ContentApiError, so one except clause
at the edge (MCP handler, CLI command) catches them all.

Exception Categories:
    - UpstreamError: The content API answered badly (status, body, transport)
    - ItemNotFoundError: A slug or mvk_id is absent from a content map
    - InvalidInputError: Tool arguments were rejected before any network call
    - ToolNotFoundError: No tool with the requested name is registered

Nothing here is retried. Errors travel up to the MCP adapter or the CLI,
which turn them into user-visible failures.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar


# =============================================================================
# Error Codes
# =============================================================================

# Upstream errors: 1xxx
ERROR_UPSTREAM_STATUS = 1001
ERROR_UPSTREAM_PARSE = 1002
ERROR_UPSTREAM_CONNECTION = 1003

# Lookup errors: 2xxx
ERROR_ITEM_NOT_FOUND = 2001
ERROR_TOOL_NOT_FOUND = 2002

# Input errors: 3xxx
ERROR_INVALID_INPUT = 3001

# Longest slice of an upstream body carried on an UpstreamError
BODY_SNIPPET_LIMIT = 200


# =============================================================================
# Base Exception
# =============================================================================


@dataclass
class ContentApiError(Exception):
    """
    Base exception for all pylot-content errors.

    Subclasses set default_code and fill message, suggestion and context from
    their own fields in __post_init__ via _fill(); anything the caller passed
    explicitly is left alone.

    Attributes:
        message: Human-readable error description
        code: Numeric error code (see the ERROR_* constants)
        suggestion: Optional hint for the operator
        context: Structured details, also emitted by to_dict()
    """

    default_code: ClassVar[int] = 0

    message: str = ""
    code: int = 0
    suggestion: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    def _fill(self, message: str, suggestion: str | None = None, **context: Any) -> None:
        if not self.message:
            self.message = message
        if not self.code:
            self.code = self.default_code
        if not self.suggestion:
            self.suggestion = suggestion
        self.context.update(context)

    def __str__(self) -> str:
        text = f"[E{self.code}] {self.message}"
        if self.suggestion:
            text += f"\nSuggestion: {self.suggestion}"
        return text

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, code={self.code}, context={self.context!r})"

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form used by the CLI's --json error output."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "code": self.code,
            "suggestion": self.suggestion,
            "context": self.context,
        }


# =============================================================================
# Upstream Errors
# =============================================================================


@dataclass
class UpstreamError(ContentApiError):
    """
    The content API returned a non-success status.

    Attributes:
        status_code: HTTP status code (0 when no response was received)
        reason: HTTP reason phrase
        url: Fully resolved request URL
        body: Leading part of the response body
    """

    default_code: ClassVar[int] = ERROR_UPSTREAM_STATUS

    status_code: int = 0
    reason: str = ""
    url: str = ""
    body: str = ""

    def __post_init__(self) -> None:
        self.body = self.body[:BODY_SNIPPET_LIMIT]
        self._fill(
            f"Upstream {self.status_code} {self.reason} for {self.url} :: {self.body}",
            status_code=self.status_code,
            reason=self.reason,
            url=self.url,
            body=self.body,
        )


@dataclass
class UpstreamParseError(UpstreamError):
    """An upstream body is not the JSON shape we asked for."""

    default_code: ClassVar[int] = ERROR_UPSTREAM_PARSE

    detail: str = ""

    def __post_init__(self) -> None:
        self._fill(f"Malformed JSON from {self.url}: {self.detail}", detail=self.detail)
        super().__post_init__()


@dataclass
class UpstreamConnectionError(UpstreamError):
    """No response could be obtained from the content API."""

    default_code: ClassVar[int] = ERROR_UPSTREAM_CONNECTION

    underlying_error: str = ""

    def __post_init__(self) -> None:
        self._fill(
            f"Request to {self.url} failed: {self.underlying_error}",
            suggestion="Check CONTENT_API_BASE and network connectivity",
            underlying_error=self.underlying_error,
        )
        super().__post_init__()


# =============================================================================
# Lookup Errors
# =============================================================================


@dataclass
class ItemNotFoundError(ContentApiError):
    """
    A content map has no item for the requested key.

    Attributes:
        key_name: Which key was searched ("slug" or "mvk_id")
        key: The value that was searched for
        content_type: The resolved (canonical) content type
    """

    default_code: ClassVar[int] = ERROR_ITEM_NOT_FOUND

    key_name: str = "slug"
    key: Any = None
    content_type: str = ""

    def __post_init__(self) -> None:
        self._fill(
            f"No item with {self.key_name} '{self.key}' in {self.content_type}",
            key_name=self.key_name,
            key=self.key,
            content_type=self.content_type,
        )


@dataclass
class ToolNotFoundError(ContentApiError):
    """No tool is registered under the requested name."""

    default_code: ClassVar[int] = ERROR_TOOL_NOT_FOUND

    tool: str = ""

    def __post_init__(self) -> None:
        self._fill(
            f"Tool not found: {self.tool}",
            suggestion="Run `pylot-content tools` to list registered tools",
            tool=self.tool,
        )


# =============================================================================
# Input Errors
# =============================================================================


@dataclass
class InvalidInputError(ContentApiError):
    """
    Tool arguments were rejected.

    Attributes:
        tool: Name of the tool whose arguments were rejected
        field_name: The offending argument, when known
        reason: Why the value was rejected
    """

    default_code: ClassVar[int] = ERROR_INVALID_INPUT

    tool: str = ""
    field_name: str | None = None
    reason: str = ""

    def __post_init__(self) -> None:
        target = f"'{self.field_name}'" if self.field_name else "arguments"
        self._fill(
            f"Invalid {target} for {self.tool}: {self.reason}",
            tool=self.tool,
            field_name=self.field_name,
            reason=self.reason,
        )
