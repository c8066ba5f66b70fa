"""
Base classes for the tool interface.

This module defines the core abstractions for MCP tools in pylot-content:
- Tool: Abstract base class that all tools must implement
- ToolContext: Runtime context passed to tools during execution

Design Principles:
    - Tools are stateless - settings and the HTTP client come from ToolContext
    - Arguments are parsed into a Pydantic model before execute() sees them
    - Tools return JSON-ready values and raise ContentApiError on failure
    - Tools are registered by name - the registry handles lookup
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import ValidationError

from pylot_content.client import ContentApiClient
from pylot_content.errors import InvalidInputError
from pylot_content.schema import Settings, ToolArgs


@dataclass
class ToolContext:
    """
    Runtime context passed to tools during execution.

    Attributes:
        settings: Process-wide settings (default domain, API location)
        client: Upstream client shared by every tool call
    """

    settings: Settings
    client: ContentApiClient

    def domain_for(self, args: ToolArgs) -> str:
        """The domain a call targets, falling back to the configured default."""
        return args.domain or self.settings.default_domain


class Tool(ABC):
    """
    Abstract base class for all pylot-content tools.

    Each tool:
    - Has a unique name (e.g., "list_items")
    - Declares its arguments as a ToolArgs subclass (args_model)
    - Implements execute() on parsed arguments

    Example:
        class PingTool(Tool):
            args_model = ToolArgs

            @property
            def name(self) -> str:
                return "ping"

            def execute(self, args: ToolArgs, context: ToolContext) -> Any:
                return {"domain": context.domain_for(args)}
    """

    args_model: ClassVar[type[ToolArgs]] = ToolArgs

    @property
    @abstractmethod
    def name(self) -> str:
        """
        The unique identifier for this tool.

        Returns:
            The tool's MCP name
        """
        ...

    @property
    def description(self) -> str:
        """Human-readable description of what the tool does."""
        return f"Tool: {self.name}"

    def input_schema(self, default_domain: str) -> dict[str, Any]:
        """
        JSON schema for the tool's arguments.

        Derived from args_model, with the domain property defaulting to the
        configured domain.

        Args:
            default_domain: Domain shown as the default

        Returns:
            JSON schema dict suitable for an MCP tool listing
        """
        schema = self.args_model.model_json_schema(by_alias=True)
        schema.pop("title", None)
        properties = schema.setdefault("properties", {})
        properties["domain"] = {
            "type": "string",
            "default": default_domain,
            "description": "Site domain",
        }
        return schema

    def parse_args(self, args: dict[str, Any] | None) -> ToolArgs:
        """
        Validate raw arguments against args_model.

        Raises:
            InvalidInputError: If the arguments do not match the model
        """
        try:
            return self.args_model.model_validate(args or {})
        except ValidationError as e:
            errors = e.errors()
            first = errors[0] if errors else {}
            loc = first.get("loc", ())
            raise InvalidInputError(
                tool=self.name,
                field_name=".".join(str(part) for part in loc) or None,
                reason="; ".join(err["msg"] for err in errors),
            ) from e

    @abstractmethod
    def execute(self, args: Any, context: ToolContext) -> Any:
        """
        Execute the tool with parsed arguments.

        Args:
            args: An instance of args_model
            context: Runtime context with settings and client

        Returns:
            A JSON-serializable value

        Raises:
            ContentApiError: On any expected failure
        """
        ...

    def run(self, args: dict[str, Any] | None, context: ToolContext) -> Any:
        """Parse raw arguments, then execute."""
        return self.execute(self.parse_args(args), context)

    def __repr__(self) -> str:
        """String representation of the tool."""
        return f"<Tool: {self.name}>"
