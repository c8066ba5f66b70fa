"""
Static tool table for pylot-content.

Both the MCP server and the CLI dispatch through one ToolRegistry. It is
filled once when pylot_content.tools is imported; listing order is
registration order, which is also the order clients see in tools/list.

Usage:
    from pylot_content.tools import default_registry

    result = default_registry.dispatch("list_items", {"contentType": "blogs"}, context)
"""

from typing import Any, Iterator

from pylot_content.errors import ToolNotFoundError
from pylot_content.tools.base import Tool, ToolContext


class ToolRegistry:
    """Name -> tool table, kept in registration order."""

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """
        Add a tool under its name, replacing any earlier tool of that name.

        Raises:
            ValueError: If tool is None or its name is empty
        """
        if tool is None:
            msg = "Cannot register None as a tool"
            raise ValueError(msg)
        if not tool.name:
            msg = "Tool must have a non-empty name"
            raise ValueError(msg)
        self._tools[tool.name] = tool

    def get(self, name: str) -> Tool:
        """
        Raises:
            ToolNotFoundError: If name is not in the table
        """
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError(tool=name) from None

    def list_tools(self) -> list[str]:
        """Tool names in registration order."""
        return list(self._tools)

    def describe(self, default_domain: str) -> list[dict[str, Any]]:
        """
        Name, description and input schema of every tool.

        Args:
            default_domain: Domain advertised as the default in each schema
        """
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "inputSchema": tool.input_schema(default_domain),
            }
            for tool in self
        ]

    def dispatch(self, name: str, arguments: dict[str, Any] | None, context: ToolContext) -> Any:
        """Look up a tool and run it on raw arguments."""
        return self.get(name).run(arguments, context)

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools.values())

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __repr__(self) -> str:
        return f"<ToolRegistry: [{', '.join(self._tools)}]>"


# Filled by pylot_content.tools at import
default_registry = ToolRegistry()
