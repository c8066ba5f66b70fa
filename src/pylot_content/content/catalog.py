"""
Virtual tool catalog for a domain.

The MCP surface is a handful of generic tools (list_items, get_item_by_slug,
search_content, ...). An agent that knows nothing about a site cannot tell
which content types exist or how to call the generic tools for them. The
catalog answers that: for every content type a domain publishes it describes
three concrete "virtual" tools, each with a ready-to-send tools/call example.

Catalog layout (order is part of the contract):
    1. Canonical content types, sorted by name
    2. Aliases whose target exists, in alias table order
    3. _redirects helpers
    4. _search helpers

The builder is a pure function of (domain, content types, alias table), so an
unchanged backend always yields the same serialized catalog.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pylot_content.content.aliases import CONTENT_TYPE_ALIASES
from pylot_content.schema import DEFAULT_LIMIT, DEFAULT_TOP, MAX_LIMIT

REDIRECTS_GROUP = "_redirects"
SEARCH_GROUP = "_search"


@dataclass(frozen=True)
class VirtualTool:
    """
    A synthesized tool descriptor.

    Attributes:
        name: Virtual tool name (e.g., "posts.list")
        description: What the tool does
        input_schema: JSON schema of the virtual tool's own arguments
        tool: Generic tool the example invokes
        arguments: Arguments of the worked example
    """

    name: str
    description: str
    input_schema: dict[str, Any]
    tool: str
    arguments: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
            "call_example": {
                "method": "tools/call",
                "params": {"name": self.tool, "arguments": self.arguments},
            },
        }


@dataclass(frozen=True)
class ToolGroup:
    """Virtual tools sharing one label (a content type, alias or helper group)."""

    label: str
    tools: list[VirtualTool] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "contentType": self.label,
            "tools": [tool.to_dict() for tool in self.tools],
        }


@dataclass(frozen=True)
class ToolCatalog:
    """The full virtual tool catalog for a domain."""

    domain: str
    groups: list[ToolGroup]
    aliases: Mapping[str, str]

    @property
    def labels(self) -> list[str]:
        """Group labels in catalog order."""
        return [group.label for group in self.groups]

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": self.domain,
            "registry": [group.to_dict() for group in self.groups],
            "aliases": dict(self.aliases),
        }


def _domain_property(domain: str) -> dict[str, Any]:
    return {"type": "string", "default": domain}


def content_type_group(domain: str, content_type: str, label: str | None = None) -> ToolGroup:
    """
    Build the list / get_by_slug / get_by_id trio for one content type.

    Args:
        domain: Domain baked into schemas and examples
        content_type: Canonical content type the examples call with
        label: Name the tools are published under (defaults to content_type)
    """
    name = label or content_type
    return ToolGroup(
        label=name,
        tools=[
            VirtualTool(
                name=f"{name}.list",
                description=f"List {name} (paginated)",
                input_schema={
                    "type": "object",
                    "properties": {
                        "domain": _domain_property(domain),
                        "limit": {
                            "type": "integer",
                            "default": DEFAULT_LIMIT,
                            "minimum": 1,
                            "maximum": MAX_LIMIT,
                        },
                        "offset": {"type": "integer", "default": 0, "minimum": 0},
                    },
                },
                tool="list_items",
                arguments={
                    "domain": domain,
                    "contentType": content_type,
                    "limit": DEFAULT_LIMIT,
                    "offset": 0,
                },
            ),
            VirtualTool(
                name=f"{name}.get_by_slug",
                description=f"Get a {name} item by slug",
                input_schema={
                    "type": "object",
                    "properties": {
                        "domain": _domain_property(domain),
                        "slug": {"type": "string"},
                    },
                    "required": ["slug"],
                },
                tool="get_item_by_slug",
                arguments={"domain": domain, "contentType": content_type, "slug": "<slug>"},
            ),
            VirtualTool(
                name=f"{name}.get_by_id",
                description=f"Get a {name} item by mvk_id",
                input_schema={
                    "type": "object",
                    "properties": {
                        "domain": _domain_property(domain),
                        "id": {"type": "integer"},
                    },
                    "required": ["id"],
                },
                tool="get_item_by_id",
                arguments={"domain": domain, "contentType": content_type, "id": 123},
            ),
        ],
    )


def redirects_group(domain: str) -> ToolGroup:
    """Helpers for the domain's redirect map."""
    return ToolGroup(
        label=REDIRECTS_GROUP,
        tools=[
            VirtualTool(
                name="redirects.map",
                description="Fetch the redirects map for the domain",
                input_schema={
                    "type": "object",
                    "properties": {"domain": _domain_property(domain)},
                },
                tool="list_redirects",
                arguments={"domain": domain},
            ),
            VirtualTool(
                name="redirects.lookup",
                description="Find redirect target for a given fromPath (e.g., '/old/')",
                input_schema={
                    "type": "object",
                    "properties": {
                        "domain": _domain_property(domain),
                        "fromPath": {"type": "string"},
                    },
                    "required": ["fromPath"],
                },
                tool="lookup_redirect",
                arguments={"domain": domain, "fromPath": "/old/"},
            ),
        ],
    )


def search_group(domain: str) -> ToolGroup:
    """Helpers for site-wide search."""
    top = {"type": "integer", "default": DEFAULT_TOP}
    return ToolGroup(
        label=SEARCH_GROUP,
        tools=[
            VirtualTool(
                name="search.all",
                description="Search the entire site",
                input_schema={
                    "type": "object",
                    "properties": {
                        "domain": _domain_property(domain),
                        "q": {"type": "string"},
                        "top": dict(top),
                    },
                    "required": ["q"],
                },
                tool="search_content",
                arguments={"domain": domain, "q": "<query>", "top": DEFAULT_TOP},
            ),
            VirtualTool(
                name="search.by_type",
                description="Search and then filter by a result type (client-side filter)",
                input_schema={
                    "type": "object",
                    "properties": {
                        "domain": _domain_property(domain),
                        "q": {"type": "string"},
                        "type": {"type": "string", "description": "e.g., 'page','post','services'"},
                        "top": dict(top),
                    },
                    "required": ["q", "type"],
                },
                tool="search_content",
                arguments={"domain": domain, "q": "<query>", "type": "page", "top": DEFAULT_TOP},
            ),
        ],
    )


def build_catalog(
    domain: str,
    content_types: Mapping[str, Any],
    aliases: Mapping[str, str] = CONTENT_TYPE_ALIASES,
) -> ToolCatalog:
    """
    Expand a domain's content types into the virtual tool catalog.

    Only the keys of content_types matter. An alias is listed only when its
    target is one of those keys; aliases pointing elsewhere are dropped
    without a trace.

    Args:
        domain: The domain the catalog describes
        content_types: Content-types document (name -> metadata)
        aliases: Alias table (alias -> canonical name)

    Returns:
        ToolCatalog in contract order
    """
    groups = [content_type_group(domain, name) for name in sorted(content_types)]

    for alias, target in aliases.items():
        if target in content_types:
            groups.append(content_type_group(domain, target, label=alias))

    groups.append(redirects_group(domain))
    groups.append(search_group(domain))

    return ToolCatalog(domain=domain, groups=groups, aliases=aliases)
