"""
Tools module for pylot-content.

Every MCP tool the server exposes lives here, registered in a static table:
    - content_tools_for_domain: Virtual tool catalog for a domain
    - list_content_types: Content types published by a domain
    - list_items: Paginated item summaries for a content type
    - get_item_by_slug: One item by slug
    - get_item_by_id: One item by mvk_id
    - list_redirects: Redirect map for a domain
    - lookup_redirect: Redirect target for one path
    - search_content: Site-wide search

Architecture:
    - Tool: Abstract base class defining the tool interface
    - ToolRegistry: Name -> tool table used for dispatch
    - ToolContext: Runtime context passed to tools (settings, client)
"""

from pylot_content.tools.base import Tool, ToolContext
from pylot_content.tools.catalog import ContentToolsForDomainTool, register_catalog_tools
from pylot_content.tools.content import (
    GetItemByIdTool,
    GetItemBySlugTool,
    ListContentTypesTool,
    ListItemsTool,
    register_content_tools,
)
from pylot_content.tools.redirects import (
    ListRedirectsTool,
    LookupRedirectTool,
    register_redirect_tools,
)
from pylot_content.tools.registry import ToolRegistry, default_registry
from pylot_content.tools.search import SearchContentTool, register_search_tools


def register_all_tools(registry: ToolRegistry | None = None) -> None:
    """Register every built-in tool, in the order the server lists them."""
    register_catalog_tools(registry)
    register_content_tools(registry)
    register_redirect_tools(registry)
    register_search_tools(registry)


# Register built-in tools
register_all_tools()

__all__ = [
    "Tool",
    "ToolContext",
    "ToolRegistry",
    "default_registry",
    "register_all_tools",
    "ContentToolsForDomainTool",
    "ListContentTypesTool",
    "ListItemsTool",
    "GetItemBySlugTool",
    "GetItemByIdTool",
    "ListRedirectsTool",
    "LookupRedirectTool",
    "SearchContentTool",
]
