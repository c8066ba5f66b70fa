"""
Content tools for pylot-content.

This module provides the generic item tools:
- list_content_types: Raw content-types document for a domain
- list_items: Paginated summaries for a content type
- get_item_by_slug: One item by its slug
- get_item_by_id: One item by its mvk_id (linear scan)

Every item tool resolves aliases first ("blogs" -> "posts"), fetches the
whole slug map for the canonical type, and works on it in memory.
"""

import logging
from typing import Any

from pylot_content.content import (
    ItemDetail,
    find_by_id,
    paginate,
    resolve_content_type,
    summarize_item,
)
from pylot_content.errors import ItemNotFoundError
from pylot_content.schema import (
    GetItemByIdArgs,
    GetItemBySlugArgs,
    ListItemsArgs,
    ToolArgs,
)
from pylot_content.tools.base import Tool, ToolContext
from pylot_content.tools.registry import ToolRegistry, default_registry

logger = logging.getLogger(__name__)


class ListContentTypesTool(Tool):
    """
    List available content types for a domain.

    Returns the upstream content-types document unmodified.
    """

    args_model = ToolArgs

    @property
    def name(self) -> str:
        return "list_content_types"

    @property
    def description(self) -> str:
        return "List available content types for a given domain"

    def execute(self, args: ToolArgs, context: ToolContext) -> Any:
        return context.client.content_types(context.domain_for(args))


class ListItemsTool(Tool):
    """
    List items for a content type, one page at a time.

    Example:
        args = {"contentType": "blogs", "limit": 5, "offset": 10}
        page = tool.run(args, context)
        # {"total": 42, "limit": 5, "offset": 10, "items": [...]}
    """

    args_model = ListItemsArgs

    @property
    def name(self) -> str:
        return "list_items"

    @property
    def description(self) -> str:
        return "List items for a contentType (paginated), returning slug, mvk_id, title, url"

    def execute(self, args: ListItemsArgs, context: ToolContext) -> Any:
        resolved = resolve_content_type(args.content_type)
        content_map = context.client.content_map(context.domain_for(args), resolved)
        return paginate(content_map, args.limit, args.offset).to_dict()


class GetItemBySlugTool(Tool):
    """Get a single item by slug."""

    args_model = GetItemBySlugArgs

    @property
    def name(self) -> str:
        return "get_item_by_slug"

    @property
    def description(self) -> str:
        return "Get a single item by slug for a given contentType"

    def execute(self, args: GetItemBySlugArgs, context: ToolContext) -> Any:
        resolved = resolve_content_type(args.content_type)
        content_map = context.client.content_map(context.domain_for(args), resolved)

        node = content_map.get(args.slug)
        if node is None:
            raise ItemNotFoundError(key_name="slug", key=args.slug, content_type=resolved)

        return ItemDetail(normalized=summarize_item(args.slug, node), raw=node).to_dict()


class GetItemByIdTool(Tool):
    """
    Get a single item by mvk_id.

    Scans the content map in order, comparing the node's mvk_id and then its
    mvk_item_meta.mvk_id. The first match wins.
    """

    args_model = GetItemByIdArgs

    @property
    def name(self) -> str:
        return "get_item_by_id"

    @property
    def description(self) -> str:
        return "Get a single item by mvk_id for a given contentType (scans the map)"

    def execute(self, args: GetItemByIdArgs, context: ToolContext) -> Any:
        resolved = resolve_content_type(args.content_type)
        content_map = context.client.content_map(context.domain_for(args), resolved)

        match = find_by_id(content_map, args.item_id)
        if match is None:
            raise ItemNotFoundError(key_name="mvk_id", key=args.item_id, content_type=resolved)

        slug, node = match
        logger.debug("mvk_id %s resolved to slug %s in %s", args.item_id, slug, resolved)
        return ItemDetail(normalized=summarize_item(slug, node), raw=node).to_dict()


def register_content_tools(registry: ToolRegistry | None = None) -> None:
    """Register all content tools (the default registry unless one is given)."""
    target = registry if registry is not None else default_registry
    target.register(ListContentTypesTool())
    target.register(ListItemsTool())
    target.register(GetItemBySlugTool())
    target.register(GetItemByIdTool())
