"""
Content model helpers for pylot-content.

This package holds the pure, network-free parts of the adapter:
    - aliases: friendly content type names -> canonical names
    - normalize: raw item nodes -> summaries, slug maps -> pages
    - catalog: content types -> domain-specific virtual tool catalog
"""

from pylot_content.content.aliases import CONTENT_TYPE_ALIASES, resolve_content_type
from pylot_content.content.catalog import ToolCatalog, ToolGroup, VirtualTool, build_catalog
from pylot_content.content.normalize import (
    ItemDetail,
    ItemSummary,
    Page,
    find_by_id,
    paginate,
    summarize_item,
)

__all__ = [
    "CONTENT_TYPE_ALIASES",
    "resolve_content_type",
    "ItemDetail",
    "ItemSummary",
    "Page",
    "find_by_id",
    "paginate",
    "summarize_item",
    "ToolCatalog",
    "ToolGroup",
    "VirtualTool",
    "build_catalog",
]
