"""
Catalog tool for pylot-content.

content_tools_for_domain fetches the domain's content types and expands them
into the virtual tool catalog (see pylot_content.content.catalog).
"""

from typing import Any

from pylot_content.content import CONTENT_TYPE_ALIASES, build_catalog
from pylot_content.schema import ToolArgs
from pylot_content.tools.base import Tool, ToolContext
from pylot_content.tools.registry import ToolRegistry, default_registry


class ContentToolsForDomainTool(Tool):
    """Return domain-driven virtual tools based on available content types."""

    args_model = ToolArgs

    @property
    def name(self) -> str:
        return "content_tools_for_domain"

    @property
    def description(self) -> str:
        return (
            "Return domain-driven virtual tools based on available content types. "
            "Includes alias-mapped tools (e.g., blogs -> posts, events -> mec-events)."
        )

    def execute(self, args: ToolArgs, context: ToolContext) -> Any:
        domain = context.domain_for(args)
        content_types = context.client.content_types(domain)
        return build_catalog(domain, content_types, CONTENT_TYPE_ALIASES).to_dict()


def register_catalog_tools(registry: ToolRegistry | None = None) -> None:
    """Register the catalog tool (the default registry unless one is given)."""
    target = registry if registry is not None else default_registry
    target.register(ContentToolsForDomainTool())
