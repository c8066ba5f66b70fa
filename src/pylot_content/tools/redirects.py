"""
Redirect tools for pylot-content.

- list_redirects: The raw from-path -> to-path map for a domain
- lookup_redirect: A single from-path lookup; a miss is {"to": null}, not an error
"""

from typing import Any

from pylot_content.schema import LookupRedirectArgs, ToolArgs
from pylot_content.tools.base import Tool, ToolContext
from pylot_content.tools.registry import ToolRegistry, default_registry


class ListRedirectsTool(Tool):
    """Return the redirects map for a domain."""

    args_model = ToolArgs

    @property
    def name(self) -> str:
        return "list_redirects"

    @property
    def description(self) -> str:
        return "Return the redirects map for a domain"

    def execute(self, args: ToolArgs, context: ToolContext) -> Any:
        return context.client.redirects(context.domain_for(args))


class LookupRedirectTool(Tool):
    """Look up where one path redirects to."""

    args_model = LookupRedirectArgs

    @property
    def name(self) -> str:
        return "lookup_redirect"

    @property
    def description(self) -> str:
        return "Look up a single redirect by 'from' path (e.g., '/old-url/')"

    def execute(self, args: LookupRedirectArgs, context: ToolContext) -> Any:
        redirect_map = context.client.redirects(context.domain_for(args))
        return {"from": args.from_path, "to": redirect_map.get(args.from_path)}


def register_redirect_tools(registry: ToolRegistry | None = None) -> None:
    """Register all redirect tools (the default registry unless one is given)."""
    target = registry if registry is not None else default_registry
    target.register(ListRedirectsTool())
    target.register(LookupRedirectTool())
