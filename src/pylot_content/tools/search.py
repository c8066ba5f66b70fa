"""
Search tool for pylot-content.

search_content calls GET /search/?site={domain}&term={q} and returns both a
compact summary and the untouched upstream payload.

Upstream payload:
    {"status": 200, "result_count": 3, "results": [
        {"id": 1, "title": "...", "url": "...", "type": "page",
         "excerpt": "...", "thumbnail": {...}, "relevance": 0.9}, ...]}

Filtering by result type and truncation to `top` happen client-side, in that
order. total_reported is what the API claims, returned is what we kept.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from pylot_content.errors import InvalidInputError
from pylot_content.schema import SearchContentArgs
from pylot_content.tools.base import Tool, ToolContext
from pylot_content.tools.registry import ToolRegistry, default_registry


@dataclass(frozen=True)
class SearchHit:
    """One search result, trimmed for agents."""

    id: Any
    title: Any
    url: Any
    type: Any
    excerpt: Any = ""
    relevance: Any = None
    has_thumbnail: bool = False

    @classmethod
    def from_result(cls, result: Mapping[str, Any]) -> "SearchHit":
        excerpt = result.get("excerpt")
        return cls(
            id=result.get("id"),
            title=result.get("title"),
            url=result.get("url"),
            type=result.get("type"),
            excerpt="" if excerpt is None else excerpt,
            relevance=result.get("relevance"),
            has_thumbnail=bool(result.get("thumbnail")),
        )


def summarize_search(
    payload: Mapping[str, Any],
    top: int,
    result_type: str | None = None,
) -> dict[str, Any]:
    """
    Filter, truncate and trim a search payload.

    Args:
        payload: Upstream search response
        top: Maximum number of hits to keep
        result_type: Keep only results whose type equals this, if given

    Returns:
        {"total_reported", "returned", "items"}
    """
    results = [r for r in payload.get("results") or [] if isinstance(r, Mapping)]
    if result_type:
        results = [r for r in results if r.get("type") == result_type]
    results = results[:top]

    reported = payload.get("result_count")
    return {
        "total_reported": len(results) if reported is None else reported,
        "returned": len(results),
        "items": [asdict(SearchHit.from_result(r)) for r in results],
    }


class SearchContentTool(Tool):
    """
    Full-site search.

    A blank search term is rejected before any request is made.
    """

    args_model = SearchContentArgs

    @property
    def name(self) -> str:
        return "search_content"

    @property
    def description(self) -> str:
        return "Full-site search via GET /search/?site={domain}&term={q}"

    def execute(self, args: SearchContentArgs, context: ToolContext) -> Any:
        if not args.q.strip():
            raise InvalidInputError(tool=self.name, field_name="q", reason="q is required")

        payload = context.client.search(context.domain_for(args), args.q)
        return {
            "normalized": summarize_search(payload, args.top, args.result_type),
            "raw": payload,
        }


def register_search_tools(registry: ToolRegistry | None = None) -> None:
    """Register the search tool (the default registry unless one is given)."""
    target = registry if registry is not None else default_registry
    target.register(SearchContentTool())
