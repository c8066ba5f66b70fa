"""
Item normalization and pagination.

Content maps come back from the API as {slug: node} objects whose node shape
varies by content type. Nodes stay plain dicts; the accessors below read the
handful of optional fields the adapter cares about.

Title fallback order (first non-null wins):
    1. mvk_item_content.title   (editorial title)
    2. title                    (flat title)
    3. mvk_item_seo.seo_title   (SEO title)
    4. the slug itself
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from itertools import islice
from typing import Any


def node_field(node: Any, *path: str) -> Any:
    """
    Read a nested optional field from a raw node.

    Returns None as soon as a step is missing or the value at that step is
    not a JSON object.

    Example:
        >>> node_field({"mvk_item_meta": {"url": "/a/"}}, "mvk_item_meta", "url")
        '/a/'
    """
    value = node
    for key in path:
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


def item_id(node: Any) -> Any:
    """The node's own mvk_id, or None."""
    return node_field(node, "mvk_id")


def item_title(node: Any, slug: str) -> Any:
    """First present title in fallback order, defaulting to the slug."""
    for path in (("mvk_item_content", "title"), ("title",), ("mvk_item_seo", "seo_title")):
        title = node_field(node, *path)
        if title is not None:
            return title
    return slug


def item_url(node: Any) -> Any:
    """Public URL from the item meta block, or None."""
    return node_field(node, "mvk_item_meta", "url")


def scan_id(node: Any) -> Any:
    """Identifier used when scanning by id: top-level first, then item meta."""
    value = item_id(node)
    if value is None:
        value = node_field(node, "mvk_item_meta", "mvk_id")
    return value


@dataclass(frozen=True)
class ItemSummary:
    """
    Lightweight view of one content item.

    Attributes:
        slug: Key of the item in its content map
        mvk_id: Upstream identifier, or None
        title: Display title (never None)
        url: Public URL, or None
    """

    slug: str
    mvk_id: Any = None
    title: Any = ""
    url: Any = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ItemDetail:
    """A normalized summary together with the untouched upstream node."""

    normalized: ItemSummary
    raw: Any

    def to_dict(self) -> dict[str, Any]:
        return {"normalized": self.normalized.to_dict(), "raw": self.raw}


@dataclass(frozen=True)
class Page:
    """
    One page of a content map.

    Attributes:
        total: Number of entries in the whole map
        limit: Requested page size
        offset: Requested start index
        items: Summaries for entries [offset, offset + limit)
    """

    total: int
    limit: int
    offset: int
    items: list[ItemSummary] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "limit": self.limit,
            "offset": self.offset,
            "items": [item.to_dict() for item in self.items],
        }


def summarize_item(slug: str, node: Any) -> ItemSummary:
    """Build the summary record for one raw node."""
    return ItemSummary(
        slug=slug,
        mvk_id=item_id(node),
        title=item_title(node, slug),
        url=item_url(node),
    )


def paginate(content_map: Mapping[str, Any], limit: int, offset: int) -> Page:
    """
    Slice a slug map into a page.

    The map's own iteration order (the order of the upstream JSON object) is
    the item order. An offset past the end yields an empty page.
    """
    entries = islice(content_map.items(), offset, offset + limit)
    return Page(
        total=len(content_map),
        limit=limit,
        offset=offset,
        items=[summarize_item(slug, node) for slug, node in entries],
    )


def find_by_id(content_map: Mapping[str, Any], wanted: int) -> tuple[str, Any] | None:
    """
    Return the first (slug, node) whose identifier equals wanted.

    Duplicate identifiers are not an error; iteration order decides.
    """
    for slug, node in content_map.items():
        candidate = scan_id(node)
        if candidate == wanted and not isinstance(candidate, bool):
            return slug, node
    return None
