"""
Unit tests for the virtual tool catalog builder.

Tests cover:
- Group order (canonical, aliases, helpers)
- Alias filtering by target presence
- Virtual tool names, schemas and call examples
- Deterministic serialization
"""

import json
from typing import Any

import pytest

from pylot_content.content.catalog import (
    REDIRECTS_GROUP,
    SEARCH_GROUP,
    build_catalog,
    content_type_group,
    redirects_group,
    search_group,
)

DOMAIN = "d.example"


def _tools_by_name(document: dict[str, Any]) -> dict[str, dict[str, Any]]:
    return {
        tool["name"]: tool
        for group in document["registry"]
        for tool in group["tools"]
    }


class TestCatalogOrder:
    """Tests for group ordering."""

    def test_posts_and_page(self) -> None:
        catalog = build_catalog(
            DOMAIN,
            {"posts": {}, "page": {}},
            {"blogs": "posts", "events": "mec-events"},
        )
        assert catalog.labels == ["page", "posts", "blogs", REDIRECTS_GROUP, SEARCH_GROUP]

    def test_default_aliases(self) -> None:
        catalog = build_catalog(DOMAIN, {"posts": {}, "mec-events": {}})
        assert catalog.labels == [
            "mec-events",
            "posts",
            "blogs",
            "blog",
            "events",
            "event",
            REDIRECTS_GROUP,
            SEARCH_GROUP,
        ]

    def test_no_content_types(self) -> None:
        catalog = build_catalog(DOMAIN, {})
        assert catalog.labels == [REDIRECTS_GROUP, SEARCH_GROUP]
        assert catalog.to_dict()["aliases"] == {
            "blogs": "posts",
            "blog": "posts",
            "events": "mec-events",
            "event": "mec-events",
        }

    def test_canonical_sorted_by_name(self) -> None:
        catalog = build_catalog(DOMAIN, {"services": {}, "faq": {}, "page": {}}, {})
        assert catalog.labels[:3] == ["faq", "page", "services"]

    def test_alias_with_absent_target_dropped(self) -> None:
        catalog = build_catalog(DOMAIN, {"page": {}}, {"blogs": "posts"})
        assert "blogs" not in catalog.labels

    def test_alias_with_falsy_metadata_kept(self) -> None:
        """Presence of the key is what counts, not its value."""
        catalog = build_catalog(DOMAIN, {"posts": 0}, {"blogs": "posts"})
        assert "blogs" in catalog.labels

    def test_group_count(self) -> None:
        catalog = build_catalog(DOMAIN, {"posts": {}, "page": {}}, {"blogs": "posts"})
        document = catalog.to_dict()
        assert len(document["registry"]) == 2 + 1 + 2
        assert sum(len(group["tools"]) for group in document["registry"]) == 3 * 3 + 2 + 2


class TestVirtualTools:
    """Tests for the generated virtual tools."""

    def test_content_type_trio(self) -> None:
        group = content_type_group(DOMAIN, "posts")
        assert [tool.name for tool in group.tools] == [
            "posts.list",
            "posts.get_by_slug",
            "posts.get_by_id",
        ]
        assert [tool.tool for tool in group.tools] == [
            "list_items",
            "get_item_by_slug",
            "get_item_by_id",
        ]

    def test_list_example(self) -> None:
        tool = content_type_group(DOMAIN, "posts").tools[0].to_dict()
        assert tool["call_example"] == {
            "method": "tools/call",
            "params": {
                "name": "list_items",
                "arguments": {"domain": DOMAIN, "contentType": "posts", "limit": 20, "offset": 0},
            },
        }
        assert tool["inputSchema"]["properties"]["limit"]["maximum"] == 100
        assert tool["inputSchema"]["properties"]["domain"]["default"] == DOMAIN

    def test_required_fields(self) -> None:
        tools = {tool.name: tool for tool in content_type_group(DOMAIN, "posts").tools}
        assert "required" not in tools["posts.list"].input_schema
        assert tools["posts.get_by_slug"].input_schema["required"] == ["slug"]
        assert tools["posts.get_by_id"].input_schema["required"] == ["id"]

    def test_example_placeholders(self) -> None:
        tools = {tool.name: tool for tool in content_type_group(DOMAIN, "posts").tools}
        assert tools["posts.get_by_slug"].arguments["slug"] == "<slug>"
        assert tools["posts.get_by_id"].arguments["id"] == 123

    def test_alias_examples_use_canonical_type(self) -> None:
        document = build_catalog(DOMAIN, {"posts": {}}, {"blogs": "posts"}).to_dict()
        tools = _tools_by_name(document)
        for name in ("blogs.list", "blogs.get_by_slug", "blogs.get_by_id"):
            assert tools[name]["call_example"]["params"]["arguments"]["contentType"] == "posts"
        assert tools["blogs.list"]["description"] == "List blogs (paginated)"

    def test_redirect_helpers(self) -> None:
        tools = {tool.name: tool for tool in redirects_group(DOMAIN).tools}
        assert tools["redirects.map"].tool == "list_redirects"
        assert tools["redirects.map"].arguments == {"domain": DOMAIN}
        assert tools["redirects.lookup"].tool == "lookup_redirect"
        assert tools["redirects.lookup"].arguments == {"domain": DOMAIN, "fromPath": "/old/"}

    def test_search_helpers(self) -> None:
        tools = {tool.name: tool for tool in search_group(DOMAIN).tools}
        assert tools["search.all"].arguments == {"domain": DOMAIN, "q": "<query>", "top": 20}
        assert tools["search.by_type"].arguments["type"] == "page"
        assert tools["search.by_type"].input_schema["required"] == ["q", "type"]

    @pytest.mark.parametrize("content_types", [{}, {"posts": {}}, {"page": {}, "faq": {}}])
    def test_examples_name_real_tools(self, content_types: dict[str, Any]) -> None:
        from pylot_content.tools import default_registry

        document = build_catalog(DOMAIN, content_types).to_dict()
        for tool in _tools_by_name(document).values():
            assert tool["call_example"]["params"]["name"] in default_registry
            assert tool["call_example"]["params"]["arguments"]["domain"] == DOMAIN


class TestDeterminism:
    """Tests for stable output."""

    def test_same_input_same_bytes(self) -> None:
        first = build_catalog(DOMAIN, {"posts": {}, "page": {}, "mec-events": {}})
        second = build_catalog(DOMAIN, {"mec-events": {}, "page": {}, "posts": {}})
        assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())

    def test_document_keys(self) -> None:
        document = build_catalog(DOMAIN, {"posts": {}}).to_dict()
        assert list(document) == ["domain", "registry", "aliases"]
        assert document["domain"] == DOMAIN
        assert list(document["registry"][0]) == ["contentType", "tools"]
        assert list(document["registry"][0]["tools"][0]) == [
            "name",
            "description",
            "inputSchema",
            "call_example",
        ]
