"""
Unit tests for the search tool.

Tests:
    - summarize_search filtering, truncation and counts
    - SearchHit trimming
    - search_content request and blank-term rejection
"""

from typing import Any

import pytest

from pylot_content.errors import InvalidInputError
from pylot_content.tools import SearchContentTool, ToolContext
from pylot_content.tools.search import SearchHit, summarize_search


@pytest.fixture
def search_payload() -> dict[str, Any]:
    return {
        "status": 200,
        "result_count": 3,
        "results": [
            {
                "id": 1,
                "title": "Coffee guide",
                "url": "https://www.example.com/coffee/",
                "type": "post",
                "excerpt": "All about beans",
                "thumbnail": {"src": "/c.png"},
                "relevance": 0.9,
            },
            {"id": 2, "title": "About", "url": "/about/", "type": "page", "relevance": 0.5},
            {"id": 3, "title": "Roasting", "url": "/roasting/", "type": "post", "excerpt": None},
        ],
    }


class TestSearchHit:
    """Tests for SearchHit.from_result()."""

    def test_full_result(self, search_payload: dict[str, Any]) -> None:
        hit = SearchHit.from_result(search_payload["results"][0])
        assert hit == SearchHit(
            id=1,
            title="Coffee guide",
            url="https://www.example.com/coffee/",
            type="post",
            excerpt="All about beans",
            relevance=0.9,
            has_thumbnail=True,
        )

    def test_sparse_result(self) -> None:
        hit = SearchHit.from_result({})
        assert hit.excerpt == ""
        assert hit.relevance is None
        assert hit.has_thumbnail is False

    def test_empty_thumbnail(self) -> None:
        assert SearchHit.from_result({"thumbnail": ""}).has_thumbnail is False


class TestSummarizeSearch:
    """Tests for summarize_search()."""

    def test_all_results(self, search_payload: dict[str, Any]) -> None:
        summary = summarize_search(search_payload, top=20)
        assert summary["total_reported"] == 3
        assert summary["returned"] == 3
        assert [item["id"] for item in summary["items"]] == [1, 2, 3]

    def test_type_filter(self, search_payload: dict[str, Any]) -> None:
        summary = summarize_search(search_payload, top=20, result_type="post")
        assert [item["id"] for item in summary["items"]] == [1, 3]
        assert summary["total_reported"] == 3
        assert summary["returned"] == 2

    def test_top_after_filter(self, search_payload: dict[str, Any]) -> None:
        summary = summarize_search(search_payload, top=1, result_type="post")
        assert [item["id"] for item in summary["items"]] == [1]

    def test_top(self, search_payload: dict[str, Any]) -> None:
        assert summarize_search(search_payload, top=2)["returned"] == 2

    def test_missing_result_count(self) -> None:
        summary = summarize_search({"results": [{"id": 1}]}, top=20)
        assert summary["total_reported"] == 1

    def test_missing_results(self) -> None:
        assert summarize_search({}, top=20) == {"total_reported": 0, "returned": 0, "items": []}

    def test_non_object_results_skipped(self) -> None:
        summary = summarize_search({"results": ["junk", {"id": 4}]}, top=20)
        assert [item["id"] for item in summary["items"]] == [4]

    def test_item_keys(self, search_payload: dict[str, Any]) -> None:
        item = summarize_search(search_payload, top=1)["items"][0]
        assert list(item) == ["id", "title", "url", "type", "excerpt", "relevance", "has_thumbnail"]


class TestSearchContentTool:
    """Tests for search_content."""

    def test_search(self, context: ToolContext, fake_api, search_payload: dict[str, Any]) -> None:
        fake_api.add_json("search/", search_payload)
        result = SearchContentTool().run({"q": "coffee", "type": "post", "top": 5}, context)

        assert result["raw"] == search_payload
        assert result["normalized"]["returned"] == 2
        request = fake_api.requests[0]
        assert request.url.params["site"] == "www.example.com"
        assert request.url.params["term"] == "coffee"

    def test_domain_override(self, context: ToolContext, fake_api) -> None:
        fake_api.add_json("search/", {"results": []})
        SearchContentTool().run({"q": "x", "domain": "other.test"}, context)
        assert fake_api.requests[0].url.params["site"] == "other.test"

    @pytest.mark.parametrize("q", ["", "   "])
    def test_blank_term_rejected_without_request(self, context: ToolContext, fake_api, q: str) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            SearchContentTool().run({"q": q}, context)
        assert "q is required" in exc_info.value.message
        assert fake_api.request_count == 0

    def test_missing_term(self, context: ToolContext, fake_api) -> None:
        with pytest.raises(InvalidInputError):
            SearchContentTool().run({}, context)
        assert fake_api.request_count == 0
