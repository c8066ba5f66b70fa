"""
Pytest configuration and fixtures for pylot-content tests.

The content API is faked with httpx.MockTransport: FakeContentApi serves
canned JSON documents by path and records every request it sees.
"""

import json
from collections.abc import Generator
from typing import Any

import httpx
import pytest

from pylot_content.client import ContentApiClient
from pylot_content.schema import Settings
from pylot_content.tools import ToolContext

API_BASE = "https://content.test/mvk-api"
DOMAIN = "www.example.com"
API_PREFIX = "/mvk-api/v1/"


class FakeContentApi:
    """In-memory stand-in for the content API."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, bytes, dict[str, str]]] = {}
        self.requests: list[httpx.Request] = []

    def add_json(self, path: str, payload: Any, status_code: int = 200) -> None:
        """Serve payload as JSON for a path relative to the versioned base."""
        self.routes[path] = (
            status_code,
            json.dumps(payload).encode(),
            {"Content-Type": "application/json"},
        )

    def add_text(self, path: str, text: str, status_code: int = 200) -> None:
        """Serve a raw text body for a path."""
        self.routes[path] = (status_code, text.encode(), {"Content-Type": "text/plain"})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix(API_PREFIX)
        route = self.routes.get(path)
        if route is None:
            return httpx.Response(404, text=f"Not Found: {path}")
        status_code, body, headers = route
        return httpx.Response(status_code, content=body, headers=headers)

    @property
    def request_count(self) -> int:
        return len(self.requests)


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at the fake API."""
    return Settings(api_base=API_BASE, api_version="v1", default_domain=DOMAIN)


@pytest.fixture
def fake_api() -> FakeContentApi:
    """An empty fake API; tests add the routes they need."""
    return FakeContentApi()


@pytest.fixture
def client(settings: Settings, fake_api: FakeContentApi) -> Generator[ContentApiClient, None, None]:
    """A client wired to the fake API."""
    with ContentApiClient(settings, transport=httpx.MockTransport(fake_api.handler)) as c:
        yield c


@pytest.fixture
def context(settings: Settings, client: ContentApiClient) -> ToolContext:
    """Tool context using the fake-API client."""
    return ToolContext(settings=settings, client=client)


@pytest.fixture
def content_types() -> dict[str, Any]:
    """Content-types document with two canonical types."""
    return {
        "posts": {"label": "Posts", "count": 4},
        "page": {"label": "Pages", "count": 1},
    }


@pytest.fixture
def posts_map() -> dict[str, Any]:
    """A posts slug map covering every title source."""
    return {
        "hello-world": {
            "mvk_id": 101,
            "title": "Flat Hello",
            "mvk_item_content": {"title": "Hello World"},
            "mvk_item_meta": {"url": "https://www.example.com/hello-world/"},
        },
        "second-post": {
            "mvk_id": 102,
            "title": "Second Post",
        },
        "seo-only": {
            "mvk_item_meta": {"mvk_id": 103},
            "mvk_item_seo": {"seo_title": "SEO Title"},
        },
        "bare": {},
    }


@pytest.fixture
def seeded_api(
    fake_api: FakeContentApi,
    content_types: dict[str, Any],
    posts_map: dict[str, Any],
) -> FakeContentApi:
    """Fake API serving content types, posts, pages and redirects for DOMAIN."""
    fake_api.add_json(f"content/{DOMAIN}/content_types.json", content_types)
    fake_api.add_json(f"content/{DOMAIN}/posts.json", posts_map)
    fake_api.add_json(
        f"content/{DOMAIN}/page.json",
        {"about": {"mvk_id": 7, "title": "About us"}},
    )
    fake_api.add_json(
        f"content/{DOMAIN}/redirects.json",
        {"/old/": "/new/", "/blog/": "/posts/"},
    )
    return fake_api
