"""
Upstream client for the headless content API.

This module wraps the only network surface of the adapter: single HTTP GET
requests returning JSON.

Behaviour:
    - URLs are {api_base}/{api_version}/{path}, leading slashes on path dropped
    - Every request carries Accept: application/json
    - Non-2xx responses raise UpstreamError with a 200-character body snippet
    - Bodies that are not JSON raise UpstreamParseError
    - Redirects are followed; otherwise one attempt per call, no retry, no caching

Usage:
    from pylot_content.client import ContentApiClient
    from pylot_content.schema import load_settings

    with ContentApiClient(load_settings()) as client:
        types = client.content_types("www.example.com")
"""

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx

from pylot_content.errors import (
    UpstreamConnectionError,
    UpstreamError,
    UpstreamParseError,
)
from pylot_content.schema import Settings

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Accept": "application/json"}


def encode_segment(value: str) -> str:
    """Percent-encode a value for use as a single path or query component."""
    return quote(value, safe="!*'()")


class ContentApiClient:
    """
    Read-only client for the content API.

    The httpx.Client is created on first use and shared by every call made
    through this instance; it holds no state besides its connection pool.

    Example:
        client = ContentApiClient(settings)
        posts = client.content_map("www.example.com", "posts")
        client.close()
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Base URL, version and timeout
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.settings = settings
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.settings.timeout_seconds,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "ContentApiClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Core request path
    # -------------------------------------------------------------------------

    def url_for(self, path: str) -> str:
        """Build the absolute URL for a path relative to the versioned base."""
        return f"{self.settings.api_base}/{self.settings.api_version}/{path.lstrip('/')}"

    def fetch_json(self, path: str) -> Any:
        """
        GET a path and decode the JSON body.

        Args:
            path: Path relative to {api_base}/{api_version}/

        Returns:
            The decoded JSON value

        Raises:
            UpstreamConnectionError: No response was received
            UpstreamError: The response status was not 2xx
            UpstreamParseError: The body was not valid JSON
        """
        url = self.url_for(path)
        logger.debug("GET %s", url)

        try:
            response = self._get_client().get(url, headers=JSON_HEADERS)
        except httpx.RequestError as e:
            raise UpstreamConnectionError(url=url, underlying_error=str(e)) from e

        if not response.is_success:
            raise UpstreamError(
                status_code=response.status_code,
                reason=response.reason_phrase,
                url=url,
                body=response.text,
            )

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise UpstreamParseError(
                status_code=response.status_code,
                reason=response.reason_phrase,
                url=url,
                body=response.text,
                detail=str(e),
            ) from e

    def fetch_mapping(self, path: str) -> dict[str, Any]:
        """
        GET a path whose body must be a JSON object.

        Raises:
            UpstreamParseError: The body decoded to something other than an object
        """
        data = self.fetch_json(path)
        if not isinstance(data, dict):
            raise UpstreamParseError(
                url=self.url_for(path),
                detail=f"expected a JSON object, got {type(data).__name__}",
            )
        return data

    # -------------------------------------------------------------------------
    # Endpoints
    # -------------------------------------------------------------------------

    def content_types(self, domain: str) -> dict[str, Any]:
        """Content type name -> metadata for a domain."""
        return self.fetch_mapping(f"content/{encode_segment(domain)}/content_types.json")

    def content_map(self, domain: str, content_type: str) -> dict[str, Any]:
        """Slug -> item node for one content type (canonical name expected)."""
        return self.fetch_mapping(
            f"content/{encode_segment(domain)}/{encode_segment(content_type)}.json"
        )

    def redirects(self, domain: str) -> dict[str, Any]:
        """From-path -> to-path redirect map for a domain."""
        return self.fetch_mapping(f"content/{encode_segment(domain)}/redirects.json")

    def search(self, domain: str, term: str) -> dict[str, Any]:
        """Site-wide search payload for a term."""
        return self.fetch_mapping(
            f"search/?site={encode_segment(domain)}&term={encode_segment(term)}"
        )
