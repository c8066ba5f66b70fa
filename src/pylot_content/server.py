"""
MCP server for pylot-content.

Binds the static tool table to the Model Context Protocol using the low-level
mcp Server, so the tool listing carries exactly the schemas our tools declare.

Tools Provided:
- content_tools_for_domain, list_content_types, list_items, get_item_by_slug,
  get_item_by_id, list_redirects, lookup_redirect, search_content

Resources Provided:
- resource://content/{default_domain}/types - Content types document
- resource://content/{default_domain}/redirects - Redirect map

Tool handlers are synchronous; each call runs in a worker thread so the event
loop only waits on the outbound HTTP request. Errors raised by a tool become
MCP tool errors carrying the error message.
"""

import functools
import json
import logging
from collections.abc import Callable
from typing import Any

import anyio
from mcp import types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

from pylot_content import __version__
from pylot_content.client import ContentApiClient
from pylot_content.errors import ContentApiError
from pylot_content.schema import Settings
from pylot_content.tools import ToolContext, ToolRegistry, default_registry

logger = logging.getLogger(__name__)

SERVER_NAME = "pylot-content-api"
JSON_MIME_TYPE = "application/json"


def resource_uris(domain: str) -> dict[str, str]:
    """URIs of the descriptive resources for a domain."""
    return {
        "types": f"resource://content/{domain}/types",
        "redirects": f"resource://content/{domain}/redirects",
    }


def to_json(value: Any) -> str:
    """Serialize a tool result for the protocol envelope."""
    return json.dumps(value, indent=2, ensure_ascii=False)


def render_result(value: Any) -> list[types.TextContent]:
    """Wrap a JSON-ready tool result as MCP content."""
    return [types.TextContent(type="text", text=to_json(value))]


def create_server(
    context: ToolContext,
    registry: ToolRegistry = default_registry,
) -> Server:
    """
    Build the MCP server around a tool context.

    Args:
        context: Settings and upstream client shared by every call
        registry: Tool table to expose

    Returns:
        A configured low-level mcp Server (not yet running)
    """
    server = Server(SERVER_NAME, version=__version__)
    domain = context.settings.default_domain
    uris = resource_uris(domain)
    resource_fetchers: dict[str, Callable[[str], Any]] = {
        uris["types"]: context.client.content_types,
        uris["redirects"]: context.client.redirects,
    }

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        """List every registered tool with its input schema."""
        return [types.Tool(**entry) for entry in registry.describe(domain)]

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        """Dispatch a tool call through the registry."""
        logger.info("%s called with %s", name, arguments or {})

        try:
            result = await anyio.to_thread.run_sync(
                functools.partial(registry.dispatch, name, arguments, context)
            )
        except ContentApiError as e:
            logger.warning("%s failed: %s", name, e.message)
            raise

        return render_result(result)

    @server.list_resources()
    async def list_resources() -> list[types.Resource]:
        """List the default domain's descriptive resources."""
        return [
            types.Resource(
                uri=AnyUrl(uris["types"]),
                name="content-types",
                description="Content types for default domain",
                mimeType=JSON_MIME_TYPE,
            ),
            types.Resource(
                uri=AnyUrl(uris["redirects"]),
                name="redirects",
                description="Redirect map for default domain",
                mimeType=JSON_MIME_TYPE,
            ),
        ]

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        """Fetch a resource document from upstream."""
        fetch = resource_fetchers.get(str(uri))
        if fetch is None:
            msg = f"Unknown resource: {uri}"
            raise ValueError(msg)

        data = await anyio.to_thread.run_sync(fetch, domain)
        return [ReadResourceContents(content=to_json(data), mime_type=JSON_MIME_TYPE)]

    return server


async def serve_stdio(server: Server) -> None:
    """Run a server over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def run_server(settings: Settings) -> None:
    """
    Entry point used by `pylot-content serve`.

    Builds the client and context from settings, then blocks serving stdio.
    """
    with ContentApiClient(settings) as client:
        context = ToolContext(settings=settings, client=client)
        server = create_server(context)
        logger.info(
            "%s over stdio | base=%s version=%s",
            SERVER_NAME,
            settings.api_base,
            settings.api_version,
        )
        anyio.run(serve_stdio, server)
