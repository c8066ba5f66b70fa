"""
pylot-content - Read-only MCP adapter for a headless content API.

pylot-content exposes a content API (content types, items, redirects, search)
as Model Context Protocol tools. It provides:
- Generic read tools that fetch, trim and page upstream JSON
- Alias-aware content type resolution (blogs -> posts, events -> mec-events)
- A per-domain catalog of virtual tools with ready-to-send call examples

Example usage:
    $ pylot-content serve
    $ pylot-content catalog www.example.com
    $ pylot-content call list_items --arg contentType=blogs --arg limit=5
"""

__version__ = "0.2.0"
__author__ = "pylot-content Contributors"

__all__ = [
    "__version__",
    "__author__",
]
