"""
Schema definitions for pylot-content.

This module defines the Pydantic models for everything that enters the
adapter from outside:
- Settings: Where the content API lives and which domain to default to
- Tool argument models: What each MCP tool accepts

Derived output records (item summaries, pages, catalog descriptors) are plain
dataclasses living next to the code that builds them.

Design Decisions:
    - Models are immutable (frozen=True)
    - Tool arguments use the wire names (contentType, fromPath) as aliases
    - Lax validation: "20" is accepted for an integer field, nothing more
"""

import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_API_BASE = "https://api.mypylot.io/mvk-api"
DEFAULT_API_VERSION = "v1"
DEFAULT_DOMAIN = "www.imaginuity.com"

# Settings field -> environment variable
ENV_VARS: dict[str, str] = {
    "api_base": "CONTENT_API_BASE",
    "api_version": "CONTENT_API_VERSION",
    "default_domain": "DEFAULT_DOMAIN",
    "timeout_seconds": "CONTENT_API_TIMEOUT",
    "log_level": "CONTENT_API_LOG_LEVEL",
}

DEFAULT_LIMIT = 20
MAX_LIMIT = 100
DEFAULT_TOP = 20


# =============================================================================
# Settings
# =============================================================================


class Settings(BaseModel):
    """
    Process-wide configuration.

    Built once at process entry and handed to the client, the tool context
    and the server. Nothing reads the environment after that.

    Attributes:
        api_base: Base URL of the content API (no trailing slash)
        api_version: Version path segment (e.g., "v1")
        default_domain: Domain used when a tool call omits one
        timeout_seconds: HTTP timeout; None waits indefinitely
        log_level: Logging level name for the stderr handler
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_base: str = Field(
        default=DEFAULT_API_BASE,
        description="Base URL of the content API",
        min_length=1,
    )
    api_version: str = Field(
        default=DEFAULT_API_VERSION,
        description="API version path segment",
        min_length=1,
    )
    default_domain: str = Field(
        default=DEFAULT_DOMAIN,
        description="Domain used when a tool call omits one",
        min_length=1,
    )
    timeout_seconds: float | None = Field(
        default=None,
        description="HTTP timeout in seconds (None = no timeout)",
        gt=0,
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level name",
    )

    @field_validator("api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop trailing slashes so URL joining never doubles them."""
        return v.rstrip("/")

    @field_validator("api_version")
    @classmethod
    def strip_slashes(cls, v: str) -> str:
        """The version is a single path segment."""
        return v.strip("/")

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Upper-case the level name and reject unknown ones."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            msg = f"Unknown log level: {v}"
            raise ValueError(msg)
        return level


def load_settings(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """
    Load settings from defaults, an optional YAML file, then the environment.

    Later sources win: environment variables override the YAML file, which
    overrides the built-in defaults. Empty environment values are ignored.

    Args:
        path: Optional path to a YAML file with Settings fields
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Validated Settings object

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML document is not a mapping
        ValidationError: If a value doesn't match the schema
    """
    data: dict[str, object] = {}

    if path is not None:
        path = Path(path)
        with path.open() as f:
            loaded = yaml.safe_load(f)
        if loaded is not None:
            if not isinstance(loaded, dict):
                msg = f"Settings file must contain a mapping: {path}"
                raise ValueError(msg)
            data.update(loaded)

    env = os.environ if environ is None else environ
    for field_name, var in ENV_VARS.items():
        value = env.get(var)
        if value:
            data[field_name] = value

    return Settings.model_validate(data)


# =============================================================================
# Tool Argument Models
# =============================================================================


class ToolArgs(BaseModel):
    """Common base for tool arguments: every tool is scoped to a domain."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    domain: str | None = Field(
        default=None,
        description="Site domain (defaults to the configured domain)",
    )


class ContentTypeArgs(ToolArgs):
    """Arguments for tools that address one content type."""

    content_type: str = Field(
        ...,
        alias="contentType",
        description="Content type or alias (e.g., 'posts', 'blogs', 'events')",
        min_length=1,
    )


class ListItemsArgs(ContentTypeArgs):
    """Arguments for list_items."""

    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    offset: int = Field(default=0, ge=0)


class GetItemBySlugArgs(ContentTypeArgs):
    """Arguments for get_item_by_slug."""

    slug: str = Field(..., description="Item slug")


class GetItemByIdArgs(ContentTypeArgs):
    """Arguments for get_item_by_id."""

    item_id: int = Field(..., alias="id", description="Item mvk_id")


class LookupRedirectArgs(ToolArgs):
    """Arguments for lookup_redirect."""

    from_path: str = Field(
        ...,
        alias="fromPath",
        description="Path to look up (e.g., '/old-url/')",
    )


class SearchContentArgs(ToolArgs):
    """Arguments for search_content."""

    q: str = Field(..., description="Search term")
    top: int = Field(default=DEFAULT_TOP, ge=1, le=MAX_LIMIT)
    result_type: str | None = Field(
        default=None,
        alias="type",
        description="Optional client-side filter by result.type (e.g., 'page','services')",
    )
