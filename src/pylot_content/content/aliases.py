"""
Content type aliases.

Agents tend to ask for "blogs" or "events"; the content API only knows the
canonical names. Resolution is a pure, total function: anything without an
alias comes back untouched.
"""

from collections.abc import Mapping

# Friendly alias -> canonical content type. Declaration order is the order
# alias groups appear in the tool catalog.
CONTENT_TYPE_ALIASES: Mapping[str, str] = {
    "blogs": "posts",
    "blog": "posts",
    "events": "mec-events",
    "event": "mec-events",
}


def resolve_content_type(
    token: str,
    aliases: Mapping[str, str] = CONTENT_TYPE_ALIASES,
) -> str:
    """
    Map a user-supplied content type to its canonical name.

    The lookup is case-insensitive, but an unknown token is returned exactly
    as given (no lower-casing).

    Example:
        >>> resolve_content_type("BLOGS")
        'posts'
        >>> resolve_content_type("Pages")
        'Pages'
    """
    return aliases.get(token.lower(), token)
