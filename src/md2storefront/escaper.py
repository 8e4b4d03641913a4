"""HTML escaping for element content and attribute values."""

from __future__ import annotations

from typing import Optional


def _escape(text: Optional[str]) -> str:
    if not text:
        return ""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def escape_content(text: Optional[str]) -> str:
    """Escape *text* for use as element content."""
    return _escape(text)


def escape_attribute(text: Optional[str]) -> str:
    """Escape *text* for use inside a double-quoted attribute value.

    Quotes of both kinds are escaped, so the result is also safe inside
    single-quoted attributes.
    """
    return _escape(text)
