"""Inline span rendering: code, links, bold and italic.

Recognised fragments are swapped for placeholder tokens as soon as they are
rendered, so later rules never re-match or re-escape markup that has
already been built. Tokens are resolved back into HTML once the outermost
call has escaped all remaining plain text.
"""

from __future__ import annotations

import logging
import re

from md2storefront.escaper import escape_attribute, escape_content

logger = logging.getLogger(__name__)

MAX_DEPTH = 10

# Placeholder tokens are wrapped in private-use code points, which escaping
# leaves alone and no style rule matches.
_TOKEN_OPEN = "\ue000"
_TOKEN_CLOSE = "\ue001"
_TOKEN_RE = re.compile(f"{_TOKEN_OPEN}(\\d+){_TOKEN_CLOSE}")

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_CODE_RE = re.compile(r"`([^`\n]+)`")
_LINK_RE = re.compile(
    r"\[([^\[\]\n]+)\]\((https?://[^\s()" + _TOKEN_OPEN + _TOKEN_CLOSE + r"]+)\)"
)

# Emphasis must hug non-whitespace text on both sides. The inner text may
# not cross a delimiter of its own kind, so a failed opener only scans to the
# next marker. A closing ``**`` may not be followed by another ``*``; the
# single ``*`` before it belongs to the inner text so ``***x***`` nests.
_BOLD_STAR_RE = re.compile(
    r"\*\*(?!\s)((?:[^*\n]|\*(?!\*)|\*(?=\*\*(?!\*)))+?)(?<!\s)\*\*(?!\*)"
)
_BOLD_UNDERSCORE_RE = re.compile(
    r"(?<!\w)__(?![\s_])((?:[^_\n]|_(?!_))+?)(?<![\s_])__(?!\w)"
)
_ITALIC_STAR_RE = re.compile(r"(?<!\*)\*(?![\s*])([^*\n]+?)(?<!\s)\*(?!\*)")
_ITALIC_UNDERSCORE_RE = re.compile(r"(?<!\w)_(?![\s_])([^_\n]+?)(?<!\s)_(?!\w)")

_STYLE_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (_BOLD_STAR_RE, "strong"),
    (_BOLD_UNDERSCORE_RE, "strong"),
    (_ITALIC_STAR_RE, "em"),
    (_ITALIC_UNDERSCORE_RE, "em"),
)


# ---------------------------------------------------------------------------
# Placeholder table
# ---------------------------------------------------------------------------

class _PlaceholderTable:
    """Fragments rendered during one top-level call, indexed by token id."""

    def __init__(self) -> None:
        self._fragments: list[str] = []

    def store(self, html: str) -> str:
        token = f"{_TOKEN_OPEN}{len(self._fragments)}{_TOKEN_CLOSE}"
        self._fragments.append(html)
        return token

    def resolve(self, html: str) -> str:
        """Replace every token in *html* with its stored fragment.

        A fragment is stored only after its own HTML is complete, so it can
        only reference tokens with a lower id. Resolving the fragments in
        creation order therefore settles all nesting in one pass; the second
        pass substitutes the top-level string.
        """
        resolved: list[str] = []

        def lookup(match: re.Match[str]) -> str:
            return resolved[int(match.group(1))]

        for fragment in self._fragments:
            resolved.append(_TOKEN_RE.sub(lookup, fragment))
        return _TOKEN_RE.sub(lookup, html)


# ---------------------------------------------------------------------------
# InlineRenderer
# ---------------------------------------------------------------------------

class InlineRenderer:
    """Render a single span of text to an escaped HTML fragment."""

    def render(self, text: str, depth: int = 0) -> str:
        """Return safe inline HTML for *text*.

        *depth* counts nested emphasis and link labels; past
        :data:`MAX_DEPTH` the span is escaped without interpretation.
        """
        if not text or not text.strip():
            return ""
        text = text.replace(_TOKEN_OPEN, "").replace(_TOKEN_CLOSE, "")
        table = _PlaceholderTable()
        return table.resolve(self._render(text, depth, table))

    # -- recursion ------------------------------------------------------------

    def _render(self, text: str, depth: int, table: _PlaceholderTable) -> str:
        if depth > MAX_DEPTH:
            logger.debug("Inline depth ceiling reached, escaping %d chars verbatim", len(text))
            return escape_content(text)

        text = _CODE_RE.sub(lambda m: self._handle_code(m, table), text)
        text = _LINK_RE.sub(lambda m: self._handle_link(m, depth, table), text)
        for pattern, tag in _STYLE_RULES:
            text = pattern.sub(
                lambda m, tag=tag: self._handle_style(m, tag, depth, table),
                text,
            )
        return escape_content(text)

    # -- fragment handlers --------------------------------------------------

    def _handle_code(self, match: re.Match[str], table: _PlaceholderTable) -> str:
        return table.store(f"<code>{escape_content(match.group(1))}</code>")

    def _handle_link(
        self, match: re.Match[str], depth: int, table: _PlaceholderTable
    ) -> str:
        label = self._render(match.group(1), depth + 1, table)
        href = escape_attribute(match.group(2))
        return table.store(
            f'<a href="{href}" target="_blank" rel="noopener noreferrer">{label}</a>'
        )

    def _handle_style(
        self, match: re.Match[str], tag: str, depth: int, table: _PlaceholderTable
    ) -> str:
        inner = self._render(match.group(1), depth + 1, table)
        return table.store(f"<{tag}>{inner}</{tag}>")


_default_renderer = InlineRenderer()


def render_inline(text: str, depth: int = 0) -> str:
    """Module-level shortcut for :meth:`InlineRenderer.render`."""
    return _default_renderer.render(text, depth)
