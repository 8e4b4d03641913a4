"""HTML renderer - converts a segmented :class:`Document` to markup.

One renderer serves both output profiles: the :class:`ProfileSpec` chosen
at construction supplies the tags and classes, and the few structural
differences (paragraph joining, colon nesting, list wrapper) are flags on
the profile rather than separate code paths.
"""

from __future__ import annotations

from typing import Optional, Union

from md2storefront.escaper import escape_attribute
from md2storefront.inline import InlineRenderer
from md2storefront.profiles import ProfileSpec, RenderProfile, get_profile
from md2storefront.segmenter import MAX_HEADING_LEVEL, Block, Document, ListItem


def _attr(name: str, value: object) -> str:
    return f' {name}="{escape_attribute(str(value))}"'


# ---------------------------------------------------------------------------
# HtmlRenderer
# ---------------------------------------------------------------------------

class HtmlRenderer:
    """Render a :class:`~md2storefront.segmenter.Document` to an HTML string."""

    def __init__(
        self,
        profile: Union[RenderProfile, str] = RenderProfile.SEMANTIC,
        inline: Optional[InlineRenderer] = None,
    ) -> None:
        self.spec: ProfileSpec = get_profile(profile)
        self.inline: InlineRenderer = inline or InlineRenderer()

    # ======================================================================
    # Public API
    # ======================================================================

    def render(self, doc: Document) -> str:
        """Return the concatenated markup of every non-empty block in *doc*."""
        parts: list[str] = []
        for block in doc:
            html = self._render_block(block)
            if html:
                parts.append(html)
        return "".join(parts)

    # ======================================================================
    # Block dispatch
    # ======================================================================

    def _render_block(self, block: Block) -> str:
        handler = getattr(self, f"_render_{block.type.value}", None)
        if handler is not None:
            return handler(block)
        return ""

    # ======================================================================
    # Per-BlockType renderers
    # ======================================================================

    def _render_heading(self, block: Block) -> str:
        content = self.inline.render(block.text)
        if not content:
            return ""
        level = max(1, min(MAX_HEADING_LEVEL, block.level))
        return self.spec.heading.format(level=level, content=content)

    def _render_paragraph(self, block: Block) -> str:
        separator = self.spec.line_separator
        if separator is None:
            content = self.inline.render(" ".join(" ".join(block.lines).split()))
        else:
            rendered = (self.inline.render(line) for line in block.lines)
            content = separator.join(html for html in rendered if html)
        if not content:
            return ""
        return self.spec.paragraph.format(content=content)

    def _render_blockquote(self, block: Block) -> str:
        content = self.inline.render(block.text)
        if not content:
            return ""
        return self.spec.blockquote.format(content=content)

    def _render_divider(self, _block: Block) -> str:
        return self.spec.divider

    def _render_ordered_list(self, block: Block) -> str:
        return self._render_list_block(block, ordered=True)

    def _render_unordered_list(self, block: Block) -> str:
        return self._render_list_block(block, ordered=False)

    # ======================================================================
    # List rendering helpers
    # ======================================================================

    def _render_list_block(self, block: Block, *, ordered: bool) -> str:
        items = [item for item in block.items if item.text.strip()]
        if not items:
            return ""

        attrs = ""
        if ordered:
            start = items[0].ordinal if items[0].ordinal is not None else 1
            if start != 1:
                attrs = _attr("start", start)
            body = self._render_numbered_items(items, start)
        elif self.spec.nest_after_colon:
            body = self._render_colon_nested_items(items)
        else:
            body = "".join(self._render_list_item(item.text) for item in items)
        if not body:
            return ""

        tag = "ol" if ordered else "ul"
        return self.spec.list_wrapper.format(
            kind="ordered" if ordered else "unordered",
            content=f"<{tag}{attrs}>{body}</{tag}>",
        )

    def _render_numbered_items(self, items: list[ListItem], start: int) -> str:
        """Emit ``value`` wherever an ordinal differs from ``start + position``."""
        parts: list[str] = []
        for position, item in enumerate(items):
            expected = start + position
            number = item.ordinal if item.ordinal is not None else expected
            attrs = _attr("value", number) if number != expected else ""
            parts.append(self._render_list_item(item.text, attrs=attrs))
        return "".join(parts)

    def _render_colon_nested_items(self, items: list[ListItem]) -> str:
        """Fold the item after a ``Label:`` item into a one-item sub-list."""
        parts: list[str] = []
        index = 0
        while index < len(items):
            text = items[index].text
            label_text = text[:-1].strip() if text.endswith(":") else ""
            if label_text and index + 1 < len(items):
                label = self.inline.render(label_text)
                child = self._render_list_item(items[index + 1].text)
                parts.append(f"<li>{label}<ul>{child}</ul></li>")
                index += 2
            else:
                parts.append(self._render_list_item(text))
                index += 1
        return "".join(parts)

    def _render_list_item(self, text: str, *, attrs: str = "") -> str:
        return f"<li{attrs}>{self.inline.render(text)}</li>"


def render(
    doc: Document, profile: Union[RenderProfile, str] = RenderProfile.SEMANTIC
) -> str:
    """Render *doc* with a new :class:`HtmlRenderer` for *profile*."""
    return HtmlRenderer(profile).render(doc)
