"""Block segmentation for catalog text.

Splits a text body into an ordered :class:`Document` of immutable
:class:`Block` values (headings, paragraphs, lists, blockquotes and
dividers) in a single left-to-right pass over its lines. Segmentation is
independent of the output profile; see :mod:`md2storefront.renderer`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Block definitions
# ---------------------------------------------------------------------------

class BlockType(Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    ORDERED_LIST = "ordered_list"
    UNORDERED_LIST = "unordered_list"
    BLOCKQUOTE = "blockquote"
    DIVIDER = "divider"


@dataclass(frozen=True)
class ListItem:
    text: str
    # Explicit leading number of an ordered item
    ordinal: Optional[int] = None


@dataclass(frozen=True)
class Block:
    type: BlockType
    # Heading / blockquote
    text: str = ""
    level: int = 0
    # Paragraph
    lines: tuple[str, ...] = ()
    # Lists
    items: tuple[ListItem, ...] = ()


@dataclass(frozen=True)
class Document:
    blocks: tuple[Block, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)


# ---------------------------------------------------------------------------
# Line grammar
# ---------------------------------------------------------------------------

MAX_HEADING_LEVEL = 6

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_HEADING_RE = re.compile(r"^(#+)\s+(\S.*)$")
# Three or more of one character, optionally spaced: ``***``, ``* * *``.
_DIVIDER_RE = re.compile(r"^(?:-(?:\s*-){2,}|_(?:\s*_){2,}|\*(?:\s*\*){2,})$")
_BLOCKQUOTE_RE = re.compile(r"^>\s*(.*)$")
_ORDERED_RE = re.compile(r"^(\d+)[.)]\s+(\S.*)$")
_UNORDERED_RE = re.compile(r"^[-*+]\s+(\S.*)$")
# Hyphen, the Unicode dash family, minus sign and bullet
_DASH_LED_RE = re.compile("^[-\u2010\u2011\u2012\u2013\u2014\u2015\u2212\u2022]\\s*(.*)$")


# ---------------------------------------------------------------------------
# Segmenter
# ---------------------------------------------------------------------------

class BlockSegmenter:
    """Group the lines of a text body into a :class:`Document`.

    Usage::

        doc = BlockSegmenter().segment("# Title\\n\\n- one\\n- two")
        [b.type for b in doc]   # [HEADING, UNORDERED_LIST]

    The segmenter keeps at most one open paragraph buffer or one open list
    at a time. Blank lines close a paragraph but are tolerated inside a
    list run.
    """

    def __init__(self) -> None:
        self._blocks: list[Block] = []
        self._paragraph: list[str] = []
        self._list_type: Optional[BlockType] = None
        self._list_items: list[ListItem] = []

    # -- public API ---------------------------------------------------------

    def segment(self, text: Optional[str]) -> Document:
        """Return the :class:`Document` for *text*."""
        self._blocks = []
        self._paragraph = []
        self._list_type = None
        self._list_items = []

        for raw in _LINE_BREAK_RE.split(text or ""):
            self._handle_line(raw.strip())
        self._flush_all()

        doc = Document(blocks=tuple(self._blocks))
        logger.debug(
            "Segmented %d block(s): %s",
            len(doc),
            ", ".join(b.type.value for b in doc),
        )
        return doc

    # -- line classification ------------------------------------------------

    def _handle_line(self, line: str) -> None:
        if not line:
            self._flush_paragraph()
            return

        match = _HEADING_RE.match(line)
        if match:
            self._flush_all()
            level = min(len(match.group(1)), MAX_HEADING_LEVEL)
            self._blocks.append(
                Block(type=BlockType.HEADING, level=level, text=match.group(2).strip())
            )
            return

        if _DIVIDER_RE.match(line):
            self._flush_all()
            self._blocks.append(Block(type=BlockType.DIVIDER))
            return

        match = _BLOCKQUOTE_RE.match(line)
        if match:
            self._flush_all()
            self._blocks.append(
                Block(type=BlockType.BLOCKQUOTE, text=match.group(1).strip())
            )
            return

        match = _ORDERED_RE.match(line)
        if match:
            self._add_list_item(
                BlockType.ORDERED_LIST,
                ListItem(text=match.group(2).strip(), ordinal=int(match.group(1))),
            )
            return

        match = _UNORDERED_RE.match(line)
        if match:
            self._add_list_item(
                BlockType.UNORDERED_LIST, ListItem(text=match.group(1).strip())
            )
            return

        match = _DASH_LED_RE.match(line)
        if match:
            self._handle_dash_led(match.group(1).strip())
            return

        self._flush_list()
        self._paragraph.append(line)

    def _handle_dash_led(self, text: str) -> None:
        """A dash without the list-marker grammar never starts a list."""
        if not text:
            return
        if self._list_type == BlockType.UNORDERED_LIST:
            self._list_items.append(ListItem(text=text))
            return
        self._flush_list()
        self._paragraph.append(text)

    def _add_list_item(self, list_type: BlockType, item: ListItem) -> None:
        self._flush_paragraph()
        if self._list_type is not None and self._list_type != list_type:
            self._flush_list()
        self._list_type = list_type
        self._list_items.append(item)

    # -- flushing -------------------------------------------------------------

    def _flush_paragraph(self) -> None:
        if self._paragraph:
            self._blocks.append(
                Block(type=BlockType.PARAGRAPH, lines=tuple(self._paragraph))
            )
        self._paragraph = []

    def _flush_list(self) -> None:
        items = tuple(item for item in self._list_items if item.text)
        if self._list_type is not None and items:
            self._blocks.append(Block(type=self._list_type, items=items))
        self._list_type = None
        self._list_items = []

    def _flush_all(self) -> None:
        self._flush_paragraph()
        self._flush_list()


def segment(text: Optional[str]) -> Document:
    """Segment *text* with a fresh :class:`BlockSegmenter`."""
    return BlockSegmenter().segment(text)
