"""High-level catalog-text-to-HTML conversion orchestrator.

Ties together the segmenter and renderer into a single public API for
converting a catalog field value, or a text file, to storefront markup.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

from md2storefront.profiles import PROFILES, RenderProfile
from md2storefront.renderer import HtmlRenderer
from md2storefront.segmenter import BlockSegmenter

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "No description provided."


def normalise_text(value: Any) -> Optional[str]:
    """Return *value* as trimmed multi-line text, or ``None`` if empty.

    Lists and tuples are treated as one line per item, with blank items
    dropped. Any other value is converted with :func:`str`.
    """
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        lines = [str(item).strip() for item in value if item is not None]
        text = "\n".join(line for line in lines if line)
    else:
        text = str(value).strip()
    return text or None


class Converter:
    """Convert catalog text to HTML for one markup profile.

    Usage::

        converter = Converter(profile="div")
        html = converter.convert_text("# Hello\\n\\n- one\\n- two")

        # None means "no value": omit the destination field
        converter.convert_text("   ")
    """

    PROFILES = PROFILES

    def __init__(self, profile: Union[RenderProfile, str] = RenderProfile.SEMANTIC) -> None:
        self.renderer = HtmlRenderer(profile)
        self.profile: RenderProfile = self.renderer.spec.profile

    def convert_text(self, value: Any) -> Optional[str]:
        """Convert a field value to HTML.

        Args:
            value: Text, a list of lines, or ``None``.

        Returns:
            The markup string, or ``None`` when *value* holds no text.
            An empty string is valid markup (e.g. input of only dashes).
        """
        text = normalise_text(value)
        if text is None:
            logger.debug("No value to convert for profile %s", self.profile.value)
            return None
        doc = BlockSegmenter().segment(text)
        html = self.renderer.render(doc)
        logger.debug(
            "Converted %d chars into %d block(s), %d chars of %s markup",
            len(text),
            len(doc),
            len(html),
            self.profile.value,
        )
        return html

    def convert_with_fallback(self, value: Any, fallback: str = NO_DESCRIPTION) -> str:
        """Convert *value*, rendering *fallback* when nothing would be emitted."""
        html = self.convert_text(value)
        if html:
            return html
        return self.convert_text(fallback) or ""

    def convert_file(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
        *,
        encoding: str = "utf-8",
        fallback: Optional[str] = None,
    ) -> Optional[str]:
        """Read a text file and write the HTML output.

        Args:
            input_path: Path to the input text file.
            output_path: Path for the output ``.html`` file.
            encoding: Text encoding of the source file.
            fallback: Sentence rendered when the source holds no content.

        Returns:
            The markup written, or ``None`` if the file held no value (an
            empty file is written in that case).
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        text = input_path.read_text(encoding=encoding)
        if fallback is not None:
            html: Optional[str] = self.convert_with_fallback(text, fallback)
        else:
            html = self.convert_text(text)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html or "", encoding="utf-8")
        return html
