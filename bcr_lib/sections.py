# -*- coding: utf-8 -*-
"""Splitting of raw BCR text into sections, lines and key/value pairs.

A BCR file is laid out as::

    <header section>*<data section>*[<trailer section>]*

Which segments count as sections depends on the ``GrammarVariant``: the
``EXTENDED`` grammar keeps the whitespace that follows the closing ``*``
as a section of its own, the ``MINIMAL`` grammar drops it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from bcr_lib.constants import COMMENT_MARKER
from bcr_lib.constants import KEY_VALUE_SEPARATOR
from bcr_lib.constants import SECTION_DELIMITER
from bcr_lib.constants import SENTINEL_PAIR
from bcr_lib.enums import GrammarVariant
from bcr_lib.errors import BcrSectionCountError

logger = logging.getLogger(__name__)

EOL = re.compile(r"[\r\n]+")


@dataclass(frozen=True)
class SectionLayout:
    """Accepted section counts and section positions of a grammar variant.

    Attributes:
        min_sections: Smallest accepted number of sections
        max_sections: Largest accepted number of sections
        header_index: Position of the header section
        data_index: Position of the data section
        trailer_index: Position of the trailer section
        trailer_section_count: Section count at which a trailer is present
        keep_blank: Whether whitespace-only segments count as sections
    """

    min_sections: int
    max_sections: int
    header_index: int = 0
    data_index: int = 1
    trailer_index: int = 2
    trailer_section_count: int = 3
    keep_blank: bool = False

    @classmethod
    def for_variant(cls, variant: GrammarVariant) -> SectionLayout:
        match variant:
            case GrammarVariant.MINIMAL:
                return cls(min_sections=2, max_sections=3)
            case GrammarVariant.EXTENDED:
                return cls(
                    min_sections=3,
                    max_sections=4,
                    trailer_section_count=4,
                    keep_blank=True,
                )
        raise ValueError(f"Unknown grammar variant: `{variant}`")


class SectionSplitter:
    """Splits raw BCR text into its ``*`` delimited sections."""

    def __init__(
        self,
        layout: SectionLayout | GrammarVariant = GrammarVariant.MINIMAL,
    ) -> None:
        if isinstance(layout, GrammarVariant):
            layout = SectionLayout.for_variant(layout)
        self.layout = layout

    def split(self, raw_text: str) -> list[str]:
        """Split raw file text into sections.

        Args:
            raw_text: Complete file content

        Returns:
            List of sections in file order

        Raises:
            BcrSectionCountError: If the number of sections is not accepted
        """
        sections = [
            segment
            for segment in raw_text.split(SECTION_DELIMITER)
            if segment and (self.layout.keep_blank or segment.strip())
        ]
        count = len(sections)
        logger.debug("Split file into %d section(s)", count)
        if not self.layout.min_sections <= count <= self.layout.max_sections:
            raise BcrSectionCountError(
                f"expected {self.layout.min_sections} to "
                f"{self.layout.max_sections} sections, found {count}"
            )
        return sections

    def header_of(self, sections: list[str]) -> str:
        return sections[self.layout.header_index]

    def data_of(self, sections: list[str]) -> str:
        return sections[self.layout.data_index]

    def trailer_of(self, sections: list[str]) -> str | None:
        """Return the trailer section, or None if the file has none."""
        if len(sections) != self.layout.trailer_section_count:
            return None
        return sections[self.layout.trailer_index]


def strip_comment(raw_line: str) -> str:
    """Cut a line at the comment marker and trim surrounding whitespace."""
    return raw_line.split(COMMENT_MARKER, maxsplit=1)[0].strip()


def lines_of(section: str) -> list[str]:
    """Split a section into trimmed, comment-free, non-empty lines.

    Args:
        section: Raw section text

    Returns:
        Ordered list of cleaned lines
    """
    lines: list[str] = []
    for raw_line in EOL.split(section):
        if line := strip_comment(raw_line):
            lines.append(line)
    return lines


def split_key_value(line: str) -> tuple[str, str]:
    """Split a ``KEY = VALUE`` line.

    Repeated separators collapse, so ``KEY==VALUE`` reads as ``KEY = VALUE``.
    Lines that do not split into exactly two parts, or with an empty key or
    value, yield the sentinel pair ``(" ", " ")`` instead of failing.

    Args:
        line: Cleaned header or trailer line

    Returns:
        Tuple of (key, value)
    """
    parts = [part for part in line.split(KEY_VALUE_SEPARATOR) if part]
    if len(parts) != 2:
        return SENTINEL_PAIR
    key, value = parts[0].strip(), parts[1].strip()
    if not key or not value:
        return SENTINEL_PAIR
    return key, value


def is_sentinel(pair: tuple[str, str]) -> bool:
    return pair == SENTINEL_PAIR
