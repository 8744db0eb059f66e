# -*- coding: utf-8 -*-
"""Shared behaviour of the header, data and trailer section parsers."""

from __future__ import annotations

from bcr_lib.enums import SectionName
from bcr_lib.enums import Severity
from bcr_lib.errors import BcrParseError
from bcr_lib.errors import SourceLocation
from bcr_lib.metadata import MetadataMap
from bcr_lib.sections import is_sentinel
from bcr_lib.sections import split_key_value


class BaseSectionParser:
    """Base class for parsers of a single BCR section.

    Errors are collected rather than thrown, allowing partial parsing
    of malformed files.

    Attributes:
        errors: List of parsing errors and warnings encountered
    """

    section: SectionName

    def __init__(self, source: str = "<string>") -> None:
        self.errors: list[BcrParseError] = []
        self._source = source

    def _location(self, line: int, text: str = "") -> SourceLocation:
        return SourceLocation(
            source=self._source,
            section=self.section,
            line=line,
            text=text,
        )

    def _add_error(self, message: str, text: str = "", line: int = 0) -> None:
        """Add an error to the error list."""
        self.errors.append(
            BcrParseError(
                severity=Severity.ERROR,
                message=message,
                location=self._location(line, text),
            )
        )

    def _add_warning(self, message: str, text: str = "", line: int = 0) -> None:
        """Add a warning to the error list."""
        self.errors.append(
            BcrParseError(
                severity=Severity.WARNING,
                message=message,
                location=self._location(line, text),
            )
        )

    def _read_pair(
        self,
        line: str,
        line_no: int,
        metadata: MetadataMap,
    ) -> tuple[str, str] | None:
        """Split a ``KEY = VALUE`` line and record it in the metadata.

        Malformed lines are skipped with a warning.

        Raises:
            BcrDuplicateKeyError: If the metadata policy rejects the key
        """
        pair = split_key_value(line)
        if is_sentinel(pair):
            self._add_warning("ignoring line without `KEY = VALUE`", line, line_no)
            return None
        key, value = pair
        metadata.add(key, value, self._location(line_no, line))
        return pair
