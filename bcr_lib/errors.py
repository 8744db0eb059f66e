# -*- coding: utf-8 -*-
"""Error handling for BCR file parsing.

This module provides error classes for tracking parsing problems with
source location information for helpful error messages.
"""

from __future__ import annotations

from dataclasses import dataclass

from bcr_lib.enums import ErrorCode
from bcr_lib.enums import SectionName
from bcr_lib.enums import Severity


@dataclass(frozen=True)
class SourceLocation:
    """Tracks where in a BCR file a problem was found.

    Attributes:
        source: The source file name or identifier
        section: The section the line belongs to
        line: Index of the cleaned line within its section (0-based)
        text: The text at this location
    """

    source: str
    section: SectionName
    line: int
    text: str

    def __str__(self) -> str:
        """Format as human-readable location string."""
        return f"(in {self.source}, {self.section.value} line {self.line + 1})"


@dataclass(frozen=True)
class BcrParseError:
    """Represents a parsing error or warning with source location.

    This is a data record for storing error information, not an exception.
    Use BcrParseException for raising errors.

    Attributes:
        severity: ERROR or WARNING
        message: Human-readable error message
        location: Source location where error occurred (optional)
    """

    severity: Severity
    message: str
    location: SourceLocation | None = None

    def __str__(self) -> str:
        """Format as human-readable error string."""
        base = f"{self.severity.value}: {self.message}"
        if self.location:
            base += f" {self.location}"
            if self.location.text:
                base += f"\n  {self.location.text}"
        return base


class BcrParseException(Exception):  # noqa: N818
    """Exception raised when a BCR file cannot be parsed.

    Attributes:
        message: Error message
        location: Source location where error occurred
        status: Status code the failure maps to
    """

    status: ErrorCode = ErrorCode.HEADER_PARSE_ERROR

    def __init__(
        self,
        message: str,
        location: SourceLocation | None = None,
        status: ErrorCode | None = None,
    ):
        self.message = message
        self.location = location
        if status is not None:
            self.status = status
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format as human-readable exception string."""
        if self.location:
            return f"{self.message} {self.location}"
        return self.message

    def to_error(self) -> BcrParseError:
        """Convert exception to BcrParseError record."""
        return BcrParseError(
            severity=Severity.ERROR,
            message=self.message,
            location=self.location,
        )


class BcrSectionCountError(BcrParseException):
    """Raised when the file does not split into an accepted number of sections."""

    status = ErrorCode.INVALID_SECTION_COUNT


class BcrDuplicateKeyError(BcrParseException):
    """Raised when a metadata key repeats under ``DuplicateKeyPolicy.ERROR``."""

    status = ErrorCode.DUPLICATE_METADATA_KEY
