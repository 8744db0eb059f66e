# -*- coding: utf-8 -*-
"""Enumerations for the BCR file format.

This module contains all enumerations used while reading BCR files,
including parse status codes, grammar variants and metadata policies.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Overall status of a parsed BCR document.

    Attributes:
        OK: File parsed completely
        INCOMPLETE_DATA: File parsed, but the data section held fewer samples
            than ``NumPoints * NumProfiles``
        NO_FILE: The file is missing or could not be read
        NO_DATA: The file is empty or contains only whitespace
        INVALID_SECTION_COUNT: Wrong number of ``*`` delimited sections
        BAD_HEADER_SECTION: Fewer header lines than the mandatory key set
        INVALID_VERSION_FIELD: The version tag does not start with ``a``
        HEADER_PARSE_ERROR: A required header field is missing or unparsable
        DUPLICATE_METADATA_KEY: A metadata key was repeated while the
            duplicate-key policy is ``ERROR``
    """

    OK = "ok"
    INCOMPLETE_DATA = "incomplete_data"
    NO_FILE = "no_file"
    NO_DATA = "no_data"
    INVALID_SECTION_COUNT = "invalid_section_count"
    BAD_HEADER_SECTION = "bad_header_section"
    INVALID_VERSION_FIELD = "invalid_version_field"
    HEADER_PARSE_ERROR = "header_parse_error"
    DUPLICATE_METADATA_KEY = "duplicate_metadata_key"

    @property
    def has_data(self) -> bool:
        """Whether a document with this status carries raster data."""
        return self in (ErrorCode.OK, ErrorCode.INCOMPLETE_DATA)


class Severity(str, Enum):
    """Severity level for parse errors.

    Attributes:
        ERROR: Critical parsing error
        WARNING: Non-fatal warning
    """

    ERROR = "error"
    WARNING = "warning"


class SectionName(str, Enum):
    """The sections of a BCR file."""

    HEADER = "header"
    DATA = "data"
    TRAILER = "trailer"


class GrammarVariant(str, Enum):
    """Section count grammar of a BCR file.

    Attributes:
        MINIMAL: Whitespace-only segments are discarded; a file has
            2 sections (header, data) or 3 (header, data, trailer)
        EXTENDED: Whitespace-only segments count as sections, so the line
            break after the closing ``*`` adds one; a file has 3 or 4
            sections
    """

    MINIMAL = "minimal"
    EXTENDED = "extended"


class DuplicateKeyPolicy(str, Enum):
    """What to do when a metadata key appears more than once.

    Attributes:
        OVERWRITE: The last value wins and moves to the end of the map
        KEEP_FIRST: The first value wins, later ones are ignored
        ERROR: Parsing stops with ``ErrorCode.DUPLICATE_METADATA_KEY``
    """

    OVERWRITE = "overwrite"
    KEEP_FIRST = "keep_first"
    ERROR = "error"
