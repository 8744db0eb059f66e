# -*- coding: utf-8 -*-
"""Constants used throughout the bcr_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# File Encodings
# -----------------------------------------------------------------------------

#: Default encoding for BCR files
BCR_ENCODING = "utf-8"

#: Encoding used for JSON files
JSON_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# File Layout
# -----------------------------------------------------------------------------

#: Character separating the header, data and trailer sections
SECTION_DELIMITER: str = "*"

#: Everything after this character on a line is a comment
COMMENT_MARKER: str = ";"

#: Separator between key and value in header and trailer lines
KEY_VALUE_SEPARATOR: str = "="

#: Key/value pair returned for lines that are not ``KEY = VALUE``
SENTINEL_PAIR: tuple[str, str] = (" ", " ")

#: Minimum number of non-empty header lines (version tag + mandatory keys)
MIN_HEADER_LINES: int = 13

#: Required first character of the version field (case-insensitive)
VERSION_FIELD_PREFIX: str = "a"

#: Layout of CREATEDATE / MODDATE values, e.g. ``010220231230``
TIMESTAMP_FORMAT: str = "%d%m%Y%H%M"

#: Number of digits in a CREATEDATE / MODDATE value
TIMESTAMP_LENGTH: int = 12

# -----------------------------------------------------------------------------
# Header Keys (matched case-insensitively)
# -----------------------------------------------------------------------------

KEY_MANUFACID: str = "MANUFACID"
KEY_CREATEDATE: str = "CREATEDATE"
KEY_MODDATE: str = "MODDATE"
KEY_NUMPOINTS: str = "NUMPOINTS"
KEY_NUMPROFILES: str = "NUMPROFILES"
KEY_XSCALE: str = "XSCALE"
KEY_YSCALE: str = "YSCALE"
KEY_ZSCALE: str = "ZSCALE"

#: Legacy header keys that are recognised but not evaluated
IGNORED_HEADER_KEYS: frozenset[str] = frozenset(
    {"ZRESOLUTION", "COMPRESSION", "DATATYPE", "CHECKTYPE"}
)

# -----------------------------------------------------------------------------
# Trailer Keys (matched case-sensitively, values in m and °C)
# -----------------------------------------------------------------------------

KEY_SCAN_FIELD_ORIGIN_X: str = "ScanFieldOriginX"
KEY_SCAN_FIELD_ORIGIN_Y: str = "ScanFieldOriginY"
KEY_SCAN_FIELD_ORIGIN_Z: str = "ScanFieldOriginZ"
KEY_SAMPLE_TEMPERATURE: str = "SampleTemperature"

#: Metadata entry recorded when the file carries no trailer
NO_TRAILER_KEY: str = "MetaDataInFile"
NO_TRAILER_VALUE: str = "none"

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

DEFAULT_OFFSET: float = 0.0

#: Sample temperature in °C assumed when the trailer does not state one
DEFAULT_SAMPLE_TEMPERATURE: float = 20.0

#: Scale applied by a freshly allocated raster grid
DEFAULT_GRID_SCALE: float = 1.0

#: Unit of all lateral and height values in a BCR file
BCR_LENGTH_UNIT: str = "m"

#: Value returned by ``NUMPOINTS`` / ``NUMPROFILES`` parsing on failure
INVALID_COUNT: int = -1

#: Largest ``NUMPOINTS`` / ``NUMPROFILES`` value (32-bit signed integer)
MAX_COUNT: int = 2**31 - 1
