# -*- coding: utf-8 -*-
"""Validation and conversion utilities for BCR values.

All numbers and timestamps are parsed against explicit, locale-independent
patterns so the result never depends on the host environment.
"""

import math
import re
from datetime import datetime
from re import Pattern

from bcr_lib.constants import INVALID_COUNT
from bcr_lib.constants import MAX_COUNT
from bcr_lib.constants import TIMESTAMP_FORMAT
from bcr_lib.constants import TIMESTAMP_LENGTH
from bcr_lib.constants import VERSION_FIELD_PREFIX

# Plain decimal or scientific notation, optional sign, "." as decimal point.
# ASCII digits only.
FLOAT_PATTERN: Pattern[str] = re.compile(
    r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII
)

# Symbols accepted in addition to FLOAT_PATTERN (lower-cased)
FLOAT_SYMBOLS: dict[str, float] = {
    "nan": math.nan,
    "infinity": math.inf,
    "+infinity": math.inf,
    "-infinity": -math.inf,
}

INT_PATTERN: Pattern[str] = re.compile(r"^[+-]?\d+$", re.ASCII)

TIMESTAMP_PATTERN: Pattern[str] = re.compile(
    rf"^\d{{{TIMESTAMP_LENGTH}}}$", re.ASCII
)


def parse_float(text: str) -> float:
    """Parse a floating point number.

    Args:
        text: Number text, surrounding whitespace is ignored

    Returns:
        Parsed value, or NaN if the text is not a number
    """
    token = text.strip()
    if FLOAT_PATTERN.match(token):
        return float(token)
    return FLOAT_SYMBOLS.get(token.lower(), math.nan)


def parse_int(text: str) -> int:
    """Parse an integer count such as ``NUMPOINTS``.

    Args:
        text: Integer text, surrounding whitespace is ignored

    Returns:
        Parsed value, or -1 if the text is not an integer or does not
        fit a 32-bit signed integer
    """
    token = text.strip()
    if not INT_PATTERN.match(token):
        return INVALID_COUNT
    value = int(token)
    if not -MAX_COUNT - 1 <= value <= MAX_COUNT:
        return INVALID_COUNT
    return value


def parse_timestamp(text: str) -> datetime | None:
    """Parse a ``ddMMyyyyHHmm`` timestamp.

    Args:
        text: Timestamp text, e.g. ``010220231230``

    Returns:
        Parsed datetime, or None if the text is not a valid timestamp
    """
    token = text.strip()
    if not TIMESTAMP_PATTERN.match(token):
        return None
    try:
        return datetime.strptime(token, TIMESTAMP_FORMAT)  # noqa: DTZ007
    except ValueError:
        return None


def parse_first_float(text: str) -> float:
    """Parse the first numeric token of a value such as ``0.001 m``.

    Args:
        text: Value text with an optional unit annotation

    Returns:
        The first token that parses as a number, or NaN if there is none
    """
    for token in text.split():
        value = parse_float(token)
        if not math.isnan(value):
            return value
    return math.nan


def is_valid_version_field(version: str) -> bool:
    """Check if a header version tag is acceptable.

    Args:
        version: First line of the header section

    Returns:
        True if its first character is ``a`` or ``A``
    """
    return version[:1].lower() == VERSION_FIELD_PREFIX
