# -*- coding: utf-8 -*-
"""Parser for the header section of BCR files.

The first header line is the version tag; every further line is a
``KEY = VALUE`` pair. Keys are matched case-insensitively. All pairs,
known or not, are also recorded in the document metadata.

Architecture: the parser produces a dictionary which is then fed to the
``BcrHeader`` Pydantic model via a single ``model_validate()`` call.
"""

import logging
from typing import Any

from bcr_lib.base import BaseSectionParser
from bcr_lib.constants import IGNORED_HEADER_KEYS
from bcr_lib.constants import KEY_CREATEDATE
from bcr_lib.constants import KEY_MANUFACID
from bcr_lib.constants import KEY_MODDATE
from bcr_lib.constants import KEY_NUMPOINTS
from bcr_lib.constants import KEY_NUMPROFILES
from bcr_lib.constants import KEY_XSCALE
from bcr_lib.constants import KEY_YSCALE
from bcr_lib.constants import KEY_ZSCALE
from bcr_lib.constants import MIN_HEADER_LINES
from bcr_lib.enums import ErrorCode
from bcr_lib.enums import SectionName
from bcr_lib.errors import BcrParseException
from bcr_lib.header.models import BcrHeader
from bcr_lib.metadata import MetadataMap
from bcr_lib.validation import is_valid_version_field
from bcr_lib.validation import parse_float
from bcr_lib.validation import parse_int
from bcr_lib.validation import parse_timestamp

logger = logging.getLogger(__name__)

# Header key -> (field name, value parser)
FIELD_PARSERS: dict[str, tuple[str, Any]] = {
    KEY_MANUFACID: ("manufacturer_id", str),
    KEY_CREATEDATE: ("create_date", parse_timestamp),
    KEY_MODDATE: ("mod_date", parse_timestamp),
    KEY_NUMPOINTS: ("num_points", parse_int),
    KEY_NUMPROFILES: ("num_profiles", parse_int),
    KEY_XSCALE: ("x_scale", parse_float),
    KEY_YSCALE: ("y_scale", parse_float),
    KEY_ZSCALE: ("z_scale", parse_float),
}


class BcrHeaderParser(BaseSectionParser):
    """Parser for the BCR header section.

    Raises ``BcrParseException`` (carrying the matching ``ErrorCode``) for
    failures that end the pipeline; tolerable problems are collected in
    ``errors``.
    """

    section = SectionName.HEADER

    def parse_lines_to_dict(
        self,
        lines: list[str],
        metadata: MetadataMap,
    ) -> dict[str, Any]:
        """Parse cleaned header lines to a dictionary.

        Args:
            lines: Header lines as returned by ``lines_of``
            metadata: Map receiving every key/value pair

        Returns:
            Dictionary that can be fed to ``BcrHeader.model_validate()``

        Raises:
            BcrParseException: If the header is too short or the version
                tag is invalid
            BcrDuplicateKeyError: If the metadata policy rejects a key
        """
        if len(lines) < MIN_HEADER_LINES:
            raise BcrParseException(
                f"header needs at least {MIN_HEADER_LINES} lines, "
                f"found {len(lines)}",
                status=ErrorCode.BAD_HEADER_SECTION,
            )

        version_field = lines[0]
        if not is_valid_version_field(version_field):
            raise BcrParseException(
                f"invalid version field: {version_field}",
                self._location(0, version_field),
                status=ErrorCode.INVALID_VERSION_FIELD,
            )

        header: dict[str, Any] = {"version_field": version_field}
        for line_no, line in enumerate(lines[1:], start=1):
            pair = self._read_pair(line, line_no, metadata)
            if pair is None:
                continue
            key, value = pair
            key_upper = key.upper()
            if key_upper in IGNORED_HEADER_KEYS:
                continue
            if key_upper in FIELD_PARSERS:
                field_name, convert = FIELD_PARSERS[key_upper]
                header[field_name] = convert(value)

        return header

    def parse_lines(self, lines: list[str], metadata: MetadataMap) -> BcrHeader:
        """Parse and validate the header section.

        Raises:
            BcrParseException: With ``HEADER_PARSE_ERROR`` if a required
                field is missing or unparsable, or any failure of
                ``parse_lines_to_dict``
        """
        header = BcrHeader.model_validate(self.parse_lines_to_dict(lines, metadata))
        if problems := header.problems():
            raise BcrParseException(
                "invalid header: " + "; ".join(problems),
                status=ErrorCode.HEADER_PARSE_ERROR,
            )
        logger.debug(
            "Header: %d points x %d profiles, scales (%g, %g, %g)",
            header.num_points,
            header.num_profiles,
            header.x_scale,
            header.y_scale,
            header.z_scale,
        )
        return header
