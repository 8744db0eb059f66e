# -*- coding: utf-8 -*-
"""Parser for the optional trailer section of BCR files.

The trailer uses the same ``KEY = VALUE`` grammar as the header but its
keys are free-form. A few well-known keys carry numeric parameters whose
value may be followed by a unit, e.g. ``ScanFieldOriginX = 0.002 m``.
"""

import logging
import math
from typing import Any

from bcr_lib.base import BaseSectionParser
from bcr_lib.constants import NO_TRAILER_KEY
from bcr_lib.constants import NO_TRAILER_VALUE
from bcr_lib.enums import SectionName
from bcr_lib.metadata import MetadataMap
from bcr_lib.trailer.models import BcrTrailerParameters
from bcr_lib.validation import parse_first_float

logger = logging.getLogger(__name__)


class BcrTrailerParser(BaseSectionParser):
    """Parser for the BCR trailer section."""

    section = SectionName.TRAILER

    def parse_lines(
        self,
        lines: list[str] | None,
        metadata: MetadataMap,
    ) -> BcrTrailerParameters:
        """Merge the trailer into ``metadata`` and extract its parameters.

        Args:
            lines: Trailer lines as returned by ``lines_of``, or None if the
                file has no trailer
            metadata: Map already holding the header entries

        Returns:
            Trailer parameters; defaults when there is no trailer

        Raises:
            BcrDuplicateKeyError: If the metadata policy rejects a key
        """
        if lines is None:
            metadata.add(NO_TRAILER_KEY, NO_TRAILER_VALUE)
            logger.debug("File has no trailer section")
            return BcrTrailerParameters()

        for line_no, line in enumerate(lines):
            self._read_pair(line, line_no, metadata)

        return BcrTrailerParameters.model_validate(
            self.parameters_to_dict(metadata)
        )

    def parameters_to_dict(self, metadata: MetadataMap) -> dict[str, Any]:
        """Read the well-known numeric keys from the metadata.

        Keys that are absent, or whose value holds no number, are left out
        so the model defaults apply.
        """
        parameters: dict[str, Any] = {}
        for field in BcrTrailerParameters.model_fields.values():
            key = field.alias
            if key not in metadata:
                continue
            value = parse_first_float(metadata[key])
            if math.isnan(value):
                self._add_warning(
                    f"no numeric value for {key}: {metadata[key]}",
                    metadata[key],
                )
                continue
            parameters[key] = value
        return parameters
