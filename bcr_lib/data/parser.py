# -*- coding: utf-8 -*-
"""Parser for the data section of BCR files.

The data section is a flat stream of height samples separated by
whitespace, spread over any number of lines. Samples are listed point by
point, profile after profile (row-major), and are scaled by ``ZScale``
before being stored.
"""

import logging
import math
from collections.abc import Iterable
from collections.abc import Iterator

from bcr_lib.base import BaseSectionParser
from bcr_lib.enums import SectionName
from bcr_lib.raster.models import RasterGrid
from bcr_lib.validation import parse_float

logger = logging.getLogger(__name__)


class BcrDataParser(BaseSectionParser):
    """Streams the samples of a BCR data section into a ``RasterGrid``.

    Tokens that are not numbers become NaN samples and are reported as
    warnings; they never stop the parse.
    """

    section = SectionName.DATA

    def iter_samples(self, lines: Iterable[str]) -> Iterator[float]:
        """Yield the unscaled samples of the data section in file order.

        Args:
            lines: Data lines as returned by ``lines_of``
        """
        for line_no, line in enumerate(lines):
            for token in line.split():
                value = parse_float(token)
                if math.isnan(value) and token.lower() != "nan":
                    self._add_warning(f"invalid sample: {token}", line, line_no)
                yield value

    def fill(
        self,
        grid: RasterGrid,
        lines: Iterable[str],
        z_scale: float,
    ) -> int:
        """Fill ``grid`` with the scaled samples of the data section.

        Args:
            grid: Freshly allocated grid
            lines: Data lines as returned by ``lines_of``
            z_scale: Factor applied to every sample

        Returns:
            Number of samples read from the section
        """
        count = 0
        discarded = 0
        for value in self.iter_samples(lines):
            count += 1
            if not grid.fill_next(value * z_scale):
                discarded += 1

        if discarded:
            self._add_warning(
                f"discarded {discarded} sample(s) beyond the declared "
                f"{grid.num_points}x{grid.num_profiles} grid"
            )
        logger.debug("Read %d sample(s), %d stored", count, grid.samples_written)
        return count
