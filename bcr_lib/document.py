# -*- coding: utf-8 -*-
"""Reading of complete BCR files.

``BcrDocument`` runs the whole parse pipeline in its constructor::

    LoadFile -> ParseHeader -> ParseData -> ParseTrailer
             -> FinalizeProperties -> CheckCompleteness

Every stage is skipped once an earlier one has set a failure status, so
the first failure wins. Failures are never raised out of the constructor;
they are reported through ``status`` and ``errors``, and the data accessors
return NaN or None instead of values.
"""

from __future__ import annotations

import datetime  # noqa: TC003
import logging
import math
from collections.abc import Mapping
from pathlib import Path

import numpy as np

from bcr_lib.constants import BCR_LENGTH_UNIT
from bcr_lib.data.parser import BcrDataParser
from bcr_lib.enums import ErrorCode
from bcr_lib.enums import Severity
from bcr_lib.errors import BcrParseError
from bcr_lib.errors import BcrParseException
from bcr_lib.header.models import BcrHeader
from bcr_lib.header.parser import BcrHeaderParser
from bcr_lib.metadata import MetadataMap
from bcr_lib.options import ParserOptions
from bcr_lib.raster.models import Point3D
from bcr_lib.raster.models import RasterGrid
from bcr_lib.sections import SectionSplitter
from bcr_lib.sections import lines_of
from bcr_lib.trailer.models import BcrTrailerParameters
from bcr_lib.trailer.parser import BcrTrailerParser

logger = logging.getLogger(__name__)


class BcrDocument:
    """A parsed BCR file.

    Example:
        doc = BcrDocument(Path("surface.bcr"))
        if doc.status.has_data:
            profile = doc.profile_at(0)
            point = doc.point_at(10, 0)

    Attributes:
        path: The file that was read
        options: Options the file was read with
        status: Overall parse status
        errors: Errors and warnings collected while parsing
    """

    unit: str = BCR_LENGTH_UNIT

    def __init__(self, path: Path | str, options: ParserOptions | None = None):
        self.path = Path(path)
        self.options = options or ParserOptions()
        self.status = ErrorCode.OK
        self.errors: list[BcrParseError] = []

        self._splitter = SectionSplitter(self.options.variant)
        self._sections: list[str] = []
        self._metadata = MetadataMap(self.options.duplicate_keys)
        self._header: BcrHeader | None = None
        self._trailer = BcrTrailerParameters()
        self._grid: RasterGrid | None = None

        self._load_file()
        self._parse_header()
        self._parse_data()
        self._parse_trailer()
        self._finalize_properties()
        self._check_completeness()
        self._sections = []

        if self.status.has_data:
            logger.info("Read `%s` (status: %s)", self.path, self.status.value)
        else:
            logger.warning("Failed to read `%s`: %s", self.path, self.status.value)

    # -------------------------------------------------------------------------
    # Pipeline stages
    # -------------------------------------------------------------------------

    def _fail(self, exc: BcrParseException) -> None:
        self.status = exc.status
        self.errors.append(exc.to_error())

    def _load_file(self) -> None:
        try:
            with self.path.open(
                mode="r", encoding=self.options.encoding, errors="replace"
            ) as f:
                raw_text = f.read()
        except OSError as e:
            self._fail(
                BcrParseException(
                    f"cannot read file: {e}", status=ErrorCode.NO_FILE
                )
            )
            return

        if not raw_text.strip():
            self._fail(BcrParseException("file is empty", status=ErrorCode.NO_DATA))
            return

        try:
            self._sections = self._splitter.split(raw_text)
        except BcrParseException as e:
            self._fail(e)

    def _parse_header(self) -> None:
        if self.status != ErrorCode.OK:
            return
        parser = BcrHeaderParser(str(self.path))
        lines = lines_of(self._splitter.header_of(self._sections))
        try:
            self._header = parser.parse_lines(lines, self._metadata)
        except BcrParseException as e:
            self.errors.extend(parser.errors)
            self._fail(e)
        else:
            self.errors.extend(parser.errors)

    def _parse_data(self) -> None:
        if self.status != ErrorCode.OK or self._header is None:
            return
        try:
            self._grid = RasterGrid(
                self._header.num_points, self._header.num_profiles
            )
        except (ValueError, MemoryError) as e:
            self._fail(
                BcrParseException(
                    f"cannot allocate {self._header.num_points}x"
                    f"{self._header.num_profiles} grid: {e}",
                    status=ErrorCode.HEADER_PARSE_ERROR,
                )
            )
            return
        parser = BcrDataParser(str(self.path))
        lines = lines_of(self._splitter.data_of(self._sections))
        parser.fill(self._grid, lines, self._header.z_scale)
        self.errors.extend(parser.errors)

    def _parse_trailer(self) -> None:
        if self.status != ErrorCode.OK:
            return
        parser = BcrTrailerParser(str(self.path))
        trailer = self._splitter.trailer_of(self._sections)
        lines = None if trailer is None else lines_of(trailer)
        try:
            self._trailer = parser.parse_lines(lines, self._metadata)
        except BcrParseException as e:
            self.errors.extend(parser.errors)
            self._fail(e)
        else:
            self.errors.extend(parser.errors)

    def _finalize_properties(self) -> None:
        if self.status != ErrorCode.OK or self._grid is None:
            return
        self._grid.x_scale = self._header.x_scale
        self._grid.y_scale = self._header.y_scale
        self._grid.z_scale = self._header.z_scale
        self._grid.x_offset = self._trailer.x_offset
        self._grid.y_offset = self._trailer.y_offset
        self._grid.z_offset = self._trailer.z_offset

    def _check_completeness(self) -> None:
        if self.status != ErrorCode.OK or self._grid is None:
            return
        if not self._grid.is_complete():
            logger.debug(
                "Grid holds %d of %d samples",
                self._grid.samples_written,
                self._grid.size,
            )
            self.status = ErrorCode.INCOMPLETE_DATA

    # -------------------------------------------------------------------------
    # Header and trailer fields
    # -------------------------------------------------------------------------

    @property
    def header(self) -> BcrHeader | None:
        """The parsed header, None if header parsing did not succeed."""
        return self._header

    @property
    def version_field(self) -> str | None:
        return self._header.version_field if self._header else None

    @property
    def manufacturer_id(self) -> str | None:
        return self._header.manufacturer_id if self._header else None

    @property
    def create_date(self) -> datetime.datetime | None:
        return self._header.create_date if self._header else None

    @property
    def mod_date(self) -> datetime.datetime | None:
        return self._header.mod_date if self._header else None

    @property
    def num_points(self) -> int:
        return self._header.num_points if self._header else 0

    @property
    def num_profiles(self) -> int:
        return self._header.num_profiles if self._header else 0

    @property
    def x_scale(self) -> float:
        return self._header.x_scale if self._header else math.nan

    @property
    def y_scale(self) -> float:
        return self._header.y_scale if self._header else math.nan

    @property
    def z_scale(self) -> float:
        return self._header.z_scale if self._header else math.nan

    @property
    def x_offset(self) -> float:
        return self._trailer.x_offset

    @property
    def y_offset(self) -> float:
        return self._trailer.y_offset

    @property
    def z_offset(self) -> float:
        return self._trailer.z_offset

    @property
    def sample_temperature(self) -> float:
        """Sample temperature in °C."""
        return self._trailer.sample_temperature

    @property
    def metadata(self) -> Mapping[str, str]:
        """Read-only header and trailer entries in file order."""
        return self._metadata.as_mapping()

    # -------------------------------------------------------------------------
    # Raster data
    # -------------------------------------------------------------------------

    @property
    def has_data(self) -> bool:
        return self.status.has_data and self._grid is not None

    def is_complete(self) -> bool:
        """Whether every cell of the grid was filled from the file."""
        return self.has_data and self._grid.is_complete()

    def heights(self) -> np.ndarray | None:
        """Read-only array of all heights, shape ``(num_points, num_profiles)``."""
        if not self.has_data:
            return None
        return self._grid.as_array()

    def profile_at(self, profile_index: int) -> np.ndarray | None:
        if not self.has_data:
            return None
        return self._grid.profile_at(profile_index)

    def points_of_profile(self, profile_index: int) -> list[Point3D] | None:
        if not self.has_data:
            return None
        return self._grid.points_of_profile(profile_index)

    def value_at(self, point_index: int, profile_index: int) -> float:
        if not self.has_data:
            return math.nan
        return self._grid.value_at(point_index, profile_index)

    def point_at(self, point_index: int, profile_index: int) -> Point3D | None:
        if not self.has_data:
            return None
        return self._grid.point_at(point_index, profile_index)

    def raise_for_status(self) -> None:
        """Raise ``BcrParseException`` if the document failed to parse.

        ``INCOMPLETE_DATA`` is not a failure and does not raise.
        """
        if self.status.has_data:
            return
        errors = [e for e in self.errors if e.severity == Severity.ERROR]
        message = errors[-1].message if errors else self.status.value
        raise BcrParseException(
            f"{self.path}: {message}",
            errors[-1].location if errors else None,
            status=self.status,
        )

    def __repr__(self) -> str:
        return (
            f"BcrDocument(path={str(self.path)!r}, status={self.status.value}, "
            f"points={self.num_points}, profiles={self.num_profiles})"
        )
