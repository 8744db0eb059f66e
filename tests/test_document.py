# -*- coding: utf-8 -*-
"""Tests for document module (complete parse pipeline)."""

import math
from datetime import datetime

import numpy as np
import pytest
from pydantic import ValidationError

from bcr_lib.document import BcrDocument
from bcr_lib.enums import DuplicateKeyPolicy
from bcr_lib.enums import ErrorCode
from bcr_lib.enums import GrammarVariant
from bcr_lib.errors import BcrParseException
from bcr_lib.options import ParserOptions
from bcr_lib.raster.models import Point3D


class TestSampleFiles:
    """Tests against the files in tests/artifacts."""

    def test_surface(self, surface_path):
        doc = BcrDocument(surface_path)

        assert doc.status == ErrorCode.OK
        assert doc.is_complete()
        assert doc.version_field == "aBCR-1.0"
        assert doc.manufacturer_id == "BEV-NanoScan"
        assert doc.create_date == datetime(2023, 2, 1, 12, 30)
        assert doc.mod_date == datetime(2023, 3, 15, 8, 15)
        assert doc.num_points == 4
        assert doc.num_profiles == 3
        assert doc.x_scale == pytest.approx(1.0e-6)
        assert doc.y_scale == pytest.approx(2.0e-6)
        assert doc.z_scale == pytest.approx(1.0e-9)
        assert doc.x_offset == pytest.approx(0.002)
        assert doc.y_offset == pytest.approx(0.001)
        assert doc.z_offset == 0.0
        assert doc.sample_temperature == pytest.approx(20.5)
        assert doc.metadata["Operator"] == "J. Doe"
        assert "MetaDataInFile" not in doc.metadata
        assert doc.errors == []

    def test_surface_values(self, surface_path):
        doc = BcrDocument(surface_path)
        assert doc.value_at(0, 0) == pytest.approx(1.0e-9)
        assert doc.value_at(3, 2) == pytest.approx(12.0e-9)
        np.testing.assert_allclose(doc.profile_at(1), [5e-9, 6e-9, 7e-9, 8e-9])

    def test_surface_points(self, surface_path):
        doc = BcrDocument(surface_path)
        point = doc.point_at(2, 1)
        assert point.x == pytest.approx(2 * 1.0e-6 + 0.002)
        assert point.y == pytest.approx(1 * 2.0e-6 + 0.001)
        assert point.z == pytest.approx(7.0e-9)

        points = doc.points_of_profile(2)
        assert len(points) == 4
        assert all(isinstance(p, Point3D) for p in points)
        assert points[-1].z == pytest.approx(12.0e-9)

    def test_no_trailer(self, no_trailer_path):
        doc = BcrDocument(no_trailer_path)
        assert doc.status == ErrorCode.OK
        assert doc.metadata["MetaDataInFile"] == "none"
        assert list(doc.metadata)[-1] == "MetaDataInFile"
        assert doc.x_offset == 0.0
        assert doc.sample_temperature == 20.0

    def test_z_scale_applied(self, no_trailer_path):
        """Test that ZScale 2.0 and sample 3.5 give a stored 7.0."""
        doc = BcrDocument(no_trailer_path)
        assert doc.value_at(0, 0) == 7.0
        assert doc.value_at(2, 1) == -1.0

    def test_truncated(self, truncated_path):
        doc = BcrDocument(truncated_path)
        assert doc.status == ErrorCode.INCOMPLETE_DATA
        assert not doc.is_complete()
        assert doc.value_at(1, 2) == 10.0
        assert doc.value_at(2, 2) == 0.0
        assert doc.value_at(3, 2) == 0.0
        assert doc.profile_at(2) is not None
        doc.raise_for_status()


class TestStatusCodes:
    """Tests for failure statuses."""

    def test_missing_file(self, tmp_path):
        doc = BcrDocument(tmp_path / "missing.bcr")
        assert doc.status == ErrorCode.NO_FILE
        assert doc.errors

    def test_directory_is_no_file(self, tmp_path):
        assert BcrDocument(tmp_path).status == ErrorCode.NO_FILE

    @pytest.mark.parametrize("text", ["", "   \r\n\t\n"])
    def test_empty_file(self, write_bcr, text):
        assert BcrDocument(write_bcr(text)).status == ErrorCode.NO_DATA

    def test_invalid_section_count(self, write_bcr, header_text):
        doc = BcrDocument(write_bcr(header_text()))
        assert doc.status == ErrorCode.INVALID_SECTION_COUNT

    def test_too_many_sections(self, write_bcr, bcr_text):
        doc = BcrDocument(write_bcr(bcr_text(trailer="A = 1") + "extra*\n"))
        assert doc.status == ErrorCode.INVALID_SECTION_COUNT

    def test_bad_header_section(self, write_bcr, bcr_text):
        doc = BcrDocument(write_bcr(bcr_text(header="aBCR\nNumPoints = 3\n")))
        assert doc.status == ErrorCode.BAD_HEADER_SECTION

    def test_invalid_version_field(self, write_bcr, bcr_text, header_text):
        """Test that a `B...` version fails regardless of other content."""
        doc = BcrDocument(write_bcr(bcr_text(header=header_text(version="BCR-1.0"))))
        assert doc.status == ErrorCode.INVALID_VERSION_FIELD

    @pytest.mark.parametrize(
        "overrides",
        [
            {"NumPoints": "0"},
            {"NumProfiles": "abc"},
            {"XScale": None},
            {"ZScale": "n/a"},
            {"CreateDate": "01022023123"},
            {"ModDate": None},
        ],
    )
    def test_header_parse_error(self, write_bcr, bcr_text, header_text, overrides):
        header = header_text(**overrides) + "Padding = 1\n"
        doc = BcrDocument(write_bcr(bcr_text(header=header)))
        assert doc.status == ErrorCode.HEADER_PARSE_ERROR

    @pytest.mark.parametrize(
        "overrides",
        [
            {"NumPoints": "99999999999", "NumProfiles": "99999999999"},
            {"NumPoints": "٣"},
        ],
    )
    def test_count_not_an_int32(self, write_bcr, bcr_text, header_text, overrides):
        doc = BcrDocument(write_bcr(bcr_text(header=header_text(**overrides))))
        assert doc.status == ErrorCode.HEADER_PARSE_ERROR
        assert doc.num_points == 0

    def test_grid_too_large_to_allocate(self, write_bcr, bcr_text, header_text):
        """Test that counts valid on their own but too large together fail."""
        header = header_text(NumPoints="2000000000", NumProfiles="2000000000")
        doc = BcrDocument(write_bcr(bcr_text(header=header)))
        assert doc.status == ErrorCode.HEADER_PARSE_ERROR
        assert not doc.has_data
        assert doc.heights() is None
        assert "cannot allocate" in doc.errors[-1].message

    def test_unknown_encoding_is_rejected(self):
        with pytest.raises(ValidationError, match="unknown encoding"):
            ParserOptions(encoding="no-such-codec")

    def test_duplicate_key_error_policy(self, write_bcr, bcr_text):
        path = write_bcr(bcr_text(trailer="ManufacID = Other"))
        options = ParserOptions(duplicate_keys=DuplicateKeyPolicy.ERROR)
        doc = BcrDocument(path, options)
        assert doc.status == ErrorCode.DUPLICATE_METADATA_KEY

    def test_duplicate_key_overwrite_policy(self, write_bcr, bcr_text):
        path = write_bcr(bcr_text(trailer="ManufacID = Other"))
        doc = BcrDocument(path)
        assert doc.status == ErrorCode.OK
        assert doc.metadata["ManufacID"] == "Other"
        assert doc.manufacturer_id == "TestScan"


class TestFailureSentinels:
    """Tests that accessors degrade instead of raising on failure."""

    @pytest.fixture
    def failed_doc(self, tmp_path):
        return BcrDocument(tmp_path / "missing.bcr")

    def test_accessors(self, failed_doc):
        assert math.isnan(failed_doc.value_at(0, 0))
        assert failed_doc.point_at(0, 0) is None
        assert failed_doc.profile_at(0) is None
        assert failed_doc.points_of_profile(0) is None
        assert failed_doc.heights() is None
        assert not failed_doc.is_complete()

    def test_header_fields(self, failed_doc):
        assert failed_doc.header is None
        assert failed_doc.version_field is None
        assert failed_doc.create_date is None
        assert failed_doc.num_points == 0
        assert math.isnan(failed_doc.x_scale)
        assert failed_doc.x_offset == 0.0
        assert failed_doc.sample_temperature == 20.0

    def test_first_failure_wins(self, write_bcr, bcr_text, header_text):
        """Test that later stages do not run after a failure."""
        header = header_text(version="BCR", NumPoints="0")
        doc = BcrDocument(write_bcr(bcr_text(header=header, trailer="A = 1")))
        assert doc.status == ErrorCode.INVALID_VERSION_FIELD
        assert "A" not in doc.metadata
        assert "MetaDataInFile" not in doc.metadata

    def test_raise_for_status(self, failed_doc):
        with pytest.raises(BcrParseException, match="cannot read file") as exc_info:
            failed_doc.raise_for_status()
        assert exc_info.value.status == ErrorCode.NO_FILE


class TestAccessorRanges:
    """Tests for out-of-range lookups on a valid document."""

    @pytest.mark.parametrize(
        ("point", "profile"),
        [(-1, 0), (0, -1), (3, 0), (0, 2), (100, 100)],
    )
    def test_value_out_of_range(self, no_trailer_path, point, profile):
        doc = BcrDocument(no_trailer_path)
        assert math.isnan(doc.value_at(point, profile))

    def test_all_in_range_values_are_finite(self, no_trailer_path):
        doc = BcrDocument(no_trailer_path)
        for point in range(doc.num_points):
            for profile in range(doc.num_profiles):
                assert not math.isnan(doc.value_at(point, profile))

    def test_profile_out_of_range(self, no_trailer_path):
        profile = BcrDocument(no_trailer_path).profile_at(5)
        assert np.isnan(profile).all()

    def test_heights_read_only(self, no_trailer_path):
        heights = BcrDocument(no_trailer_path).heights()
        assert heights.shape == (3, 2)
        with pytest.raises(ValueError):
            heights[0, 0] = 1.0


class TestGrammarVariants:
    """Tests for the section count grammar option."""

    def test_extended_reads_trailer(self, surface_path):
        options = ParserOptions(variant=GrammarVariant.EXTENDED)
        doc = BcrDocument(surface_path, options)
        assert doc.status == ErrorCode.OK
        assert doc.x_offset == pytest.approx(0.002)

    def test_extended_needs_closing_line_break(self, write_bcr, bcr_text):
        text = bcr_text(trailer="A = 1").rstrip("\n")
        options = ParserOptions(variant=GrammarVariant.EXTENDED)
        doc = BcrDocument(write_bcr(text), options)
        assert doc.status == ErrorCode.OK
        assert doc.metadata["MetaDataInFile"] == "none"
        assert "A" not in doc.metadata

    def test_minimal_without_closing_line_break(self, write_bcr, bcr_text):
        text = bcr_text(trailer="A = 1").rstrip("\n")
        doc = BcrDocument(write_bcr(text))
        assert doc.metadata["A"] == "1"


class TestWarnings:
    """Tests for tolerated problems."""

    def test_bad_sample_is_nan(self, write_bcr, bcr_text):
        doc = BcrDocument(write_bcr(bcr_text(data="1 2 x\n4 5 6\n")))
        assert doc.status == ErrorCode.OK
        assert math.isnan(doc.value_at(2, 0))
        assert len(doc.errors) == 1

    def test_surplus_samples(self, write_bcr, bcr_text):
        doc = BcrDocument(write_bcr(bcr_text(data="1 2 3 4 5 6 7 8\n")))
        assert doc.status == ErrorCode.OK
        assert doc.is_complete()
        assert doc.value_at(2, 1) == 6.0

    def test_repr(self, no_trailer_path):
        assert "status=ok" in repr(BcrDocument(no_trailer_path))
