# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides shared fixtures for accessing the sample BCR files in
``tests/artifacts`` and for writing ad-hoc BCR files to a temporary
directory.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

# =============================================================================
# Path Constants
# =============================================================================

ARTIFACTS_DIR = Path(__file__).parent / "artifacts"


# =============================================================================
# BCR Builders
# =============================================================================

DEFAULT_HEADER_FIELDS: dict[str, str] = {
    "ManufacID": "TestScan",
    "CreateDate": "010220231230",
    "ModDate": "020220231245",
    "NumPoints": "3",
    "NumProfiles": "2",
    "XScale": "0.5",
    "YScale": "0.25",
    "ZScale": "1.0",
    "ZResolution": "-1",
    "Compression": "0",
    "DataType": "7",
    "CheckType": "0",
}


def build_header(version: str = "aBCR-1.0", **overrides: str | None) -> str:
    """Build a header section; an override of None drops that key."""
    fields = {**DEFAULT_HEADER_FIELDS, **overrides}
    lines = [version]
    lines += [f"{key} = {value}" for key, value in fields.items() if value is not None]
    return "\n".join(lines) + "\n"


def build_bcr(
    header: str | None = None,
    data: str = "1 2 3\n4 5 6\n",
    trailer: str | None = None,
) -> str:
    """Assemble a complete BCR text from its sections."""
    text = (header if header is not None else build_header()) + "*\n" + data + "*\n"
    if trailer is not None:
        text += trailer + "*\n"
    return text


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def artifacts_dir() -> Path:
    """Return path to test artifacts directory."""
    return ARTIFACTS_DIR


@pytest.fixture
def surface_path() -> Path:
    """4x3 sample with a trailer."""
    return ARTIFACTS_DIR / "surface.bcr"


@pytest.fixture
def no_trailer_path() -> Path:
    """3x2 sample with ZScale 2.0 and no trailer."""
    return ARTIFACTS_DIR / "surface_no_trailer.bcr"


@pytest.fixture
def truncated_path() -> Path:
    """4x3 sample whose data section stops after 10 samples."""
    return ARTIFACTS_DIR / "truncated.bcr"


@pytest.fixture
def write_bcr(tmp_path: Path) -> Callable[..., Path]:
    """Return a function writing text to a file in ``tmp_path``."""

    def _write(text: str, name: str = "test.bcr") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def bcr_text() -> Callable[..., str]:
    """Return ``build_bcr`` for tests that assemble files section by section."""
    return build_bcr


@pytest.fixture
def header_text() -> Callable[..., str]:
    """Return ``build_header``."""
    return build_header
