# -*- coding: utf-8 -*-
"""Unified interface for BCR file I/O.

This module provides the primary entry point for reading BCR files and
exporting them for other tooling:

1. ``BcrDocument`` parses the file and captures failures as a status
2. ``BcrDocumentSummary`` (a Pydantic model) snapshots the document
3. The summary serializes to JSON via ``model_dump_json()``
"""

from __future__ import annotations

import datetime  # noqa: TC003
import math
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_serializer

from bcr_lib.constants import JSON_ENCODING
from bcr_lib.document import BcrDocument
from bcr_lib.enums import ErrorCode
from bcr_lib.options import ParserOptions


class BcrDocumentSummary(BaseModel):
    """JSON friendly snapshot of a ``BcrDocument``.

    ``heights`` is indexed ``[profile][point]`` so each inner list is one
    profile; NaN values serialize as ``null``.
    """

    model_config = ConfigDict(frozen=True)

    source: str
    status: ErrorCode
    unit: str
    version_field: str | None = None
    manufacturer_id: str | None = None
    create_date: datetime.datetime | None = None
    mod_date: datetime.datetime | None = None
    num_points: int = 0
    num_profiles: int = 0
    x_scale: float | None = None
    y_scale: float | None = None
    z_scale: float | None = None
    x_offset: float = 0.0
    y_offset: float = 0.0
    z_offset: float = 0.0
    sample_temperature: float
    metadata: dict[str, str] = Field(default_factory=dict)
    errors: list[str] = Field(default_factory=list)
    heights: list[list[float | None]] | None = None

    @field_serializer("x_scale", "y_scale", "z_scale")
    def serialize_nan_as_none(self, v: float | None) -> float | None:
        return None if v is None or math.isnan(v) else v


class BcrInterface:
    """Unified interface for BCR file I/O.

    Example:
        doc = BcrInterface.load(Path("surface.bcr"))
        BcrInterface.save_json(doc, Path("surface.json"))
    """

    @classmethod
    def load(
        cls,
        path: Path,
        options: ParserOptions | None = None,
    ) -> BcrDocument:
        """Read a BCR file.

        The returned document always exists; check ``status`` for failures.
        """
        return BcrDocument(path, options)

    @classmethod
    def summarize(
        cls,
        document: BcrDocument,
        *,
        include_data: bool = True,
    ) -> BcrDocumentSummary:
        """Snapshot a document, optionally with its height values."""
        heights = None
        if include_data and document.has_data:
            heights = [
                [None if math.isnan(v) else v for v in profile]
                for profile in document.heights().T.tolist()
            ]

        return BcrDocumentSummary(
            source=str(document.path),
            status=document.status,
            unit=document.unit,
            version_field=document.version_field,
            manufacturer_id=document.manufacturer_id,
            create_date=document.create_date,
            mod_date=document.mod_date,
            num_points=document.num_points,
            num_profiles=document.num_profiles,
            x_scale=document.x_scale,
            y_scale=document.y_scale,
            z_scale=document.z_scale,
            x_offset=document.x_offset,
            y_offset=document.y_offset,
            z_offset=document.z_offset,
            sample_temperature=document.sample_temperature,
            metadata=dict(document.metadata),
            errors=[str(error) for error in document.errors],
            heights=heights,
        )

    @classmethod
    def to_dict(
        cls,
        document: BcrDocument,
        *,
        include_data: bool = True,
    ) -> dict[str, Any]:
        return cls.summarize(document, include_data=include_data).model_dump(
            mode="json"
        )

    @classmethod
    def to_json(
        cls,
        document: BcrDocument,
        *,
        include_data: bool = True,
        indent: int | None = 2,
    ) -> str:
        return cls.summarize(document, include_data=include_data).model_dump_json(
            indent=indent
        )

    @classmethod
    def save_json(
        cls,
        document: BcrDocument,
        path: Path,
        *,
        include_data: bool = True,
    ) -> None:
        """Write a document summary as JSON.

        Args:
            document: Parsed document
            path: Path to write to
            include_data: Whether to include the height values
        """
        path.write_text(
            cls.to_json(document, include_data=include_data),
            encoding=JSON_ENCODING,
        )
