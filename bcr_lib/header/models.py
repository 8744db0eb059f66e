# -*- coding: utf-8 -*-
"""Header model for BCR files.

Unparsable fields keep a sentinel rather than failing validation:
counts become -1, scales NaN and timestamps None. ``problems()`` reports
which of them keep the header from being usable.
"""

from __future__ import annotations

import datetime  # noqa: TC003
import math

from pydantic import BaseModel
from pydantic import ConfigDict


class BcrHeader(BaseModel):
    """Fixed fields of a BCR header section."""

    model_config = ConfigDict(frozen=True)

    version_field: str
    manufacturer_id: str | None = None
    create_date: datetime.datetime | None = None
    mod_date: datetime.datetime | None = None
    num_points: int = 0
    num_profiles: int = 0
    x_scale: float = math.nan
    y_scale: float = math.nan
    z_scale: float = math.nan

    def problems(self) -> list[str]:
        """Describe every required field that is missing or invalid."""
        problems: list[str] = []
        if self.num_points <= 0:
            problems.append(f"NumPoints must be > 0, got {self.num_points}")
        if self.num_profiles <= 0:
            problems.append(f"NumProfiles must be > 0, got {self.num_profiles}")
        for key, scale in (
            ("XScale", self.x_scale),
            ("YScale", self.y_scale),
            ("ZScale", self.z_scale),
        ):
            if math.isnan(scale):
                problems.append(f"{key} is missing or not a number")
        if self.create_date is None:
            problems.append("CreateDate is missing or not a valid date")
        if self.mod_date is None:
            problems.append("ModDate is missing or not a valid date")
        return problems

    @property
    def is_valid(self) -> bool:
        return not self.problems()
