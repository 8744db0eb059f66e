# -*- coding: utf-8 -*-
"""Raster data model for BCR height maps.

Heights are stored in a dense ``NumPoints x NumProfiles`` array indexed by
``(point, profile)``. The array is allocated up front and filled one sample
at a time in the order the data section lists them.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

from bcr_lib.constants import DEFAULT_GRID_SCALE
from bcr_lib.constants import DEFAULT_OFFSET


class Point3D(NamedTuple):
    """An immutable point (x, y, z) in physical units (metres)."""

    x: float
    y: float
    z: float

    def __str__(self) -> str:
        return f"[Point3D - X:{self.x!r} Y:{self.y!r} Z:{self.z!r}]"

    @property
    def is_valid(self) -> bool:
        """False if any coordinate is NaN."""
        return not any(math.isnan(c) for c in self)


class RasterGrid:
    """Dense grid of heights with conversion to physical coordinates.

    Scales and offsets only affect the coordinates returned by
    ``point_at``; the stored heights are never modified by them.
    """

    def __init__(self, num_points: int, num_profiles: int) -> None:
        if num_points <= 0 or num_profiles <= 0:
            raise ValueError(
                f"grid dimensions must be positive, got {num_points}x{num_profiles}"
            )
        self.num_points = num_points
        self.num_profiles = num_profiles
        self.x_scale = DEFAULT_GRID_SCALE
        self.y_scale = DEFAULT_GRID_SCALE
        self.z_scale = DEFAULT_GRID_SCALE
        self.x_offset = DEFAULT_OFFSET
        self.y_offset = DEFAULT_OFFSET
        self.z_offset = DEFAULT_OFFSET
        self._heights = np.zeros((num_points, num_profiles), dtype=np.float64)
        self._cursor = 0

    @property
    def size(self) -> int:
        """Number of cells, ``num_points * num_profiles``."""
        return self.num_points * self.num_profiles

    @property
    def samples_written(self) -> int:
        return self._cursor

    def fill_next(self, value: float) -> bool:
        """Store a sample at the running index and advance it.

        Samples beyond the grid size are ignored.

        Returns:
            True if the value was stored
        """
        if self._cursor >= self.size:
            return False
        profile_index, point_index = divmod(self._cursor, self.num_points)
        self._heights[point_index, profile_index] = value
        self._cursor += 1
        return True

    def is_complete(self) -> bool:
        return self._cursor == self.size

    def _in_range(self, point_index: int, profile_index: int) -> bool:
        return (
            0 <= point_index < self.num_points
            and 0 <= profile_index < self.num_profiles
        )

    def value_at(self, point_index: int, profile_index: int) -> float:
        """Stored height, or NaN for an index outside the grid."""
        if not self._in_range(point_index, profile_index):
            return math.nan
        return float(self._heights[point_index, profile_index])

    def point_at(self, point_index: int, profile_index: int) -> Point3D:
        """Physical coordinates of a grid cell.

        A coordinate whose index lies outside the grid is NaN.
        """
        x = point_index * self.x_scale + self.x_offset
        y = profile_index * self.y_scale + self.y_offset
        if not 0 <= point_index < self.num_points:
            x = math.nan
        if not 0 <= profile_index < self.num_profiles:
            y = math.nan
        z = self.value_at(point_index, profile_index) + self.z_offset
        return Point3D(x, y, z)

    def profile_at(self, profile_index: int) -> np.ndarray:
        """Heights of one profile; all NaN if the index is out of range."""
        if not 0 <= profile_index < self.num_profiles:
            return np.full(self.num_points, np.nan, dtype=np.float64)
        return self._heights[:, profile_index].copy()

    def points_of_profile(self, profile_index: int) -> list[Point3D]:
        return [
            self.point_at(point_index, profile_index)
            for point_index in range(self.num_points)
        ]

    def as_array(self) -> np.ndarray:
        """Read-only view of all heights, shape ``(num_points, num_profiles)``."""
        view = self._heights.view()
        view.flags.writeable = False
        return view
