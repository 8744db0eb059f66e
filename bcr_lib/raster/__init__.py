# -*- coding: utf-8 -*-
"""Raster module holding the BCR height grid."""

from bcr_lib.raster.models import Point3D
from bcr_lib.raster.models import RasterGrid

__all__ = [
    "Point3D",
    "RasterGrid",
]
