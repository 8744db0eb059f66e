# -*- coding: utf-8 -*-
"""Trailer module for parsing the optional BCR trailer section."""

from bcr_lib.trailer.models import BcrTrailerParameters
from bcr_lib.trailer.parser import BcrTrailerParser

__all__ = [
    "BcrTrailerParameters",
    "BcrTrailerParser",
]
