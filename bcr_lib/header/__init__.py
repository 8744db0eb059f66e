# -*- coding: utf-8 -*-
"""Header module for parsing the BCR header section."""

from bcr_lib.header.models import BcrHeader
from bcr_lib.header.parser import BcrHeaderParser

__all__ = [
    "BcrHeader",
    "BcrHeaderParser",
]
