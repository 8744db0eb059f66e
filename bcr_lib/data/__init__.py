# -*- coding: utf-8 -*-
"""Data module for parsing the BCR data section."""

from bcr_lib.data.parser import BcrDataParser

__all__ = [
    "BcrDataParser",
]
