# -*- coding: utf-8 -*-
"""File I/O operations for BCR files.

This module provides keyword-argument wrappers around BcrInterface.

For new code, prefer using BcrInterface directly:

    from bcr_lib.interface import BcrInterface

    doc = BcrInterface.load(Path("surface.bcr"))
    BcrInterface.save_json(doc, Path("surface.json"))
"""

from pathlib import Path

from bcr_lib.constants import BCR_ENCODING
from bcr_lib.document import BcrDocument
from bcr_lib.enums import DuplicateKeyPolicy
from bcr_lib.enums import GrammarVariant
from bcr_lib.interface import BcrInterface
from bcr_lib.options import ParserOptions

__all__ = [
    "read_bcr_file",
    "save_bcr_json",
]


def read_bcr_file(
    path: Path,
    *,
    variant: GrammarVariant = GrammarVariant.MINIMAL,
    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.OVERWRITE,
    encoding: str = BCR_ENCODING,
) -> BcrDocument:
    """Read a BCR file.

    Args:
        path: Path to the .bcr file
        variant: Section count grammar
        duplicate_keys: Policy for repeated metadata keys
        encoding: Character encoding (default: UTF-8)

    Returns:
        Parsed document; check its ``status`` for failures
    """
    options = ParserOptions(
        variant=variant,
        duplicate_keys=duplicate_keys,
        encoding=encoding,
    )
    return BcrInterface.load(path, options)


def save_bcr_json(
    path: Path,
    document: BcrDocument,
    *,
    include_data: bool = True,
) -> None:
    """Save a parsed document as JSON.

    Args:
        path: Path to write JSON file
        document: Document to serialize
        include_data: Whether to include the height values
    """
    BcrInterface.save_json(document, path, include_data=include_data)
