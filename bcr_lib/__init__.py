# -*- coding: utf-8 -*-
"""BCR Reader Library.

A Python library for reading surface topography raster files in the BCR
text format (ISO 25178-7, ISO 25178-71, EUNA 15178).

Usage:
    from bcr_lib import BcrDocument, ErrorCode

    doc = BcrDocument(Path("surface.bcr"))
    if doc.status.has_data:
        heights = doc.profile_at(0)
        point = doc.point_at(3, 0)
    else:
        print(doc.status, doc.errors)
"""

__version__ = "0.1.0"

# Constants
from bcr_lib.constants import BCR_ENCODING
from bcr_lib.constants import BCR_LENGTH_UNIT
from bcr_lib.constants import DEFAULT_SAMPLE_TEMPERATURE
from bcr_lib.constants import JSON_ENCODING
from bcr_lib.document import BcrDocument

# Enums
from bcr_lib.enums import DuplicateKeyPolicy
from bcr_lib.enums import ErrorCode
from bcr_lib.enums import GrammarVariant
from bcr_lib.enums import SectionName
from bcr_lib.enums import Severity
from bcr_lib.errors import BcrDuplicateKeyError
from bcr_lib.errors import BcrParseError
from bcr_lib.errors import BcrParseException
from bcr_lib.errors import BcrSectionCountError
from bcr_lib.errors import SourceLocation
from bcr_lib.header.models import BcrHeader
from bcr_lib.interface import BcrDocumentSummary
from bcr_lib.interface import BcrInterface
from bcr_lib.io import read_bcr_file
from bcr_lib.io import save_bcr_json
from bcr_lib.options import ParserOptions
from bcr_lib.raster.models import Point3D
from bcr_lib.raster.models import RasterGrid
from bcr_lib.sections import SectionLayout
from bcr_lib.sections import SectionSplitter
from bcr_lib.trailer.models import BcrTrailerParameters

__all__ = [
    # Constants
    "BCR_ENCODING",
    "BCR_LENGTH_UNIT",
    "DEFAULT_SAMPLE_TEMPERATURE",
    "JSON_ENCODING",
    # Documents
    "BcrDocument",
    "BcrDocumentSummary",
    # Errors
    "BcrDuplicateKeyError",
    "BcrHeader",
    "BcrInterface",
    "BcrParseError",
    "BcrParseException",
    "BcrSectionCountError",
    "BcrTrailerParameters",
    # Enums
    "DuplicateKeyPolicy",
    "ErrorCode",
    "GrammarVariant",
    "ParserOptions",
    # Raster
    "Point3D",
    "RasterGrid",
    "SectionLayout",
    "SectionName",
    "SectionSplitter",
    "Severity",
    "SourceLocation",
    # I/O
    "read_bcr_file",
    "save_bcr_json",
]
