# -*- coding: utf-8 -*-
"""Configuration for reading BCR files."""

import codecs

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import field_validator

from bcr_lib.constants import BCR_ENCODING
from bcr_lib.enums import DuplicateKeyPolicy
from bcr_lib.enums import GrammarVariant


class ParserOptions(BaseModel):
    """Options controlling how a BCR file is read.

    Attributes:
        variant: Section count grammar (see ``GrammarVariant``)
        duplicate_keys: Policy for repeated metadata keys
        encoding: Character encoding of the file
    """

    model_config = ConfigDict(frozen=True)

    variant: GrammarVariant = GrammarVariant.MINIMAL
    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.OVERWRITE
    encoding: str = BCR_ENCODING

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e
        return v
