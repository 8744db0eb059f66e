# -*- coding: utf-8 -*-
"""Numeric parameters taken from the BCR trailer section."""

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from bcr_lib.constants import DEFAULT_OFFSET
from bcr_lib.constants import DEFAULT_SAMPLE_TEMPERATURE
from bcr_lib.constants import KEY_SAMPLE_TEMPERATURE
from bcr_lib.constants import KEY_SCAN_FIELD_ORIGIN_X
from bcr_lib.constants import KEY_SCAN_FIELD_ORIGIN_Y
from bcr_lib.constants import KEY_SCAN_FIELD_ORIGIN_Z


class BcrTrailerParameters(BaseModel):
    """Scan field origin (m) and sample temperature (°C).

    The aliases are the case-sensitive trailer keys the values are read from.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    x_offset: float = Field(default=DEFAULT_OFFSET, alias=KEY_SCAN_FIELD_ORIGIN_X)
    y_offset: float = Field(default=DEFAULT_OFFSET, alias=KEY_SCAN_FIELD_ORIGIN_Y)
    z_offset: float = Field(default=DEFAULT_OFFSET, alias=KEY_SCAN_FIELD_ORIGIN_Z)
    sample_temperature: float = Field(
        default=DEFAULT_SAMPLE_TEMPERATURE,
        alias=KEY_SAMPLE_TEMPERATURE,
    )
