"""Configuration for raster loading and querying.

Values come from keyword arguments first, then environment variables:

- RASTER_COORDINATE_PRECISION: fixed-point scale of caller coordinates
  (degrees * precision), default 1_000_000
- RASTER_MAX_CELLS: optional cap on width*height per loaded source
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

COORDINATE_PRECISION = 1_000_000.0

_ENV_FIELDS = {
    "coordinate_precision": "RASTER_COORDINATE_PRECISION",
    "max_cells": "RASTER_MAX_CELLS",
}


class RasterSettings(BaseModel):
    coordinate_precision: float = Field(default=COORDINATE_PRECISION, gt=0)
    max_cells: int | None = Field(default=None, gt=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def read_environment(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for field, env in _ENV_FIELDS.items():
            value = os.getenv(env)
            if field not in data and value:
                data[field] = value.strip()
        return data


class RasterSourceSpec(BaseModel):
    """Declaration of one raster source, as supplied by setup configuration."""

    path: Path
    xmin: float
    xmax: float
    ymin: float
    ymax: float
    nrows: int = Field(gt=0)
    ncols: int = Field(gt=0)

    model_config = ConfigDict(frozen=True)


@lru_cache
def get_settings() -> RasterSettings:
    return RasterSettings()
