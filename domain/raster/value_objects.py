"""Raster Bounded Context - Value Objects.

Immutable data structures for gridded raster data and its georeference.
All validation occurs at construction time via Pydantic.

Grid layout: row-major, row 0 is the northern edge (max_y), column 0 is the
western edge (min_x). A flat index for (column, row) is row * width + column.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from domain.raster.errors import MalformedInputError

# ---------------------------------------------------------------------------
# Numeric Constants
# ---------------------------------------------------------------------------
INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)

# Sentinel datum meaning "no data for this query"
INVALID_DATUM = INT32_MAX


def calc_cell_size(min_value: float, max_value: float, count: int) -> float:
    """Return the per-cell step along one axis, in degrees per cell."""
    if count <= 0:
        raise ValueError(f"Cell count must be positive, got {count}")
    return (max_value - min_value) / count


class BoundingBox(BaseModel):
    """Geographic extent of a raster in degrees (Value Object).

    Invariants are enforced at construction time - invalid BoundingBox
    cannot be instantiated.
    """

    min_x: float  # Western boundary (longitude)
    min_y: float  # Southern boundary (latitude)
    max_x: float  # Eastern boundary (longitude)
    max_y: float  # Northern boundary (latitude)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_bounds(self) -> "BoundingBox":
        for name in ("min_x", "min_y", "max_x", "max_y"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite: {getattr(self, name)}")
        # Longitude range
        if not (-180 <= self.min_x <= 180):
            raise ValueError(f"min_x longitude out of range: {self.min_x}")
        if not (-180 <= self.max_x <= 180):
            raise ValueError(f"max_x longitude out of range: {self.max_x}")
        # Latitude range
        if not (-90 <= self.min_y <= 90):
            raise ValueError(f"min_y latitude out of range: {self.min_y}")
        if not (-90 <= self.max_y <= 90):
            raise ValueError(f"max_y latitude out of range: {self.max_y}")
        # Ordering
        if not (self.min_x < self.max_x):
            raise ValueError(
                f"Invalid x ordering: min_x={self.min_x} >= max_x={self.max_x}"
            )
        if not (self.min_y < self.max_y):
            raise ValueError(
                f"Invalid y ordering: min_y={self.min_y} >= max_y={self.max_y}"
            )
        return self

    def contains(self, lon: float, lat: float) -> bool:
        """Inclusive containment test."""
        return self.min_x <= lon <= self.max_x and self.min_y <= lat <= self.max_y


class RasterGrid(BaseModel):
    """Immutable integer matrix of raster values (Value Object).

    The data array is made read-only at construction time. Attempts to
    modify it afterwards raise ValueError.
    """

    data: NDArray[np.int32]  # 2D int32 array (height x width), read-only

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def validate_grid(self) -> "RasterGrid":
        if self.data.ndim != 2:
            raise ValueError(f"Data must be 2D, got {self.data.ndim}D")
        if self.data.shape[0] == 0 or self.data.shape[1] == 0:
            raise ValueError(f"Data cannot be empty: {self.data.shape}")
        if self.data.dtype != np.int32:
            raise ValueError(f"Data must be int32, got {self.data.dtype}")

        # Owned, contiguous, frozen copy so caller arrays are never aliased
        immutable = np.array(self.data, dtype=np.int32, copy=True, order="C")
        immutable.flags.writeable = False
        object.__setattr__(self, "data", immutable)

        return self

    @classmethod
    def from_values(cls, values: Sequence[int], width: int, height: int) -> "RasterGrid":
        """Build a grid from a flat row-major sequence.

        Raises:
            MalformedInputError: If the value count is not width * height, or
                a value does not fit in a signed 32-bit integer.
        """
        expected = width * height
        if len(values) != expected:
            raise MalformedInputError(
                f"Expected {expected} values ({width}x{height}), got {len(values)}"
            )
        try:
            wide = np.asarray(values, dtype=np.int64)
        except OverflowError as e:
            raise MalformedInputError("Raster value out of 32-bit integer range") from e
        if wide.size and (wide.min() < INT32_MIN or wide.max() > INT32_MAX):
            raise MalformedInputError("Raster value out of 32-bit integer range")
        return cls(data=wide.astype(np.int32).reshape(height, width))

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    def value_at(self, column: int, row: int) -> int:
        """Return the value at (column, row).

        Out-of-range indices are a caller bug and fail fast; negative indices
        are rejected rather than wrapped.
        """
        if not (0 <= column < self.width and 0 <= row < self.height):
            raise IndexError(
                f"Cell ({column}, {row}) outside {self.width}x{self.height} grid"
            )
        return int(self.data[row, column])


class RasterSource(BaseModel):
    """Raster grid anchored to a geographic bounding box (Value Object).

    Step sizes are derived once at construction:
        xstep = (max_x - min_x) / width
        ystep = (max_y - min_y) / height
    """

    grid: RasterGrid
    bounds: BoundingBox

    model_config = ConfigDict(frozen=True)

    _xstep: float = PrivateAttr()
    _ystep: float = PrivateAttr()

    def model_post_init(self, context: Any, /) -> None:
        self._xstep = calc_cell_size(self.bounds.min_x, self.bounds.max_x, self.width)
        self._ystep = calc_cell_size(self.bounds.min_y, self.bounds.max_y, self.height)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def xstep(self) -> float:
        return self._xstep

    @property
    def ystep(self) -> float:
        return self._ystep


class RasterDatum(BaseModel):
    """Result of a point query (Value Object).

    INVALID_DATUM signals "no data here" (e.g., query outside bounds) and is
    distinct from any error condition.
    """

    datum: int = Field(default=INVALID_DATUM, ge=INT32_MIN, le=INT32_MAX)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def invalid(cls) -> "RasterDatum":
        return cls()

    @property
    def is_valid(self) -> bool:
        return self.datum != INVALID_DATUM
