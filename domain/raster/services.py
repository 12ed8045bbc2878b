"""Raster Bounded Context - Domain Services.

Pure domain logic for point queries against a RasterSource.
NO I/O operations - file loading is implemented by infrastructure adapters
under `src/infrastructure/raster/text_grid_adapter.py` via domain ports.

Coordinates here are plain degrees. Fixed-point conversion belongs to the
application layer (application.raster.facade).
"""

from __future__ import annotations

import math

from domain.raster.errors import InvalidGeoreferenceError
from domain.raster.value_objects import (
    BoundingBox,
    RasterDatum,
    RasterGrid,
    RasterSource,
)

# Fractional cell indices closer than this to a cell centre or tie are
# treated as exactly on it; absorbs rounding in (lon - min_x) / xstep
INDEX_TOLERANCE = 1e-9


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------
def build_source(
    grid: RasterGrid, width: int, height: int, bounds: BoundingBox
) -> RasterSource:
    """Anchor a grid to a bounding box, checking the declared dimensions.

    Raises:
        InvalidGeoreferenceError: If width/height do not match the grid shape.
    """
    if grid.width != width or grid.height != height:
        raise InvalidGeoreferenceError(
            f"Declared {width}x{height} does not match grid "
            f"{grid.width}x{grid.height}"
        )
    return RasterSource(grid=grid, bounds=bounds)


# ---------------------------------------------------------------------------
# Helper: Bounds Check
# ---------------------------------------------------------------------------
def is_within_bounds(bounds: BoundingBox, lon: float, lat: float) -> bool:
    """Check if (lon, lat) is within bounds (inclusive)."""
    return bounds.contains(lon, lat)


def fractional_cell(source: RasterSource, lon: float, lat: float) -> tuple[float, float]:
    """Convert degrees to fractional (column, row) indices.

    Row 0 = north edge (max_y), so y is inverted.
    """
    xf = (lon - source.bounds.min_x) / source.xstep
    yf = (source.bounds.max_y - lat) / source.ystep
    return xf, yf


def _snap(value: float, resolution: float) -> float:
    # Pull values within INDEX_TOLERANCE of a multiple of resolution onto it
    nearest = round(value / resolution) * resolution
    return nearest if abs(value - nearest) < INDEX_TOLERANCE else value


def _round_half_down(value: float) -> int:
    # Remainder above one half goes up; exact halves stay on the lower index
    value = _snap(value, 0.5)
    lower = math.floor(value)
    return int(lower + 1) if value - lower > 0.5 else int(lower)


def _clamp(index: int, size: int) -> int:
    return max(0, min(index, size - 1))


# ---------------------------------------------------------------------------
# Nearest Lookup
# ---------------------------------------------------------------------------
def query_nearest(source: RasterSource, lon: float, lat: float) -> RasterDatum:
    """Return the value of the cell nearest to (lon, lat).

    Points outside the bounding box return the invalid datum. Points on the
    eastern or southern edge resolve to the last column or row.
    """
    if not is_within_bounds(source.bounds, lon, lat):
        return RasterDatum.invalid()

    xf, yf = fractional_cell(source, lon, lat)
    column = _clamp(_round_half_down(xf), source.width)
    row = _clamp(_round_half_down(yf), source.height)

    return RasterDatum(datum=source.grid.value_at(column, row))


# ---------------------------------------------------------------------------
# Bilinear Interpolation
# ---------------------------------------------------------------------------
def query_interpolated(source: RasterSource, lon: float, lat: float) -> RasterDatum:
    """Interpolate the value at (lon, lat) from the 4 surrounding cells.

    Each cell value is taken to sit at the cell's centre, so querying the
    exact centre of a cell returns that cell's raw value, and the midpoint
    of four cells returns their average.

    Boundary behavior:
        Corner indices are clamped to the grid. Within half a cell of the
        outer edge this duplicates edge cells, so bilinear degrades to
        linear (on edges) or nearest (on corners).

    The blended value is truncated toward zero.
    """
    if not is_within_bounds(source.bounds, lon, lat):
        return RasterDatum.invalid()

    xf, yf = fractional_cell(source, lon, lat)
    xc = _snap(xf - 0.5, 1.0)
    yc = _snap(yf - 0.5, 1.0)

    left = math.floor(xc)
    right = math.ceil(xc)
    top = math.floor(yc)
    bottom = math.ceil(yc)

    # Fractional position between left/right and top/bottom
    x = xc - left
    y = yc - top

    left = _clamp(left, source.width)
    right = _clamp(right, source.width)
    top = _clamp(top, source.height)
    bottom = _clamp(bottom, source.height)

    grid = source.grid
    top_left = grid.value_at(left, top)
    top_right = grid.value_at(right, top)
    bottom_left = grid.value_at(left, bottom)
    bottom_right = grid.value_at(right, bottom)

    value = (
        top_left * (1 - x) * (1 - y)
        + top_right * x * (1 - y)
        + bottom_left * (1 - x) * y
        + bottom_right * x * y
    )

    return RasterDatum(datum=math.trunc(value))
