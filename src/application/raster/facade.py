"""Fixed-point query entry points for the routing engine.

The routing engine carries coordinates as integers (degrees scaled by the
coordinate precision). These functions convert to degrees and dispatch to
the source behind a handle; the domain math never sees fixed-point values.
"""

from __future__ import annotations

from .registry import QueryMode, RasterSourceRegistry
from .results import QueryResult


def to_degrees(fixed: int, precision: float) -> float:
    """Convert a fixed-point coordinate to degrees.

    Raises:
        ValueError: If precision is not positive
    """
    if precision <= 0:
        raise ValueError(f"Coordinate precision must be positive, got {precision}")
    return fixed / precision


def query_by_handle(
    registry: RasterSourceRegistry,
    handle: int,
    lon_fixed: int,
    lat_fixed: int,
    mode: QueryMode = QueryMode.NEAREST,
    precision: float | None = None,
) -> QueryResult:
    """Query a loaded source with fixed-point coordinates.

    Args:
        registry: Registry owning the source
        handle: Handle returned by RasterSourceRegistry.load
        lon_fixed: Longitude in degrees * precision
        lat_fixed: Latitude in degrees * precision
        mode: Nearest-cell or bilinear lookup
        precision: Fixed-point scale; defaults to the registry settings

    Returns:
        QueryResult holding a datum (the invalid sentinel outside bounds), or
        InvalidHandleError for an unknown handle

    Raises:
        ValueError: If precision is not positive
    """
    if precision is None:
        precision = registry.settings.coordinate_precision
    return registry.query(
        handle,
        to_degrees(lon_fixed, precision),
        to_degrees(lat_fixed, precision),
        mode,
    )


def query_nearest(
    registry: RasterSourceRegistry,
    handle: int,
    lon_fixed: int,
    lat_fixed: int,
    precision: float | None = None,
) -> QueryResult:
    return query_by_handle(
        registry, handle, lon_fixed, lat_fixed, QueryMode.NEAREST, precision
    )


def query_interpolated(
    registry: RasterSourceRegistry,
    handle: int,
    lon_fixed: int,
    lat_fixed: int,
    precision: float | None = None,
) -> QueryResult:
    return query_by_handle(
        registry, handle, lon_fixed, lat_fixed, QueryMode.INTERPOLATED, precision
    )
