"""Application services for the raster bounded context.

Typical setup-then-query flow::

    registry = RasterSourceRegistry()
    handle = registry.load("penalty.asc", 5.0, 6.0, 50.0, 51.0, 100, 100).unwrap()
    datum = query_interpolated(registry, handle, 5_500_000, 50_500_000).unwrap()
"""

from .facade import query_by_handle, query_interpolated, query_nearest, to_degrees
from .registry import QueryMode, RasterSourceRegistry
from .results import LoadResult, QueryResult
from .settings import RasterSettings, RasterSourceSpec, get_settings

__all__ = [
    "LoadResult",
    "QueryMode",
    "QueryResult",
    "RasterSettings",
    "RasterSourceRegistry",
    "RasterSourceSpec",
    "get_settings",
    "query_by_handle",
    "query_interpolated",
    "query_nearest",
    "to_degrees",
]
