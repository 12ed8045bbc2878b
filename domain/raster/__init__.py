"""Raster Bounded Context.

Responsible for gridded per-location scalar data (elevation, penalties):
- Value Objects: BoundingBox, RasterGrid, RasterSource, RasterDatum
- Services: query_nearest, query_interpolated
"""
