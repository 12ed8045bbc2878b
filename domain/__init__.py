"""Raster Query Domain Layer.

This package contains the core logic organized by bounded contexts:
- raster: Gridded raster values, georeferencing, point queries
"""

from domain import raster

__all__ = ["raster"]
