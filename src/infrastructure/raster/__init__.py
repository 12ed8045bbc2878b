"""Infrastructure adapters for the raster bounded context.

This module provides the infrastructure layer implementations for raster
operations, including loading grids from whitespace-delimited text files.
"""

from .text_grid_adapter import TextGridAdapter

__all__ = ["TextGridAdapter"]
