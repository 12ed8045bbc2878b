"""Domain Port(s) for Raster I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .value_objects import RasterGrid


class RasterRepository(Protocol):
    """Port for obtaining raster grids from external sources.

    Implementations live in infrastructure (e.g., whitespace text adapter).
    """

    def load_grid(self, file_path: Path | str, width: int, height: int) -> RasterGrid:
        """Load a width x height grid laid out row-major, north row first."""
        ...
