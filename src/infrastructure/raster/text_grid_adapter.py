"""Whitespace text adapter for RasterRepository.

Loads a raster grid from a plain text file holding whitespace-separated
signed decimal integers, row-major with the northern row first, and returns
a domain RasterGrid Value Object.

Lifecycle:
1) Check the path exists and stat it (size, optional cell budget)
2) Read the whole file as ASCII text and split on whitespace
3) Validate every token is an optional sign followed by decimal digits
4) Convert to int64, range-check into int32, reshape to (height, width)
5) Return RasterGrid
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import numpy as np

from domain.raster.errors import (
    InsufficientMemoryError,
    MalformedInputError,
    RasterIOError,
)
from domain.raster.value_objects import RasterGrid

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


class TextGridAdapter:
    """Infrastructure adapter for loading raster grids from text files.

    Parameters
    ----------
    max_cells: int | None
        Optional budget on width*height. If specified and exceeded by the
        declared dimensions, InsufficientMemoryError is raised before the
        file is read.
    """

    def __init__(self, max_cells: int | None = None) -> None:
        self.max_cells = max_cells

    def load_grid(self, file_path: Path | str, width: int, height: int) -> RasterGrid:
        """Parse the file into a width x height RasterGrid.

        Raises:
            RasterIOError: If the file is missing or cannot be read
            MalformedInputError: If the content is not exactly width*height
                integers separated by whitespace
            InsufficientMemoryError: If width*height exceeds max_cells
        """
        path = Path(file_path)

        if not path.exists():
            raise RasterIOError(f"No such raster file: {path.name}")

        if self.max_cells is not None and width * height > self.max_cells:
            raise InsufficientMemoryError(
                f"Grid of {width}x{height} cells exceeds budget {self.max_cells}"
            )

        try:
            if path.stat().st_size == 0:
                raise MalformedInputError("Empty file")
            text = path.read_text(encoding="ascii")
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"Non-ASCII content in raster: {e}") from e
        except OSError as e:
            # Log only filename, errno, and strerror to avoid leaking absolute paths
            logger.error(
                "Failed to read %s (errno=%s, strerror=%s)",
                path.name,
                getattr(e, "errno", "unknown"),
                getattr(e, "strerror", "unknown"),
            )
            raise RasterIOError(f"Unable to read raster file: {path.name}") from e

        tokens = text.split()
        if not tokens:
            raise MalformedInputError("Empty file")

        bad = next((t for t in tokens if not _INT_TOKEN.fullmatch(t)), None)
        if bad is not None:
            raise MalformedInputError(f"Non-integer token in raster: {bad[:32]!r}")

        try:
            values = np.fromiter(map(int, tokens), dtype=np.int64, count=len(tokens))
        except OverflowError as e:
            raise MalformedInputError("Raster value out of 32-bit integer range") from e

        grid = RasterGrid.from_values(values, width, height)

        logger.debug("Raster %s: Parsed %dx%d grid", path.name, width, height)
        return grid
