"""Raster Bounded Context - Error Hierarchy.

Custom exceptions for raster loading and querying.

Coordinates outside a source's bounds are NOT errors; they produce the
invalid datum (see value_objects.INVALID_DATUM).
"""

from __future__ import annotations


class RasterError(Exception):
    """Base error for raster operations."""


class RasterIOError(RasterError):
    """Raster source file is missing or cannot be read."""


class MalformedInputError(RasterError):
    """File content is not a clean integer sequence of the expected shape."""


class InvalidGeoreferenceError(RasterError):
    """Declared dimensions or bounding box cannot georeference the grid."""


class InsufficientMemoryError(RasterError):
    """Declared grid exceeds the configured cell budget."""


class InvalidHandleError(RasterError):
    """Query references a handle that no loaded source owns.

    Attributes:
        handle: The offending handle
        size: Number of sources loaded when the query was made
    """

    def __init__(self, handle: int, size: int) -> None:
        self.handle = handle
        self.size = size
        super().__init__(
            f"No loaded raster source for handle {handle} "
            f"({size} source(s) loaded)"
        )
