"""Registry of loaded raster sources.

Each distinct file path is parsed at most once; the registry hands back a
stable integer handle (0, 1, 2, ... in load order) used by all later queries.

Concurrency:
    load() is serialised by a lock so check-then-insert is atomic. Queries
    take no lock: sources are immutable once registered and handles are
    never reused or invalidated.
"""

from __future__ import annotations

import logging
import threading
import time
from enum import Enum
from pathlib import Path

from domain.raster.errors import (
    InvalidGeoreferenceError,
    InvalidHandleError,
    RasterError,
)
from domain.raster.repositories import RasterRepository
from domain.raster.services import build_source, query_interpolated, query_nearest
from domain.raster.value_objects import BoundingBox, RasterSource
from infrastructure.raster import TextGridAdapter

from .results import LoadResult, QueryResult
from .settings import RasterSettings, RasterSourceSpec, get_settings

logger = logging.getLogger(__name__)


class QueryMode(str, Enum):
    NEAREST = "nearest"
    INTERPOLATED = "interpolated"


def _normalize(path: Path | str) -> Path:
    return Path(path).expanduser().resolve()


class RasterSourceRegistry:
    """Owns loaded raster sources and maps file paths to handles.

    Parameters
    ----------
    repository: RasterRepository | None
        Port used to parse grids. Defaults to TextGridAdapter with the cell
        budget from settings.
    settings: RasterSettings | None
        Defaults to get_settings().
    """

    def __init__(
        self,
        repository: RasterRepository | None = None,
        settings: RasterSettings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.repository = repository or TextGridAdapter(
            max_cells=self.settings.max_cells
        )
        self._sources: list[RasterSource] = []
        self._handles: dict[Path, int] = {}
        self._load_lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sources)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        return _normalize(path) in self._handles

    def handle_for(self, path: Path | str) -> int | None:
        """Return the handle of an already-loaded path, or None."""
        return self._handles.get(_normalize(path))

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(
        self,
        path: Path | str,
        xmin: float,
        xmax: float,
        ymin: float,
        ymax: float,
        nrows: int,
        ncols: int,
    ) -> LoadResult:
        """Load a raster file, or return the handle it was loaded under.

        On a cache hit the file is not read again and the remaining
        arguments are ignored. A failed load registers nothing and does not
        consume a handle.
        """
        key = _normalize(path)

        with self._load_lock:
            existing = self._handles.get(key)
            if existing is not None:
                logger.info(
                    "Raster %s: Already loaded at handle %d", key.name, existing
                )
                return LoadResult(handle=existing)

            started = time.perf_counter()
            try:
                source = self._read_source(key, xmin, xmax, ymin, ymax, nrows, ncols)
            except RasterError as e:
                logger.warning("Raster %s: Load failed: %s", key.name, e)
                return LoadResult(error=e)

            handle = len(self._sources)
            self._sources.append(source)
            self._handles[key] = handle

        logger.info(
            "Raster %s: Loaded %dx%d grid at handle %d in %.3fs",
            key.name,
            ncols,
            nrows,
            handle,
            time.perf_counter() - started,
        )
        return LoadResult(handle=handle)

    def load_spec(self, spec: RasterSourceSpec) -> LoadResult:
        """Load a source declared in configuration."""
        return self.load(
            spec.path, spec.xmin, spec.xmax, spec.ymin, spec.ymax, spec.nrows, spec.ncols
        )

    def _read_source(
        self,
        path: Path,
        xmin: float,
        xmax: float,
        ymin: float,
        ymax: float,
        nrows: int,
        ncols: int,
    ) -> RasterSource:
        if nrows <= 0 or ncols <= 0:
            raise InvalidGeoreferenceError(
                f"Dimensions must be positive, got {ncols}x{nrows}"
            )
        try:
            bounds = BoundingBox(min_x=xmin, max_x=xmax, min_y=ymin, max_y=ymax)
        except ValueError as e:
            raise InvalidGeoreferenceError(str(e)) from e

        grid = self.repository.load_grid(path, ncols, nrows)
        return build_source(grid, ncols, nrows, bounds)

    # ------------------------------------------------------------------
    # Queries (degrees)
    # ------------------------------------------------------------------
    def source(self, handle: int) -> RasterSource:
        """Return the source for a handle.

        Raises:
            InvalidHandleError: If no source was loaded under this handle
        """
        sources = self._sources
        if handle < 0 or handle >= len(sources):
            raise InvalidHandleError(handle, len(sources))
        return sources[handle]

    def query(
        self, handle: int, lon: float, lat: float, mode: QueryMode = QueryMode.NEAREST
    ) -> QueryResult:
        try:
            source = self.source(handle)
        except InvalidHandleError as e:
            return QueryResult(error=e)

        if QueryMode(mode) is QueryMode.INTERPOLATED:
            return QueryResult(datum=query_interpolated(source, lon, lat))
        return QueryResult(datum=query_nearest(source, lon, lat))

    def query_nearest(self, handle: int, lon: float, lat: float) -> QueryResult:
        return self.query(handle, lon, lat, QueryMode.NEAREST)

    def query_interpolated(self, handle: int, lon: float, lat: float) -> QueryResult:
        return self.query(handle, lon, lat, QueryMode.INTERPOLATED)
