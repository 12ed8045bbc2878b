"""Root pytest configuration for all tests.

Provides shared fixtures for writing text rasters and building isolated
registries. Import paths (domain.*, infrastructure.*, application.*) are
configured via pytest's ``pythonpath`` setting in pyproject.toml.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pytest

from application.raster.settings import RasterSettings, get_settings


def get_fixtures_dir() -> Path:
    """Return path to tests/fixtures/ directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return get_fixtures_dir()


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Keep environment-driven settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_grid(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing rows of integers as a text raster under tmp_path."""

    def _write(rows: Sequence[Sequence[int]], name: str = "grid.txt") -> Path:
        path = tmp_path / name
        path.write_text(
            "\n".join(" ".join(str(v) for v in row) for row in rows) + "\n",
            encoding="ascii",
        )
        return path

    return _write


@pytest.fixture
def settings() -> RasterSettings:
    return RasterSettings(coordinate_precision=1_000_000.0)


@pytest.fixture
def registry(settings: RasterSettings):
    from application.raster.registry import RasterSourceRegistry

    return RasterSourceRegistry(settings=settings)
