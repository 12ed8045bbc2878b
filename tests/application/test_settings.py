"""Tests for environment-driven raster settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from application.raster.settings import (
    COORDINATE_PRECISION,
    RasterSettings,
    RasterSourceSpec,
    get_settings,
)


def test_defaults(monkeypatch):
    monkeypatch.delenv("RASTER_COORDINATE_PRECISION", raising=False)
    monkeypatch.delenv("RASTER_MAX_CELLS", raising=False)

    settings = RasterSettings()

    assert settings.coordinate_precision == COORDINATE_PRECISION == 1_000_000.0
    assert settings.max_cells is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("RASTER_COORDINATE_PRECISION", "100000")
    monkeypatch.setenv("RASTER_MAX_CELLS", " 4096 ")

    settings = get_settings()

    assert settings.coordinate_precision == 100_000.0
    assert settings.max_cells == 4096


def test_keyword_arguments_win_over_environment(monkeypatch):
    monkeypatch.setenv("RASTER_COORDINATE_PRECISION", "100000")

    assert RasterSettings(coordinate_precision=10.0).coordinate_precision == 10.0


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.delenv("RASTER_MAX_CELLS", raising=False)

    assert get_settings() is get_settings()


@pytest.mark.parametrize(
    "env, value",
    [
        ("RASTER_COORDINATE_PRECISION", "0"),
        ("RASTER_COORDINATE_PRECISION", "abc"),
        ("RASTER_MAX_CELLS", "-5"),
    ],
)
def test_invalid_environment_rejected(monkeypatch, env, value):
    monkeypatch.setenv(env, value)

    with pytest.raises(ValidationError):
        RasterSettings()


def test_source_spec_validation(tmp_path):
    spec = RasterSourceSpec(
        path=str(tmp_path / "a.txt"), xmin=0, xmax=1, ymin=0, ymax=1, nrows=3, ncols=4
    )

    assert isinstance(spec.path, Path)
    assert spec.nrows == 3

    with pytest.raises(ValidationError):
        RasterSourceSpec(path="a.txt", xmin=0, xmax=1, ymin=0, ymax=1, nrows=0, ncols=4)
