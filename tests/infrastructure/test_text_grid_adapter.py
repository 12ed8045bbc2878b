"""Tests for the whitespace text raster adapter."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from domain.raster.errors import (
    InsufficientMemoryError,
    MalformedInputError,
    RasterIOError,
)
from infrastructure.raster.text_grid_adapter import TextGridAdapter


def test_file_not_found_raises(tmp_path):
    adapter = TextGridAdapter()
    with pytest.raises(RasterIOError, match="missing.txt") as exc_info:
        adapter.load_grid(tmp_path / "missing.txt", 2, 2)

    assert str(tmp_path) not in str(exc_info.value)


def test_happy_path_row_major(write_grid):
    p = write_grid([[1, 2, 3], [4, 5, 6]])

    grid = TextGridAdapter().load_grid(p, 3, 2)

    assert grid.data.dtype == np.int32
    assert grid.data.shape == (2, 3)
    assert grid.value_at(2, 0) == 3
    assert grid.value_at(0, 1) == 4


def test_accepts_str_path(write_grid):
    p = write_grid([[7, 8], [9, 10]])

    grid = TextGridAdapter().load_grid(str(p), 2, 2)

    assert grid.value_at(1, 1) == 10


def test_row_breaks_are_not_significant(tmp_path):
    """Only the overall token order matters, not where lines break."""
    p = tmp_path / "one_line.txt"
    p.write_text("1 2 3 4 5 6", encoding="ascii")

    grid = TextGridAdapter().load_grid(p, 2, 3)

    assert grid.value_at(1, 0) == 2
    assert grid.value_at(0, 2) == 5


def test_signed_values_and_mixed_whitespace(tmp_path):
    p = tmp_path / "signed.txt"
    p.write_text("\n\n  -430 +0\t8849\r\n-1 2147483647 -2147483648\n\n", encoding="ascii")

    grid = TextGridAdapter().load_grid(p, 3, 2)

    assert grid.value_at(0, 0) == -430
    assert grid.value_at(1, 0) == 0
    assert grid.value_at(1, 1) == 2147483647
    assert grid.value_at(2, 1) == -2147483648


@pytest.mark.parametrize(
    "content",
    [
        "1 2\n3 x\n",  # non-numeric token
        "1 2\n3 4abc\n",  # trailing garbage on a token
        "1 2\n3 4\nend\n",  # trailing non-numeric content
        "1.5 2\n3 4\n",  # decimal
        "1,2,3,4",  # wrong separator
        "1 2\n3 - 4\n",  # dangling sign
    ],
)
def test_malformed_tokens_rejected(tmp_path, content):
    p = tmp_path / "bad.txt"
    p.write_text(content, encoding="ascii")

    with pytest.raises(MalformedInputError):
        TextGridAdapter().load_grid(p, 2, 2)


@pytest.mark.parametrize("content", ["1 2 3", "1 2 3 4 5"])
def test_wrong_token_count_rejected(tmp_path, content):
    p = tmp_path / "count.txt"
    p.write_text(content, encoding="ascii")

    with pytest.raises(MalformedInputError, match="Expected 4 values"):
        TextGridAdapter().load_grid(p, 2, 2)


@pytest.mark.parametrize("content", ["", "   \n\t\n"])
def test_empty_file_rejected(tmp_path, content):
    p = tmp_path / "empty.txt"
    p.write_text(content, encoding="ascii")

    with pytest.raises(MalformedInputError, match="Empty file"):
        TextGridAdapter().load_grid(p, 2, 2)


@pytest.mark.parametrize("value", ["2147483648", "-2147483649", "9" * 40])
def test_out_of_range_value_rejected(tmp_path, value):
    p = tmp_path / "overflow.txt"
    p.write_text(f"{value} 0\n0 0\n", encoding="ascii")

    with pytest.raises(MalformedInputError, match="32-bit"):
        TextGridAdapter().load_grid(p, 2, 2)


def test_non_ascii_content_rejected(tmp_path):
    p = tmp_path / "unicode.txt"
    p.write_text("1 2\n3 ٤\n", encoding="utf-8")  # Arabic-Indic digit four

    with pytest.raises(MalformedInputError):
        TextGridAdapter().load_grid(p, 2, 2)


def test_cell_budget_exceeded(write_grid):
    p = write_grid([[1, 2], [3, 4]])

    adapter = TextGridAdapter(max_cells=3)
    with pytest.raises(InsufficientMemoryError):
        adapter.load_grid(p, 2, 2)

    assert TextGridAdapter(max_cells=4).load_grid(p, 2, 2).value_at(1, 1) == 4


def test_read_error_wrapped_and_logged(write_grid, monkeypatch, caplog):
    from pathlib import Path

    p = write_grid([[1, 2], [3, 4]])

    def _raise_permission_error(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(Path, "read_text", _raise_permission_error)

    caplog.set_level(logging.ERROR)
    with pytest.raises(RasterIOError) as exc_info:
        TextGridAdapter().load_grid(p, 2, 2)

    assert isinstance(exc_info.value.__cause__, PermissionError)
    assert "Failed to read grid.txt" in caplog.text
    # Only the file name is logged, never the absolute path
    assert str(p.parent) not in caplog.text


def test_logging_debug_on_success(write_grid, caplog):
    p = write_grid([[1, 2], [3, 4]], name="penalty.txt")

    caplog.set_level(logging.DEBUG, logger="infrastructure.raster.text_grid_adapter")
    TextGridAdapter().load_grid(p, 2, 2)

    assert "Raster penalty.txt: Parsed 2x2 grid" in caplog.text
