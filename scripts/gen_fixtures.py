#!/usr/bin/env python3
"""Generate text raster fixtures for the test suite.

Fixtures are small synthetic grids in the whitespace-delimited integer
format read by TextGridAdapter - not real terrain data.

Usage:
    PYTHONPATH=. python scripts/gen_fixtures.py

Output:
    tests/fixtures/*.txt

Dependencies:
    This script imports from shared/fixtures_expected.py (not tests/) to avoid
    circular dependencies between scripts and tests packages.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from shared.fixtures_expected import EXPECTED_FIXTURE_COUNT, EXPECTED_FIXTURES

# Output directory
FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"


def ensure_dir() -> None:
    """Ensure fixtures directory exists."""
    FIXTURES_DIR.mkdir(parents=True, exist_ok=True)
    print(f"Output directory: {FIXTURES_DIR}")


# =============================================================================
# Helper: write_grid
# =============================================================================
def write_grid(path: Path, data: NDArray[np.int64]) -> None:
    """Write a 2D integer array row-major, one raster row per line."""
    if data.ndim != 2:
        raise ValueError(f"Data must be 2D, got {data.ndim}D")
    np.savetxt(path, data, fmt="%d", delimiter=" ")


def write_text(path: Path, text: str) -> None:
    path.write_text(text, encoding="ascii")


# =============================================================================
# Valid grids
# =============================================================================
def gen_grid_2x2() -> None:
    """Generate the 2x2 worked example [[1, 2], [3, 4]]."""
    path = FIXTURES_DIR / "grid_2x2.txt"
    write_grid(path, np.array([[1, 2], [3, 4]], dtype=np.int64))
    print(f"  Created: {path.name} (2x2)")


def gen_grid_4x3_known() -> None:
    """Generate 4 columns x 3 rows holding 10, 20, ..., 120 row-major."""
    path = FIXTURES_DIR / "grid_4x3_known.txt"
    data = (np.arange(1, 13, dtype=np.int64) * 10).reshape(3, 4)
    write_grid(path, data)
    print(f"  Created: {path.name} (4x3, 10..120)")


def gen_grid_signed() -> None:
    """Generate 3x2 grid with negative and '+'-prefixed values, ragged spacing."""
    path = FIXTURES_DIR / "grid_signed.txt"
    write_text(path, "  -430 +0   8849\n\t-1\n 2147483647 -2147483648  \n")
    print(f"  Created: {path.name} (3x2, signed)")


# =============================================================================
# Malformed inputs
# =============================================================================
def gen_malformed() -> None:
    """Generate files TextGridAdapter must reject."""
    write_text(FIXTURES_DIR / "malformed_empty.txt", "")
    write_text(FIXTURES_DIR / "malformed_overflow.txt", "2147483648 0\n0 0\n")
    write_text(FIXTURES_DIR / "malformed_short.txt", "1 2\n3\n")
    write_text(FIXTURES_DIR / "malformed_token.txt", "1 2\n3 x\n")
    print("  Created: malformed_{empty,overflow,short,token}.txt")


def main() -> int:
    ensure_dir()

    print("\nValid grids")
    gen_grid_2x2()
    gen_grid_4x3_known()
    gen_grid_signed()

    print("\nMalformed inputs")
    gen_malformed()

    # Verify generated fixtures match expected list exactly
    found_set = {f.name for f in FIXTURES_DIR.iterdir() if f.suffix == ".txt"}
    expected_set = set(EXPECTED_FIXTURES)

    if found_set != expected_set:
        print("ERROR: Fixture filenames do not match expected list!")
        missing = expected_set - found_set
        extra = found_set - expected_set
        if missing:
            print(f"  Missing (expected but not generated): {sorted(missing)}")
        if extra:
            print(f"  Extra (generated but not expected): {sorted(extra)}")
        print("\nUpdate shared/fixtures_expected.py to match generated fixtures.")
        return 1

    print(f"\nAll {EXPECTED_FIXTURE_COUNT} fixtures verified successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
