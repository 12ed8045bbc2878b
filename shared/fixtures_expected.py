"""Single source of truth for expected raster test fixtures.

This module defines the list of expected fixture filenames used by both:
- scripts/gen_fixtures.py (generation verification)
- tests/infrastructure/test_fixtures_sanity.py (existence verification)

Location: shared/ (not tests/) to avoid scripts->tests dependency.

When adding/removing fixtures, update ONLY this list.
"""

from __future__ import annotations

# Sorted alphabetically for deterministic comparison.
EXPECTED_FIXTURES: list[str] = sorted(
    [
        "grid_2x2.txt",  # Worked example [[1,2],[3,4]]
        "grid_4x3_known.txt",  # Known values 10..120, 4 columns x 3 rows
        "grid_signed.txt",  # Negative and explicitly signed values
        "malformed_empty.txt",  # Empty file rejection
        "malformed_overflow.txt",  # Value above int32 max
        "malformed_short.txt",  # Fewer tokens than 2x2
        "malformed_token.txt",  # Non-numeric token
    ]
)

# Count derived from list for verification
EXPECTED_FIXTURE_COUNT: int = len(EXPECTED_FIXTURES)
