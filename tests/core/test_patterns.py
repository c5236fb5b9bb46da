"""Tests for the built-in grids and transition cases."""

from lifegrid.core.codec import format_grid, parse_grid
from lifegrid.core.patterns import DEFAULT_PATTERN, SELF_TEST_CASES, TransitionCase


class TestPatterns:
    """Test cases for the built-in fixtures."""

    def test_default_pattern_is_rectangular(self):
        assert len(DEFAULT_PATTERN) == 5
        assert all(len(row) == 5 for row in DEFAULT_PATTERN)
        assert {cell for row in DEFAULT_PATTERN for cell in row} == {0, 1}

    def test_default_pattern_encoding(self):
        assert format_grid(DEFAULT_PATTERN) == "01000,10011,11001,01000,10001"

    def test_self_test_cases(self):
        """Test the case table is well formed."""
        names = [case.name for case in SELF_TEST_CASES]
        assert len(names) == 5
        assert len(set(names)) == len(names)

        for case in SELF_TEST_CASES:
            assert isinstance(case, TransitionCase)
            assert parse_grid(case.start).shape == parse_grid(case.expected).shape

    def test_non_square_case_present(self):
        shapes = {parse_grid(case.start).shape for case in SELF_TEST_CASES}
        assert (3, 5) in shapes
