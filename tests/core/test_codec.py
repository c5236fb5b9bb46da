"""Tests for the grid text encodings."""

import pytest
from lifegrid.core.codec import BANNER, format_grid, parse_grid, pretty_format
from lifegrid.core.engine import GridEngine
from lifegrid.core.grid import Grid


class TestParseGrid:
    """Test cases for parse_grid."""

    def test_square_grid(self):
        grid = parse_grid("010,111,000")
        assert grid.shape == (3, 3)
        assert grid.to_list() == [[0, 1, 0], [1, 1, 1], [0, 0, 0]]

    def test_non_square_grid(self):
        grid = parse_grid("00000,01110,00000")
        assert grid.num_rows == 3
        assert grid.num_cols == 5

    def test_single_row(self):
        grid = parse_grid("1011")
        assert grid.shape == (1, 4)

    def test_surrounding_whitespace_ignored(self):
        grid = parse_grid("  01,10\n")
        assert grid.to_list() == [[0, 1], [1, 0]]

    def test_whitespace_symbol_kept_at_edges(self):
        """Test that a space used as the dead symbol is not stripped as padding."""
        grid = parse_grid(" 1,1 ", dead=" ")
        assert grid.shape == (2, 2)
        assert grid.to_list() == [[0, 1], [1, 0]]

    def test_whitespace_delimiter_kept_at_edges(self):
        """Test that a newline delimiter is not stripped while other padding is."""
        grid = parse_grid(" 01\n10\t", row_delimiter="\n")
        assert grid.to_list() == [[0, 1], [1, 0]]

        # A trailing delimiter is an empty row, not padding
        with pytest.raises(ValueError):
            parse_grid("01\n10\n", row_delimiter="\n")

    def test_custom_symbols(self):
        """Test parsing with a different delimiter and cell symbols."""
        grid = parse_grid("#.#/.#.", row_delimiter="/", alive="#", dead=".")
        assert grid.to_list() == [[1, 0, 1], [0, 1, 0]]

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "010,01",
            "01,010",
            "010,,010",
            "010,",
            "012",
            "01 0",
        ],
    )
    def test_malformed_text_rejected(self, text):
        with pytest.raises(ValueError):
            parse_grid(text)

    def test_same_symbols_rejected(self):
        with pytest.raises(ValueError):
            parse_grid("xx", alive="x", dead="x")

    def test_multi_character_symbols_rejected(self):
        with pytest.raises(ValueError):
            parse_grid("1010", alive="10", dead="0")

    def test_empty_delimiter_rejected(self):
        with pytest.raises(ValueError):
            parse_grid("10", row_delimiter="")


class TestFormatGrid:
    """Test cases for format_grid."""

    def test_format_grid(self):
        grid = Grid([[0, 1, 0], [1, 1, 1]])
        assert format_grid(grid) == "010,111"

    def test_format_engine(self):
        assert format_grid(GridEngine()) == "01000,10011,11001,01000,10001"

    def test_format_nested_list(self):
        assert format_grid([[1, 0], [0, 1]]) == "10,01"

    def test_no_trailing_delimiter(self):
        assert format_grid(Grid([[1]])) == "1"

    def test_custom_symbols(self):
        grid = Grid([[1, 0, 1], [0, 1, 0]])
        assert format_grid(grid, row_delimiter="/", alive="#", dead=".") == "#.#/.#."

    def test_output_parses_back(self):
        text = "00000,01110,00000"
        assert format_grid(parse_grid(text)) == text


class TestPrettyFormat:
    """Test cases for pretty_format."""

    def test_pretty_format(self):
        grid = Grid([[0, 1], [1, 0]])
        assert pretty_format(grid) == "0 1 \n1 0 \n"

    def test_pretty_format_with_banner(self):
        grid = Grid([[1, 1, 0]])
        assert pretty_format(grid, banner=True) == BANNER + "\n" + "1 1 0 \n"

    def test_pretty_format_engine(self):
        output = pretty_format(GridEngine())
        lines = output.splitlines()

        assert len(lines) == 5
        assert lines[0] == "0 1 0 0 0 "
        assert output.endswith("\n")
