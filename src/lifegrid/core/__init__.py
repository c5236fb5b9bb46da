"""Core Game of Life logic."""

from .grid import ALIVE, DEAD, Grid
from .engine import GridEngine, next_cell_state
from .codec import format_grid, parse_grid, pretty_format
from .patterns import DEFAULT_PATTERN, SELF_TEST_CASES, TransitionCase

__all__ = [
    "ALIVE",
    "DEAD",
    "Grid",
    "GridEngine",
    "next_cell_state",
    "format_grid",
    "parse_grid",
    "pretty_format",
    "DEFAULT_PATTERN",
    "SELF_TEST_CASES",
    "TransitionCase",
]
