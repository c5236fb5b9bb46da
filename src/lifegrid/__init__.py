"""Bounded Conway's Game of Life engine with a text codec and CLI."""

__version__ = "0.1.0"

from .core.grid import Grid
from .core.engine import GridEngine
from .core.codec import format_grid, parse_grid, pretty_format

__all__ = ["Grid", "GridEngine", "format_grid", "parse_grid", "pretty_format"]
