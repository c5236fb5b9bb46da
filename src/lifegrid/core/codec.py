"""Text encodings for grids.

The compact encoding writes one symbol per cell and separates rows with a
delimiter, e.g. ``01000,10011,11001`` for a 3x5 grid. The pretty rendering
puts each cell digit on a space-separated line per row.
"""

from typing import Any

from .grid import Grid

ROW_DELIMITER = ","
ALIVE_SYMBOL = "1"
DEAD_SYMBOL = "0"
CELL_SEPARATOR = " "
BANNER = "----------------------"


def _as_grid(source: Any) -> Grid:
    # Engines expose their current grid as .grid
    if isinstance(source, Grid):
        return source
    grid = getattr(source, "grid", None)
    if isinstance(grid, Grid):
        return grid
    return Grid(source)


def parse_grid(
    text: str,
    row_delimiter: str = ROW_DELIMITER,
    alive: str = ALIVE_SYMBOL,
    dead: str = DEAD_SYMBOL,
) -> Grid:
    """Parse the compact encoding into a Grid.

    The row count is the number of delimited segments and the column count
    is the length of the first segment.

    Args:
        text: Encoded grid
        row_delimiter: String separating rows
        alive: Symbol for a live cell
        dead: Symbol for a dead cell

    Returns:
        Parsed grid

    Raises:
        ValueError: If the text is empty, rows differ in length, or a symbol
            other than alive/dead appears
    """
    if len(alive) != 1 or len(dead) != 1:
        raise ValueError(f"Cell symbols must be single characters, got {alive!r} and {dead!r}")
    if alive == dead:
        raise ValueError(f"Alive and dead symbols must differ, both are {alive!r}")
    if not row_delimiter:
        raise ValueError("Row delimiter must not be empty")

    # Whitespace used as a symbol or delimiter is data, not padding
    padding = "".join(c for c in " \t\r\n" if c not in (alive, dead, row_delimiter))
    text = text.strip(padding)
    if not text:
        raise ValueError("Cannot parse an empty grid")

    segments = text.split(row_delimiter)
    width = len(segments[0])
    symbols = {alive: 1, dead: 0}

    rows = []
    for index, segment in enumerate(segments):
        if not segment:
            raise ValueError(f"Row {index} is empty")
        if len(segment) != width:
            raise ValueError(f"Row {index} has {len(segment)} cells, expected {width}")
        try:
            rows.append([symbols[char] for char in segment])
        except KeyError as e:
            raise ValueError(f"Unknown cell symbol {e.args[0]!r} in row {index}") from e

    return Grid(rows)


def format_grid(
    source: Any,
    row_delimiter: str = ROW_DELIMITER,
    alive: str = ALIVE_SYMBOL,
    dead: str = DEAD_SYMBOL,
) -> str:
    """Format a grid in the compact encoding accepted by parse_grid.

    Args:
        source: Grid, engine, or rectangular nested sequence

    Returns:
        Encoded grid with no trailing delimiter
    """
    grid = _as_grid(source)
    return row_delimiter.join("".join(alive if cell else dead for cell in row) for row in grid.cells)


def pretty_format(source: Any, banner: bool = False) -> str:
    """Render a grid with a space after every cell and a newline after every row.

    Args:
        source: Grid, engine, or rectangular nested sequence
        banner: Whether to precede the rendering with a separator line

    Returns:
        Multi-line rendering
    """
    grid = _as_grid(source)
    lines = []
    if banner:
        lines.append(BANNER + "\n")
    for row in grid.cells:
        lines.append("".join(f"{int(cell)}{CELL_SEPARATOR}" for cell in row) + "\n")

    return "".join(lines)
