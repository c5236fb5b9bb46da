"""Conway's Game of Life transition engine for bounded grids."""

import logging
from typing import Any, Optional
import numpy as np

from .grid import ALIVE, DEAD, Grid
from .patterns import DEFAULT_PATTERN

logger = logging.getLogger(__name__)


def next_cell_state(alive: bool, live_neighbors: int) -> int:
    """Apply the rule table to a single cell.

    - Live cell with 0-1 neighbors dies (underpopulation)
    - Live cell with 2-3 neighbors survives
    - Live cell with 4-8 neighbors dies (overcrowding)
    - Dead cell with exactly 3 neighbors becomes alive (reproduction)
    - Any other dead cell stays dead

    Args:
        alive: Current state of the cell
        live_neighbors: Number of living neighbors (0-8)

    Returns:
        ALIVE or DEAD

    Raises:
        ValueError: If live_neighbors is outside 0-8
    """
    if not 0 <= live_neighbors <= 8:
        raise ValueError(f"Neighbor count must be between 0 and 8, got {live_neighbors}")

    if alive:
        return ALIVE if live_neighbors in (2, 3) else DEAD
    return ALIVE if live_neighbors == 3 else DEAD


class GridEngine:
    """Bounded Game of Life simulation engine.

    The engine owns its grid exclusively. Each step computes every next
    cell value from the same snapshot and then replaces the grid as a whole,
    so cell views taken before a step describe the previous generation.

    Not safe for concurrent use: serialize calls to step() externally.
    """

    def __init__(self, grid: Optional[Any] = None) -> None:
        """Initialize the engine.

        Args:
            grid: A Grid or rectangular nested sequence of cell values.
                Defaults to the built-in 5x5 demo pattern.

        Raises:
            ValueError: If the grid data is empty or not rectangular
        """
        self._grid = Grid(DEFAULT_PATTERN if grid is None else grid)
        self._generation = 0

    @property
    def grid(self) -> Grid:
        """Current grid."""
        return self._grid

    @property
    def num_rows(self) -> int:
        return self._grid.num_rows

    @property
    def num_cols(self) -> int:
        return self._grid.num_cols

    @property
    def generation(self) -> int:
        """Number of steps applied since construction."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._grid.population

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of an in-bounds cell; raises IndexError otherwise."""
        return self._grid.get_cell(row, col)

    def neighbor_count(self, row: int, col: int) -> int:
        """Count living neighbors of any position, treating off-grid cells as dead."""
        return self._grid.get_neighbors(row, col)

    def to_list(self) -> list:
        """Export the grid contents row-major."""
        return self._grid.to_list()

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self._grid = Grid(self._apply_rules(self._grid))
        self._generation += 1

        logger.debug(
            "Generation %d: population %d on %dx%d grid",
            self._generation,
            self.population,
            self.num_rows,
            self.num_cols,
        )

    @staticmethod
    def _apply_rules(grid: Grid) -> np.ndarray:
        """Compute the next generation of a grid into a fresh array."""
        neighbor_counts = grid.count_all_neighbors()
        cells = grid.cells

        # Birth: dead cell with exactly 3 neighbors
        birth_mask = (cells == DEAD) & (neighbor_counts == 3)

        # Survival: live cell with 2 or 3 neighbors
        survival_mask = (cells == ALIVE) & ((neighbor_counts == 2) | (neighbor_counts == 3))

        next_cells = np.zeros(grid.shape, dtype=np.int8)
        next_cells[birth_mask | survival_mask] = ALIVE

        return next_cells

    def __repr__(self) -> str:
        return f"GridEngine({self.num_rows}x{self.num_cols}, generation={self._generation})"
