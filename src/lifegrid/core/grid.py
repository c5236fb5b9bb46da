"""Grid data structure for bounded cellular automata."""

from typing import Any, Tuple
import numpy as np
import torch
import torch.nn.functional as F

DEAD = 0
ALIVE = 1

# Offsets of the 8 surrounding positions: row above, same row, row below
NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)

_NEIGHBOR_KERNEL = (
    torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
)


class Grid:
    """Represents a fixed-size rectangular grid of alive/dead cells.

    Cells are stored row-major in a numpy array of shape (num_rows, num_cols).
    Edges are bounded: positions outside the grid are always treated as dead.
    A grid is never changed after construction; a new generation is a new Grid.
    """

    def __init__(self, rows: Any) -> None:
        """Initialize a grid from a rectangular matrix.

        Args:
            rows: Nested sequence (or 2D array) of boolean or numeric cell
                values, indexed as rows[row][col]. Non-zero means alive.
                The data is copied.

        Raises:
            ValueError: If the data is empty, ragged, not two-dimensional
                or not boolean/numeric
        """
        if isinstance(rows, Grid):
            cells = rows._cells.copy()
        else:
            cells = self._to_array(rows)

        self._cells = cells
        self._cells.flags.writeable = False

    @staticmethod
    def _to_array(rows: Any) -> np.ndarray:
        if not isinstance(rows, np.ndarray):
            rows = list(rows)
            for index, row in enumerate(rows):
                try:
                    rows[index] = list(row)
                except TypeError as e:
                    raise ValueError(f"Row {index} is not a sequence") from e
            if not rows:
                raise ValueError("Grid must have at least one row")
            width = len(rows[0])
            for index, row in enumerate(rows):
                if len(row) != width:
                    raise ValueError(f"Row {index} has {len(row)} cells, expected {width}")

        arr = np.array(rows)
        if arr.ndim != 2:
            raise ValueError(f"Grid data must be two-dimensional, got {arr.ndim} dimension(s)")
        if arr.shape[0] == 0:
            raise ValueError("Grid must have at least one row")
        if arr.shape[1] == 0:
            raise ValueError("Grid must have at least one column")
        if arr.dtype.kind not in "biuf":
            raise ValueError(f"Grid cells must be boolean or numeric, got dtype {arr.dtype}")

        return (arr != 0).astype(np.int8)

    @classmethod
    def empty(cls, num_rows: int, num_cols: int) -> "Grid":
        """Create a grid with every cell dead."""
        return cls(np.zeros((num_rows, num_cols), dtype=np.int8))

    @property
    def num_rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def num_cols(self) -> int:
        return int(self._cells.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (num_rows, num_cols)."""
        return (self.num_rows, self.num_cols)

    @property
    def cells(self) -> np.ndarray:
        """Get a read-only view of the cell array."""
        return self._cells.view()

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether (row, col) lies inside the grid."""
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.num_rows}x{self.num_cols} grid")

        return bool(self._cells[row, col])

    def is_alive(self, row: int, col: int) -> bool:
        """Check if a position holds a live cell; off-grid positions are dead."""
        return self.in_bounds(row, col) and self._cells[row, col] == ALIVE

    def get_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a position.

        Args:
            row: Row coordinate, may lie outside the grid
            col: Column coordinate, may lie outside the grid

        Returns:
            Number of living neighbors (0-8)
        """
        return sum(1 for dr, dc in NEIGHBOR_OFFSETS if self.is_alive(row + dr, col + dc))

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using PyTorch convolution.

        Zero padding makes every off-grid position count as dead.

        Returns:
            2D int8 array of shape (num_rows, num_cols) with neighbor counts
        """
        source = torch.from_numpy(self._cells.astype(np.float32)).reshape(1, 1, self.num_rows, self.num_cols)
        neighbors = F.conv2d(source, _NEIGHBOR_KERNEL, padding=1)

        return neighbors[0, 0].numpy().round().astype(np.int8)

    def to_list(self) -> list:
        """Convert grid to nested list, row-major.

        Returns:
            2D list representation of the grid
        """
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Grid({self.num_rows}x{self.num_cols}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if cell else "." for cell in row) for row in self._cells)
