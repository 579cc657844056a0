"""
Static occupancy grid: width x height cells, each open or blocked.
"""

from __future__ import annotations
import math
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .errors import InvalidConfiguration, OutOfBounds

# Built-in layout: 1 = blocked, 0 = open. The centre cells are open so the
# default start position (middle of the world) is not inside a wall.
DEFAULT_LAYOUT: List[List[int]] = [
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [1, 0, 0, 0, 0, 0, 0, 0, 0, 1],
    [1, 0, 1, 1, 0, 0, 1, 1, 0, 1],
    [1, 0, 1, 0, 0, 0, 0, 1, 0, 1],
    [1, 0, 0, 0, 0, 0, 0, 0, 0, 1],
    [1, 0, 0, 0, 0, 0, 0, 0, 0, 1],
    [1, 0, 1, 0, 0, 0, 0, 1, 0, 1],
    [1, 0, 1, 1, 0, 0, 1, 1, 0, 1],
    [1, 0, 0, 0, 0, 0, 0, 0, 0, 1],
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
]


class Grid:
    """Immutable row-major occupancy map."""

    def __init__(self, width: int, height: int, cells: Sequence[int]) -> None:
        """
        width, height: grid dimensions in cells (both positive).
        cells: row-major occupancy values of length width*height;
        truthy values are blocked.
        """
        if width <= 0 or height <= 0:
            raise InvalidConfiguration(
                f"grid dimensions must be positive, got {width}x{height}"
            )
        if len(cells) != width * height:
            raise InvalidConfiguration(
                f"expected {width * height} cells for a {width}x{height} grid, "
                f"got {len(cells)}"
            )
        self.width = width
        self.height = height
        self._cells = np.asarray(cells, dtype=bool).reshape(height, width)
        self._cells.setflags(write=False)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Grid:
        """Build a grid from a list of rows (top row first)."""
        if not rows or not rows[0]:
            raise InvalidConfiguration("grid must have at least one cell")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidConfiguration("grid rows must all have the same length")
        return cls(width, len(rows), [tile for row in rows for tile in row])

    @property
    def cells(self) -> np.ndarray:
        """Read-only (height, width) boolean view of the cells."""
        return self._cells

    def contains(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def cell_at(self, col: int, row: int) -> bool:
        """Return True if the cell is blocked; raise OutOfBounds off-grid."""
        if not self.contains(col, row):
            raise OutOfBounds(col, row, self.width, self.height)
        return bool(self._cells[row, col])

    def is_blocked(self, col: int, row: int) -> bool:
        """Bounds-checked lookup: anything outside the grid reads as open."""
        return self.contains(col, row) and bool(self._cells[row, col])

    @staticmethod
    def cell_of(
        x: float, y: float, cell_size: Tuple[float, float]
    ) -> Tuple[int, int]:
        """Map a world coordinate to the (col, row) containing it."""
        return (
            int(math.floor(x / cell_size[0])),
            int(math.floor(y / cell_size[1])),
        )

    def blocked_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (col, row) of every blocked cell, row by row."""
        rows, cols = np.nonzero(self._cells)
        for row, col in zip(rows.tolist(), cols.tolist()):
            yield col, row

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, blocked={int(self._cells.sum())})"


def default_grid() -> Grid:
    return Grid.from_rows(DEFAULT_LAYOUT)
