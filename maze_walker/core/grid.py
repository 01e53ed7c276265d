"""
Maze grid model.

A grid is a rectangular, immutable arrangement of passages and walls:

    0 = Passage (traversable)
    1 = Wall (impassable)

Anything outside the grid counts as a wall.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Sequence


class MazeError(Exception):
    """Base class for maze walker errors."""

    pass


class InvalidGrid(MazeError, ValueError):
    """Exception raised when grid input is not a usable maze."""

    pass


class Cell(IntEnum):
    """Kinds of cell in the maze."""
    PASSAGE = 0
    WALL = 1


@dataclass(frozen=True)
class Grid:
    """Rectangular maze grid. Build with `Grid.from_rows`."""

    cells: tuple[tuple[Cell, ...], ...]
    width: int
    height: int

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "Grid":
        """
        Validate an array-of-arrays of 0/1 values and build a grid.

        Args:
            rows: Rows of the maze, top to bottom.

        Returns:
            Grid with the same layout.

        Raises:
            InvalidGrid: If there are no rows or columns, the rows are
                ragged, or a value is not 0 or 1.
        """
        rows = [list(row) for row in rows]

        if not rows:
            raise InvalidGrid("Grid has no rows")

        width = len(rows[0])
        if width == 0:
            raise InvalidGrid("Grid has no columns")

        cells = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InvalidGrid(
                    f"Grid is not rectangular: row {y} has {len(row)} cells, "
                    f"expected {width}"
                )
            for x, value in enumerate(row):
                # bool is an int subclass but never a valid cell
                if isinstance(value, bool) or not isinstance(value, int) or value not in (0, 1):
                    raise InvalidGrid(
                        f"Invalid cell value {value!r} at position ({x}, {y}). "
                        f"Valid values: 0 (passage), 1 (wall)"
                    )
            cells.append(tuple(Cell(value) for value in row))

        return cls(cells=tuple(cells), width=width, height=len(cells))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        """Get cell type at position."""
        if not self.in_bounds(x, y):
            return Cell.WALL  # Out of bounds = wall
        return self.cells[y][x]

    def is_blocked(self, x: int, y: int) -> bool:
        return self.cell(x, y) == Cell.WALL


# The maze the walker ships with
DEFAULT_MAZE = [
    [1, 1, 1, 1, 1, 0, 1],
    [1, 0, 1, 0, 0, 0, 1],
    [1, 0, 1, 0, 1, 0, 1],
    [1, 0, 0, 0, 0, 0, 1],
    [1, 1, 1, 1, 0, 1, 1],
    [1, 0, 0, 0, 0, 0, 1],
    [1, 1, 0, 1, 1, 1, 1],
]
