from __future__ import annotations

import operator
from typing import NamedTuple

import numpy as np


class _Position(NamedTuple):
    x: int
    y: int


class Coordinate(_Position):
    """Board position as (column, row); row 0 is the top of the board.

    Both parts must be integers; floats and other non-index values raise
    ``TypeError`` on construction.
    """

    __slots__ = ()

    def __new__(cls, x: int, y: int) -> "Coordinate":
        return super().__new__(cls, operator.index(x), operator.index(y))

    def offset(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.x + other.x, self.y + other.y)


class GameGrid:
    """Square occupancy grid.

    Cells are stored as a boolean numpy array indexed ``[row, column]``.
    Addressing a cell outside the board is a programming error and raises
    ``IndexError``; callers that may hold off-board coordinates check
    ``is_inside`` first.
    """

    def __init__(self, size: int) -> None:
        self.size = int(size)
        if self.size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.grid = np.zeros((self.size, self.size), dtype=np.bool_)

    def reset(self) -> None:
        self.grid.fill(False)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def _check(self, coord: Coordinate) -> None:
        # numpy would silently wrap negative indices
        if not self.is_inside(coord.x, coord.y):
            raise IndexError(f"{tuple(coord)} is outside a {self.size}x{self.size} grid")

    def is_filled(self, coord: Coordinate) -> bool:
        self._check(coord)
        return bool(self.grid[coord.y, coord.x])

    def occupy(self, coord: Coordinate) -> None:
        self._check(coord)
        self.grid[coord.y, coord.x] = True

    def clear(self, coord: Coordinate) -> None:
        self._check(coord)
        self.grid[coord.y, coord.x] = False

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
