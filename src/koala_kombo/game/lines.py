from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .grid import Coordinate, GameGrid


@dataclass(frozen=True)
class LineClear:
    rows: Tuple[int, ...] = ()
    columns: Tuple[int, ...] = ()

    @property
    def count(self) -> int:
        return len(self.rows) + len(self.columns)


def find_complete_lines(grid: GameGrid) -> LineClear:
    """Detect every full row and column on the current grid without mutating it."""
    rows = np.flatnonzero(np.all(grid.grid, axis=1))
    cols = np.flatnonzero(np.all(grid.grid, axis=0))
    return LineClear(rows=tuple(int(r) for r in rows), columns=tuple(int(c) for c in cols))


def clear_lines(grid: GameGrid, lines: LineClear) -> None:
    for r in lines.rows:
        for x in range(grid.size):
            grid.clear(Coordinate(x, r))
    for c in lines.columns:
        for y in range(grid.size):
            grid.clear(Coordinate(c, y))


def resolve_lines(grid: GameGrid) -> LineClear:
    # All lines are detected before any is cleared: a cleared row must not
    # hide a column that was complete through the shared cell.
    lines = find_complete_lines(grid)
    if lines.count:
        clear_lines(grid, lines)
    return lines
