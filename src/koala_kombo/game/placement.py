from __future__ import annotations

from typing import FrozenSet, List, Optional

from .grid import Coordinate, GameGrid
from .shapes import Shape


def can_place(grid: GameGrid, shape: Shape, anchor: Coordinate) -> Optional[FrozenSet[Coordinate]]:
    """Return the absolute cells ``shape`` would cover at ``anchor``, or None.

    None means at least one cell is off the board or already filled; the two
    cases are not distinguished.
    """
    cells = []
    for offset in shape.cells:
        target = anchor.offset(offset)
        if not grid.is_inside(target.x, target.y) or grid.is_filled(target):
            return None
        cells.append(target)
    return frozenset(cells)


def footprint(grid: GameGrid, shape: Shape, anchor: Coordinate) -> FrozenSet[Coordinate]:
    """In-bounds cells of ``shape`` at ``anchor``, ignoring occupancy."""
    targets = (anchor.offset(o) for o in shape.cells)
    return frozenset(t for t in targets if grid.is_inside(t.x, t.y))


def valid_anchors(grid: GameGrid, shape: Shape) -> List[Coordinate]:
    """All anchors where ``shape`` fits, row by row."""
    anchors: List[Coordinate] = []
    for y in range(grid.size - shape.height + 1):
        for x in range(grid.size - shape.width + 1):
            anchor = Coordinate(x, y)
            if can_place(grid, shape, anchor) is not None:
                anchors.append(anchor)
    return anchors
