from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Tuple

import numpy as np

from .grid import Coordinate


class ShapeId(IntEnum):
    SINGLE = 0
    DUO = 1
    DUO_UP = 2
    TRIO = 3
    TRIO_UP = 4
    I = 5
    I_UP = 6
    LONG_I = 7
    LONG_I_UP = 8
    O = 9
    WIDE_O = 10
    TALL_O = 11
    HUGE = 12
    T = 13
    T_DOWN = 14
    T_LEFT = 15
    T_RIGHT = 16
    L = 17
    L_UP = 18
    J = 19
    J_UP = 20
    S = 21
    S_UP = 22
    Z = 23
    Z_UP = 24


# Rows top to bottom; 1 marks a filled cell.
BASE_SHAPES: Dict[ShapeId, np.ndarray] = {
    ShapeId.SINGLE: np.array([[1]], dtype=np.int8),
    ShapeId.DUO: np.array([[1, 1]], dtype=np.int8),
    ShapeId.DUO_UP: np.array([[1], [1]], dtype=np.int8),
    ShapeId.TRIO: np.array([[1, 1, 1]], dtype=np.int8),
    ShapeId.TRIO_UP: np.array([[1], [1], [1]], dtype=np.int8),
    ShapeId.I: np.array([[1, 1, 1, 1]], dtype=np.int8),
    ShapeId.I_UP: np.array([[1], [1], [1], [1]], dtype=np.int8),
    ShapeId.LONG_I: np.array([[1, 1, 1, 1, 1]], dtype=np.int8),
    ShapeId.LONG_I_UP: np.array([[1], [1], [1], [1], [1]], dtype=np.int8),
    ShapeId.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    ShapeId.WIDE_O: np.array([[1, 1, 1], [1, 1, 1]], dtype=np.int8),
    ShapeId.TALL_O: np.array([[1, 1], [1, 1], [1, 1]], dtype=np.int8),
    ShapeId.HUGE: np.ones((3, 3), dtype=np.int8),
    ShapeId.T: np.array([[0, 1, 0], [1, 1, 1]], dtype=np.int8),
    ShapeId.T_DOWN: np.array([[1, 1, 1], [0, 1, 0]], dtype=np.int8),
    ShapeId.T_LEFT: np.array([[0, 1], [1, 1], [0, 1]], dtype=np.int8),
    ShapeId.T_RIGHT: np.array([[1, 0], [1, 1], [1, 0]], dtype=np.int8),
    ShapeId.L: np.array([[0, 0, 1], [1, 1, 1]], dtype=np.int8),
    ShapeId.L_UP: np.array([[1, 0], [1, 0], [1, 1]], dtype=np.int8),
    ShapeId.J: np.array([[1, 0, 0], [1, 1, 1]], dtype=np.int8),
    ShapeId.J_UP: np.array([[1, 1], [1, 0], [1, 0]], dtype=np.int8),
    ShapeId.S: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
    ShapeId.S_UP: np.array([[1, 0], [1, 1], [0, 1]], dtype=np.int8),
    ShapeId.Z: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
    ShapeId.Z_UP: np.array([[0, 1], [1, 1], [1, 0]], dtype=np.int8),
}


def offsets_of(matrix: np.ndarray) -> Tuple[Coordinate, ...]:
    """Filled cells of a 0/1 matrix as row-major offsets normalized to (0, 0)."""
    filled = np.argwhere(matrix != 0)
    filled = filled - filled.min(axis=0)
    return tuple(Coordinate(int(x), int(y)) for y, x in filled)


@dataclass(frozen=True)
class Shape:
    """Immutable polyomino footprint: an id plus its relative cell offsets."""

    id: ShapeId
    cells: Tuple[Coordinate, ...]

    @property
    def size(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return max(c.x for c in self.cells) + 1

    @property
    def height(self) -> int:
        return max(c.y for c in self.cells) + 1


CATALOG: Dict[ShapeId, Shape] = {
    shape_id: Shape(shape_id, offsets_of(BASE_SHAPES[shape_id])) for shape_id in ShapeId
}


def get_shape(shape_id: ShapeId) -> Shape:
    return CATALOG[ShapeId(shape_id)]


def coords(shape_id: ShapeId) -> Tuple[Coordinate, ...]:
    return get_shape(shape_id).cells


def all_shapes() -> List[Shape]:
    return [CATALOG[s] for s in ShapeId]
