"""Game module for Koala Kombo.

Exports the core game engine and supporting classes:
- GameGrid / Coordinate: Occupancy grid and board positions
- Shape / ShapeId: Closed catalog of polyomino shapes
- can_place: Placement validation
- PieceQueue / PieceSlot / ShapeSource: Three-slot piece queue and its random source
- ScoringRules: Line clear scoring
- GameSession: Board, queue and score for one game
"""

from .grid import Coordinate, GameGrid
from .shapes import CATALOG, Shape, ShapeId, all_shapes, coords, get_shape
from .placement import can_place, footprint, valid_anchors
from .lines import LineClear, find_complete_lines, resolve_lines
from .pieces import QUEUE_SIZE, PieceQueue, PieceSlot, ShapeSource
from .rules import ScoringRules
from .core import CommitResult, GameConfig, GameSession, new_session

__all__ = [
    "Coordinate",
    "GameGrid",
    "CATALOG",
    "Shape",
    "ShapeId",
    "all_shapes",
    "coords",
    "get_shape",
    "can_place",
    "footprint",
    "valid_anchors",
    "LineClear",
    "find_complete_lines",
    "resolve_lines",
    "QUEUE_SIZE",
    "PieceQueue",
    "PieceSlot",
    "ShapeSource",
    "ScoringRules",
    "CommitResult",
    "GameConfig",
    "GameSession",
    "new_session",
]
