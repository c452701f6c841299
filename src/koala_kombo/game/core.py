from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

import numpy as np

from .grid import Coordinate, GameGrid
from .lines import resolve_lines
from .pieces import QUEUE_SIZE, PieceQueue, PieceSlot, ShapeSource
from .placement import can_place, footprint, valid_anchors
from .rules import ScoringRules
from .shapes import Shape, get_shape

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    board_size: int = 8
    pieces_per_set: int = QUEUE_SIZE
    random_seed: Optional[int] = None
    max_episode_steps: int = 1000

    def validate(self) -> None:
        if self.board_size <= 0:
            raise ValueError(f"board_size must be positive, got {self.board_size}")
        if self.pieces_per_set != QUEUE_SIZE:
            raise ValueError(f"pieces_per_set is fixed at {QUEUE_SIZE}, got {self.pieces_per_set}")
        if self.max_episode_steps <= 0:
            raise ValueError(f"max_episode_steps must be positive, got {self.max_episode_steps}")


@dataclass(frozen=True)
class CommitResult:
    slot: int
    cells: FrozenSet[Coordinate]
    rows: Tuple[int, ...]
    columns: Tuple[int, ...]
    score_delta: int
    refilled: bool


class GameSession:
    """Board, piece queue and score for one game.

    ``commit_placement`` is the only mutating operation; everything else is a
    query. The session has no terminal state and is not thread-safe.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        source: Optional[ShapeSource] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.config.validate()
        self.rules = rules or ScoringRules()
        self.source = source or ShapeSource(self.config.random_seed)
        self._grid = GameGrid(self.config.board_size)
        self._queue = PieceQueue(self.source)
        self._score = 0
        self.last_commit: Optional[CommitResult] = None

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.source.seed(seed)
        self._grid.reset()
        self._queue.refill()
        self._score = 0
        self.last_commit = None

    @property
    def board_size(self) -> int:
        return self._grid.size

    @property
    def score(self) -> int:
        return self._score

    @property
    def filled_cells(self) -> int:
        return self._grid.filled_count()

    def slots(self) -> Tuple[PieceSlot, ...]:
        return self._queue.slots

    def is_filled(self, coord: Coordinate) -> bool:
        return self._grid.is_filled(Coordinate(*coord))

    def grid_state(self) -> np.ndarray:
        return self._grid.clone_state()

    def _slot_shape(self, slot_index: int) -> Optional[Shape]:
        shape_id = self._queue.available(slot_index)
        if shape_id is None:
            return None
        return get_shape(shape_id)

    def preview(self, slot_index: int, anchor: Coordinate) -> Optional[FrozenSet[Coordinate]]:
        anchor = Coordinate(*anchor)
        shape = self._slot_shape(slot_index)
        if shape is None:
            return None
        return can_place(self._grid, shape, anchor)

    def preview_footprint(self, slot_index: int, anchor: Coordinate) -> FrozenSet[Coordinate]:
        """Cells to highlight for a drag, even when the drop would be rejected."""
        anchor = Coordinate(*anchor)
        shape = self._slot_shape(slot_index)
        if shape is None:
            return frozenset()
        return footprint(self._grid, shape, anchor)

    def valid_placements(self, slot_index: int) -> List[Coordinate]:
        shape = self._slot_shape(slot_index)
        if shape is None:
            return []
        return valid_anchors(self._grid, shape)

    def commit_placement(self, slot_index: int, anchor: Coordinate) -> bool:
        # Validated again here: the caller may have previewed an older board.
        cells = self.preview(slot_index, anchor)
        if cells is None:
            return False

        for cell in cells:
            self._grid.occupy(cell)
        self._queue.mark_used(slot_index)

        lines = resolve_lines(self._grid)
        delta = self.rules.score_for_lines(len(lines.rows), len(lines.columns), self._grid.size)
        self._score += delta

        refilled = self._queue.exhausted()
        if refilled:
            self._queue.refill()

        self.last_commit = CommitResult(
            slot=slot_index,
            cells=cells,
            rows=lines.rows,
            columns=lines.columns,
            score_delta=delta,
            refilled=refilled,
        )
        logger.debug(
            "Slot %d placed at %s: rows=%s columns=%s delta=%d score=%d filled=%d",
            slot_index, tuple(anchor), lines.rows, lines.columns, delta, self._score,
            self._grid.filled_count(),
        )
        return True


def new_session(board_size: int = 8, seed: Optional[int] = None, source: Optional[ShapeSource] = None) -> GameSession:
    return GameSession(GameConfig(board_size=board_size, random_seed=seed), source=source)
