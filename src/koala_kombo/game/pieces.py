from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from .shapes import ShapeId

logger = logging.getLogger(__name__)

QUEUE_SIZE = 3


class ShapeSource:
    """Uniform random shape ids, drawn with replacement."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)
        self._choices = list(ShapeId)

    def seed(self, seed: Optional[int]) -> None:
        self.rng.seed(seed)

    def draw(self) -> ShapeId:
        return self._choices[self.rng.randrange(len(self._choices))]


@dataclass(frozen=True)
class PieceSlot:
    shape: ShapeId
    used: bool = False


class PieceQueue:
    """Fixed set of three slots, replaced as a whole once every slot is used."""

    def __init__(self, source: ShapeSource) -> None:
        self.source = source
        self._slots: List[PieceSlot] = []
        self.refill()

    def refill(self) -> None:
        self._slots = [PieceSlot(self.source.draw()) for _ in range(QUEUE_SIZE)]
        logger.debug("Queue refilled: %s", [s.shape.name for s in self._slots])

    @property
    def slots(self) -> Tuple[PieceSlot, ...]:
        return tuple(self._slots)

    def available(self, index: int) -> Optional[ShapeId]:
        """Shape in slot ``index`` if the index is valid and the slot unused."""
        if not 0 <= index < len(self._slots):
            return None
        slot = self._slots[index]
        if slot.used:
            return None
        return slot.shape

    def mark_used(self, index: int) -> None:
        self._slots[index] = replace(self._slots[index], used=True)

    def exhausted(self) -> bool:
        return all(s.used for s in self._slots)
