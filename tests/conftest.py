from __future__ import annotations

from typing import Iterable, List

import pytest

from koala_kombo.game import GameConfig, GameSession, ShapeId, ShapeSource


class ScriptedSource(ShapeSource):
    """Hands out a fixed sequence of shapes, then repeats the last one."""

    def __init__(self, shapes: Iterable[ShapeId]) -> None:
        super().__init__(seed=0)
        self.shapes: List[ShapeId] = list(shapes)
        self.draws = 0

    def draw(self) -> ShapeId:
        index = min(self.draws, len(self.shapes) - 1)
        self.draws += 1
        return self.shapes[index]


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def make_session():
    def _make(shapes: Iterable[ShapeId], board_size: int = 8) -> GameSession:
        return GameSession(GameConfig(board_size=board_size), source=ScriptedSource(shapes))

    return _make
