from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from koala_kombo.game import QUEUE_SIZE, Coordinate, GameConfig, GameSession, ScoringRules, ShapeId

CELL_PIXELS = 12
EMPTY_COLOR = (30, 30, 36)
FILLED_COLOR = (70, 200, 120)


def _compute_action_mask(session: GameSession) -> np.ndarray:
    size = session.board_size
    mask = np.zeros((QUEUE_SIZE, size, size), dtype=np.bool_)
    for slot in range(QUEUE_SIZE):
        for anchor in session.valid_placements(slot):
            mask[slot, anchor.x, anchor.y] = True
    return mask


def _valid_actions(session: GameSession) -> List[Tuple[int, int, int]]:
    return [
        (slot, anchor.x, anchor.y)
        for slot in range(QUEUE_SIZE)
        for anchor in session.valid_placements(slot)
    ]


class KoalaKomboEnv(gym.Env):
    """Placement environment: each action drops one queued piece at (column, row).

    The game itself never ends, so episodes only finish by truncation after
    ``config.max_episode_steps`` steps.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 rules: Optional[ScoringRules] = None,
                 invalid_action_penalty: float = -0.1) -> None:
        super().__init__()
        self.session = GameSession(config, rules)
        self.render_mode = render_mode
        self.invalid_action_penalty = float(invalid_action_penalty)

        size = self.session.board_size
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=0, high=1, shape=(size, size), dtype=np.int8),
                "pieces": spaces.Box(low=0, high=len(ShapeId) - 1, shape=(QUEUE_SIZE,), dtype=np.int16),
                "used": spaces.MultiBinary(QUEUE_SIZE),
            }
        )
        # Action: (slot, column, row)
        self.action_space = spaces.MultiDiscrete((QUEUE_SIZE, size, size))
        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        slots = self.session.slots()
        return {
            "grid": self.session.grid_state().astype(np.int8),
            "pieces": np.array([int(s.shape) for s in slots], dtype=np.int16),
            "used": np.array([s.used for s in slots], dtype=np.int8),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "action_mask": _compute_action_mask(self.session),
            "valid_actions": _valid_actions(self.session),
            "score": self.session.score,
            "steps": self._steps,
            "filled_cells": self.session.filled_cells,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        self.session.reset(seed)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: np.ndarray | Tuple[int, int, int]):
        slot, x, y = map(int, action)

        success = self.session.commit_placement(slot, Coordinate(x, y))
        if success:
            reward = float(self.session.last_commit.score_delta)
        else:
            reward = self.invalid_action_penalty

        self._steps += 1
        terminated = False
        truncated = self._steps >= self.session.config.max_episode_steps

        info = self._get_info()
        info["placed"] = success
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        grid = self._get_obs()["grid"]
        palette = np.array([EMPTY_COLOR, FILLED_COLOR], dtype=np.uint8)
        img = palette[grid]
        # Scale each board cell up to a CELL_PIXELS square
        return img.repeat(CELL_PIXELS, axis=0).repeat(CELL_PIXELS, axis=1)
