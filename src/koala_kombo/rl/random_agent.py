from __future__ import annotations

import argparse
import random
from typing import Optional

import gymnasium as gym

import koala_kombo.env  # noqa: F401
from koala_kombo.game import GameConfig


def run_random(steps: int = 200, seed: Optional[int] = None, board_size: int = 8) -> float:
    config = GameConfig(board_size=board_size, max_episode_steps=steps)
    env = gym.make("KoalaKombo-8x8-v0", config=config)
    picker = random.Random(seed)
    _, info = env.reset(seed=seed)
    total_reward = 0.0
    done = False
    while not done:
        # Without a legal move the game cannot progress; the step is spent as a penalty
        action = picker.choice(info["valid_actions"]) if info["valid_actions"] else (0, 0, 0)
        _, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        done = terminated or truncated
    env.close()
    print(f"Random agent total reward: {total_reward:.2f} (score {info['score']})")
    return total_reward


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=200)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--board-size", type=int, default=8)
    return p


def main() -> None:
    args = build_parser().parse_args()
    run_random(steps=args.steps, seed=args.seed, board_size=args.board_size)


if __name__ == "__main__":  # pragma: no cover
    main()
