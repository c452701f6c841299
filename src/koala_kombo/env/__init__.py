"""Gymnasium environments for Koala Kombo."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Register default 8x8 placement environment
register(
    id="KoalaKombo-8x8-v0",
    entry_point="koala_kombo.env.koala_kombo_env:KoalaKomboEnv",
)

__all__ = ["KoalaKombo-8x8-v0"]
