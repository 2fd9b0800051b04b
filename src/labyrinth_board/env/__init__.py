"""Gymnasium environments for Labyrinth Board."""

from __future__ import annotations

from gymnasium.envs.registration import register

from .labyrinth_env import EnvConfig, LabyrinthEnv, decode_action

# Register the classic 7x7 board with fixed even/even tiles
register(
    id="Labyrinth-7x7-v0",
    entry_point="labyrinth_board.env.labyrinth_env:LabyrinthEnv",
)

__all__ = ["EnvConfig", "LabyrinthEnv", "decode_action"]
