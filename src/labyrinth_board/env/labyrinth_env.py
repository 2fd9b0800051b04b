from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from labyrinth_board.game import ALL_TILES, Board, Direction, Footprint, Rotation


@dataclass
class EnvConfig:
    rows: int = 7
    columns: int = 7
    max_episode_steps: int = 200
    fixed_tiles: bool = True
    invalid_action_penalty: float = -0.1
    step_penalty: float = -0.01
    goal_reward: float = 1.0


def decode_action(action: int, rows: int, columns: int) -> Tuple[str, Tuple[int, int], Union[Direction, Rotation]]:
    """Map a flat action index to ("shift", cell, direction) or ("rotate", cell, rotation).

    Row shifts come first (East, West per row), then column shifts
    (South, North per column), then one right-rotation per cell.
    """
    if action < 2 * rows:
        row, odd = divmod(action, 2)
        return "shift", (row, 0), Direction.WEST if odd else Direction.EAST
    action -= 2 * rows
    if action < 2 * columns:
        col, odd = divmod(action, 2)
        return "shift", (0, col), Direction.NORTH if odd else Direction.SOUTH
    action -= 2 * columns
    return "rotate", divmod(action, columns), Rotation.RIGHT


def _compute_action_mask(board: Board) -> np.ndarray:
    n_shifts = 2 * board.rows + 2 * board.columns
    mask = np.ones((n_shifts + board.size,), dtype=np.bool_)
    for idx in range(n_shifts):
        _, cell, direction = decode_action(idx, board.rows, board.columns)
        mask[idx] = board.can_move(cell, direction)
    return mask


class LabyrinthEnv(gym.Env):
    """Slide lines and rotate tiles until the token can reach the goal cell."""

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(self, config: Optional[EnvConfig] = None, render_mode: Optional[str] = None) -> None:
        super().__init__()
        self.config = config or EnvConfig()
        if self.config.rows * self.config.columns < 2:
            raise ValueError(
                f"Board must have at least two cells for a token and a goal, got {self.config.rows}x{self.config.columns}"
            )
        self.render_mode = render_mode
        rows, columns = self.config.rows, self.config.columns

        self.board = Board(rows, columns)
        self.token = (0, 0)
        self.goal = (rows - 1, columns - 1)
        self._steps = 0

        self.observation_space = spaces.Dict(
            {
                "tiles": spaces.Box(low=0, high=len(ALL_TILES) - 1, shape=(rows, columns), dtype=np.int8),
                "token": spaces.MultiDiscrete([rows, columns]),
                "goal": spaces.MultiDiscrete([rows, columns]),
            }
        )
        self.action_space = spaces.Discrete(2 * rows + 2 * columns + rows * columns)

    def _new_board(self) -> Board:
        rows, columns = self.config.rows, self.config.columns
        codes = self.np_random.integers(0, len(ALL_TILES), size=rows * columns)
        board = Board(rows, columns, [ALL_TILES[int(c)] for c in codes])
        if self.config.fixed_tiles:
            for row in range(0, rows, 2):
                for col in range(0, columns, 2):
                    board.blocks.add_non_movable(Footprint(row, col, 1, 1))
        return board

    def _get_obs(self) -> Dict[str, Any]:
        tiles = np.array([[tile.code for tile in row] for row in self.board.tiles], dtype=np.int8)
        return {
            "tiles": tiles,
            "token": np.array(self.token, dtype=np.int64),
            "goal": np.array(self.goal, dtype=np.int64),
        }

    def _get_info(self, path=None) -> Dict[str, Any]:
        return {
            "action_mask": _compute_action_mask(self.board),
            "path": path,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        self._steps = 0
        size = self.config.rows * self.config.columns
        while True:
            self.board = self._new_board()
            token, goal = self.np_random.choice(size, size=2, replace=False)
            self.token = self.board.row_col(int(token))
            self.goal = self.board.row_col(int(goal))
            if self.board.shortest_path(self.token, self.goal) is None:
                break
        return self._get_obs(), self._get_info()

    def step(self, action):
        kind, cell, turn = decode_action(int(action), self.config.rows, self.config.columns)

        reward_components: Dict[str, float] = {"step": self.config.step_penalty}
        if kind == "shift":
            if not self.board.move(cell, turn):
                reward_components["invalid"] = self.config.invalid_action_penalty
        else:
            self.board.rotate(cell, turn)

        self._steps += 1
        path = self.board.shortest_path(self.token, self.goal)
        terminated = path is not None
        if terminated:
            reward_components = {"goal": self.config.goal_reward}
        truncated = not terminated and self._steps >= self.config.max_episode_steps

        reward = float(sum(reward_components.values()))
        info = self._get_info(path)
        info["reward_components"] = reward_components
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[str]:
        if self.render_mode == "ansi":
            return self.board.render()
        return None

    def close(self) -> None:
        pass
