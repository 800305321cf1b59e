from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import BOARD_HEIGHT, BOARD_WIDTH, Command, FallingBlocksGame, GameConfig
from falling_blocks.game.shapes import color_for, hex_to_rgb


class FallingBlocksEnv(gym.Env):
    """
    Frame-stepped environment over the falling-block engine.

    Actions (6 total), matching the engine commands:
      0: No-op
      1: Move Left
      2: Move Right
      3: Rotate CW
      4: Soft Drop
      5: Hard Drop

    Each step applies the command, then delivers one frame of `frame_ms` to the
    gravity scheduler. The reward is the score gained during the step.
    Episodes never truncate on their own; `gym.make` adds the step limit.
    Pausing is a host concern and is not part of the action space.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        frame_ms: float = 1000.0 / 30,
    ) -> None:
        super().__init__()
        self.game = FallingBlocksGame(config)
        self.render_mode = render_mode
        self.frame_ms = float(frame_ms)

        # Board with the falling piece overlaid as negative type ids
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=-7, high=7, shape=(BOARD_HEIGHT, BOARD_WIDTH), dtype=np.int8),
                "next_piece": spaces.Discrete(8),
            }
        )
        self.action_space = spaces.Discrete(6)

        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        return {
            "board": self.game.get_state().astype(np.int8),
            "next_piece": int(self.game.next_piece.kind),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines": self.game.lines_cleared,
            "level": self.game.level,
            "drop_interval_ms": self.game.drop_interval_ms,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.factory.rng.seed(seed)
        self.game.reset()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        command = Command(int(action))
        assert command != Command.TOGGLE_PAUSE, "pause is not an agent action"

        score_before = self.game.score
        self.game.handle(command)
        self.game.tick(self.frame_ms)
        self._steps += 1

        reward = float(self.game.score - score_before)
        terminated = self.game.game_over
        return self._get_obs(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            state = self.game.get_state()
            cell = 12
            h, w = state.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    v = int(state[y, x])
                    color = hex_to_rgb(color_for(v)) if v else (30, 30, 36)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        return None
