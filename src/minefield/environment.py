"""
Gymnasium environment wrapper for Minefield.

Provides a standard RL interface over the Field and its action codes.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .field import Field, FieldConfig, GameAction, Point


# ============================================================================
# Minefield Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minefield.

    Observation:
        2D array over the playable interior where:
        - -1 = hidden box
        - -2 = marked box
        - -3 = suspect box
        - 0-8 = open box with adjacent mine count
        - 9 = open mine

    Actions:
        MultiDiscrete [row, col, code]: 0-based interior position and
        a GameAction code.

    Rewards:
        - +1 for opening at least one safe box
        - +10 for winning the game
        - -10 for uncovering a mine
        - -0.1 for an action that opened nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[FieldConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minefield environment.

        Args:
            config: Field configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or FieldConfig()
        self.field = Field.from_config(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-3,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.MultiDiscrete(
            [self.config.rows, self.config.cols, len(GameAction)]
        )

        self._steps = 0
        self._lost = False

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        rng = random.Random(int(self.np_random.integers(2**32)))
        self.field = Field.from_config(self.config, rng)
        self._steps = 0
        self._lost = False

        return self.field.get_observation(), self._get_info()

    def step(
        self, action
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Sequence of (row, col, code).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col, code = (int(value) for value in action)
        self._steps += 1

        if self._is_over():
            reward = 0.0
        else:
            reward = self._calculate_reward(Point(row + 1, col + 1), code)

        observation = self.field.get_observation()
        terminated = self._is_over()
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _calculate_reward(self, point: Point, code: int) -> float:
        """
        Run an action and score its outcome.

        Args:
            point: Target point in field coordinates.
            code: GameAction code.

        Returns:
            Reward value.
        """
        covered_before = self.field.num_covered
        if not self.field.run_action(point, code):
            self._lost = True
            return -10.0
        if self.field.is_game_won():
            return 10.0
        if self.field.num_covered < covered_before:
            return 1.0
        return -0.1

    def _is_over(self) -> bool:
        """Check if the episode reached a win or a loss."""
        return self._lost or self.field.is_game_won()

    def _game_state(self) -> str:
        """Name of the current game state."""
        if self._lost:
            return "LOST"
        if self.field.is_game_won():
            return "WON"
        return "PLAYING"

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "num_covered": self.field.num_covered,
            "hints": self.field.hints,
            "remaining_mines": self.field.remaining_mines,
            "game_state": self._game_state(),
        }

    def render(self) -> Optional[str]:
        """Render the current field state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render field as text, fully uncovered once the game is over."""
        if self._is_over():
            return self.field.render_all()
        return self.field.render()

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of hidden interior boxes.

        Returns:
            Boolean array of size rows * cols where True = hidden.
        """
        mask = np.zeros(self.config.rows * self.config.cols, dtype=bool)
        for point in self.field.get_hidden_points():
            mask[(point.x - 1) * self.config.cols + (point.y - 1)] = True
        return mask
