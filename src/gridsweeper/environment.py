"""
Gymnasium environment wrapper for gridsweeper.

Provides a standard RL interface over a GameSession, so automated
players drive the same action surface a UI does.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .render import render_board
from .session import GameSession, SessionState


# ============================================================================
# Environment
# ============================================================================

class SweeperEnv(gym.Env):
    """
    Gymnasium environment for gridsweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent hazard count
        - 9 = revealed hazard

    Actions:
        Discrete action space of size width * height.
        Action i is a primary action on cell (i // width, i % width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a hazard
        - -0.1 for invalid action (already revealed/flagged)

    Each step counts as one clock tick.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 25x25 with 50 hazards).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.session = GameSession(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0
        self._total_safe_cells = self.config.total_cells - self.config.hazard_count

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
            options: May hold ``layout``, a list of fixed hazard positions.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        layout = (options or {}).get("layout")
        board_seed = int(self.np_random.integers(2**31))
        self.session.new_session(self.config, seed=board_seed, layout=layout)
        self._steps = 0

        return self.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * width + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(int(action))
        self._steps += 1

        reward = self._calculate_reward(row, col)
        self.session.tick()

        observation = self.session.board.get_observation()
        terminated = self.session.is_terminal
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return action // self.config.width, action % self.config.width

    def _calculate_reward(self, row: int, col: int) -> float:
        """
        Apply a primary action and score it.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        cell = self.session.board.get_cell(row, col)

        # Invalid action (already revealed or flagged)
        if cell is None or not cell.is_hidden or cell.is_flagged:
            return -0.1

        result = self.session.primary_action(row, col)

        if result.session_state == SessionState.WON:
            return 10.0
        if result.session_state == SessionState.LOST:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.session.board
        return {
            "steps": self._steps,
            "revealed": board.safe_revealed_count,
            "total_safe": self._total_safe_cells,
            "game_state": self.session.state.name,
            "elapsed_seconds": self.session.elapsed_seconds,
            "valid_actions": len(board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        return render_board(
            self.session.board,
            self.session.state,
            self.session.triggered_cell,
        )

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            int8 array where 1 = valid action, usable with
            ``action_space.sample(mask=...)``.
        """
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for row, col in self.session.board.get_valid_actions():
            mask[row * self.config.width + col] = 1
        return mask
