"""
Gymnasium environment wrapper for Minesweeper.

Exposes the game engine through the standard step/reset interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import GameConfig
from .cell import NUM_TILES
from .engine import GameEngine
from .render import render_ansi


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D int8 array of tile indices (see Cell.tile):
        - 0-8 = uncovered cell with adjacent mine count
        - 9 = mine
        - 10 = covered cell
        - 11 = flag
        - 12 = wrong flag (after a loss)

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < rows * cols reveals cell (i // cols, i % cols);
        the upper half toggles the flag on the same cells.

    Rewards:
        - +1 for winning the game
        - -1 for revealing a mine
        - 0 otherwise
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Game configuration (default: 16x16 with 40 mines).
            render_mode: How to render the environment.
            seed: Seed for mine deployment.
        """
        super().__init__()

        self.engine = GameEngine(config, seed=seed)
        self.config = self.engine.config
        self.render_mode = render_mode
        self._cells = self.config.cell_count

        self.observation_space = spaces.Box(
            low=0,
            high=NUM_TILES - 1,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducible mine deployment.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.engine.reseed(seed)
        self.engine.new_game()
        self._steps = 0
        return self.engine.tiles(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).

        Raises:
            ValueError: If the action is outside the action space.
        """
        flag, row, col = self._decode_action(action)
        self._steps += 1

        was_playing = self.engine.is_playing
        if flag:
            self.engine.toggle_flag(row, col)
        else:
            self.engine.reveal(row, col)

        reward = 0.0
        if was_playing and self.engine.session.is_won:
            reward = 1.0
        elif was_playing and self.engine.session.is_lost:
            reward = -1.0

        terminated = not self.engine.is_playing
        return self.engine.tiles(), reward, terminated, False, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (flag, row, col)."""
        action = int(action)
        if not 0 <= action < 2 * self._cells:
            raise ValueError(f"Invalid action {action}")
        flag, index = divmod(action, self._cells)
        row, col = divmod(index, self.config.cols)
        return bool(flag), row, col

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        session = self.engine.session
        return {
            "steps": self._steps,
            "status": session.status.name,
            "mines_remaining": session.mines_remaining,
            "uncovered": session.uncovered_count,
            "safe_cells": self.config.safe_cell_count,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_ansi(self.engine.session)
        if self.render_mode == "human":
            print(render_ansi(self.engine.session))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            Boolean array where True = valid action. Covered unflagged
            cells can be revealed; covered cells can have their flag
            toggled, while marks are left or the cell is already flagged.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        session = self.engine.session
        if not session.is_playing:
            return mask
        for row, col in session.covered_positions():
            index = row * self.config.cols + col
            cell = session.cell(row, col)
            if not cell.is_flagged:
                mask[index] = True
            if cell.is_flagged or session.mines_remaining > 0:
                mask[self._cells + index] = True
        return mask
