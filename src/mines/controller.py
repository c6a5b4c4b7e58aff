"""
Input handling at the presentation boundary.

Translates pointer presses into engine actions. Pressing anywhere after
a game has ended starts a new game, and the same press is then applied
to the fresh board if it lands on the grid.
"""
import logging
from enum import Enum, auto
from typing import Optional, Tuple

from .engine import GameEngine

logger = logging.getLogger(__name__)

# Pixel size of a square cell.
CELL_SIZE = 15


class MouseButton(Enum):
    """Pointer buttons understood by the board."""

    PRIMARY = auto()
    SECONDARY = auto()


class BoardController:
    """
    Routes clicks on a drawn board to a GameEngine.

    Attributes:
        engine: Engine receiving the actions.
        cell_size: Width and height of a cell in pixels.
    """

    def __init__(self, engine: GameEngine, cell_size: int = CELL_SIZE) -> None:
        if cell_size < 1:
            raise ValueError("Cell size must be positive")
        self.engine = engine
        self.cell_size = cell_size

    def board_size(self) -> Tuple[int, int]:
        """Pixel (width, height) of the grid."""
        config = self.engine.config
        return config.cols * self.cell_size, config.rows * self.cell_size

    def cell_at(self, x: int, y: int) -> Optional[Tuple[int, int]]:
        """
        Map a pixel to a grid position.

        Returns:
            (row, col), or None if the pixel is off the grid.
        """
        width, height = self.board_size()
        if not (0 <= x < width and 0 <= y < height):
            return None
        return y // self.cell_size, x // self.cell_size

    def press(self, x: int, y: int, button: MouseButton) -> bool:
        """
        Handle a pointer press at pixel (x, y).

        Returns:
            True if the board needs redrawing.
        """
        redraw = self._restart_if_finished()
        position = self.cell_at(x, y)
        if position is None:
            return redraw
        self._dispatch(position[0], position[1], button)
        return True

    def press_cell(self, row: int, col: int, button: MouseButton) -> bool:
        """
        Handle a press addressed directly by cell.

        Follows the same restart-then-act contract as press(). A position
        off the grid only restarts a finished game.

        Returns:
            True if the board needs redrawing.
        """
        redraw = self._restart_if_finished()
        if not self.engine.session.in_bounds(row, col):
            return redraw
        self._dispatch(row, col, button)
        return True

    def _restart_if_finished(self) -> bool:
        if self.engine.is_playing:
            return False
        logger.debug("Press on finished game, starting a new one")
        self.engine.new_game()
        return True

    def _dispatch(self, row: int, col: int, button: MouseButton) -> None:
        if button == MouseButton.SECONDARY:
            self.engine.toggle_flag(row, col)
        else:
            self.engine.reveal(row, col)
