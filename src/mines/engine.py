"""
Game engine for Minesweeper.

Owns the configuration, the random source and the current session, and
reports status text to the presentation layer after every change.
"""
import logging
import random
from typing import Callable, Optional

import numpy as np

from .board import (
    DEFAULT_CONFIG,
    FlagResult,
    GameConfig,
    GameSession,
    GameStatus,
    RevealResult,
)
from .cell import Cell

logger = logging.getLogger(__name__)

StatusSink = Callable[[str], None]

GAME_WON = "Game won"
GAME_LOST = "Game lost"
NO_MARKS_LEFT = "No marks left"


class GameEngine:
    """
    Drives consecutive game sessions with a fixed configuration.

    The engine is synchronous and not thread-safe: a multi-threaded
    front end must serialize its calls.

    Attributes:
        config: Grid size and mine count used for every session.
        rng: Random source used for mine deployment.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        status_sink: Optional[StatusSink] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the engine and start the first session.

        Args:
            config: Session configuration (default: 16x16 with 40 mines).
            status_sink: Called with status text whenever it changes.
            rng: Random source for deployment. Takes precedence over seed.
            seed: Seed for a reproducible random source. When neither rng
                nor seed is given, the OS entropy source is used.
        """
        self.config = config or DEFAULT_CONFIG
        self.rng = rng or self._make_rng(seed)
        self._status_sink = status_sink
        self._status_text = ""
        self._session = None
        self.new_game()

    @staticmethod
    def _make_rng(seed: Optional[int]) -> random.Random:
        if seed is None:
            return random.SystemRandom()
        return random.Random(seed)

    def reseed(self, seed: int) -> None:
        """Replace the random source with a seeded one."""
        self.rng = random.Random(seed)

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def new_game(self) -> GameSession:
        """Discard the current session and start a fresh one."""
        self._session = GameSession.create(self.config, self.rng)
        logger.info(
            "New game: %dx%d with %d mines",
            self.config.rows, self.config.cols, self.config.mine_count,
        )
        self._report(str(self._session.mines_remaining))
        return self._session

    # ========================================================================
    # Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell in the current session.

        Raises:
            IndexError: If the position is outside the board.
        """
        was_playing = self._session.is_playing
        result = self._session.reveal(row, col)
        if was_playing and not self._session.is_playing:
            self._report(GAME_WON if self._session.is_won else GAME_LOST)
        return result

    def toggle_flag(self, row: int, col: int) -> FlagResult:
        """
        Toggle a flag in the current session.

        Raises:
            IndexError: If the position is outside the board.
        """
        result = self._session.toggle_flag(row, col)
        if result == FlagResult.NO_MARKS_LEFT:
            self._report(NO_MARKS_LEFT)
        elif result != FlagResult.IGNORED:
            self._report(str(self._session.mines_remaining))
        return result

    def _report(self, text: str) -> None:
        self._status_text = text
        if self._status_sink is not None:
            self._status_sink(text)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def status(self) -> GameStatus:
        return self._session.status

    @property
    def is_playing(self) -> bool:
        return self._session.is_playing

    @property
    def mines_remaining(self) -> int:
        return self._session.mines_remaining

    @property
    def status_text(self) -> str:
        """Last text sent to the status sink."""
        return self._status_text

    def cell(self, row: int, col: int) -> Cell:
        return self._session.cell(row, col)

    def tile(self, row: int, col: int) -> int:
        return self._session.tile(row, col)

    def tiles(self) -> np.ndarray:
        return self._session.tiles()
