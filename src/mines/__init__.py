"""
Minesweeper game module.

Provides the game engine including session state, mine deployment,
flood-fill reveal, flagging and the click contract for front ends.
"""
from .cell import (
    Cell,
    CoverState,
    MarkState,
    TILE_MINE,
    TILE_COVER,
    TILE_MARK,
    TILE_WRONG_MARK,
)
from .board import (
    GameConfig,
    GameSession,
    GameStatus,
    RevealResult,
    FlagResult,
    DEFAULT_CONFIG,
)
from .engine import GameEngine, GAME_WON, GAME_LOST, NO_MARKS_LEFT
from .controller import BoardController, MouseButton, CELL_SIZE
from .render import render_ansi
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CoverState",
    "MarkState",
    "TILE_MINE",
    "TILE_COVER",
    "TILE_MARK",
    "TILE_WRONG_MARK",
    "GameConfig",
    "GameSession",
    "GameStatus",
    "RevealResult",
    "FlagResult",
    "DEFAULT_CONFIG",
    "GameEngine",
    "GAME_WON",
    "GAME_LOST",
    "NO_MARKS_LEFT",
    "BoardController",
    "MouseButton",
    "CELL_SIZE",
    "render_ansi",
    "MinesweeperEnv",
]
