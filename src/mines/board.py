"""
Board module for Minesweeper game.

Implements a single game session: the grid of cells, mine deployment,
cell revealing with flood fill, flagging and win/loss detection.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, List, Tuple

import numpy as np

from .cell import Cell

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of a game session."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


class FlagResult(Enum):
    """Outcome of a flag toggle."""

    FLAGGED = auto()
    UNFLAGGED = auto()
    NO_MARKS_LEFT = auto()
    IGNORED = auto()


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session. Immutable once validated.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Total mines to deploy.
    """

    rows: int = 16
    cols: int = 16
    mine_count: int = 40

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise ValueError("Number of mines cannot be negative")
        if self.mine_count > self.cell_count:
            raise ValueError(f"Too many mines (max {self.cell_count})")

    @property
    def cell_count(self) -> int:
        """Total number of cells on the grid."""
        return self.rows * self.cols

    @property
    def safe_cell_count(self) -> int:
        """Number of cells that do not hold a mine."""
        return self.cell_count - self.mine_count


DEFAULT_CONFIG = GameConfig(16, 16, 40)


@dataclass
class RevealResult:
    """
    Cells uncovered by a single reveal, and the session status after it.

    Attributes:
        uncovered: Positions whose cover state changed, in uncover order.
        status: Session status once the reveal was applied.
    """

    uncovered: List[Position] = field(default_factory=list)
    status: GameStatus = GameStatus.IN_PROGRESS

    @property
    def changed(self) -> bool:
        """Check if any cell was uncovered."""
        return bool(self.uncovered)

    def __len__(self) -> int:
        """Number of uncovered positions."""
        return len(self.uncovered)


# ============================================================================
# Game Session
# ============================================================================

@dataclass
class GameSession:
    """
    One Minesweeper game from deployment to a terminal status.

    Creating a session allocates a covered grid and deploys the mines.
    The session is mutated in place by reveal and flag actions and is
    replaced wholesale when a new game starts.
    """

    config: GameConfig = field(default_factory=GameConfig)
    rng: random.Random = field(default_factory=random.SystemRandom, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _status: GameStatus = GameStatus.IN_PROGRESS
    _uncovered: int = 0
    _flags: int = 0

    def __post_init__(self) -> None:
        """Build the grid and deploy mines after dataclass creation."""
        self._init_grid()
        self._deploy_mines()

    @classmethod
    def create(cls, config: GameConfig, rng: random.Random) -> "GameSession":
        """
        Start a new session: covered grid, mines deployed, in progress.

        Args:
            config: Grid size and mine count.
            rng: Random source for deployment.
        """
        return cls(config=config, rng=rng)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create covered grid without mines."""
        self._grid = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]
        self._status = GameStatus.IN_PROGRESS
        self._uncovered = 0
        self._flags = 0

    def _deploy_mines(self) -> None:
        """
        Place mines by rejection sampling.

        A uniformly random position is drawn until the requested number
        of distinct positions hold a mine. A draw landing on an existing
        mine is discarded, so each position is counted at most once.
        """
        deployed = 0
        draws = 0
        while deployed < self.config.mine_count:
            position = self.rng.randrange(self.config.cell_count)
            draws += 1
            row, col = divmod(position, self.config.cols)
            cell = self._grid[row][col]
            if cell.is_mine:
                continue
            cell.is_mine = True
            deployed += 1
            self._increment_adjacent(row, col)
        logger.debug(
            "Deployed %d mines on %dx%d grid in %d draws",
            deployed, self.config.rows, self.config.cols, draws,
        )

    def _increment_adjacent(self, row: int, col: int) -> None:
        """Bump the adjacency count of non-mine neighbors."""
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            neighbor = self._grid[neighbor_row][neighbor_col]
            if not neighbor.is_mine:
                neighbor.adjacent_mines += 1

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get in-bounds neighboring positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for up to 8 neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    def _check_position(self, row: int, col: int) -> None:
        """Raise IndexError for a position off the board."""
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Position ({row}, {col}) is outside the "
                f"{self.config.rows}x{self.config.cols} board"
            )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal the cell at the given position.

        Flagged and uncovered cells are left alone. Revealing a mine
        loses the game. Revealing a cell with no adjacent mines also
        uncovers the surrounding empty region.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            The uncovered positions and the resulting status.

        Raises:
            IndexError: If the position is outside the board.
        """
        self._check_position(row, col)
        if not self.is_playing:
            return RevealResult(status=self._status)

        cell = self._grid[row][col]
        if not cell.uncover():
            return RevealResult(status=self._status)

        uncovered = [(row, col)]
        if cell.is_mine:
            self._uncovered += 1
            self._status = GameStatus.LOST
            logger.info("Mine revealed at (%d, %d), game lost", row, col)
            return RevealResult(uncovered, self._status)

        if cell.adjacent_mines == 0:
            uncovered.extend(self._flood_fill(row, col))

        self._uncovered += len(uncovered)
        self._check_win_condition()
        return RevealResult(uncovered, self._status)

    def _flood_fill(self, row: int, col: int) -> List[Position]:
        """Uncover the empty region around an already uncovered zero cell."""
        opened = []
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            for neighbor_row, neighbor_col in self.neighbors(
                current_row, current_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if neighbor.is_mine or not neighbor.uncover():
                    continue
                opened.append((neighbor_row, neighbor_col))
                if neighbor.adjacent_mines == 0:
                    stack.append((neighbor_row, neighbor_col))
        logger.debug("Flood fill from (%d, %d) opened %d cells", row, col, len(opened))
        return opened

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are uncovered."""
        if self._uncovered == self.config.safe_cell_count:
            self._status = GameStatus.WON
            logger.info("All safe cells uncovered, game won")

    def toggle_flag(self, row: int, col: int) -> FlagResult:
        """
        Toggle the flag on a covered cell.

        A new flag is refused once as many flags as mines are placed.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            What happened to the cell.

        Raises:
            IndexError: If the position is outside the board.
        """
        self._check_position(row, col)
        if not self.is_playing:
            return FlagResult.IGNORED

        cell = self._grid[row][col]
        if cell.is_uncovered:
            return FlagResult.IGNORED

        if cell.is_flagged:
            cell.toggle_mark()
            self._flags -= 1
            return FlagResult.UNFLAGGED

        if self.mines_remaining == 0:
            return FlagResult.NO_MARKS_LEFT

        cell.toggle_mark()
        self._flags += 1
        return FlagResult.FLAGGED

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        """Get current session status."""
        return self._status

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._status == GameStatus.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._status == GameStatus.LOST

    @property
    def mines_remaining(self) -> int:
        """Mine count minus placed flags."""
        return self.config.mine_count - self._flags

    @property
    def flag_count(self) -> int:
        """Number of flags placed."""
        return self._flags

    @property
    def uncovered_count(self) -> int:
        """Number of uncovered cells, mines included."""
        return self._uncovered

    def cell(self, row: int, col: int) -> Cell:
        """
        Get the cell at a position.

        Raises:
            IndexError: If the position is outside the board.
        """
        self._check_position(row, col)
        return self._grid[row][col]

    def tile(self, row: int, col: int) -> int:
        """Get the tile index to draw at a position."""
        return self.cell(row, col).tile(self.is_lost)

    def tiles(self) -> np.ndarray:
        """
        Get the tile view of the whole grid.

        Returns:
            2D int8 array of shape (rows, cols) holding tile indices
            (see Cell.tile).
        """
        view = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        lost = self.is_lost
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                view[row, col] = self._grid[row][col].tile(lost)
        return view

    def positions(self) -> Iterator[Position]:
        """Iterate over all positions in row-major order."""
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                yield row, col

    def mine_positions(self) -> List[Position]:
        """Get positions holding a mine."""
        return [
            (row, col) for row, col in self.positions()
            if self._grid[row][col].is_mine
        ]

    def covered_positions(self) -> List[Position]:
        """Get positions that are still covered, flagged or not."""
        return [
            (row, col) for row, col in self.positions()
            if self._grid[row][col].is_covered
        ]
