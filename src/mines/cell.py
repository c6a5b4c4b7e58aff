"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their content
(mine/adjacency count), cover state and mark state.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CoverState(Enum):
    """Whether a cell's content is hidden from the player."""

    COVERED = auto()
    UNCOVERED = auto()


class MarkState(Enum):
    """Whether the player has flagged a covered cell."""

    UNMARKED = auto()
    FLAGGED = auto()


# Tile indices into the 13-image atlas. 0-8 are the adjacency numbers.
TILE_MINE = 9
TILE_COVER = 10
TILE_MARK = 11
TILE_WRONG_MARK = 12
NUM_TILES = 13


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Meaningless for mines.
        cover: Covered or uncovered.
        mark: Flagged or unmarked. Only changes while covered.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    cover: CoverState = CoverState.COVERED
    mark: MarkState = MarkState.UNMARKED

    def uncover(self) -> bool:
        """
        Uncover this cell.

        Returns:
            True if the cell changed, False if it was already uncovered
            or is flagged.
        """
        if self.cover == CoverState.UNCOVERED:
            return False
        if self.mark == MarkState.FLAGGED:
            return False
        self.cover = CoverState.UNCOVERED
        return True

    def toggle_mark(self) -> bool:
        """
        Toggle the flag on this cell.

        Returns:
            True if the mark was toggled, False if the cell is uncovered.
        """
        if self.cover == CoverState.UNCOVERED:
            return False
        if self.mark == MarkState.UNMARKED:
            self.mark = MarkState.FLAGGED
        else:
            self.mark = MarkState.UNMARKED
        return True

    @property
    def is_covered(self) -> bool:
        """Check if cell is covered."""
        return self.cover == CoverState.COVERED

    @property
    def is_uncovered(self) -> bool:
        """Check if cell is uncovered."""
        return self.cover == CoverState.UNCOVERED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.mark == MarkState.FLAGGED

    def tile(self, game_lost: bool = False) -> int:
        """
        Derive the tile to draw for this cell.

        Once the game is lost, covered mines are shown and flags on
        safe cells are shown as wrong. Stored state is left untouched.

        Args:
            game_lost: Whether the owning session has been lost.

        Returns:
            0-8: Uncovered safe cell with adjacent mine count
            9: Mine
            10: Covered cell
            11: Flag
            12: Wrong flag
        """
        if self.is_uncovered:
            return TILE_MINE if self.is_mine else self.adjacent_mines
        if self.is_flagged:
            if game_lost and not self.is_mine:
                return TILE_WRONG_MARK
            return TILE_MARK
        if game_lost and self.is_mine:
            return TILE_MINE
        return TILE_COVER
