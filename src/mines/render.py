"""Text rendering of a game session."""
from .board import GameSession
from .cell import TILE_COVER, TILE_MARK, TILE_MINE, TILE_WRONG_MARK

TILE_CHARS = {
    0: " ",
    TILE_MINE: "*",
    TILE_COVER: ".",
    TILE_MARK: "F",
    TILE_WRONG_MARK: "X",
}


def tile_char(tile: int) -> str:
    """Character used to draw a tile index."""
    return TILE_CHARS.get(tile, str(tile))


def render_ansi(session: GameSession) -> str:
    """Render the session's tile view as ASCII, one line per row."""
    lines = []
    view = session.tiles()
    for row in range(session.config.rows):
        row_str = ""
        for col in range(session.config.cols):
            row_str += tile_char(int(view[row, col])) + " "
        lines.append(row_str)
    return "\n".join(lines)
