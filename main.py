#!/usr/bin/env python3
"""
Minesweeper - terminal front end.

Usage:
    python main.py [--rows N] [--cols N] [--mines N] [--seed S] [--verbose]

Commands at the prompt:
    r ROW COL   reveal a cell
    f ROW COL   toggle a flag
    n           start a new game
    q           quit

After a game ends, any command starts a new game and is then applied.
"""
import argparse
import logging
from typing import Optional

from src.mines.board import GameConfig
from src.mines.controller import BoardController, MouseButton
from src.mines.engine import GameEngine
from src.mines.render import render_ansi

BUTTONS = {"r": MouseButton.PRIMARY, "f": MouseButton.SECONDARY}


def print_board(engine: GameEngine) -> None:
    """Print column headers, the board and the status line."""
    cols = engine.config.cols
    print("    " + " ".join(str(col % 10) for col in range(cols)))
    for row, line in enumerate(render_ansi(engine.session).split("\n")):
        print(f"{row:>3} {line}")
    print(f"[{engine.status_text}]")


def handle_command(
    controller: BoardController, line: str
) -> Optional[bool]:
    """
    Apply one command line.

    Returns:
        None to quit, otherwise whether the board should be redrawn.
    """
    parts = line.split()
    if not parts:
        return False
    command = parts[0].lower()
    if command == "q":
        return None
    if command == "n":
        controller.engine.new_game()
        return True
    if command in BUTTONS and len(parts) == 3:
        try:
            row, col = int(parts[1]), int(parts[2])
        except ValueError:
            print("Row and column must be numbers")
            return False
        return controller.press_cell(row, col, BUTTONS[command])
    print("Commands: r ROW COL | f ROW COL | n | q")
    return False


def play(config: GameConfig, seed: Optional[int] = None) -> None:
    """Run the interactive loop."""
    engine = GameEngine(config, seed=seed)
    controller = BoardController(engine)

    print(f"Minesweeper {config.rows}x{config.cols} with {config.mine_count} mines")
    print_board(engine)

    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        redraw = handle_command(controller, line)
        if redraw is None:
            break
        if redraw:
            print_board(engine)


def main() -> None:
    """Parse arguments and start the game."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument("--rows", type=int, default=16, help="Number of rows")
    parser.add_argument("--cols", type=int, default=16, help="Number of columns")
    parser.add_argument("--mines", type=int, default=40, help="Number of mines")
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible boards"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine activity"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GameConfig(rows=args.rows, cols=args.cols, mine_count=args.mines)
    except ValueError as exc:
        parser.error(str(exc))

    play(config, args.seed)


if __name__ == "__main__":
    main()
