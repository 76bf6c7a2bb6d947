"""
Terminal front end.

Usage:
    minesweeper [--width W] [--height H] [--mines N] [--seed S]
    python -m minesweeper [--width W] [--height H] [--mines N] [--seed S]
"""
import argparse
from typing import Callable, List, Optional

from .board import BoardConfig, ConfigError, GameState
from .commands import CommandError, parse_command
from .render import render_board, render_status
from .session import GameSession


WELCOME_BANNER = """Welcome to Minesweeper!
Commands:
  r x y - Reveal cell at (x, y)
  f x y - Toggle flag at (x, y)
  q     - Quit game
"""

PROMPT = "Enter command: "


def run(
    session: GameSession,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> GameSession:
    """
    Play one game until it is won, lost or the player quits.

    End of input is treated as quitting.

    Args:
        session: Session holding the board to play.
        input_fn: Reads one line, given a prompt.
        output_fn: Writes one block of text.

    Returns:
        The finished session.
    """
    output_fn(WELCOME_BANNER)

    while not session.is_finished:
        output_fn(render_board(session.board))
        output_fn(render_status(session.board, session.moves_made))

        try:
            line = input_fn(PROMPT)
        except EOFError:
            session.quit()
            break

        try:
            command = parse_command(line)
        except CommandError as exc:
            output_fn(str(exc))
            continue

        message = session.apply(command)
        if session.state != GameState.PLAYING:
            output_fn(render_board(session.board))
        if message:
            output_fn(message)

    return session


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the console script."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - clear the minefield from your terminal"
    )
    parser.add_argument(
        "--width", type=int, default=9, help="Number of columns"
    )
    parser.add_argument(
        "--height", type=int, default=9, help="Number of rows"
    )
    parser.add_argument(
        "--mines", type=int, default=10, help="Number of mines"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for a reproducible mine layout"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and play a game."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = BoardConfig(
            width=args.width,
            height=args.height,
            num_mines=args.mines,
            seed=args.seed,
        )
    except ConfigError as exc:
        parser.error(str(exc))

    run(GameSession(config))
