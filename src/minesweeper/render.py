"""
Text rendering for the terminal game.

Works from the board observation, so nothing hidden can leak onto the
screen.
"""
from typing import Optional

import numpy as np

from .board import Board
from .cell import FLAGGED_CODE, HIDDEN_CODE, MINE_CODE


HIDDEN_SYMBOL = "#"
FLAG_SYMBOL = "F"
MINE_SYMBOL = "*"
EMPTY_SYMBOL = " "

ROW_LABEL_WIDTH = 2


def cell_symbol(value: int) -> str:
    """Map an observation value to the character drawn for it."""
    if value == HIDDEN_CODE:
        return HIDDEN_SYMBOL
    if value == FLAGGED_CODE:
        return FLAG_SYMBOL
    if value == MINE_CODE:
        return MINE_SYMBOL
    if value == 0:
        return EMPTY_SYMBOL
    return str(value)


def render_observation(obs: np.ndarray) -> str:
    """
    Render an observation array as a grid with coordinate headers.

    Column indices run along the top, row indices down the left, e.g.::

             0  1  2
            ---------
         0 | #  1  F
    """
    height, width = obs.shape
    indent = " " * (ROW_LABEL_WIDTH + 2)
    header = indent + "".join(f"{x:>2} " for x in range(width))
    rule = indent + "---" * width

    lines = [header.rstrip(), rule]
    for y in range(height):
        cells = "".join(f" {cell_symbol(int(value))} " for value in obs[y])
        lines.append(f"{y:>{ROW_LABEL_WIDTH}} |{cells}")
    return "\n".join(lines)


def render_board(board: Board) -> str:
    """Render the player's view of a board."""
    return render_observation(board.get_observation())


def render_status(board: Board, moves_made: Optional[int] = None) -> str:
    """
    One-line summary shown under the grid.

    "Left" is mines minus flags and goes negative when the player
    over-flags. The move counter is appended when given.
    """
    status = (
        f"Mines: {board.num_mines}  "
        f"Flags: {board.flag_count}  "
        f"Left: {board.mines_remaining}  "
        f"Revealed: {board.revealed_count}/{board.config.safe_cells}"
    )
    if moves_made is not None:
        status += f"  Moves: {moves_made}"
    return status
