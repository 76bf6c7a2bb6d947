"""
Game session: one player, one board, one game at a time.

The caller owns the session, so several games can run side by side and
tests can drive a game without a terminal.
"""
from typing import Optional

import numpy as np

from .board import Board, BoardConfig, GameState
from .commands import Command, CommandType


WIN_MESSAGE = "Congratulations! You won!"
LOSS_MESSAGE = "Game Over! You hit a mine!"
OUT_OF_BOUNDS_MESSAGE = "Coordinates out of bounds."
QUIT_MESSAGE = "Thanks for playing!"


class GameSession:
    """
    Wraps a Board and turns player commands into moves.

    Attributes:
        config: Board configuration reused by reset().
        board: The board currently being played.
        moves_made: Commands applied to the current board, quit excluded.
        quit_requested: Whether the player asked to stop.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or BoardConfig()
        self._rng = rng
        self.reset()

    def reset(self) -> None:
        """Start a fresh game with the same configuration."""
        self.board = Board(self.config, rng=self._rng)
        self.moves_made = 0
        self.quit_requested = False

    def apply(self, command: Command) -> Optional[str]:
        """
        Apply a parsed command to the board.

        Returns:
            A message for the player, or None when there is nothing to say.
        """
        if command.action is CommandType.QUIT:
            self.quit()
            return QUIT_MESSAGE

        if self.is_finished:
            return self.result_message()

        if not self.board.is_valid_position(command.x, command.y):
            return OUT_OF_BOUNDS_MESSAGE

        self.moves_made += 1
        if command.action is CommandType.REVEAL:
            self.board.reveal(command.x, command.y)
        else:
            self.board.toggle_flag(command.x, command.y)

        return self.result_message()

    def quit(self) -> None:
        self.quit_requested = True

    @property
    def state(self) -> GameState:
        return self.board.game_state

    @property
    def is_finished(self) -> bool:
        """True once the game is won, lost or abandoned."""
        return self.quit_requested or self.state != GameState.PLAYING

    def result_message(self) -> Optional[str]:
        """Message for a won or lost game, None while still playing."""
        if self.board.is_game_over():
            return LOSS_MESSAGE
        if self.board.is_victory():
            return WIN_MESSAGE
        return None
