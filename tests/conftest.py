"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable, List, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, GameSession


# ============================================================================
# Helpers
# ============================================================================

class ScriptedRng:
    """
    Stand-in generator that yields a fixed list of mine positions.

    Board draws x then y for every candidate, so positions are replayed in
    that order, duplicates included.
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]) -> None:
        self._values: List[int] = [v for pos in positions for v in pos]
        self.calls = 0

    def integers(self, low: int, high: int) -> int:
        if self.calls >= len(self._values):
            raise AssertionError("ScriptedRng ran out of positions")
        value = self._values[self.calls]
        self.calls += 1
        assert low <= value < high
        return value


def make_board(
    width: int, height: int, mines: Iterable[Tuple[int, int]]
) -> Board:
    """Build a board whose mines sit exactly at the given (x, y) positions."""
    mines = list(mines)
    config = BoardConfig(width, height, len(set(mines)))
    return Board(config, rng=ScriptedRng(mines))


def revealed_positions(board: Board) -> set:
    """All (x, y) positions currently revealed."""
    return {
        (x, y)
        for y in range(board.height)
        for x in range(board.width)
        if board.get_cell(x, y).is_revealed
    }


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(BoardConfig(seed=1234))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with a single mine in the middle."""
    return make_board(3, 3, [(1, 1)])


@pytest.fixture
def wall_board() -> Board:
    """5x5 board with a vertical wall of mines in column 2."""
    return make_board(5, 5, [(2, y) for y in range(5)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_session() -> GameSession:
    """3x3 session with one mine in the top-left corner."""
    return GameSession(BoardConfig(3, 3, 1), rng=ScriptedRng([(0, 0)]))


# ============================================================================
# Factory Fixtures
# ============================================================================

@pytest.fixture
def board_factory():
    """Factory building boards with mines at chosen (x, y) positions."""
    return make_board


@pytest.fixture
def scripted_rng():
    """The ScriptedRng class, for tests that inspect mine sampling."""
    return ScriptedRng


@pytest.fixture
def revealed():
    """Function returning the set of revealed positions on a board."""
    return revealed_positions
