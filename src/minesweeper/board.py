"""
Board module for Minesweeper.

Implements the minefield: random mine placement, adjacency counts, the
reveal cascade, flag toggling and win/lose detection.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from .cell import Cell


# ============================================================================
# Constants
# ============================================================================

NEIGHBOR_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class ConfigError(ValueError):
    """Raised when a board cannot be built from the given dimensions."""


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
        seed: Optional seed for a reproducible mine layout.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure the board leaves room for at least one safe cell."""
        if self.width < 1 or self.height < 1:
            raise ConfigError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ConfigError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.total_cells - self.num_mines

    def make_rng(self) -> np.random.Generator:
        """Create a generator from the seed, or from OS entropy if unset."""
        return np.random.default_rng(self.seed)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Mines are placed as soon as the board is built. Coordinates are
    (x, y) with x the column and y the row; the grid is stored row-major.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[np.random.Generator] = field(default=None, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _revealed_count: int = 0
    _is_over: bool = False

    def __post_init__(self) -> None:
        """Build the grid, lay the mines and count neighbours."""
        if self.rng is None:
            self.rng = self.config.make_rng()
        grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]
        self._place_mines(grid)
        self._calculate_adjacent_mines(grid)
        self._grid = grid

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _place_mines(self, grid: List[List[Cell]]) -> None:
        """
        Place mines by rejection sampling.

        Draws uniform coordinates until num_mines distinct cells are mined.
        num_mines < width * height, so an unmined cell always remains.
        """
        placed = 0
        while placed < self.config.num_mines:
            x, y = self._sample_position()
            cell = grid[y][x]
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1

    def _sample_position(self) -> Tuple[int, int]:
        """Draw one uniformly random (x, y) coordinate."""
        x = int(self.rng.integers(0, self.config.width))
        y = int(self.rng.integers(0, self.config.height))
        return x, y

    def _calculate_adjacent_mines(self, grid: List[List[Cell]]) -> None:
        """Store the neighbouring mine count on every safe cell."""
        for y in range(self.config.height):
            for x in range(self.config.width):
                cell = grid[y][x]
                if cell.is_mine:
                    continue
                cell.adjacent_mines = sum(
                    1 for nx, ny in self.neighbors(x, y) if grid[ny][nx].is_mine
                )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get the in-bounds king-move neighbours of a position.

        Args:
            x: Column of the centre cell.
            y: Row of the centre cell.

        Returns:
            List of (x, y) tuples; a corner has 3, an edge 5, others 8.
        """
        neighbors = []
        for delta_x, delta_y in NEIGHBOR_OFFSETS:
            new_x = x + delta_x
            new_y = y + delta_y
            if self.is_valid_position(new_x, new_y):
                neighbors.append((new_x, new_y))
        return neighbors

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal the cell at (x, y).

        A mine ends the game. A cell with no adjacent mines opens its whole
        zero region plus the numbered cells bordering it. Flagged cells,
        including flagged neighbours met during the cascade, stay hidden.

        Out-of-range coordinates, revealed or flagged cells and finished
        games are ignored.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            True if at least one cell was revealed, False otherwise.
        """
        if not self._can_reveal(x, y):
            return False

        stack = [(x, y)]
        while stack:
            cur_x, cur_y = stack.pop()
            cell = self._grid[cur_y][cur_x]
            if not cell.reveal():
                continue

            self._revealed_count += 1

            if cell.is_mine:
                self._is_over = True
                break

            if cell.adjacent_mines == 0:
                stack.extend(
                    (nx, ny) for nx, ny in self.neighbors(cur_x, cur_y)
                    if self._grid[ny][nx].is_hidden
                )

        return True

    def _can_reveal(self, x: int, y: int) -> bool:
        """Check if a cell can be revealed."""
        if self.game_state != GameState.PLAYING:
            return False
        if not self.is_valid_position(x, y):
            return False
        return self._grid[y][x].is_hidden

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle the flag on a hidden cell.

        Args:
            x: Column.
            y: Row.

        Returns:
            True if the flag was toggled, False for revealed cells,
            out-of-range coordinates or a finished game.
        """
        if self.game_state != GameState.PLAYING:
            return False
        if not self.is_valid_position(x, y):
            return False
        return self._grid[y][x].toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def is_game_over(self) -> bool:
        """True once a mine has been revealed."""
        return self._is_over

    def is_victory(self) -> bool:
        """
        True once every safe cell is revealed, whatever the flags say.

        A lost board is never a victory, even though the losing mine is
        counted in revealed_count.
        """
        return not self._is_over and self._revealed_count == self.config.safe_cells

    @property
    def is_over(self) -> bool:
        """Check if a mine has been revealed."""
        return self._is_over

    @property
    def revealed_count(self) -> int:
        """Cells revealed so far, including a losing mine."""
        return self._revealed_count

    @property
    def game_state(self) -> GameState:
        """Summarise the two terminal queries."""
        if self._is_over:
            return GameState.LOST
        if self.is_victory():
            return GameState.WON
        return GameState.PLAYING

    @property
    def width(self) -> int:
        """Number of columns."""
        return self.config.width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self.config.height

    @property
    def num_mines(self) -> int:
        """Total mines on the board."""
        return self.config.num_mines

    @property
    def flag_count(self) -> int:
        """Number of currently flagged cells."""
        return sum(cell.is_flagged for row in self._grid for cell in row)

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags; negative when the player over-flags."""
        return self.config.num_mines - self.flag_count

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(x, y):
            return None
        return self._grid[y][x]

    def get_observation(self) -> np.ndarray:
        """
        Get the player's view of the board as a numpy array.

        Returns:
            int8 array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for y in range(self.config.height):
            for x in range(self.config.width):
                obs[y, x] = self._grid[y][x].to_observation()
        return obs


def initialize(
    width: int,
    height: int,
    mine_count: int,
    rng: Optional[np.random.Generator] = None,
) -> Board:
    """
    Build a ready-to-play board.

    Args:
        width: Number of columns.
        height: Number of rows.
        mine_count: Mines to place, 0 <= mine_count < width * height.
        rng: Generator used for mine placement (default: OS entropy).

    Returns:
        A board with its mines placed and counted.

    Raises:
        ConfigError: If the dimensions or mine count are invalid.
    """
    config = BoardConfig(width=width, height=height, num_mines=mine_count)
    return Board(config, rng=rng)
