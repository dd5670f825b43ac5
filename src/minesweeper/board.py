"""
Board module for Minesweeper game.

Implements the game board with lazy mine placement, neighbor wiring,
cascading reveal and win/loss detection.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from .cell import Cell
from .errors import ConfigError


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1), (1, 0), (1, 1),
)


class Outcome(Enum):
    """Result of a single reveal request."""

    CONTINUE = auto()
    WON = auto()
    LOST = auto()
    INVALID_MOVE = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ConfigError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols
        if self.num_mines > max_mines:
            raise ConfigError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Mines are placed on the first reveal, never inside the 3x3 block
    around that first position. Not thread-safe: callers sharing a board
    across threads must serialize calls to ``reveal``.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: Optional[random.Random] = field(
        default_factory=random.Random, repr=False
    )
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _initialized: bool = False
    _cells_revealed: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        if self.rng is None:
            self.rng = random.Random()
        self._init_grid()

    @classmethod
    def create(
        cls,
        rows: int,
        cols: int,
        num_mines: int,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Build a board from raw dimensions.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            num_mines: Total mines to place.
            seed: Seed for a fresh random source, ignored when rng is given.
            rng: Random source used for mine placement.

        Raises:
            ConfigError: If the dimensions or mine count are invalid.
        """
        if rng is None:
            rng = random.Random(seed)
        return cls(BoardConfig(rows, cols, num_mines), rng)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]

    def _initialize(self, row: int, col: int) -> None:
        """Place mines around the first reveal and wire neighbors."""
        self._place_mines(row, col)
        self._link_neighbors()
        self._initialized = True

    def _place_mines(self, safe_row: int, safe_col: int) -> None:
        """
        Place mines by rejection sampling, keeping the safe zone clear.

        Args:
            safe_row: Row of the first reveal.
            safe_col: Column of the first reveal.

        Raises:
            ConfigError: If there are fewer cells outside the safe zone
                than mines to place.
        """
        available = self.config.total_cells - self._safe_zone_size(
            safe_row, safe_col
        )
        if self.config.num_mines > available:
            raise ConfigError(
                f"Cannot place {self.config.num_mines} mines outside the "
                f"safe zone of ({safe_row}, {safe_col}): only {available} "
                "cells available"
            )

        placed = 0
        draws = 0
        while placed < self.config.num_mines:
            row = self.rng.randrange(self.config.rows)
            col = self.rng.randrange(self.config.cols)
            draws += 1
            if self._in_safe_zone(row, col, safe_row, safe_col):
                continue
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1

        logger.debug(
            "Placed %d mines in %d draws, safe zone at (%d, %d)",
            placed, draws, safe_row, safe_col,
        )

    def _link_neighbors(self) -> None:
        """Link every cell to its in-bounds neighbors."""
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                cell = self._grid[row][col]
                for neighbor_row, neighbor_col in self._get_neighbors(row, col):
                    cell.link_neighbor(self._grid[neighbor_row][neighbor_col])

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self._is_valid_position(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    @staticmethod
    def _in_safe_zone(
        row: int, col: int, safe_row: int, safe_col: int
    ) -> bool:
        """Check if position lies in the 3x3 block around the first reveal."""
        return abs(row - safe_row) <= 1 and abs(col - safe_col) <= 1

    def _safe_zone_size(self, safe_row: int, safe_col: int) -> int:
        """Number of in-bounds cells in the safe zone."""
        height = min(safe_row + 1, self.config.rows - 1) - max(safe_row - 1, 0) + 1
        width = min(safe_col + 1, self.config.cols - 1) - max(safe_col - 1, 0) + 1
        return height * width

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> Outcome:
        """
        Reveal a cell at the given position.

        On the first call, places mines outside the 3x3 block around this
        cell. Empty cells (0 adjacent mines) open their neighbors.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            INVALID_MOVE for out-of-range or already revealed cells,
            LOST if the cell holds a mine (the cell stays hidden),
            WON once every safe cell is revealed, CONTINUE otherwise.

        Raises:
            ConfigError: On the first call, if the mines do not fit
                outside the safe zone.
        """
        if not self._is_valid_position(row, col):
            return Outcome.INVALID_MOVE

        if not self._initialized:
            self._initialize(row, col)

        cell = self._grid[row][col]
        if cell.is_revealed:
            return Outcome.INVALID_MOVE
        if cell.is_mine:
            return Outcome.LOST

        self._cascade_reveal(row, col)

        if self._cells_revealed == self.safe_cell_count:
            return Outcome.WON
        return Outcome.CONTINUE

    def _cascade_reveal(self, row: int, col: int) -> None:
        """Reveal a safe cell and open the empty region around it."""
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            cell = self._grid[current_row][current_col]
            if cell.is_mine or not cell.mark_revealed():
                continue
            self._cells_revealed += 1
            if cell.adjacent_mine_count > 0:
                continue
            for neighbor_row, neighbor_col in self._get_neighbors(
                current_row, current_col
            ):
                if not self._grid[neighbor_row][neighbor_col].is_revealed:
                    stack.append((neighbor_row, neighbor_col))

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def row_count(self) -> int:
        """Number of rows."""
        return self.config.rows

    @property
    def col_count(self) -> int:
        """Number of columns."""
        return self.config.cols

    @property
    def mine_count(self) -> int:
        """Number of mines on the board."""
        return self.config.num_mines

    @property
    def click_count(self) -> int:
        """Number of safe cells revealed so far."""
        return self._cells_revealed

    @property
    def safe_cell_count(self) -> int:
        """Number of safe cells to reveal to win."""
        return self.config.total_cells - self.config.num_mines

    @property
    def is_initialized(self) -> bool:
        """Check if mines have been placed."""
        return self._initialized

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def find_hint(self) -> Optional[Tuple[int, int]]:
        """
        Find the first safe cell still hidden, scanning row by row.

        Returns:
            (row, col) of that cell, or None if every safe cell is revealed.
        """
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                cell = self._grid[row][col]
                if not cell.is_revealed and not cell.is_mine:
                    return row, col
        return None

    def get_hidden_positions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions that are not revealed.
        """
        positions = []
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if not self._grid[row][col].is_revealed:
                    positions.append((row, col))
        return positions

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                0-8 = revealed with adjacent count
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs
