"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Iterable, List, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Random Sources
# ============================================================================

class ScriptedRandom:
    """Random source that replays a fixed sequence of randrange results."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values: List[int] = list(values)
        self.calls = 0

    def randrange(self, *args, **kwargs) -> int:
        self.calls += 1
        return self._values.pop(0)


def scripted_mines(positions: Iterable[Tuple[int, int]]) -> ScriptedRandom:
    """Build a random source that draws the given mine positions in order."""
    values: List[int] = []
    for row, col in positions:
        values.extend((row, col))
    return ScriptedRandom(values)


def count_mines(board: Board) -> int:
    """Count mines on a board."""
    return sum(
        1
        for row in range(board.row_count)
        for col in range(board.col_count)
        if board.get_cell(row, col).is_mine
    )


def count_revealed(board: Board) -> int:
    """Count revealed cells on a board."""
    return sum(
        1
        for row in range(board.row_count)
        for col in range(board.col_count)
        if board.get_cell(row, col).is_revealed
    )


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(rng=random.Random(1234))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0), random.Random(0))


@pytest.fixture
def walled_board() -> Board:
    """
    Create a 5x5 board whose column 3 is solid mines.

    The first draws land in the safe zone of (0, 0) and on a duplicate,
    both of which placement must skip.
    """
    rng = scripted_mines(
        [(1, 1), (0, 3), (0, 3), (1, 3), (2, 3), (3, 3), (4, 3)]
    )
    return Board(BoardConfig(5, 5, 5), rng)


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
