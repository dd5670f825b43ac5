"""
Cell module for Minesweeper game.

Represents individual cells on the game board: whether they hold a mine,
whether they have been revealed, and which cells surround them.
"""
import logging
import weakref
from dataclasses import dataclass, field
from typing import List, Tuple


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MAX_NEIGHBORS = 8


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(eq=False)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Neighbors are held as weak references: the board owns every cell,
    a cell only looks its neighbors up.

    Attributes:
        is_mine: Whether this cell contains a mine.
        revealed: Whether this cell has been revealed.
    """

    is_mine: bool = False
    revealed: bool = False
    _neighbors: List["weakref.ReferenceType[Cell]"] = field(
        default_factory=list, repr=False
    )

    def mark_revealed(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell went from hidden to revealed, False if it
            was already revealed.
        """
        if self.revealed:
            return False
        self.revealed = True
        return True

    def link_neighbor(self, other: "Cell") -> None:
        """
        Register another cell as adjacent to this one.

        Args:
            other: The neighboring cell.
        """
        if len(self._neighbors) >= MAX_NEIGHBORS:
            logger.error(
                "Cell already has %d neighbors, ignoring extra link",
                MAX_NEIGHBORS,
            )
            return
        self._neighbors.append(weakref.ref(other))

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.revealed

    @property
    def neighbors(self) -> Tuple["Cell", ...]:
        """Linked neighbor cells that are still alive."""
        cells = (ref() for ref in self._neighbors)
        return tuple(cell for cell in cells if cell is not None)

    @property
    def adjacent_mine_count(self) -> int:
        """Number of linked neighbors holding a mine (0-8)."""
        return sum(1 for cell in self.neighbors if cell.is_mine)

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Hidden cell
            0-8: Revealed cell with adjacent mine count
        """
        if not self.revealed:
            return -1
        return self.adjacent_mine_count
