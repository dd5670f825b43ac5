"""
Minesweeper game module.

Provides the core rule engine: board state, mine placement and reveal logic.
"""
from .cell import Cell
from .board import Board, BoardConfig, Outcome
from .errors import ConfigError

__all__ = [
    "Cell",
    "Board",
    "BoardConfig",
    "Outcome",
    "ConfigError",
]
