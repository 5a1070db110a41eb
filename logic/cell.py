"""
Basic value types for TicTacToe: cell marks and moves.
"""

from enum import Enum
from dataclasses import dataclass


class Cell(Enum):
    """The content of one board cell."""
    EMPTY = 0
    X = 1
    O = 2

    def opposite(self) -> "Cell":
        """Get the opposite mark. EMPTY stays EMPTY."""
        if self == Cell.X:
            return Cell.O
        if self == Cell.O:
            return Cell.X
        return Cell.EMPTY

    def __str__(self) -> str:
        return " " if self == Cell.EMPTY else self.name


@dataclass(frozen=True)
class Move:
    """
    A move in the game: a single cell address.
    """
    row: int                # Row (0-2)
    col: int                # Column (0-2)
