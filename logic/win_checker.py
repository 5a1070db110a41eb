"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, List, Tuple

import numpy as np

from .cell import Cell


class Outcome(Enum):
    """The result of a position. Derived from the board, never stored."""
    ONGOING = "ongoing"
    X_WON = "x_won"
    O_WON = "o_won"
    DRAW = "draw"

    @property
    def winner(self) -> Optional[Cell]:
        """The winning mark, or None if nobody has won."""
        if self == Outcome.X_WON:
            return Cell.X
        if self == Outcome.O_WON:
            return Cell.O
        return None

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.ONGOING

    @classmethod
    def won_by(cls, cell: Cell) -> "Outcome":
        if cell == Cell.X:
            return cls.X_WON
        if cell == Cell.O:
            return cls.O_WON
        raise ValueError(f"{cell!r} cannot win")


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    # Same lines as index arrays, for scanning all of them at once
    _LINE_ROWS = np.array([[r for r, _ in line] for line in WINNING_LINES])
    _LINE_COLS = np.array([[c for _, c in line] for line in WINNING_LINES])

    def _completed_lines(self, grid: np.ndarray) -> np.ndarray:
        """Indices of all lines holding three identical non-empty marks."""
        lines = grid[self._LINE_ROWS, self._LINE_COLS]
        complete = (
            (lines[:, 0] != Cell.EMPTY.value)
            & (lines[:, 0] == lines[:, 1])
            & (lines[:, 1] == lines[:, 2])
        )
        return np.flatnonzero(complete)

    def check_winner(self, grid: np.ndarray) -> Optional[Cell]:
        """
        Check if there's a winner.

        Lines are scanned rows first, then columns, then diagonals;
        the first completed line decides.

        Args:
            grid: The 3x3 board array.

        Returns:
            The winning Cell, or None if no winner yet.
        """
        found = self._completed_lines(grid)
        if found.size == 0:
            return None

        row, col = self.WINNING_LINES[found[0]][0]
        return Cell(int(grid[row, col]))

    def check_draw(self, grid: np.ndarray) -> bool:
        """
        Check if the game is a draw: all cells filled and no winner.
        """
        if self.check_winner(grid) is not None:
            return False

        return not bool((grid == Cell.EMPTY.value).any())

    def evaluate(self, grid: np.ndarray) -> Outcome:
        """
        Derive the outcome of a position.

        Args:
            grid: The 3x3 board array.

        Returns:
            The winner's Outcome if a line is complete, otherwise
            ONGOING while any cell is empty, otherwise DRAW.
        """
        winner = self.check_winner(grid)

        if winner is not None:
            return Outcome.won_by(winner)

        if (grid == Cell.EMPTY.value).any():
            return Outcome.ONGOING

        return Outcome.DRAW

    def get_winning_line(self, grid: np.ndarray) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        found = self._completed_lines(grid)
        if found.size == 0:
            return None
        return self.WINNING_LINES[found[0]]
