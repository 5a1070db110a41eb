"""
Board for TicTacToe.
Holds the 3x3 grid and answers questions about its content.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from .cell import Cell, Move
from .config import GameConfig
from .win_checker import Outcome, WinChecker


# Characters accepted by Board.from_rows
_CHAR_TO_CELL = {
    "X": Cell.X,
    "O": Cell.O,
    " ": Cell.EMPTY,
    ".": Cell.EMPTY,
    "": Cell.EMPTY,
}


class Board:
    """
    The 3x3 TicTacToe grid.

    Cells are stored as the Cell enum values in a numpy int8 array.
    The board knows nothing about turns; it only stores marks and
    detects wins and draws.
    """

    SIZE = GameConfig.BOARD_SIZE

    _win_checker = WinChecker()

    def __init__(self, grid: Optional[np.ndarray] = None):
        if grid is None:
            grid = np.full((self.SIZE, self.SIZE), Cell.EMPTY.value, dtype=np.int8)
        else:
            grid = np.array(grid, dtype=np.int8)
            if grid.shape != (self.SIZE, self.SIZE):
                raise ValueError(f"Board must be {self.SIZE}x{self.SIZE}, got {grid.shape}")
            valid = np.isin(grid, [cell.value for cell in Cell])
            if not valid.all():
                raise ValueError("Board contains values that are not cell marks")
        self.grid = grid

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Union[Cell, str]]]) -> "Board":
        """
        Build a board from nested rows.

        Args:
            rows: 3 rows of 3 entries, each a Cell or one of
                "X", "O", " ", "." or "" (case-insensitive).
        """
        values = []
        for row in rows:
            line = []
            for entry in row:
                if isinstance(entry, Cell):
                    line.append(entry.value)
                else:
                    line.append(_CHAR_TO_CELL[entry.upper()].value)
            values.append(line)
        return cls(np.array(values, dtype=np.int8))

    def _check_bounds(self, row: int, col: int):
        if not (0 <= row < self.SIZE and 0 <= col < self.SIZE):
            raise IndexError(f"Cell ({row}, {col}) is outside the {self.SIZE}x{self.SIZE} board")

    def get(self, move: Move) -> Cell:
        """Read the cell at a move's address."""
        self._check_bounds(move.row, move.col)
        return Cell(int(self.grid[move.row, move.col]))

    def __getitem__(self, address: Tuple[int, int]) -> Cell:
        row, col = address
        return self.get(Move(row, col))

    def set(self, move: Move, cell: Cell):
        """
        Write a mark into a cell.

        This is the raw primitive: it does not check whether the cell is
        already taken. Use MoveValidator.apply_move for that.

        Raises:
            IndexError: if the address is outside the board.
        """
        self._check_bounds(move.row, move.col)
        self.grid[move.row, move.col] = cell.value

    @contextmanager
    def placed(self, move: Move, cell: Cell) -> Iterator["Board"]:
        """
        Temporarily place a mark, restoring the previous content on exit.

        The restore runs on every way out of the with-block,
        including early returns and exceptions.
        """
        previous = self.get(move)
        self.set(move, cell)
        try:
            yield self
        finally:
            self.set(move, previous)

    def has_empty_cell(self) -> bool:
        """True if at least one cell is empty."""
        return bool((self.grid == Cell.EMPTY.value).any())

    def empty_cells(self) -> List[Move]:
        """
        Get all empty cells on the board, in row-major order.
        """
        rows, cols = np.nonzero(self.grid == Cell.EMPTY.value)
        return [Move(int(row), int(col)) for row, col in zip(rows, cols)]

    def evaluate(self) -> Outcome:
        """Derive the current outcome (win, draw or ongoing)."""
        return self._win_checker.evaluate(self.grid)

    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        return self._win_checker.get_winning_line(self.grid)

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Read-only copy of the grid, for renderers."""
        return tuple(
            tuple(Cell(int(value)) for value in row)
            for row in self.grid
        )

    def key(self) -> bytes:
        """Hashable key identifying this position."""
        return self.grid.tobytes()

    def copy(self) -> "Board":
        return Board(self.grid.copy())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __repr__(self) -> str:
        rows = ["".join(str(cell) if cell != Cell.EMPTY else "." for cell in row)
                for row in self.snapshot()]
        return f"Board({'/'.join(rows)})"
