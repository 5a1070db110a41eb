"""
Move validator for TicTacToe.
Validates that moves follow the rules and applies the ones that do.
"""

from typing import Optional
from dataclasses import dataclass

from .cell import Cell, Move


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_valid


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must be on the board
    2. Can only place on empty cells (a cell is claimed once)
    """

    def validate_move(self, board, move: Move) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            move: Cell to place the mark in.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        size = board.SIZE

        # Check if row/col are in valid range
        if not (0 <= move.row < size and 0 <= move.col < size):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({move.row}, {move.col}). Must be 0-{size - 1}."
            )

        # Check if cell is empty
        current = board.get(move)
        if current != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({move.row}, {move.col}) is already occupied by {current}"
            )

        return ValidationResult(is_valid=True)

    def apply_move(self, board, move: Move, cell: Cell) -> ValidationResult:
        """
        Claim a cell for a player if the rules allow it.

        The check and the write happen in this one call, nothing else
        touches the board in between. On failure the board is unchanged.

        Args:
            board: Board to update in place.
            move: Cell to claim.
            cell: The player's mark (X or O).

        Returns:
            ValidationResult, truthy if the mark was written.
        """
        if cell == Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message="Cannot place an empty mark"
            )

        result = self.validate_move(board, move)
        if result:
            board.set(move, cell)
        return result
