"""
Game state management for TicTacToe.
Tracks the board, who plays which symbol, whose turn it is and the move history.
"""

from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .board import Board
from .cell import Cell, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import Outcome


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 3x3 board
    - Which mark the human plays (the machine plays the other one)
    - Whose turn it is
    - Move history

    The result is never stored, it is derived from the board on demand.
    """

    # The mark the human plays, fixed for the whole game
    human: Cell = Cell.X

    # The 3x3 board
    board: Board = field(default_factory=Board)

    # Current player's turn (defaults to the human)
    current_player: Optional[Cell] = None

    # Move history
    moves: List[Tuple[Cell, Move]] = field(default_factory=list)

    def __post_init__(self):
        if self.human == Cell.EMPTY:
            raise ValueError("The human must play X or O, not EMPTY")
        if self.current_player is None:
            self.current_player = self.human
        elif self.current_player == Cell.EMPTY:
            raise ValueError("current_player must be X or O")
        self.validator = MoveValidator()

    @property
    def machine(self) -> Cell:
        """The mark the automated opponent plays."""
        return self.human.opposite()

    @property
    def outcome(self) -> Outcome:
        return self.board.evaluate()

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def winner(self) -> Optional[Cell]:
        return self.outcome.winner

    def make_move(self, move: Move) -> ValidationResult:
        """
        Make a move for the player whose turn it is.

        Args:
            move: The cell to claim.

        Returns:
            ValidationResult, truthy if the move was applied.
            On failure the board is left untouched.
        """
        if self.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        result = self.validator.apply_move(self.board, move, self.current_player)
        if result:
            self.moves.append((self.current_player, move))
            self.current_player = self.current_player.opposite()

        return result

    def player_move(self, move: Move) -> ValidationResult:
        """Make the human's move."""
        return self._move_for(self.human, move)

    def machine_move(self, move: Move) -> ValidationResult:
        """Make the machine's move."""
        return self._move_for(self.machine, move)

    def _move_for(self, cell: Cell, move: Move) -> ValidationResult:
        if self.current_player != cell:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's not {cell}'s turn!"
            )
        return self.make_move(move)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            human=self.human,
            board=self.board.copy(),
            current_player=self.current_player,
            moves=list(self.moves),
        )


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState(human=Cell.X)

    # X wins on the main diagonal
    moves = [Move(1, 1), Move(0, 1), Move(0, 0), Move(2, 1), Move(2, 2)]

    for move in moves:
        print(f"\n{game.current_player} moves to ({move.row}, {move.col})")
        print(f"  applied: {bool(game.make_move(move))}")

    print(f"\nOutcome: {game.outcome}")
    assert game.winner == Cell.X
    print("\nGame state test done!")
