"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Dict, Optional, Tuple

from .board import Board
from .cell import Cell, Move
from .config import GameConfig
from .win_checker import Outcome


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The search is exhaustive (no pruning, no depth limit): the AI will
    win if possible, block the opponent if needed, and never lose.

    All candidate moves are tried on the caller's board and undone again,
    so the board is unchanged when a search returns.
    """

    def __init__(
        self,
        player: Cell = Cell.O,
        memoize: Optional[bool] = None,
        verbose: Optional[bool] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (X or O).
            memoize: Cache scores of searched positions
                (default: GameConfig.MEMOIZE).
            verbose: Print search statistics (default: GameConfig.VERBOSE).
        """
        if player == Cell.EMPTY:
            raise ValueError("The AI must play X or O, not EMPTY")

        self.player = player
        self.opponent = player.opposite()
        self.memoize = GameConfig.MEMOIZE if memoize is None else memoize
        self.verbose = GameConfig.VERBOSE if verbose is None else verbose

        # Scores only depend on the position and who is to move
        self._cache: Dict[Tuple[bytes, Cell], int] = {}

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Board) -> Optional[Move]:
        """
        Get the best move for the current position.

        Cells are tried in row-major order and the best move only changes
        on a strictly better score, so among equally good moves the first
        one found wins.

        Args:
            board: Current board. Used for the search and restored.

        Returns:
            The best Move, or None if no cell is empty.
        """
        self.positions_evaluated = 0

        best_score = GameConfig.SCORE_FLOOR
        best_move = None

        for move in board.empty_cells():
            with board.placed(move, self.player):
                score = self.score(board, self.opponent)

            if score > best_score:
                best_score = score
                best_move = move

        if self.verbose and best_move is not None:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: ({best_move.row}, {best_move.col}) (score: {best_score})")

        return best_move

    def score_move(self, board: Board, move: Move) -> int:
        """
        Score placing the AI's mark at a given empty cell.

        Returns:
            +1 for a forced win, 0 for a draw, -1 for a forced loss.
        """
        if board.get(move) != Cell.EMPTY:
            raise ValueError(f"Cell ({move.row}, {move.col}) is not empty")

        with board.placed(move, self.player):
            return self.score(board, self.opponent)

    def score(self, board: Board, mover: Cell) -> int:
        """
        Minimax score of a position, from the AI's point of view.

        Args:
            board: Position to score. Restored before returning.
            mover: Whose turn it is in this position.

        Returns:
            WIN_SCORE if the AI has won, LOSS_SCORE if the opponent has
            won, DRAW_SCORE for a full board, otherwise the best score
            the mover can force.
        """
        self.positions_evaluated += 1

        if self.memoize:
            key = (board.key(), mover)
            cached = self._cache.get(key)
            if cached is None:
                cached = self._cache[key] = self._search(board, mover)
            return cached

        return self._search(board, mover)

    def _search(self, board: Board, mover: Cell) -> int:
        outcome = board.evaluate()

        if outcome.winner == self.player:
            return GameConfig.WIN_SCORE
        if outcome.winner == self.opponent:
            return GameConfig.LOSS_SCORE
        if outcome == Outcome.DRAW:
            return GameConfig.DRAW_SCORE

        is_maximizing = mover == self.player
        best = GameConfig.SCORE_FLOOR if is_maximizing else GameConfig.SCORE_CEILING

        for move in board.empty_cells():
            with board.placed(move, mover):
                score = self.score(board, mover.opposite())

            if is_maximizing:
                best = max(best, score)
            else:
                best = min(best, score)

        return best

    def suggest_move(self, board: Board) -> str:
        """
        Get a human-readable suggestion for the AI's move.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(board)

        if move is None:
            return "No moves available!"

        return f"Place {self.player} at position ({move.row}, {move.col})"
