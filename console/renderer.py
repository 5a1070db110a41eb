"""
Renders the board and the game result as text.
The renderer only reads the board, it never changes it.
"""

from typing import Optional

from logic.board import Board
from logic.cell import Cell
from logic.win_checker import Outcome

from .config import ConsoleConfig as C


def _border(left: str, middle: str, right: str) -> str:
    return " " + left + middle.join(C.HORIZONTAL for _ in C.COLUMN_LABELS) + right


def render_board(board: Board) -> str:
    """
    Draw the board with box-drawing characters.

    Example (X in 1A, O in 2B):

          A B C
         ┌─┬─┬─┐
        1│X│ │ │
         ├─┼─┼─┤
        2│ │O│ │
         ├─┼─┼─┤
        3│ │ │ │
         └─┴─┴─┘
    """
    lines = ["  " + " ".join(C.COLUMN_LABELS), _border(C.TOP_LEFT, C.TOP_TEE, C.TOP_RIGHT)]

    for index, row in enumerate(board.snapshot()):
        if index > 0:
            lines.append(_border(C.LEFT_TEE, C.CROSS, C.RIGHT_TEE))
        cells = C.VERTICAL.join(str(cell) for cell in row)
        lines.append(f"{C.ROW_LABELS[index]}{C.VERTICAL}{cells}{C.VERTICAL}")

    lines.append(_border(C.BOTTOM_LEFT, C.BOTTOM_TEE, C.BOTTOM_RIGHT))
    return "\n".join(lines)


def render_result(outcome: Outcome, human: Cell) -> str:
    """
    Message for the end of the game, from the human's point of view.

    Returns:
        The message, or an empty string while the game is ongoing.
    """
    winner: Optional[Cell] = outcome.winner

    if winner is not None:
        return C.HUMAN_WON if winner == human else C.MACHINE_WON
    if outcome == Outcome.DRAW:
        return C.DRAW
    return ""
