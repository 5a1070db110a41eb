"""
Parsers for text typed at the console.
"""

from logic.cell import Cell, Move

from .config import ConsoleConfig


class ParseError(ValueError):
    """Raised when console input cannot be turned into a symbol or move."""


def parse_symbol(text: str) -> Cell:
    """
    Parse the human's symbol choice.

    Args:
        text: Raw input, e.g. "x\\n".

    Returns:
        Cell.X or Cell.O.

    Raises:
        ParseError: if the input is not exactly one of X, x, O, o.
    """
    stripped = text.strip()

    if len(stripped) > 1:
        raise ParseError(f"Input {stripped} too long")
    if not stripped:
        raise ParseError(f"Could not parse: {stripped}")

    char = stripped.upper()
    if char == "X":
        return Cell.X
    if char == "O":
        return Cell.O

    raise ParseError(f"'{stripped}' is not one of 'X', 'x', 'O', 'o'")


def parse_move(text: str) -> Move:
    """
    Parse a move such as "1A", "b3" or "C2".

    One character is the row digit (1-3), the other the column letter (A-C),
    in either order, case-insensitive.

    Raises:
        ParseError: if the input does not name exactly one cell.
    """
    stripped = text.strip()

    if len(stripped) != 2:
        raise ParseError(f"Input {stripped} must be a row (1-3) and a column (A-C), e.g. 1A")

    row = col = None
    for char in stripped.upper():
        if char in ConsoleConfig.ROW_LABELS and row is None:
            row = ConsoleConfig.ROW_LABELS.index(char)
        elif char in ConsoleConfig.COLUMN_LABELS and col is None:
            col = ConsoleConfig.COLUMN_LABELS.index(char)

    if row is None or col is None:
        raise ParseError(f"Could not parse: {stripped}")

    return Move(row, col)


def format_move(move: Move) -> str:
    """Format a move the way the human types it, e.g. Move(0, 0) -> "1A"."""
    return f"{ConsoleConfig.ROW_LABELS[move.row]}{ConsoleConfig.COLUMN_LABELS[move.col]}"
