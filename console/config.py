"""
Console configuration for TicTacToe.
Prompts, messages and the characters used to draw the board.
"""


class ConsoleConfig:
    """
    Configuration class for console settings.
    """

    # ==================== INPUT SETTINGS ====================
    SYMBOL_PROMPT = "Please choose a symbol: X or O"
    MOVE_PROMPT = "your move: "

    # Column letters and row digits, in board order
    COLUMN_LABELS = "ABC"
    ROW_LABELS = "123"

    # ==================== MESSAGES ====================
    MACHINE_MOVED = "machine moved: {move}"
    HUMAN_WON = "Congratulations, you won!"
    MACHINE_WON = "Sorry, but you lost"
    DRAW = "Draw"
    GOODBYE = "Goodbye!"

    # ==================== BOARD DRAWING ====================
    # Box-drawing characters
    TOP_LEFT = "┌"
    TOP_RIGHT = "┐"
    BOTTOM_LEFT = "└"
    BOTTOM_RIGHT = "┘"
    HORIZONTAL = "─"
    VERTICAL = "│"
    TOP_TEE = "┬"
    BOTTOM_TEE = "┴"
    LEFT_TEE = "├"
    RIGHT_TEE = "┤"
    CROSS = "┼"
