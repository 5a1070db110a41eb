"""
Game configuration for TicTacToe.
All the settings for the board and the minimax opponent.
"""


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid (fixed, not configurable)
    BOARD_SIZE = 3

    # ==================== MINIMAX SETTINGS ====================
    # Terminal scores, from the machine's point of view
    WIN_SCORE = 1
    LOSS_SCORE = -1
    DRAW_SCORE = 0

    # Start values for the running best score.
    # Must be strictly outside [LOSS_SCORE, WIN_SCORE].
    SCORE_FLOOR = -10
    SCORE_CEILING = 10

    # Cache scores of already searched positions
    MEMOIZE = True

    # Print search statistics after every move
    VERBOSE = False
