"""
Logic module for TicTacToe.
Handles the board, game rules, and AI opponent.
"""

__version__ = "1.0.0"

from .cell import Cell, Move
from .config import GameConfig
from .board import Board
from .win_checker import Outcome, WinChecker
from .move_validator import MoveValidator, ValidationResult
from .game_state import GameState
from .ai_player import AIPlayer
