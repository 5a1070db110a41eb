"""
Console module for TicTacToe.
Reads symbols and moves typed by the human and draws the board.
"""

from .config import ConsoleConfig
from .parser import ParseError, parse_symbol, parse_move, format_move
from .renderer import render_board, render_result
