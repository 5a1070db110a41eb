"""
Tests for console parsing, board drawing and the console game driver.
Run with pytest, or directly as a script.
"""

import itertools
import sys

import pytest

from console.parser import ParseError, parse_symbol, parse_move, format_move
from console.renderer import render_board, render_result
from logic.ai_player import AIPlayer
from logic.board import Board
from logic.cell import Cell, Move
from logic.config import GameConfig
from logic.win_checker import Outcome
import main


# ==================== PARSER ====================

@pytest.mark.parametrize("text, expected", [
    ("X", Cell.X), ("x", Cell.X), ("O", Cell.O), ("o\n", Cell.O), ("  x  ", Cell.X),
])
def test_parse_symbol(text, expected):
    assert parse_symbol(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "XO", "y", "0", "-"])
def test_parse_symbol_rejects(text):
    with pytest.raises(ParseError):
        parse_symbol(text)


@pytest.mark.parametrize("text, expected", [
    ("1A", Move(0, 0)),
    ("1a", Move(0, 0)),
    ("A1", Move(0, 0)),
    (" 3c \n", Move(2, 2)),
    ("2B", Move(1, 1)),
    ("b3", Move(2, 1)),
    ("3A", Move(2, 0)),
])
def test_parse_move(text, expected):
    assert parse_move(text) == expected


@pytest.mark.parametrize("text", ["", "1", "4A", "1D", "11", "AB", "ABC", "1A2", "0A"])
def test_parse_move_rejects(text):
    with pytest.raises(ParseError):
        parse_move(text)


def test_format_move_matches_parse_move():
    assert format_move(Move(0, 0)) == "1A"
    assert format_move(Move(2, 1)) == "3B"
    for row, col in itertools.product(range(3), repeat=2):
        assert parse_move(format_move(Move(row, col))) == Move(row, col)


def test_parse_error_is_a_value_error():
    assert issubclass(ParseError, ValueError)


# ==================== RENDERER ====================

def test_render_board():
    board = Board.from_rows([
        ["X", " ", " "],
        [" ", "O", " "],
        [" ", " ", " "],
    ])
    expected = "\n".join([
        "  A B C",
        " ┌─┬─┬─┐",
        "1│X│ │ │",
        " ├─┼─┼─┤",
        "2│ │O│ │",
        " ├─┼─┼─┤",
        "3│ │ │ │",
        " └─┴─┴─┘",
    ])
    before = board.copy()

    assert render_board(board) == expected
    assert board == before


@pytest.mark.parametrize("outcome, human, expected", [
    (Outcome.X_WON, Cell.X, "Congratulations, you won!"),
    (Outcome.O_WON, Cell.X, "Sorry, but you lost"),
    (Outcome.O_WON, Cell.O, "Congratulations, you won!"),
    (Outcome.DRAW, Cell.O, "Draw"),
    (Outcome.ONGOING, Cell.X, ""),
])
def test_render_result(outcome, human, expected):
    assert render_result(outcome, human) == expected


# ==================== DRIVER ====================

class ScriptedConsole:
    """Feeds canned answers and records everything written."""

    def __init__(self, answers):
        self.answers = iter(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt):
        self.prompts.append(prompt)
        return next(self.answers)

    def output(self, message):
        self.lines.append(message)


def every_cell_forever():
    return itertools.cycle(format_move(Move(row, col))
                           for row in range(3) for col in range(3))


@pytest.mark.parametrize("symbol", ["x", "O"])
@pytest.mark.parametrize("machine_first", [False, True])
def test_game_runs_to_the_end_without_human_win(symbol, machine_first):
    answers = itertools.chain([symbol, "zz"], every_cell_forever())
    script = ScriptedConsole(answers)

    game = main.TicTacToeConsole(
        machine_first=machine_first,
        input_func=script.input,
        output_func=script.output,
    )
    outcome = game.run()

    human = parse_symbol(symbol)
    assert outcome.is_terminal
    assert outcome.winner != human
    assert game.game_state.human == human
    assert game.ai.player == human.opposite()
    assert script.lines[-1] == render_result(outcome, human)
    assert any(line.startswith("machine moved: ") for line in script.lines)


def test_driver_reprompts_on_bad_input_and_occupied_cells():
    # AI plays O; human X takes the centre first, then repeats itself
    answers = itertools.chain(["?", "x", "2B", "2B", "9Z"], every_cell_forever())
    script = ScriptedConsole(answers)

    game = main.TicTacToeConsole(input_func=script.input, output_func=script.output)
    game.run()

    assert script.prompts[0].startswith("Please choose a symbol")
    assert "'?' is not one of 'X', 'x', 'O', 'o'" in script.lines
    assert any("already occupied" in line for line in script.lines)
    assert any(line.startswith("Could not parse") for line in script.lines)
    assert game.game_state.moves[0] == (Cell.X, Move(1, 1))


def test_machine_first_opens_in_the_corner():
    script = ScriptedConsole(every_cell_forever())

    game = main.TicTacToeConsole(
        human=Cell.X,
        machine_first=True,
        input_func=script.input,
        output_func=script.output,
    )
    game.run()

    assert game.game_state.moves[0] == (Cell.O, Move(0, 0))
    assert "machine moved: 1A" in script.lines


def test_final_board_shown_when_human_ends_the_game():
    # A perfect human moving first fills the ninth cell of a drawn game
    lines = []
    perfect_human = AIPlayer(Cell.X)

    def perfect_input(prompt):
        return format_move(perfect_human.get_best_move(game.game_state.board))

    game = main.TicTacToeConsole(
        human=Cell.X,
        input_func=perfect_input,
        output_func=lines.append,
    )
    outcome = game.run()

    final_board = game.game_state.board
    assert outcome == Outcome.DRAW
    assert game.game_state.moves[-1][0] == Cell.X
    assert not final_board.has_empty_cell()
    assert lines[-2] == render_board(final_board)
    assert lines[-1] == "Draw"


def test_verbose_flag_reaches_the_ai_only():
    game = main.TicTacToeConsole(human=Cell.X, verbose=True)
    game.setup()

    assert game.ai.verbose is True
    assert AIPlayer(Cell.O).verbose is GameConfig.VERBOSE


def test_main_verbose_leaves_config_alone(monkeypatch):
    def no_more_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_more_input)
    before = GameConfig.VERBOSE

    assert main.main(["--symbol", "X", "--verbose"]) == 0
    assert GameConfig.VERBOSE is before


def test_main_handles_end_of_input(monkeypatch, capsys):
    def no_more_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_more_input)

    assert main.main(["--symbol", "X"]) == 0
    assert "Goodbye!" in capsys.readouterr().out


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
