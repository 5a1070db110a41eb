"""
Console game for TicTacToe.

This script ties together:
- Console (symbol and move parsing, board drawing)
- Logic (game state, move validation, AI)

Run this script to play TicTacToe against the computer!
"""

import argparse
from typing import Callable, Optional

# Console imports
from console.config import ConsoleConfig
from console.parser import ParseError, parse_symbol, parse_move, format_move
from console.renderer import render_board, render_result

# Logic imports
from logic.ai_player import AIPlayer
from logic.cell import Cell
from logic.game_state import GameState
from logic.win_checker import Outcome


class TicTacToeConsole:
    """
    Console controller for a game against the AI.

    Game flow:
    1. Human picks X or O, the AI plays the other symbol
    2. Human types a move, re-prompted until it is accepted
    3. AI calculates the best response and plays it
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        human: Optional[Cell] = None,
        machine_first: bool = False,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        ai: Optional[AIPlayer] = None,
        verbose: bool = False
    ):
        """
        Initialize the console game.

        Args:
            human: Symbol for the human. Asked for at start if not given.
            machine_first: If True, the AI makes the first move.
            input_func: Reads one line of input for a prompt (default: input).
            output_func: Writes one message (default: print).
            ai: AI to play against. Created for the other symbol if not given.
            verbose: Print search statistics for AI moves it creates.
        """
        self.input = input_func or input
        self.output = output_func or print
        self.machine_first = machine_first
        self.human = human
        self.ai = ai
        self.verbose = verbose
        self.game_state: Optional[GameState] = None

    def _ask(self, prompt: str, parse):
        """Prompt until the parser accepts the answer."""
        while True:
            text = self.input(prompt)
            try:
                return parse(text)
            except ParseError as e:
                self.output(str(e))

    def setup(self) -> GameState:
        """Bind symbols to players and create a fresh game."""
        if self.human is None:
            self.human = self._ask(ConsoleConfig.SYMBOL_PROMPT + "\n", parse_symbol)

        if self.ai is None or self.ai.player != self.human.opposite():
            self.ai = AIPlayer(self.human.opposite(), verbose=self.verbose or None)

        first = self.ai.player if self.machine_first else self.human
        self.game_state = GameState(human=self.human, current_player=first)
        return self.game_state

    def run(self) -> Outcome:
        """
        Play one game to the end.

        Returns:
            The final outcome.
        """
        game = self.setup()
        self.output(render_board(game.board))

        while not game.is_game_over:
            if game.current_player == game.human:
                self._human_turn()
                if game.is_game_over:
                    self.output(render_board(game.board))
                    break

            self._machine_turn()
            self.output(render_board(game.board))

        self.output(render_result(game.outcome, game.human))
        return game.outcome

    def _human_turn(self):
        """Read moves until one is accepted."""
        game = self.game_state

        while True:
            move = self._ask(ConsoleConfig.MOVE_PROMPT, parse_move)
            result = game.player_move(move)
            if result:
                return
            self.output(result.error_message)

    def _machine_turn(self):
        """Let the AI pick a move and play it."""
        game = self.game_state

        move = self.ai.get_best_move(game.board)
        if move is None:
            return

        game.machine_move(move)
        self.output(ConsoleConfig.MACHINE_MOVED.format(move=format_move(move)))


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe against an unbeatable AI")
    parser.add_argument(
        "--symbol",
        choices=["X", "O", "x", "o"],
        help="Your symbol (asked for at start if not given)"
    )
    parser.add_argument(
        "--machine-first",
        action="store_true",
        help="Let the AI make the first move"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print search statistics for every AI move"
    )

    args = parser.parse_args(argv)

    human = parse_symbol(args.symbol) if args.symbol else None
    game = TicTacToeConsole(
        human=human,
        machine_first=args.machine_first,
        verbose=args.verbose
    )

    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print(ConsoleConfig.GOODBYE)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
