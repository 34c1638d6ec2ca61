"""
Main script for console TicTacToe.

This script ties together:
- Logic (game engine, move validation, win detection)
- Console (board rendering, move input)

Run this script to play TicTacToe against a friend at the same keyboard!
"""

import sys
from typing import Optional

# Logic imports
from logic import __version__
from logic.engine import GameEngine
from logic.errors import MoveError
from logic.game_state import GameResult

# Console imports
from console.config import ConsoleConfig
from console.renderer import BoardRenderer
from console.input_source import ConsoleMoveSource


class TicTacToeGame:
    """
    Main controller for a two-player console game.

    Game flow:
    1. Announce the current player and draw the board
    2. Read a move, asking again until it is legal
    3. Evaluate the board
    4. Stop on a win or draw, otherwise pass the turn and repeat
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        renderer: Optional[BoardRenderer] = None,
        move_source: Optional[ConsoleMoveSource] = None
    ):
        self.config = config or ConsoleConfig()
        self.engine = GameEngine()
        self.renderer = renderer or BoardRenderer(self.config)
        self.move_source = move_source or ConsoleMoveSource(self.config)

    def play(self) -> GameResult:
        """
        Play one game to the end.

        Returns:
            The terminal result (CROSS_WON, CIRCLE_WON or DRAW).

        Raises:
            EOFError: the move source ran dry mid-game.
        """
        while True:
            print(self.config.NEXT_PLAYER_MESSAGE.format(player=self.engine.current_player().value))
            self.renderer.draw(self.engine.board)

            self._place_next_mark()

            result = self.engine.evaluate()
            if result.is_terminal:
                break

            self.engine.next_turn()
            print()

        self._show_game_result(result)
        return result

    def _place_next_mark(self):
        """Read moves until one is accepted by the engine."""
        print(self.config.MOVE_PROMPT, end="", flush=True)
        while True:
            row, col = self.move_source.read_move()
            try:
                self.engine.place_mark(row, col)
                return
            except MoveError as e:
                print(e)
                print(self.config.RETRY_MESSAGE)
                print(self.config.MOVE_PROMPT, end="", flush=True)

    def _show_game_result(self, result: GameResult):
        """Show the final board and result."""
        print()
        self.renderer.draw(self.engine.board)

        if result == GameResult.CROSS_WON:
            print(self.config.CROSS_WON_MESSAGE)
        elif result == GameResult.CIRCLE_WON:
            print(self.config.CIRCLE_WON_MESSAGE)
        elif result == GameResult.DRAW:
            print(self.config.DRAW_MESSAGE)

        line = self.engine.win_checker.get_winning_line(self.engine.game_state)
        if line:
            print("winning line: " + " ".join(f"({row},{col})" for row, col in line))


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    config = ConsoleConfig()

    parser = argparse.ArgumentParser(description="Two-player console TicTacToe")
    parser.add_argument(
        "--style",
        choices=config.STYLES,
        default=config.DEFAULT_STYLE,
        help="Board layout (default: %(default)s)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args(argv)

    print("=" * config.BANNER_WIDTH)
    print("   TicTacToe - enter moves as: row column (0-2)")
    print("=" * config.BANNER_WIDTH + "\n")

    game = TicTacToeGame(config, renderer=BoardRenderer(config, style=args.style))

    try:
        game.play()
    except (EOFError, KeyboardInterrupt):
        print("\n\nGame interrupted before it finished.")
        return 1
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
