"""
Game engine for console TicTacToe.
Owns the game state and is the only place that mutates it.
"""

from typing import Optional
from .game_state import GameState, GameResult, Player, Board
from .move_validator import MoveValidator
from .win_checker import WinChecker


class GameEngine:
    """
    Authoritative board and turn state.

    Turn order is driven by the caller:
    1. place_mark() paints the current player's mark
    2. evaluate() tells whether the game is over
    3. next_turn() hands the move to the other player

    Once evaluate() returns a terminal result the caller must stop;
    the engine does not guard against further moves.
    """

    def __init__(self, game_state: Optional[GameState] = None):
        self.game_state = game_state or GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    @property
    def board(self) -> Board:
        return self.game_state.board

    def current_player(self) -> Player:
        """Get the player whose turn it is."""
        return self.game_state.turn_player

    def place_mark(self, row: int, col: int) -> None:
        """
        Place the current player's mark at (row, col).

        Raises:
            PositionOutOfBoundsError: row or col is outside 0-2.
            MarkAlreadyExistsError: the cell is taken.
        """
        self.validator.validate_move(self.game_state, row, col)
        self.game_state.board[row][col] = self.game_state.turn_player.mark

    def next_turn(self) -> None:
        self.game_state.turn_player = self.game_state.turn_player.opposite()

    def evaluate(self) -> GameResult:
        return self.win_checker.evaluate(self.game_state)
