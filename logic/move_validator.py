"""
Move validator for console TicTacToe.
Checks that a placement is legal before the engine applies it.
"""

from .game_state import GameState, Mark
from .errors import PositionOutOfBoundsError, MarkAlreadyExistsError


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must be inside the 3x3 grid
    2. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, row: int, col: int) -> None:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Raises:
            PositionOutOfBoundsError: row or col is outside 0-2.
            MarkAlreadyExistsError: the cell already holds a mark.
        """
        if not game_state.in_bounds(row, col):
            raise PositionOutOfBoundsError(row, col)

        if game_state.board[row][col] != Mark.EMPTY:
            raise MarkAlreadyExistsError(row, col)
