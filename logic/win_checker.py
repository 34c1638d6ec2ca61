"""
Win checker for console TicTacToe.
Decides whether a board is won, drawn or still in progress.
"""

from typing import Optional, List, Tuple
from .game_state import GameState, Mark, GameResult, Board, BOARD_SIZE


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)

    Every line is described by its first cell and a (delta_row, delta_col)
    step, so one scan handles rows, columns and both diagonals.
    """

    # (start_row, start_col, delta_row, delta_col), in evaluation order
    LINES = (
        # Rows, top to bottom
        [(row, 0, 0, 1) for row in range(BOARD_SIZE)]
        # Columns, left to right
        + [(0, col, 1, 0) for col in range(BOARD_SIZE)]
        # Diagonals
        + [(0, 0, 1, 1), (0, BOARD_SIZE - 1, 1, -1)]
    )

    def evaluate(self, game_state: GameState) -> GameResult:
        """
        Evaluate the board.

        Args:
            game_state: The current game state. Not modified.

        Returns:
            CROSS_WON / CIRCLE_WON for the first complete line found,
            DRAW if the board is full, NO_WINNER otherwise.
        """
        result = self.check_winner(game_state)
        if result.is_terminal:
            return result

        if game_state.is_full():
            return GameResult.DRAW

        return GameResult.NO_WINNER

    def check_winner(self, game_state: GameState) -> GameResult:
        """
        Check if there's a winner.

        Returns:
            CROSS_WON or CIRCLE_WON, or NO_WINNER if no line is complete.
        """
        for line in self.LINES:
            result = self._check_line(game_state.board, *line)
            if result != GameResult.NO_WINNER:
                return result

        return GameResult.NO_WINNER

    def _check_line(
        self,
        board: Board,
        start_row: int,
        start_col: int,
        delta_row: int,
        delta_col: int
    ) -> GameResult:
        """
        Check if a single line has a winner.

        Walks from the start cell in steps of (delta_row, delta_col) until it
        leaves the grid. An empty cell or a mismatch ends the line at once.
        """
        first = board[start_row][start_col]
        if first == Mark.EMPTY:
            return GameResult.NO_WINNER

        row, col = start_row + delta_row, start_col + delta_col
        while GameState.in_bounds(row, col):
            if board[row][col] != first:
                return GameResult.NO_WINNER
            row, col = row + delta_row, col + delta_col

        return GameResult.won_by(first)

    def get_winning_line(self, game_state: GameState) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Args:
            game_state: The game state.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for start_row, start_col, delta_row, delta_col in self.LINES:
            if self._check_line(game_state.board, start_row, start_col, delta_row, delta_col) != GameResult.NO_WINNER:
                return [
                    (start_row + i * delta_row, start_col + i * delta_col)
                    for i in range(BOARD_SIZE)
                ]
        return None
