"""
Game state for console TicTacToe.
Tracks the board and whose turn it is.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


# TicTacToe is always played on a 3x3 grid
BOARD_SIZE = 3


class Mark(Enum):
    """Content of a single cell."""
    EMPTY = 0
    CROSS = 1
    CIRCLE = 2


class Player(Enum):
    """The two players in the game. The value is the display name."""
    CROSS = "cross"
    CIRCLE = "circle"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.CIRCLE if self == Player.CROSS else Player.CROSS

    @property
    def mark(self) -> Mark:
        """The mark this player paints on the board."""
        if self == Player.CROSS:
            return Mark.CROSS
        return Mark.CIRCLE


class GameResult(Enum):
    """Outcome of evaluating a board."""
    NO_WINNER = 0
    CROSS_WON = 1
    CIRCLE_WON = 2
    DRAW = 3

    @property
    def is_terminal(self) -> bool:
        """True once the game is won or drawn."""
        return self != GameResult.NO_WINNER

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for a draw or a game in progress."""
        if self == GameResult.CROSS_WON:
            return Player.CROSS
        if self == GameResult.CIRCLE_WON:
            return Player.CIRCLE
        return None

    @staticmethod
    def won_by(mark: Mark) -> "GameResult":
        """Map a line's mark to the result it produces."""
        if mark == Mark.CROSS:
            return GameResult.CROSS_WON
        if mark == Mark.CIRCLE:
            return GameResult.CIRCLE_WON
        return GameResult.NO_WINNER


Board = List[List[Mark]]


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 3x3 board (which mark is in each cell)
    - The player whose turn it is (cross always starts)

    Winner and draw are not stored here, the WinChecker derives them
    from the board on demand.
    """

    board: Board = field(
        default_factory=lambda: [[Mark.EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
    )

    turn_player: Player = Player.CROSS

    def __post_init__(self):
        if len(self.board) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in self.board):
            raise ValueError(f"board must be {BOARD_SIZE}x{BOARD_SIZE}")
        if not all(isinstance(cell, Mark) for row in self.board for cell in row):
            raise ValueError("board cells must be Mark values")

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        """Check if (row, col) is a cell of the grid."""
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples.
        """
        empty = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self.board[row][col] == Mark.EMPTY:
                    empty.append((row, col))
        return empty

    def is_full(self) -> bool:
        """True when no cell is empty."""
        return not self.get_empty_cells()
