"""
Board renderer for console TicTacToe.
Turns the 3x3 grid of marks into text.
"""

from typing import Optional, List
from logic.game_state import Board
from .config import ConsoleConfig


class BoardRenderer:
    """
    Renders the board as text.

    Two styles are supported:
    - plain: cells separated by " |", rows by a dashed line
    - box: box-drawing grid with row and column indices
    """

    def __init__(self, config: Optional[ConsoleConfig] = None, style: Optional[str] = None):
        """
        Initialize the renderer.

        Args:
            config: Console configuration. Uses defaults if not provided.
            style: "plain" or "box". Uses config.DEFAULT_STYLE if not provided.
        """
        self.config = config or ConsoleConfig()
        self.style = style or self.config.DEFAULT_STYLE

        if self.style not in self.config.STYLES:
            raise ValueError(f"Unknown board style '{self.style}', expected one of {self.config.STYLES}")

    def render(self, board: Board) -> str:
        """
        Render the board.

        Args:
            board: The 3x3 grid of marks.

        Returns:
            The board as a multi-line string (no trailing newline).
        """
        if self.style == "box":
            return "\n".join(self._render_box(board))
        return "\n".join(self._render_plain(board))

    def draw(self, board: Board):
        """Print the board to console."""
        print(self.render(board))

    def _symbol(self, mark) -> str:
        return self.config.MARK_SYMBOLS[mark]

    def _render_plain(self, board: Board) -> List[str]:
        lines = []
        for i, row in enumerate(board):
            line = ""
            for j, mark in enumerate(row):
                line += " " + self._symbol(mark)
                if j != len(row) - 1:
                    line += self.config.CELL_SEPARATOR
            lines.append(line)

            if i != len(board) - 1:
                lines.append(self.config.ROW_SEPARATOR)
        return lines

    def _render_box(self, board: Board) -> List[str]:
        size = len(board)
        lines = ["    " + "   ".join(str(col) for col in range(size))]
        lines.append("  ┌" + "┬".join("───" for _ in range(size)) + "┐")

        for row in range(size):
            cells = "│".join(f" {self._symbol(mark)} " for mark in board[row])
            lines.append(f"{row} │{cells}│")

            if row < size - 1:
                lines.append("  ├" + "┼".join("───" for _ in range(size)) + "┤")

        lines.append("  └" + "┴".join("───" for _ in range(size)) + "┘")
        return lines
