"""
Move input for console TicTacToe.
Reads row/column pairs typed by the players.
"""

import sys
from typing import Optional, List, TextIO, Tuple
from .config import ConsoleConfig


class ConsoleMoveSource:
    """
    Reads moves as two whitespace-separated integers.

    "1 2" on one line and "1" then "2" on separate lines are the same move.
    Bounds are not checked here, the engine rejects illegal positions.
    """

    def __init__(self, config: Optional[ConsoleConfig] = None, stream: Optional[TextIO] = None):
        """
        Initialize the move source.

        Args:
            config: Console configuration. Uses defaults if not provided.
            stream: Where moves are read from. Uses stdin if not provided.
        """
        self.config = config or ConsoleConfig()
        self.stream = stream or sys.stdin
        self._tokens: List[str] = []

    def read_move(self) -> Tuple[int, int]:
        """
        Read the next move.

        Returns:
            (row, column) as typed, possibly out of bounds.

        Raises:
            EOFError: the input ended before two numbers were read.
        """
        while True:
            token = self._next_token()
            try:
                row = int(token)
                token = self._next_token()
                column = int(token)
                return row, column
            except ValueError:
                # A bad token voids the whole move, including a row already read
                print(self.config.BAD_INPUT_MESSAGE.format(token=token))
                self._tokens.clear()
                print(self.config.MOVE_PROMPT, end="", flush=True)

    def _next_token(self) -> str:
        while not self._tokens:
            line = self.stream.readline()
            if not line:
                raise EOFError("no more moves to read")
            self._tokens = line.split()
        return self._tokens.pop(0)
