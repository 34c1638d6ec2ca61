"""
Move errors for TicTacToe.
Raised by the engine when a requested placement is not legal.
"""


class MoveError(Exception):
    """Base class for illegal move requests. Carries the offending position."""

    def __init__(self, row: int, column: int, message: str):
        super().__init__(message)
        self.row = row
        self.column = column


class PositionOutOfBoundsError(MoveError):
    """The requested cell lies outside the 3x3 grid."""

    def __init__(self, row: int, column: int):
        super().__init__(row, column, f"position ({row},{column}) is out of bounds.")


class MarkAlreadyExistsError(MoveError):
    """The requested cell is already occupied."""

    def __init__(self, row: int, column: int):
        super().__init__(row, column, f"position ({row},{column}) already has a mark on it.")
