"""
Logic module for console TicTacToe.
Handles game state, move rules and win detection.
"""

from .game_state import GameState, Player, Mark, GameResult, BOARD_SIZE
from .errors import MoveError, PositionOutOfBoundsError, MarkAlreadyExistsError
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .engine import GameEngine

__version__ = "1.0.0"
