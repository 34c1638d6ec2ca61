"""
Console module for TicTacToe.
Handles drawing the board and reading moves from the players.
"""

from .config import ConsoleConfig
from .renderer import BoardRenderer
from .input_source import ConsoleMoveSource
