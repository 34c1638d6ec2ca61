"""
Console configuration for TicTacToe.
All the settings for drawing the board and talking to the players.
"""

from logic.game_state import Mark


class ConsoleConfig:
    """
    Configuration class for console settings.
    Change these values to restyle the game!
    """

    # ==================== BOARD STYLE ====================
    # "plain" is the classic  X | O |    layout
    # "box" draws a box-drawing grid with row/column indices
    STYLES = ("plain", "box")
    DEFAULT_STYLE = "plain"

    # What each mark looks like on screen
    MARK_SYMBOLS = {
        Mark.EMPTY: " ",
        Mark.CROSS: "X",
        Mark.CIRCLE: "O",
    }

    # Plain style separators
    CELL_SEPARATOR = " |"
    ROW_SEPARATOR = "------------"

    # ==================== MESSAGES ====================
    NEXT_PLAYER_MESSAGE = "next player to place a mark is: {player}"
    MOVE_PROMPT = "> "
    RETRY_MESSAGE = "please re-enter a position:"
    BAD_INPUT_MESSAGE = "'{token}' is not a number, enter a row and a column (0-2)."

    CROSS_WON_MESSAGE = "cross won the game!"
    CIRCLE_WON_MESSAGE = "circle won the game!"
    DRAW_MESSAGE = "the game has ended with a draw!"

    # ==================== BANNER ====================
    BANNER_WIDTH = 60
