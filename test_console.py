"""
Test script for the console module and the game loop.
Moves are fed from in-memory streams, so no keyboard is needed.
"""

import io
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from console import ConsoleConfig, BoardRenderer, ConsoleMoveSource
from logic.game_state import GameState, Mark, GameResult
from main import TicTacToeGame, main


def scripted_game(moves: str, style: str = "plain") -> TicTacToeGame:
    config = ConsoleConfig()
    return TicTacToeGame(
        config,
        renderer=BoardRenderer(config, style=style),
        move_source=ConsoleMoveSource(config, stream=io.StringIO(moves)),
    )


# ==================== RENDERER TESTS ====================

def test_plain_render():
    state = GameState()
    state.board[0][0] = Mark.CROSS
    state.board[0][1] = Mark.CIRCLE
    state.board[2][2] = Mark.CIRCLE

    text = BoardRenderer(style="plain").render(state.board)

    assert text.split("\n") == [
        " X | O |  ",
        "------------",
        "   |   |  ",
        "------------",
        "   |   | O",
    ]


def test_box_render_has_indices():
    state = GameState()
    state.board[1][1] = Mark.CROSS

    lines = BoardRenderer(style="box").render(state.board).split("\n")

    assert lines[0] == "    0   1   2"
    assert lines[1] == "  ┌───┬───┬───┐"
    assert lines[4] == "1 │   │ X │   │"
    assert lines[-1] == "  └───┴───┴───┘"


def test_unknown_style_rejected():
    with pytest.raises(ValueError):
        BoardRenderer(style="fancy")


# ==================== INPUT TESTS ====================

def test_move_on_one_line():
    source = ConsoleMoveSource(stream=io.StringIO("1 2\n"))
    assert source.read_move() == (1, 2)


def test_move_across_lines():
    source = ConsoleMoveSource(stream=io.StringIO("2\n0\n"))
    assert source.read_move() == (2, 0)


def test_out_of_range_numbers_pass_through():
    source = ConsoleMoveSource(stream=io.StringIO("7 -1\n"))
    assert source.read_move() == (7, -1)


def test_non_numeric_input_is_skipped(capsys):
    source = ConsoleMoveSource(stream=io.StringIO("one two\n1 1\n"))
    assert source.read_move() == (1, 1)
    assert "'one' is not a number" in capsys.readouterr().out


def test_bad_column_restarts_the_move(capsys):
    source = ConsoleMoveSource(stream=io.StringIO("1 x\n2 2\n0 0\n"))

    assert source.read_move() == (2, 2)
    assert source._tokens == []
    assert source.read_move() == (0, 0)
    assert "'x' is not a number" in capsys.readouterr().out


def test_game_bad_column_does_not_shift_moves():
    game = scripted_game("0 0\n1 oops\n1 0\n0 1\n1 1\n0 2\n")

    assert game.play() == GameResult.CROSS_WON
    assert game.engine.board[1][0] == Mark.CIRCLE
    assert game.engine.board[1][1] == Mark.CIRCLE
    assert game.engine.board[0][1] == Mark.CROSS


def test_end_of_input():
    source = ConsoleMoveSource(stream=io.StringIO("1\n"))
    with pytest.raises(EOFError):
        source.read_move()


# ==================== GAME LOOP TESTS ====================

def test_game_cross_wins(capsys):
    game = scripted_game("0 0\n1 0\n0 1\n1 1\n0 2\n")

    assert game.play() == GameResult.CROSS_WON

    out = capsys.readouterr().out
    assert "next player to place a mark is: cross" in out
    assert "next player to place a mark is: circle" in out
    assert "cross won the game!" in out
    assert "winning line: (0,0) (0,1) (0,2)" in out


def test_game_draw(capsys):
    game = scripted_game("0 0\n0 1\n0 2\n1 1\n1 0\n1 2\n2 1\n2 0\n2 2\n")

    assert game.play() == GameResult.DRAW
    assert "the game has ended with a draw!" in capsys.readouterr().out


def test_game_reprompts_on_illegal_moves(capsys):
    game = scripted_game("3 0\n0 0\n0 0\n1 0\n0 1\n1 1\n0 2\n")

    assert game.play() == GameResult.CROSS_WON

    out = capsys.readouterr().out
    assert "position (3,0) is out of bounds." in out
    assert "position (0,0) already has a mark on it." in out
    assert out.count("please re-enter a position:") == 2


def test_main_plays_a_game(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0 2\n0 0\n1 1\n1 0\n2 0\n"))

    assert main(["--style", "box"]) == 0

    out = capsys.readouterr().out
    assert "cross won the game!" in out
    assert "Goodbye!" in out


def test_main_handles_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 1\n"))

    assert main([]) == 1
    assert "Goodbye!" in capsys.readouterr().out
