"""Unit tests for /src/console.py"""

from collections.abc import Iterator
from typing import Callable

import pytest

from src.console import ConsoleGame, parse_move
from src.core.exceptions import InvalidRequestError, MoveFormatError
from src.core.shared_types import Status
from src.domino.game import Game, PlayerMark, Position


def scripted_input(lines: list[str]) -> Callable[[str], str]:
    """Stand-in for `input`: returns the given lines one after the other"""
    remaining: Iterator[str] = iter(lines)

    def _input(prompt: str) -> str:
        return next(remaining)

    return _input


# -- parse_move --
@pytest.mark.parametrize(
    "text, expected",
    [
        ("2 3", Position(2, 3)),
        (" 2 3 ", Position(2, 3)),
        ("0\t7", Position(0, 7)),
        ("10   12\n", Position(10, 12)),  # out of range for an 8x8 board, but that is for the Game to decide
    ],
)
def test_parse_valid_move(text: str, expected: Position) -> None:
    assert parse_move(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",  # nothing
        "   ",  # only whitespace
        "2",  # single number
        "2 3 4",  # more than two numbers
        "a b",  # not numbers
        "2@ 3",  # special characters
        "-1 3",  # negative numbers are not accepted
        "2,3",  # not separated by whitespace
        "١ ٢",  # digits, but not ASCII ones
    ],
)
def test_parse_invalid_move(text: str) -> None:
    with pytest.raises(MoveFormatError):
        parse_move(text)


def test_move_format_error_is_invalid_request() -> None:
    with pytest.raises(InvalidRequestError):
        parse_move("nonsense")


# -- ConsoleGame --
def test_console_game_plays_to_the_end() -> None:
    output: list[str] = []
    game = Game.new_game(2)
    console = ConsoleGame(game, scripted_input(["0 0"]), output.append)

    status = console.start()
    assert status == Status.PLAYER_1_WINS
    assert output[-1] == "Game over after 1 turns: player 1 wins"


def test_console_game_reprompts_after_bad_input() -> None:
    """Garbage and illegal moves are reported, the same player gets asked again"""
    output: list[str] = []
    game = Game.new_game(2)
    lines = ["hello", "0 1", "5 5", "1 0"]
    console = ConsoleGame(game, scripted_input(lines), output.append)

    status = console.start()
    assert status == Status.PLAYER_1_WINS
    assert game.turn_count == 1
    assert game.player_at(Position(1, 0)) == PlayerMark.PLAYER_1
    assert sum("Illegal move" in line for line in output) == 2
    assert any("Cannot interpret 'hello'" in line for line in output)


def test_console_game_prints_board_before_every_turn() -> None:
    output: list[str] = []
    game = Game.new_game(3)
    console = ConsoleGame(game, scripted_input(["0 0", "1 2", "1 0"]), output.append)
    console.start()

    boards = [line for line in output if line.startswith("  0 1 2 ")]
    # one board per turn + the final board
    assert len(boards) == 4
    assert boards[-1] == game.to_text()
