"""Unit tests for /src/domino/board.py"""

import pytest

from src.domino.board import Board
from src.domino.moves import Domino
from src.domino.players import PlayerMark
from src.domino.position import Position

EMPTY_BOARD_TEXT = (
    "  0 1 2 3 4 5 6 7 \n"
    "0 . . . . . . . . \n"
    "1 . . . . . . . . \n"
    "2 . . . . . . . . \n"
    "3 . . . . . . . . \n"
    "4 . . . . . . . . \n"
    "5 . . . . . . . . \n"
    "6 . . . . . . . . \n"
    "7 . . . . . . . . \n"
)

SMALL_BOARD_TEXT = (
    "  0 1 2 \n"
    "0 X X O \n"
    "1 . . O \n"
    "2 . . . \n"
)


def test_empty_board() -> None:
    board = Board.empty(8)
    assert board.size == 8
    assert all(board.is_empty(position) for position in board.positions())
    assert len(board.positions()) == 64


def test_positions_row_major() -> None:
    board = Board.empty(2)
    assert board.positions() == [
        Position(0, 0),
        Position(0, 1),
        Position(1, 0),
        Position(1, 1),
    ]


def test_empty_board_to_text() -> None:
    assert Board.empty(8).to_text() == EMPTY_BOARD_TEXT


def test_from_text() -> None:
    board = Board.from_text(SMALL_BOARD_TEXT)
    assert board.size == 3
    assert board.player_at(Position(0, 0)) == PlayerMark.PLAYER_1
    assert board.player_at(Position(0, 1)) == PlayerMark.PLAYER_1
    assert board.player_at(Position(0, 2)) == PlayerMark.PLAYER_2
    assert board.player_at(Position(1, 2)) == PlayerMark.PLAYER_2
    assert board.empty_positions() == [
        Position(1, 0),
        Position(1, 1),
        Position(2, 0),
        Position(2, 1),
        Position(2, 2),
    ]


def test_text_roundtrip() -> None:
    assert Board.from_text(SMALL_BOARD_TEXT).to_text() == SMALL_BOARD_TEXT


def test_from_text_rejects_non_square_board() -> None:
    with pytest.raises(ValueError):
        Board.from_text("  0 1 \n0 . . \n")


def test_place_domino() -> None:
    board = Board.empty(8)
    board.place_domino(Domino(Position(3, 3), PlayerMark.PLAYER_2))
    assert board.player_at(Position(3, 3)) == PlayerMark.PLAYER_2
    assert board.player_at(Position(4, 3)) == PlayerMark.PLAYER_2
    assert len(board.empty_positions()) == 62


@pytest.mark.parametrize(
    "domino, allowed",
    [
        (Domino(Position(1, 0), PlayerMark.PLAYER_1), True),
        (Domino(Position(1, 1), PlayerMark.PLAYER_1), False),  # (1, 2) is taken
        (Domino(Position(0, 1), PlayerMark.PLAYER_2), False),  # (0, 1) is taken
        (Domino(Position(1, 0), PlayerMark.PLAYER_2), True),
        (Domino(Position(2, 0), PlayerMark.PLAYER_2), False),  # off the board
        (Domino(Position(2, 2), PlayerMark.PLAYER_1), False),  # off the board
    ],
)
def test_can_place(domino: Domino, allowed: bool) -> None:
    board = Board.from_text(SMALL_BOARD_TEXT)
    assert board.can_place(domino) == allowed


def test_board_equality_ignores_listeners() -> None:
    board = Board.empty(3)
    board.subscribe(lambda changed: None)
    assert board == Board.empty(3)


@pytest.mark.parametrize(
    "position",
    [Position(-1, 0), Position(0, -1), Position(8, 0), Position(0, 8)],
)
def test_player_at_off_the_board(position: Position) -> None:
    """A move on the bottom row must not show up at row -1"""
    board = Board.empty(8)
    board.place_domino(Domino(Position(7, 0), PlayerMark.PLAYER_1))
    with pytest.raises(IndexError):
        board.player_at(position)
    with pytest.raises(IndexError):
        board.cell(position)
