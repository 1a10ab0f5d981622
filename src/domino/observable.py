"""
Change notification for the board.

A front-end that repaints per cell can hold on to a `CellProperty` instead of polling the board after every move.
Listeners are called synchronously from within the move that changed the cell.
"""

from typing import TYPE_CHECKING, Callable

from src.domino.players import PlayerMark
from src.domino.position import Position

if TYPE_CHECKING:
    from src.domino.board import Board

BoardListener = Callable[[list[Position]], None]
CellListener = Callable[[Position, PlayerMark], None]


class CellProperty:
    """Read-only, observable view on a single cell of a Board."""

    def __init__(self, board: "Board", position: Position) -> None:
        self._board = board
        self.position = position
        self._listeners: dict[CellListener, BoardListener] = {}

    def get(self) -> PlayerMark:
        return self._board.player_at(self.position)

    def add_listener(self, listener: CellListener) -> None:
        """listener(position, new_mark) fires only when THIS cell changes"""
        if listener in self._listeners:
            return

        def _on_board_change(changed: list[Position]) -> None:
            if self.position in changed:
                listener(self.position, self.get())

        self._listeners[listener] = _on_board_change
        self._board.subscribe(_on_board_change)

    def remove_listener(self, listener: CellListener) -> None:
        board_listener = self._listeners.pop(listener, None)
        if board_listener is not None:
            self._board.unsubscribe(board_listener)
