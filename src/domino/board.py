"""The Game board keeps track of which player owns which cell"""

from dataclasses import dataclass, field
from typing import Self

from src.domino.moves import Domino
from src.domino.observable import BoardListener, CellProperty
from src.domino.players import GLYPH_TO_MARK, MARK_TO_GLYPH, PlayerMark
from src.domino.position import Position


@dataclass
class Board:
    size: int
    cells: list[list[PlayerMark]]
    listeners: list[BoardListener] = field(
        default_factory=list, repr=False, compare=False
    )
    # one handle per cell, so a listener added through any of them is only registered once
    cell_handles: dict[Position, CellProperty] = field(
        default_factory=dict, repr=False, compare=False
    )

    @classmethod
    def empty(cls, size: int) -> Self:
        return cls(size, [[PlayerMark.NONE] * size for _ in range(size)])

    @classmethod
    def from_text(cls, text: str) -> Self:
        """Construct a board from its printed form (see `to_text`).

        ex. a 3x3 board after Player 1 placed a domino on (0, 0):
          0 1 2
        0 X X .
        1 . . .
        2 . . .

        The header line and the row labels are skipped, so only the glyphs matter.
        """
        rows = [line.split() for line in text.splitlines() if line.strip()]
        # first line holds the column indices, first token of every other line is the row index
        cells = [[GLYPH_TO_MARK[glyph] for glyph in row[1:]] for row in rows[1:]]
        size = len(cells)
        if any(len(row) != size for row in cells):
            raise ValueError(f"Board text is not square:\n{text}")
        return cls(size, cells)

    def to_text(self) -> str:
        """Column indices on top, row index in front of every row. Every entry is followed by a single space."""
        lines = ["  " + "".join(f"{col} " for col in range(self.size))]
        for row in range(self.size):
            glyphs = "".join(f"{MARK_TO_GLYPH[mark]} " for mark in self.cells[row])
            lines.append(f"{row} {glyphs}")
        return "".join(f"{line}\n" for line in lines)

    def player_at(self, position: Position) -> PlayerMark:
        self._assert_on_board(position)
        return self.cells[position.row][position.col]

    def is_empty(self, position: Position) -> bool:
        return self.player_at(position) == PlayerMark.NONE

    def positions(self) -> list[Position]:
        """All cells in row-major order"""
        return [Position(row, col) for row in range(self.size) for col in range(self.size)]

    def empty_positions(self) -> list[Position]:
        return [position for position in self.positions() if self.is_empty(position)]

    def can_place(self, domino: Domino) -> bool:
        """Both halves on the board (checked first, so no cell outside gets read) and both empty"""
        return domino.fits_on(self.size) and all(
            self.is_empty(cell) for cell in domino.cells()
        )

    def place_domino(self, domino: Domino) -> None:
        """Mark both cells and let the listeners know. Caller must make sure the placement is allowed."""
        changed = list(domino.cells())
        for cell in changed:
            self.cells[cell.row][cell.col] = domino.mark
        self._notify(changed)

    # --- observers ---
    def cell(self, position: Position) -> CellProperty:
        self._assert_on_board(position)
        if position not in self.cell_handles:
            self.cell_handles[position] = CellProperty(self, position)
        return self.cell_handles[position]

    def subscribe(self, listener: BoardListener) -> None:
        self.listeners.append(listener)

    def unsubscribe(self, listener: BoardListener) -> None:
        if listener in self.listeners:
            self.listeners.remove(listener)

    def _assert_on_board(self, position: Position) -> None:
        """Negative indices would silently wrap around to the other side of the board"""
        if not position.is_within_bounds(self.size):
            raise IndexError(f"{position} is not on a {self.size}x{self.size} board.")

    def _notify(self, changed: list[Position]) -> None:
        # copy: a listener is allowed to unsubscribe itself
        for listener in list(self.listeners):
            listener(changed)
