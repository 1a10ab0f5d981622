"""
Placement rules.

Every player always places the same kind of domino:
* Player 1 lays it horizontally: the chosen cell + the cell to its right
* Player 2 stands it up vertically: the chosen cell + the cell below it
"""

from dataclasses import dataclass

from src.domino.players import PlayerMark
from src.domino.position import Position

# (row offset, column offset) of the second cell of the domino, relative to the chosen cell
ORIENTATION_RULES: dict[PlayerMark, tuple[int, int]] = {
    PlayerMark.PLAYER_1: (0, 1),
    PlayerMark.PLAYER_2: (1, 0),
}


@dataclass(frozen=True)
class Domino:
    """The chosen (anchor) cell plus the player placing it. The orientation follows from the player."""

    anchor: Position
    mark: PlayerMark

    @property
    def partner(self) -> Position:
        d_row, d_col = ORIENTATION_RULES[self.mark]
        return self.anchor.offset(d_row, d_col)

    def cells(self) -> tuple[Position, Position]:
        return self.anchor, self.partner

    def fits_on(self, size: int) -> bool:
        """Both halves must lie on the board. Checked before reading any cell."""
        return all(cell.is_within_bounds(size) for cell in self.cells())
