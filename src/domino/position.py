"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Row and column, both 0-indexed. Row 0 is the top row when the board is printed."""

    row: int
    col: int

    def is_within_bounds(self, size: int) -> bool:
        return (0 <= self.row < size) and (0 <= self.col < size)

    def offset(self, d_row: int, d_col: int) -> "Position":
        return Position(self.row + d_row, self.col + d_col)
