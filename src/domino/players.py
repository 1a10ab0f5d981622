"""Defines who owns a cell / whose turn it is"""

from enum import Enum, auto


class PlayerMark(Enum):
    NONE = auto()
    PLAYER_1 = auto()
    PLAYER_2 = auto()

    def opponent(self) -> "PlayerMark":
        if self == PlayerMark.NONE:
            raise ValueError("An empty cell has no opponent.")
        return PlayerMark.PLAYER_2 if self == PlayerMark.PLAYER_1 else PlayerMark.PLAYER_1

MARK_TO_GLYPH: dict[PlayerMark, str] = {
    PlayerMark.NONE: ".",
    PlayerMark.PLAYER_1: "X",
    PlayerMark.PLAYER_2: "O",
}

GLYPH_TO_MARK: dict[str, PlayerMark] = {value: key for key, value in MARK_TO_GLYPH.items()}
