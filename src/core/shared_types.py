"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    PLAYER_1_WINS = "player 1 wins"
    PLAYER_2_WINS = "player 2 wins"


# Player names are handled by the service and the result records, the engine only knows about marks
PlayerName = str
