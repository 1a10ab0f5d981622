"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The Service builds a result record once a game has ended and hands it to the repository,
so the db layer never needs to know about the Game itself.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from src.core.shared_types import PlayerName, Status


@dataclass(frozen=True)
class GameResultModel:
    """Immutable record of a finished game. Assembled by the Service right after the final move."""

    player_1_name: PlayerName
    player_2_name: PlayerName
    status: Status
    number_of_turns: int
    created: datetime
    duration: timedelta

    @property
    def winner(self) -> PlayerName | None:
        if self.status == Status.PLAYER_1_WINS:
            return self.player_1_name
        if self.status == Status.PLAYER_2_WINS:
            return self.player_2_name
        return None
