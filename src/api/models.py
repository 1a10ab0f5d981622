"""Requests and Response models"""

from datetime import datetime, timedelta
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.config import DEFAULT_BOARD_SIZE, MIN_BOARD_SIZE
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import PlayerName, Status


# --- REQUEST MODELS ---
class StartGameRequest(BaseModel):
    player_1_name: PlayerName
    player_2_name: PlayerName
    board_size: int = DEFAULT_BOARD_SIZE

    @field_validator("player_1_name", "player_2_name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise InvalidRequestError("Player name cannot be empty.")
        return name

    @field_validator("board_size")
    @classmethod
    def validate_board_size(cls, value: int) -> int:
        if value < MIN_BOARD_SIZE:
            raise InvalidRequestError(
                f"Board size must be at least {MIN_BOARD_SIZE}, got {value}."
            )
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID


class MoveRequest(BaseModel):
    """Row and column are NOT checked against the board here. Out of range cells are simply illegal moves."""

    game_id: UUID
    row: int
    col: int


class EndGameRequest(BaseModel):
    game_id: UUID


class SaveResultRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    players: dict[str, PlayerName]
    board: str
    current_player: PlayerName
    last_move_legal: bool
    turn_count: int
    status: Status
    winner: PlayerName | None = None


class LegalMovesResponse(BaseModel):
    game_id: UUID
    player_name: PlayerName
    legal_moves: list[tuple[int, int]]


class GameResultResponse(BaseModel):
    player_1_name: PlayerName
    player_2_name: PlayerName
    status: Status
    number_of_turns: int
    created: datetime
    duration: timedelta
