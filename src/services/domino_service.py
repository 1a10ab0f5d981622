"""Orchestration of communication from the front-end to business logic and persistence layers (and the reverse direction)."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from src.api.models import (
    EndGameRequest,
    GameResponse,
    GameResultResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    SaveResultRequest,
    StartGameRequest,
)
from src.core.exceptions import (
    GameStateError,
    RepositoryError,
    SessionNotFoundError,
)
from src.core.models import GameResultModel
from src.core.shared_types import PlayerName, Status
from src.db.repository import ResultRepository
from src.domino.game import Game
from src.domino.players import PlayerMark
from src.domino.position import Position

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class GameSession:
    """A running game together with the info the engine does not care about (who is playing, since when)."""

    game: Game
    players: dict[PlayerMark, PlayerName]
    started_at: datetime = field(default_factory=utc_now)
    # set once the game is over, cleared when the repository accepted it
    unsaved_result: GameResultModel | None = None

    @property
    def player_to_move(self) -> PlayerName:
        return self.players[self.game.current_player]

    @property
    def winner(self) -> PlayerName | None:
        return next(
            (name for mark, name in self.players.items() if self.game.is_winner(mark)),
            None,
        )


class DominoService:
    """Orchestration of layers for the domino game."""

    def __init__(self, repository: ResultRepository) -> None:
        self.repo = repository
        self.sessions: dict[UUID, GameSession] = {}

    # -- front-end logic ---
    def start_game(self, request: StartGameRequest) -> GameResponse:
        """Both players are known up front: the game starts right away with Player 1 to move."""
        game = Game.new_game(request.board_size)
        session = GameSession(
            game=game,
            players={
                PlayerMark.PLAYER_1: request.player_1_name,
                PlayerMark.PLAYER_2: request.player_2_name,
            },
        )
        game_id = uuid4()
        self.sessions[game_id] = session
        logger.info(
            "Started game %s: %s (Player 1) vs %s (Player 2) on a %dx%d board",
            game_id,
            request.player_1_name,
            request.player_2_name,
            request.board_size,
            request.board_size,
        )
        return self._create_game_response(game_id, session)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        session = self._fetch_session(request.game_id)
        return self._create_game_response(request.game_id, session)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        session = self._fetch_session(request.game_id)
        return LegalMovesResponse(
            game_id=request.game_id,
            player_name=session.player_to_move,
            legal_moves=[(pos.row, pos.col) for pos in session.game.legal_moves()],
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """
        Make a move attempt.
        ----
        An illegal move is not an error: the response simply reports `last_move_legal=False` and the same player is still to move.
        If the move ends the game, the result gets stored. The session stays readable until `end_game`.
        """
        session = self._fetch_session(request.game_id)
        game = session.game
        if game.is_game_over():
            raise GameStateError(f"Game {request.game_id} has already ended.")

        player_name = session.player_to_move
        game.make_move(Position(request.row, request.col))

        if not game.last_move_legal:
            logger.warning(
                "Illegal move attempted by %s at row=%d, col=%d",
                player_name,
                request.row,
                request.col,
            )
            return self._create_game_response(request.game_id, session)

        logger.info(
            "Move made by %s: row=%d, col=%d", player_name, request.row, request.col
        )
        response = self._create_game_response(request.game_id, session)
        if game.is_game_over():
            logger.info("Game %s over. Winner: %s", request.game_id, session.winner)
            session.unsaved_result = self._build_result(session)
            self._store_result(session)
        return response

    def save_result(self, request: SaveResultRequest) -> None:
        """Retry storing the result of a finished game whose result could not be stored at the end of the game."""
        session = self._fetch_session(request.game_id)
        if session.unsaved_result is None:
            raise GameStateError(
                f"Game {request.game_id} has no result waiting to be stored."
            )
        self._store_result(session)

    def end_game(self, request: EndGameRequest) -> None:
        """Discard a session. A game abandoned before it ended is not recorded."""
        self._fetch_session(request.game_id)
        del self.sessions[request.game_id]
        logger.info("Session %s closed", request.game_id)

    def list_results(self) -> list[GameResultResponse]:
        return [
            GameResultResponse(
                player_1_name=result.player_1_name,
                player_2_name=result.player_2_name,
                status=result.status,
                number_of_turns=result.number_of_turns,
                created=result.created,
                duration=result.duration,
            )
            for result in self.repo.list_results()
        ]

    # -- Internal helpers --
    def _build_result(self, session: GameSession) -> GameResultModel:
        ended_at = utc_now()
        return GameResultModel(
            player_1_name=session.players[PlayerMark.PLAYER_1],
            player_2_name=session.players[PlayerMark.PLAYER_2],
            status=session.game.status,
            number_of_turns=session.game.turn_count,
            created=ended_at,
            duration=ended_at - session.started_at,
        )

    def _store_result(self, session: GameSession) -> None:
        """A failing repository does not undo the game. The result stays on the session, so `save_result` can try again."""
        assert session.unsaved_result is not None
        try:
            _, result_id = self.repo.add_result(session.unsaved_result)
        except RepositoryError:
            logger.exception("Failed to save game result")
            return
        session.unsaved_result = None
        logger.info("Game result saved with id %s", result_id)

    def _create_game_response(self, game_id: UUID, session: GameSession) -> GameResponse:
        game = session.game
        status = game.status
        return GameResponse(
            game_id=game_id,
            players={mark.name.lower(): name for mark, name in session.players.items()},
            board=game.to_text(),
            current_player=session.player_to_move,
            last_move_legal=game.last_move_legal,
            turn_count=game.turn_count,
            status=status,
            winner=session.winner if status != Status.IN_PROGRESS else None,
        )

    def _fetch_session(self, game_id: UUID) -> GameSession:
        """Attempt to find the running game and raise error if it fails."""
        session = self.sessions.get(game_id)
        if session is None:
            raise SessionNotFoundError(f"Game with {game_id=} not found.")
        return session
