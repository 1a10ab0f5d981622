"""
The Game class will be the entrypoint into the domain layer for the service layer (and the console front-end).
It is responsible for all the rules of playing a turn: which placements are legal, applying them, whose turn it is,
and whether the game has ended.

Illegal moves are not errors here: a move attempt that breaks the rules simply does not happen,
and `last_move_legal` is set to False. Callers should check that flag after every `make_move`.
"""

import logging
from dataclasses import dataclass
from typing import Self

from src.core.config import DEFAULT_BOARD_SIZE, validate_board_size
from src.core.shared_types import Status
from src.domino.board import Board
from src.domino.moves import Domino
from src.domino.observable import BoardListener, CellProperty
from src.domino.players import PlayerMark
from src.domino.position import Position

logger = logging.getLogger(__name__)

WINNING_STATUS: dict[PlayerMark, Status] = {
    PlayerMark.PLAYER_1: Status.PLAYER_1_WINS,
    PlayerMark.PLAYER_2: Status.PLAYER_2_WINS,
}


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    current_player: PlayerMark
    last_move_legal: bool
    turn_count: int
    moves: list[Domino]

    @classmethod
    def new_game(cls, size: int = DEFAULT_BOARD_SIZE) -> Self:
        """Empty board, Player 1 to move."""
        validate_board_size(size)
        return cls(
            board=Board.empty(size),
            current_player=PlayerMark.PLAYER_1,
            last_move_legal=True,
            turn_count=0,
            moves=[],
        )

    @property
    def size(self) -> int:
        return self.board.size

    def player_at(self, position: Position) -> PlayerMark:
        return self.board.player_at(position)

    def is_legal_move(self, position: Position) -> bool:
        """
        Can the player to move place their domino with its first half on `position`?
        ----

        * Player 1 (horizontal): `position` and the cell to its right must be on the board and empty.
        * Player 2 (vertical): `position` and the cell below it must be on the board and empty.

        Never changes the state, so it is safe to probe every cell with it.
        """
        return self.board.can_place(self._domino_at(position))

    def make_move(self, position: Position) -> None:
        """
        Attempt to place the current player's domino.
        -----

        1. check legality on the board as it is now (nothing gets written before this check)
        2. not legal? --> only flag it. Board, turn and turn counter stay as they are.
        3. legal? --> mark both cells, count the turn, record the move, pass the turn to the opponent
        """
        if not self.is_legal_move(position):
            self.last_move_legal = False
            logger.debug(
                "Illegal move by %s at row=%d, col=%d",
                self.current_player.name,
                position.row,
                position.col,
            )
            return

        domino = self._domino_at(position)
        self.board.place_domino(domino)
        self.last_move_legal = True
        self.turn_count += 1
        self.moves.append(domino)
        self.current_player = self.current_player.opponent()
        logger.debug(
            "Move %d: %s placed a domino on %s",
            self.turn_count,
            domino.mark.name,
            domino.cells(),
        )

        if self.is_game_over():
            logger.info(
                "Game over after %d turns: %s", self.turn_count, self.status.value
            )

    def legal_moves(self) -> list[Position]:
        """Every cell the player to move could place the first half of their domino on (row-major order)."""
        return [
            position for position in self.board.positions() if self.is_legal_move(position)
        ]

    # --- CHECKS FOR ENDING THE GAME ---
    def is_game_over(self) -> bool:
        """The game ends as soon as the player to move is stuck. (Even if the opponent could still place a domino: there is no passing.)"""
        return not any(
            self.is_legal_move(position) for position in self.board.positions()
        )

    @property
    def status(self) -> Status:
        """
        The player who cannot move loses. So given we know the game is over, the player to move got stuck and the opponent is the winner.
        """
        if not self.is_game_over():
            return Status.IN_PROGRESS
        return WINNING_STATUS[self.current_player.opponent()]

    def is_winner(self, player: PlayerMark) -> bool:
        return WINNING_STATUS.get(player) == self.status

    # --- observers ---
    def cell(self, position: Position) -> CellProperty:
        """Observable handle on a single cell, for front-ends that repaint per cell."""
        return self.board.cell(position)

    def subscribe(self, listener: BoardListener) -> None:
        """listener(changed_positions) is called after every legal move."""
        self.board.subscribe(listener)

    def to_text(self) -> str:
        return self.board.to_text()

    def __str__(self) -> str:
        return self.to_text()

    # -- PRIVATE HELPERS ---
    def _domino_at(self, position: Position) -> Domino:
        return Domino(anchor=position, mark=self.current_player)
