"""
Play the game in a terminal.

Moves are typed as two whole numbers separated by whitespace: `<row> <col>`.
The cell typed in is where the first half of the domino goes. The second half goes to the right (Player 1)
or below (Player 2).
"""

import logging
import re
from typing import Callable

from src.core.config import Settings, configure_logging
from src.core.exceptions import MoveFormatError
from src.core.shared_types import Status
from src.domino.game import Game
from src.domino.players import PlayerMark
from src.domino.position import Position

logger = logging.getLogger(__name__)

# ASCII only: "\d" would also accept digits from other scripts
MOVE_PATTERN = re.compile(r"\d+\s+\d+", re.ASCII)

PLAYER_LABELS: dict[PlayerMark, str] = {
    PlayerMark.PLAYER_1: "Player 1 (X, horizontal)",
    PlayerMark.PLAYER_2: "Player 2 (O, vertical)",
}


def parse_move(text: str) -> Position:
    """
    Convert a line like '2 3' into Position(2, 3).

    The board size is not checked here. An out of range cell is passed on and rejected by the Game as an illegal move.
    """
    stripped = text.strip()
    if not MOVE_PATTERN.fullmatch(stripped):
        raise MoveFormatError(
            f"Cannot interpret {text!r} as a move. Expected two numbers: <row> <col>"
        )
    row, col = stripped.split()
    return Position(int(row), int(col))


class ConsoleGame:
    """Read moves from `input_fn` until the game is over. Output goes through `output_fn`."""

    def __init__(
        self,
        game: Game,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.game = game
        self.input_fn = input_fn
        self.output_fn = output_fn

    def start(self) -> Status:
        while not self.game.is_game_over():
            self.output_fn(self.game.to_text())
            self._play_turn()

        self.output_fn(self.game.to_text())
        status = self.game.status
        self.output_fn(f"Game over after {self.game.turn_count} turns: {status.value}")
        return status

    def _play_turn(self) -> None:
        """Keep asking the same player until they enter a legal move"""
        player = self.game.current_player
        while True:
            line = self.input_fn(f"{PLAYER_LABELS[player]} > ")
            try:
                position = parse_move(line)
            except MoveFormatError as e:
                logger.debug("Rejected input %r", line)
                self.output_fn(str(e))
                continue

            self.game.make_move(position)
            if self.game.last_move_legal:
                return
            self.output_fn(
                f"Illegal move at row={position.row}, col={position.col}. Try again."
            )


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings)
    game = Game.new_game(settings.board_size)
    try:
        ConsoleGame(game).start()
    except (EOFError, KeyboardInterrupt):
        logger.info("Game aborted after %d turns", game.turn_count)


if __name__ == "__main__":
    main()
