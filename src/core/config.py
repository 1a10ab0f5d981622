"""
Application settings.

Read from environment variables (a `.env` file in the working directory is loaded first, if present).
"""

import logging
import os
from dataclasses import dataclass
from typing import Self

from dotenv import load_dotenv

from src.core.exceptions import ConfigurationError

DEFAULT_BOARD_SIZE = 8
DEFAULT_DATABASE_URL = "sqlite:///game_results.sqlite3"
DEFAULT_LOG_LEVEL = "INFO"

# smallest board on which a domino can be placed at all
MIN_BOARD_SIZE = 2


def validate_board_size(size: int) -> int:
    """A board of size 1 (or less) cannot hold a single domino. Reject it before a game gets created."""
    if size < MIN_BOARD_SIZE:
        raise ConfigurationError(
            f"Board size must be at least {MIN_BOARD_SIZE}, got {size}."
        )
    return size


@dataclass(frozen=True)
class Settings:
    board_size: int = DEFAULT_BOARD_SIZE
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> Self:
        load_dotenv()

        raw_size = os.getenv("DOMINO_BOARD_SIZE", str(DEFAULT_BOARD_SIZE))
        try:
            board_size = int(raw_size)
        except ValueError as e:
            raise ConfigurationError(
                f"DOMINO_BOARD_SIZE must be an integer, got {raw_size!r}."
            ) from e

        log_level = os.getenv("DOMINO_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if log_level not in logging.getLevelNamesMapping():
            raise ConfigurationError(f"Unknown log level: {log_level!r}")

        return cls(
            board_size=validate_board_size(board_size),
            database_url=os.getenv("DOMINO_DATABASE_URL", DEFAULT_DATABASE_URL),
            log_level=log_level,
        )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
