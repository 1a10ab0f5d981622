"""Exceptions shared by all layers. Illegal moves are NOT in here: the engine reports those through a flag."""


class GameError(Exception):
    """Base class for everything this application raises on purpose."""


class ConfigurationError(GameError):
    """Settings that would leave the game unplayable (ex. a board too small to fit a single domino)."""


class GameStateError(GameError):
    """Request does not fit the state the game/session is in."""


class InvalidRequestError(GameError):
    """Input from outside could not be interpreted."""


class MoveFormatError(InvalidRequestError):
    """A line of text is not of the form '<row> <col>'."""


class SessionNotFoundError(GameError):
    """No running game session with the requested ID."""


class RepositoryError(GameError):
    """Persistence layer could not store / remove the requested record."""
