"""Exceptions shared across layers."""


class GameError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(GameError):
    """Caller supplied a cell or move index outside the allowed range."""


class InvalidBoardError(GameError):
    """Encoded board string cannot be decoded into a snapshot."""


class GameStateError(GameError):
    """Stored game data does not describe a reachable game."""


class InvalidRequestError(GameError):
    """Request model failed validation at the boundary."""


class RepositoryError(GameError):
    """Requested record is missing from the repository."""
