"""Custom exceptions. Everything the domain raises derives from GameError."""


class GameError(Exception):
    """Top-level exception for anything going wrong while playing."""


class InvalidColumnError(GameError):
    """Column index outside of the board."""


class ColumnFullError(GameError):
    """No empty row left in the requested column."""


class GameNotInProgressError(GameError):
    """Moves are only accepted while the game is in progress."""


class MissingPlayerIdentityError(GameError):
    """There is no active player to make the move."""


class GameStateError(GameError):
    """Session data that does not describe a valid game (e.g. an unknown status)."""


class CellOccupiedError(GameError):
    """Attempt to place a piece on a cell that is already taken."""


class RepositoryError(GameError):
    """Game session could not be found in (or stored to) the repository."""


class InvalidRequestError(ValueError):
    """Request data that cannot be interpreted. Raised from pydantic validators."""
