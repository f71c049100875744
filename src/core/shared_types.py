"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    NOT_STARTED = "not started"
    IN_PROGRESS = "in progress"
    PLAYER_ONE_WON = "player one won"
    PLAYER_TWO_WON = "player two won"
    TIE = "tie"


class PlayerId(StrEnum):
    ONE = "one"
    TWO = "two"


class Rejection(StrEnum):
    """Reason a start/move request was ignored. Names mirror the exception taxonomy."""

    INVALID_COLUMN = "invalid column"
    COLUMN_FULL = "column full"
    GAME_NOT_IN_PROGRESS = "game not in progress"
    MISSING_PLAYER_IDENTITY = "missing player identity"
    CELL_OCCUPIED = "cell occupied"
