"""Requests and Response models"""

import re
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import PlayerId, Rejection, Status

Seat = str
DisplayColor = str

# named colors ("red"), hex ("#ff0000") and functional notation ("rgb(255, 0, 0)")
_COLOR_PATTERN = re.compile(r"^[#a-zA-Z0-9(),.% ]+$")


# --- REQUEST MODELS ---
class StartGameRequest(BaseModel):
    """Press on the start button. Without a game_id a brand new game gets created."""

    game_id: Optional[UUID] = None
    player_one_color: Optional[str] = None
    player_two_color: Optional[str] = None

    @field_validator(*["player_one_color", "player_two_color"])
    @classmethod
    def validate_color(cls, value: Optional[str]) -> Optional[str]:
        # blank means: fall back to the default color for that seat
        if value is None or not value.strip():
            return None

        value = value.strip()
        if len(value) > 32 or not _COLOR_PATTERN.match(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a display color."
            )
        return value


class ColumnClick(BaseModel):
    """Body of the request the page sends when a column header gets clicked."""

    column: int


class MoveRequest(BaseModel):
    game_id: UUID
    column: int


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class EventResponse(BaseModel):
    """Instruction for the page: clear the grid, draw a piece, or announce the result."""

    kind: Literal["reset_board_view", "piece_placed", "game_over"]
    row: Optional[int] = None
    column: Optional[int] = None
    color: Optional[str] = None
    message: Optional[str] = None


class GameResponse(BaseModel):
    game_id: UUID
    status: Status
    players: dict[Seat, DisplayColor]
    active_player: Optional[PlayerId]
    board: list[list[Optional[PlayerId]]]
    move_history: list[int]
    winning_line: list[tuple[int, int]]
    message: Optional[str]
    events: list[EventResponse] = []


class MoveResponse(GameResponse):
    accepted: bool
    rejection: Optional[Rejection] = None
