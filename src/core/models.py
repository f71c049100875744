"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and the domain/db layers (lower) use the model defined here to send to/receive from the Service.
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
CellValue = Optional[str]
Seat = str
DisplayColor = str


@dataclass
class GameModel:
    """Transport-safe representation of a Connect Four session used between API, Service, DB, and Game layers."""

    board: list[list[CellValue]]
    players: dict[Seat, DisplayColor]
    active_player: Optional[str]
    status: str
    moves: list[int] = field(default_factory=list)
    winning_line: list[tuple[int, int]] = field(default_factory=list)
