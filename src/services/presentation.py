"""
Presentation boundary.

The core never draws anything. It records what the view should do as plain events,
and any PresentationAdapter (the browser page, a test double, ...) can be fed those events.
"""

from dataclasses import dataclass
from typing import Literal, Protocol, Union

from src.connect_four.game import Placement


class PresentationAdapter(Protocol):
    """What a rendering surface must be able to do."""

    def reset_board_view(self) -> None:
        """Clear the grid. Called when a new game starts, before any piece gets rendered."""
        ...

    def render_piece(self, row: int, column: int, color: str) -> None:
        """Show a newly dropped piece."""
        ...

    def render_game_over(self, message: str) -> None:
        """Announce the end of the game ("Player 1 won!", "Player 2 won!", "Tie!")."""
        ...


@dataclass(frozen=True)
class ResetBoardView:
    kind: Literal["reset_board_view"] = "reset_board_view"


@dataclass(frozen=True)
class PiecePlaced:
    row: int
    column: int
    color: str
    kind: Literal["piece_placed"] = "piece_placed"

    @classmethod
    def from_placement(cls, placement: Placement) -> "PiecePlaced":
        return cls(placement.row, placement.column, placement.player.color)


@dataclass(frozen=True)
class GameOver:
    message: str
    kind: Literal["game_over"] = "game_over"


PresentationEvent = Union[ResetBoardView, PiecePlaced, GameOver]


def replay(events: list[PresentationEvent], adapter: PresentationAdapter) -> None:
    """Dispatch recorded events, in order, to a rendering surface."""
    for event in events:
        if isinstance(event, ResetBoardView):
            adapter.reset_board_view()
        elif isinstance(event, PiecePlaced):
            adapter.render_piece(event.row, event.column, event.color)
        elif isinstance(event, GameOver):
            adapter.render_game_over(event.message)
