"""The two players and their display colors"""

from dataclasses import dataclass

from src.core.shared_types import PlayerId

GAME_OVER_MESSAGES: dict[PlayerId, str] = {
    PlayerId.ONE: "Player 1 won!",
    PlayerId.TWO: "Player 2 won!",
}


@dataclass(frozen=True)
class Player:
    id: PlayerId
    color: str


def other(player: PlayerId) -> PlayerId:
    return PlayerId.TWO if player == PlayerId.ONE else PlayerId.ONE


def pick_color(requested: str | None, default: str) -> str:
    """Use the color the user supplied, unless it is missing or blank."""
    if requested is None or not requested.strip():
        return default
    return requested.strip()


# Colors used when the start form leaves a color blank (seat ONE, seat TWO)
DEFAULT_COLORS = ("red", "gold")
