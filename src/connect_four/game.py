"""
The Game class is the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating the business logic required to play a turn:
find the landing row, place the piece, check for a win or a tie, and hand the turn to the other player.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.connect_four.board import BOARD_DIMENSIONS, Board
from src.connect_four.players import (
    DEFAULT_COLORS,
    GAME_OVER_MESSAGES,
    Player,
    PlayerId,
    other,
    pick_color,
)
from src.connect_four.win import Coordinate, winning_line
from src.core.exceptions import (
    ColumnFullError,
    GameNotInProgressError,
    GameStateError,
    InvalidColumnError,
    MissingPlayerIdentityError,
)
from src.core.models import GameModel
from src.core.shared_types import Status

logger = logging.getLogger(__name__)

TIE_MESSAGE = "Tie!"

FINISHED_STATUSES = (Status.PLAYER_ONE_WON, Status.PLAYER_TWO_WON, Status.TIE)

WIN_STATUS: dict[PlayerId, Status] = {
    PlayerId.ONE: Status.PLAYER_ONE_WON,
    PlayerId.TWO: Status.PLAYER_TWO_WON,
}


@dataclass(frozen=True)
class Placement:
    """Where a piece landed, and whose it is."""

    row: int
    column: int
    player: Player


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    players: dict[PlayerId, Player]
    active: Optional[PlayerId]
    status: Status
    moves: list[int] = field(default_factory=list)
    winning_line: list[Coordinate] = field(default_factory=list)

    @classmethod
    def new_game(
        cls, height: int = BOARD_DIMENSIONS[0], width: int = BOARD_DIMENSIONS[1]
    ) -> Self:
        """A session waiting for someone to press start."""
        return cls(
            board=Board.empty(height, width),
            players={},
            active=None,
            status=Status.NOT_STARTED,
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        try:
            status = Status(model.status)
        except ValueError:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(Status)}"
            ) from None

        players = {
            player_id: Player(player_id, model.players[player_id.value])
            for player_id in PlayerId
            if player_id.value in model.players
        }
        active = PlayerId(model.active_player) if model.active_player else None

        return cls(
            board=Board.from_rows(model.board),
            players=players,
            active=active,
            status=status,
            moves=list(model.moves),
            winning_line=[tuple(coordinate) for coordinate in model.winning_line],
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            board=self.board.to_rows(),
            players={
                player_id.value: player.color
                for player_id, player in self.players.items()
            },
            active_player=self.active.value if self.active else None,
            status=self.status.value,
            moves=list(self.moves),
            winning_line=list(self.winning_line),
        )

    @property
    def is_finished(self) -> bool:
        return self.status in FINISHED_STATUSES

    @property
    def active_player(self) -> Optional[Player]:
        if self.active is None:
            return None
        return self.players.get(self.active)

    @property
    def game_over_message(self) -> Optional[str]:
        """Human readable summary once the game is over, None while it is not."""
        if self.status == Status.TIE:
            return TIE_MESSAGE
        for player_id, status in WIN_STATUS.items():
            if self.status == status:
                return GAME_OVER_MESSAGES[player_id]
        return None

    def start(
        self,
        player_one_color: Optional[str] = None,
        player_two_color: Optional[str] = None,
        default_colors: tuple[str, str] = DEFAULT_COLORS,
    ) -> None:
        """
        (Re)start the game. Allowed from any state.
        ----

        1. create both players (blank colors fall back to the defaults)
        2. clear the board, keeping its dimensions
        3. player ONE moves first
        """
        self.players = {
            PlayerId.ONE: Player(
                PlayerId.ONE, pick_color(player_one_color, default_colors[0])
            ),
            PlayerId.TWO: Player(
                PlayerId.TWO, pick_color(player_two_color, default_colors[1])
            ),
        }
        self.board = Board.empty(self.board.height, self.board.width)
        self.moves = []
        self.winning_line = []
        self.active = PlayerId.ONE
        self._change_status(Status.IN_PROGRESS)
        logger.info(
            "Game started: player 1 %s, player 2 %s",
            self.players[PlayerId.ONE].color,
            self.players[PlayerId.TWO].color,
        )

    def apply_move(self, column: int) -> Placement:
        """
        Drop the active player's piece in `column`
        -----

        1. reject if not in progress / column invalid / column full (nothing changes)
        2. place the piece in the lowest empty row
        3. win? --> finished, the active player won
        4. board full? --> finished, tie
        5. otherwise the other player is up
        """
        # make sure the game is (still) in progress
        if self.status != Status.IN_PROGRESS:
            raise GameNotInProgressError(
                f"Game is not in progress. status: {self.status}"
            )

        player = self._get_active_player()

        if not self.board.is_valid_column(column):
            raise InvalidColumnError(
                f"Column {column} is not on the board (0 - {self.board.width - 1})."
            )

        row = self.board.lowest_empty_row(column)
        if row is None:
            raise ColumnFullError(f"Column {column} is full.")

        self.board.place(row, column, player.id)
        self.moves.append(column)
        logger.debug("Player %s dropped a piece at (%s, %s)", player.id, row, column)

        self._update_game_status(player.id)
        return Placement(row=row, column=column, player=player)

    # -- PRIVATE HELPERS ---
    def _get_active_player(self) -> Player:
        player = self.active_player
        if player is None:
            raise MissingPlayerIdentityError(
                "There is no active player. Start the game first."
            )
        return player

    def _update_game_status(self, mover: PlayerId) -> None:
        """Performs checks to see if the game has ended and changes status accordingly. Otherwise, switch turns."""
        line = winning_line(self.board, mover)
        if line is not None:
            self.winning_line = line
            self._change_status(WIN_STATUS[mover])
        elif self.board.is_full():
            self._change_status(Status.TIE)
        else:
            self.active = other(mover)

        if self.is_finished:
            logger.info("Game over: %s", self.game_over_message)

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status
