"""Orchestration of communication from API router to business logic and the session store (and the reverse direction)."""

import logging
from dataclasses import asdict
from typing import Optional
from uuid import UUID

from src.api.models import (
    DeleteGameRequest,
    EventResponse,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    MoveResponse,
    StartGameRequest,
)
from src.connect_four.game import Game
from src.core.config import Settings, get_settings
from src.core.exceptions import (
    CellOccupiedError,
    ColumnFullError,
    GameError,
    GameNotInProgressError,
    InvalidColumnError,
    MissingPlayerIdentityError,
    RepositoryError,
)
from src.core.models import GameModel
from src.core.shared_types import Rejection
from src.db.repository import GameRepository
from src.services.presentation import (
    GameOver,
    PiecePlaced,
    PresentationEvent,
    ResetBoardView,
)

logger = logging.getLogger(__name__)

REJECTIONS: dict[type[GameError], Rejection] = {
    InvalidColumnError: Rejection.INVALID_COLUMN,
    ColumnFullError: Rejection.COLUMN_FULL,
    GameNotInProgressError: Rejection.GAME_NOT_IN_PROGRESS,
    MissingPlayerIdentityError: Rejection.MISSING_PLAYER_IDENTITY,
    CellOccupiedError: Rejection.CELL_OCCUPIED,
}


class ConnectFourService:
    """Orchestration of layers for Connect Four."""

    def __init__(
        self, repository: GameRepository, settings: Optional[Settings] = None
    ) -> None:
        self.repo = repository
        self.settings = settings or get_settings()

    # -- API routes logic ---
    def start_game(self, request: StartGameRequest) -> GameResponse:
        """The start button got pressed: create a new game, or restart the given one."""

        if request.game_id is None:
            game = Game.new_game(
                height=self.settings.board_height, width=self.settings.board_width
            )
        else:
            game = Game.from_model(self._fetch_game(request.game_id))

        game.start(
            request.player_one_color,
            request.player_two_color,
            default_colors=(
                self.settings.player_one_color,
                self.settings.player_two_color,
            ),
        )
        started = game.to_model()

        if request.game_id is None:
            started, game_id = self.repo.create_game(started)
        else:
            game_id = request.game_id
            self.repo.update_game(game_id, started)

        return self._create_game_response(game_id, started, [ResetBoardView()])

    def play_column(self, request: MoveRequest) -> MoveResponse:
        """
        A column got clicked.
        ----

        Rule violations (full column, game over, ...) are not errors for the player: the click is ignored,
        the stored game stays as it was and the response says why nothing happened.
        """
        stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model)

        try:
            placement = game.apply_move(request.column)
        except GameError as e:
            rejection = REJECTIONS.get(type(e))
            if rejection is None:
                raise
            logger.info(
                "Ignored click on column %s for game %s: %s",
                request.column,
                request.game_id,
                e,
            )
            return self._create_move_response(
                request.game_id, stored_model, [], rejection=rejection
            )

        events: list[PresentationEvent] = [PiecePlaced.from_placement(placement)]
        if game.game_over_message is not None:
            events.append(GameOver(game.game_over_message))

        after_move = game.to_model()
        self.repo.update_game(request.game_id, after_move)
        return self._create_move_response(request.game_id, after_move, events)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state (e.g. when the page gets reloaded)."""
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model, [])

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to drop a session."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")

    # -- Internal helpers --
    def _create_game_response(
        self, game_id: UUID, model: GameModel, events: list[PresentationEvent]
    ) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        return GameResponse(**self._response_fields(game_id, model, events))

    def _create_move_response(
        self,
        game_id: UUID,
        model: GameModel,
        events: list[PresentationEvent],
        rejection: Optional[Rejection] = None,
    ) -> MoveResponse:
        return MoveResponse(
            **self._response_fields(game_id, model, events),
            accepted=rejection is None,
            rejection=rejection,
        )

    def _response_fields(
        self, game_id: UUID, model: GameModel, events: list[PresentationEvent]
    ) -> dict:
        game = Game.from_model(model)
        return {
            "game_id": game_id,
            "status": game.status,
            "players": model.players,
            "active_player": game.active,
            "board": model.board,
            "move_history": model.moves,
            "winning_line": model.winning_line,
            "message": game.game_over_message,
            "events": [EventResponse(**asdict(event)) for event in events],
        }

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
