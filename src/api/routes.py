"""HTTP routes: the page, and the JSON endpoints it calls on 'start game' and 'column clicked'."""

from pathlib import Path
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import FileResponse

from src.api.models import (
    ColumnClick,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    MoveResponse,
    StartGameRequest,
)
from src.core.exceptions import RepositoryError
from src.services.connect_four_service import ConnectFourService

STATIC_DIR = Path(__file__).resolve().parent / "static"

router = APIRouter()


def get_service(request: Request) -> ConnectFourService:
    return request.app.state.service


@router.get("/", include_in_schema=False)
def index() -> FileResponse:
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")


@router.post("/games", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
def create_game(
    body: StartGameRequest, service: ConnectFourService = Depends(get_service)
) -> GameResponse:
    # a new game always gets a fresh id, whatever the body says
    request = body.model_copy(update={"game_id": None})
    return service.start_game(request)


@router.post("/games/{game_id}/start", response_model=GameResponse)
def restart_game(
    game_id: UUID,
    body: StartGameRequest,
    service: ConnectFourService = Depends(get_service),
) -> GameResponse:
    request = body.model_copy(update={"game_id": game_id})
    try:
        return service.start_game(request)
    except RepositoryError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/games/{game_id}", response_model=GameResponse)
def get_game(
    game_id: UUID, service: ConnectFourService = Depends(get_service)
) -> GameResponse:
    try:
        return service.get_game_state(GetGameRequest(game_id=game_id))
    except RepositoryError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/games/{game_id}/moves", response_model=MoveResponse)
def play_column(
    game_id: UUID,
    body: ColumnClick,
    service: ConnectFourService = Depends(get_service),
) -> MoveResponse:
    try:
        return service.play_column(MoveRequest(game_id=game_id, column=body.column))
    except RepositoryError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/games/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(
    game_id: UUID, service: ConnectFourService = Depends(get_service)
) -> Response:
    try:
        service.delete_game(DeleteGameRequest(game_id=game_id))
    except RepositoryError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
