"""REST endpoints. Thin layer: parse the request, hand it to the GameService, return its response."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status

from src.api.models import (
    BoardResponse,
    CreateGameRequest,
    DeleteGameRequest,
    GameInfoResponse,
    GameStateResponse,
    GetGameRequest,
    JoinGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveResponse,
    TurnRequest,
)
from src.services.game_service import GameService

API_CONTEXT = "/hareandhounds/api/games"

router = APIRouter(prefix=API_CONTEXT, tags=["games"])


def get_service(request: Request) -> GameService:
    """The service gets created once, during startup of the app."""
    return request.app.state.game_service


Service = Annotated[GameService, Depends(get_service)]


@router.post(
    "", response_model=GameInfoResponse, status_code=status.HTTP_201_CREATED
)
def create_game(body: CreateGameRequest, service: Service) -> GameInfoResponse:
    return service.create_new_game(body)


@router.put("/{game_id}", response_model=GameInfoResponse)
def join_game(game_id: int, service: Service) -> GameInfoResponse:
    return service.join_game(JoinGameRequest(game_id=game_id))


@router.get("/{game_id}/state", response_model=GameStateResponse)
def get_game_state(game_id: int, service: Service) -> GameStateResponse:
    return service.get_game_state(GetGameRequest(game_id=game_id))


@router.get("/{game_id}/board", response_model=BoardResponse)
def get_game_board(game_id: int, service: Service) -> BoardResponse:
    return service.get_game_board(GetGameRequest(game_id=game_id))


@router.get("/{game_id}/legal-moves", response_model=LegalMovesResponse)
def get_legal_moves(
    game_id: int, player_id: int, service: Service
) -> LegalMovesResponse:
    return service.legal_moves(LegalMovesRequest(game_id=game_id, player_id=player_id))


@router.post("/{game_id}/turns", response_model=MoveResponse)
def play_turn(game_id: int, body: TurnRequest, service: Service) -> MoveResponse:
    return service.make_move(body.for_game(game_id))


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(game_id: int, service: Service) -> Response:
    service.delete_game(DeleteGameRequest(game_id=game_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
