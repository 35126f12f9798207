"""Requests and Response models"""

from typing import Any

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import GameState, MoveResult, PieceKind


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    piece_type: PieceKind

    @field_validator("piece_type", mode="before")
    @classmethod
    def validate_piece_type(cls, value: Any) -> str:
        if not isinstance(value, str) or value.strip().upper() not in PieceKind.__members__:
            raise InvalidRequestError(
                f"Cannot create a game with piece type {value!r}. Pick one from {','.join(PieceKind)}."
            )
        return value.strip().upper()


class JoinGameRequest(BaseModel):
    game_id: int


class GetGameRequest(BaseModel):
    game_id: int


class DeleteGameRequest(BaseModel):
    game_id: int


class LegalMovesRequest(BaseModel):
    game_id: int
    player_id: int


class MoveRequest(BaseModel):
    game_id: int
    player_id: int
    from_rank: int
    from_file: int
    to_rank: int
    to_file: int


class TurnRequest(BaseModel):
    """Body of a move posted to the API. The game ID comes from the path."""

    player_id: int
    from_rank: int
    from_file: int
    to_rank: int
    to_file: int

    def for_game(self, game_id: int) -> MoveRequest:
        return MoveRequest(game_id=game_id, **self.model_dump())


# --- RESPONSE MODELS ---
class GameInfoResponse(BaseModel):
    game_id: int
    player_id: int
    piece_type: PieceKind
    state: GameState


class GameStateResponse(BaseModel):
    game_id: int
    state: GameState


class PieceResponse(BaseModel):
    piece_type: PieceKind
    rank: int
    file: int


class BoardResponse(BaseModel):
    game_id: int
    pieces: list[PieceResponse]


class MoveResponse(BaseModel):
    game_id: int
    result: MoveResult
    state: GameState


class LegalMovesResponse(BaseModel):
    game_id: int
    player_id: int
    piece_type: PieceKind
    legal_moves: list[str]


class ErrorResponse(BaseModel):
    reason: str
    detail: str
