"""
Text notation of a board, used to persist a game.

<hare>/<hound>/<hound>/<hound>

Every square is written as two digits: rank then file.
ex) the starting position is written as
41/01/10/12
i.e. the hare stands on rank 4 / file 1, and the hounds on (0, 1), (1, 0) and (1, 2).

The hounds are written in the order they are stored in, so a board read back from its notation lists its pieces
in exactly the same order as before.
"""

from src.core.exceptions import GameStateError
from src.core.shared_types import PieceKind
from src.hareandhounds.pieces import NUMBER_OF_HOUNDS, Piece
from src.hareandhounds.square import Position

SEPARATOR = "/"


def board_to_notation(pieces: list[Piece]) -> str:
    hare = [piece for piece in pieces if piece.kind == PieceKind.HARE]
    hounds = [piece for piece in pieces if piece.kind == PieceKind.HOUND]
    return SEPARATOR.join(piece.position.to_notation() for piece in hare + hounds)


def board_from_notation(notation: str) -> list[Piece]:
    squares = notation.strip().split(SEPARATOR)
    if len(squares) != 1 + NUMBER_OF_HOUNDS:
        raise GameStateError(
            f"Board notation {notation!r} must list {1 + NUMBER_OF_HOUNDS} squares."
        )

    try:
        positions = [Position.from_notation(square) for square in squares]
    except ValueError as exc:
        raise GameStateError(f"Invalid board notation {notation!r}: {exc}") from exc

    if len(set(positions)) != len(positions):
        raise GameStateError(f"Two pieces share a square in {notation!r}.")
    if not all(position.is_board_node() for position in positions):
        raise GameStateError(f"Board notation {notation!r} leaves the board.")

    hare, *hounds = positions
    return [Piece(PieceKind.HARE, hare)] + [
        Piece(PieceKind.HOUND, hound) for hound in hounds
    ]
