"""
Move validation.

A move is legal when the piece takes a single step along a line of the board onto an empty point.
Hounds can never move backwards (towards rank 0). The hare has no such restriction.

Turn order is checked by Game before anything in here gets called.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Self

from src.core.exceptions import IllegalMoveError
from src.core.shared_types import PieceKind
from src.hareandhounds.pieces import Piece
from src.hareandhounds.square import Position
from src.hareandhounds.topology import is_single_step, neighbours


class Board(Protocol):
    """Just the parts the validator needs"""

    def piece_at(self, position: Position) -> Optional[Piece]: ...
    def is_occupied(self, position: Position) -> bool: ...
    def locate(self, kind: PieceKind) -> list[Position]: ...


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_position: Position
    to_position: Position

    @classmethod
    def from_coordinates(
        cls, from_rank: int, from_file: int, to_rank: int, to_file: int
    ) -> Self:
        return cls(Position(from_rank, from_file), Position(to_rank, to_file))

    def to_notation(self) -> str:
        """ex) '0111': from (0, 1) to (1, 1)"""
        return f"{self.from_position.to_notation()}{self.to_position.to_notation()}"

    @property
    def is_backwards(self) -> bool:
        """Towards rank 0"""
        return self.to_position.rank < self.from_position.rank


def validate_move(board: Board, kind: PieceKind, move: Move) -> None:
    """
    Raise IllegalMoveError if the player moving the `kind` pieces is not allowed to make this move.
    ----

    1. Both points must be part of the board.
    2. One of your own pieces must be standing on the from-position.
    3. Hounds cannot move backwards.
    4. The destination must be empty.
    5. The move must be a single step along a line of the board.
    """
    if not (move.from_position.is_board_node() and move.to_position.is_board_node()):
        raise IllegalMoveError(f"Move {move.to_notation()} leaves the board.")

    moving_piece = board.piece_at(move.from_position)
    if moving_piece is None or moving_piece.kind != kind:
        raise IllegalMoveError(
            f"No {kind.lower()} to move on {move.from_position.to_notation()}."
        )

    if kind == PieceKind.HOUND and move.is_backwards:
        raise IllegalMoveError("Hounds cannot move backwards.")

    if board.is_occupied(move.to_position):
        raise IllegalMoveError(
            f"Destination {move.to_position.to_notation()} is occupied."
        )

    if not is_single_step(move.from_position, move.to_position):
        raise IllegalMoveError(f"Move {move.to_notation()} is not a single step.")


def is_legal_move(board: Board, kind: PieceKind, move: Move) -> bool:
    try:
        validate_move(board, kind, move)
    except IllegalMoveError:
        return False
    return True


def legal_moves(board: Board, kind: PieceKind) -> list[Move]:
    """Every move the player with the `kind` pieces could make right now"""
    candidate_moves = [
        Move(from_position=square, to_position=target)
        for square in board.locate(kind)
        for target in neighbours(square)
    ]
    return [move for move in candidate_moves if is_legal_move(board, kind, move)]
