"""The Game board holds the pieces and implements everything that affects their positions"""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.shared_types import PieceKind
from src.hareandhounds.moves import Move
from src.hareandhounds.notation import board_from_notation, board_to_notation
from src.hareandhounds.pieces import STARTING_PIECES, Piece
from src.hareandhounds.square import Position


@dataclass
class Board:
    """
    Ordered list of the four pieces: the hare, followed by the three hounds.

    The piece list is the only state. Occupancy is always computed from it.
    """

    pieces: list[Piece]

    @classmethod
    def starting_position(cls) -> Self:
        return cls(list(STARTING_PIECES))

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        return cls(board_from_notation(notation))

    def to_notation(self) -> str:
        return board_to_notation(self.pieces)

    @property
    def hare(self) -> Piece:
        return next(piece for piece in self.pieces if piece.kind == PieceKind.HARE)

    @property
    def hounds(self) -> list[Piece]:
        return [piece for piece in self.pieces if piece.kind == PieceKind.HOUND]

    def occupied_positions(self) -> frozenset[Position]:
        return frozenset(piece.position for piece in self.pieces)

    def is_occupied(self, position: Position) -> bool:
        return position in self.occupied_positions()

    def are_all_occupied(self, positions: tuple[Position, ...]) -> bool:
        occupied = self.occupied_positions()
        return all(position in occupied for position in positions)

    def piece_at(self, position: Position) -> Optional[Piece]:
        return next(
            (piece for piece in self.pieces if piece.position == position), None
        )

    def locate(self, kind: PieceKind) -> list[Position]:
        return [piece.position for piece in self.pieces if piece.kind == kind]

    def move_piece(self, move: Move) -> None:
        """Relocate the piece standing on the from-position. Keeps the piece order intact."""
        for idx, piece in enumerate(self.pieces):
            if piece.position == move.from_position:
                self.pieces[idx] = piece.moved_to(move.to_position)
                return
        raise ValueError(f"No piece to move on {move.from_position}")
