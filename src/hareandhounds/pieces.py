"""Defines the pieces: one hare and three hounds"""

from dataclasses import dataclass, replace
from typing import Self

from src.core.shared_types import PieceKind
from src.hareandhounds.square import Position


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    position: Position

    def moved_to(self, position: Position) -> Self:
        return replace(self, position=position)


# Hare first, then the hounds. The board keeps this order for the lifetime of a game.
STARTING_PIECES: tuple[Piece, ...] = (
    Piece(PieceKind.HARE, Position(4, 1)),
    Piece(PieceKind.HOUND, Position(0, 1)),
    Piece(PieceKind.HOUND, Position(1, 0)),
    Piece(PieceKind.HOUND, Position(1, 2)),
)

NUMBER_OF_HOUNDS = 3
