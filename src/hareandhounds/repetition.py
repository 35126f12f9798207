"""
Bookkeeping for the stalling rule: the same board position occurring three times means the hounds are stalling.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Protocol, Self

from src.core.exceptions import GameStateError
from src.hareandhounds.pieces import Piece

STALLING_REPETITIONS = 3

Fingerprint = str


class Board(Protocol):
    @property
    def hare(self) -> Piece: ...
    @property
    def hounds(self) -> list[Piece]: ...


def fingerprint(board: Board) -> Fingerprint:
    """
    Canonical key of a board position.

    The hounds are interchangeable, so their squares get sorted first. The hare's square is appended last.
    ex) '01_10_12_41' for the starting position.
    """
    hound_squares = sorted(hound.position for hound in board.hounds)
    squares = [square.to_notation() for square in hound_squares]
    squares.append(board.hare.position.to_notation())
    return "_".join(squares)


@dataclass
class RepetitionLedger:
    """How many times each board position occurred. Positions are only ever added, never removed."""

    counts: Counter[Fingerprint] = field(default_factory=Counter)

    @classmethod
    def from_counts(cls, counts: dict[Fingerprint, int]) -> Self:
        if any(count < 1 for count in counts.values()):
            raise GameStateError(f"Repetition counts must be positive: {counts}")
        return cls(Counter(counts))

    def to_counts(self) -> dict[Fingerprint, int]:
        return dict(self.counts)

    def record(self, board: Board) -> int:
        """Register the position and return how often it has occurred so far"""
        key = fingerprint(board)
        self.counts[key] += 1
        return self.counts[key]

    def is_stalling(self) -> bool:
        return STALLING_REPETITIONS in self.counts.values()
