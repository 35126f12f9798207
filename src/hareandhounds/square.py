"""
A position on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# The board is drawn on a 5 x 3 grid: ranks 0-4, files 0-2
BOARD_DIMENSIONS = (5, 3)

# The four corners of the grid are not part of the board. Lines only meet in the remaining 11 points.
GRID_CORNERS = frozenset({(0, 0), (0, 2), (4, 0), (4, 2)})


@dataclass(frozen=True, order=True)
class Position:
    rank: int
    file: int

    @classmethod
    def from_notation(cls, text: str) -> Position:
        """Notation: two digits, rank then file. '41' is rank 4, file 1"""
        if len(text) != 2 or not text.isdigit():
            raise ValueError(f"Cannot interpret {text!r} as a position.")
        return cls(int(text[0]), int(text[1]))

    def to_notation(self) -> str:
        return f"{self.rank}{self.file}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.rank < BOARD_DIMENSIONS[0]) and (
            0 <= self.file < BOARD_DIMENSIONS[1]
        )

    def is_board_node(self) -> bool:
        """Inside the grid and not one of its unreachable corners"""
        return self.is_within_bounds() and (self.rank, self.file) not in GRID_CORNERS


BOARD_NODES: frozenset[Position] = frozenset(
    Position(rank, file)
    for rank in range(BOARD_DIMENSIONS[0])
    for file in range(BOARD_DIMENSIONS[1])
    if (rank, file) not in GRID_CORNERS
)
