"""
The fixed graph of the board.

The classic board only has diagonal lines through some of its points. Those are exactly the points whose
coordinate sum (rank + file) is odd, so no explicit adjacency table is needed:

* even sum: orthogonal steps only
* odd sum: orthogonal and diagonal steps
"""

from src.hareandhounds.square import BOARD_NODES, Position


def allows_diagonal(position: Position) -> bool:
    return (position.rank + position.file) % 2 == 1


def is_single_step(from_position: Position, to_position: Position) -> bool:
    """Does moving from one position to the other follow exactly one line segment of the board?"""
    delta_rank = abs(from_position.rank - to_position.rank)
    delta_file = abs(from_position.file - to_position.file)

    # no jumping over points
    if delta_rank > 1 or delta_file > 1:
        return False

    step_cost = delta_rank + delta_file
    if allows_diagonal(from_position):
        return step_cost <= 2
    return step_cost <= 1


def neighbours(position: Position) -> list[Position]:
    """All board points connected to the given one"""
    return sorted(
        node
        for node in BOARD_NODES
        if node != position and is_single_step(position, node)
    )


# The hare can only get trapped on a point with exactly three connections: these are
# the hare's square and the three squares the hounds need to occupy.
# (0,1) also has three connections, but a hare standing there has already escaped.
TRAP_SQUARES: dict[Position, tuple[Position, Position, Position]] = {
    Position(4, 1): (Position(3, 0), Position(3, 1), Position(3, 2)),
    Position(2, 0): (Position(1, 0), Position(2, 1), Position(3, 0)),
    Position(2, 2): (Position(1, 2), Position(2, 1), Position(3, 2)),
}
