"""Unit tests for /src/hareandhounds/square.py"""

import pytest

from src.hareandhounds.square import BOARD_DIMENSIONS, BOARD_NODES, Position

CORNERS = [(0, 0), (0, 2), (4, 0), (4, 2)]


@pytest.mark.parametrize(
    "rank, file, notation",
    [
        (rank, file, f"{rank}{file}")
        for rank in range(BOARD_DIMENSIONS[0])
        for file in range(BOARD_DIMENSIONS[1])
    ],
)
def test_from_notation(rank: int, file: int, notation: str) -> None:
    """'41' maps to rank 4, file 1, etc."""
    position = Position.from_notation(notation)
    assert position.rank == rank
    assert position.file == file
    assert position.to_notation() == notation


@pytest.mark.parametrize("notation", ["", "4", "412", "a1", "-1"])
def test_invalid_notation(notation: str) -> None:
    with pytest.raises(ValueError):
        _ = Position.from_notation(notation)


def test_board_has_eleven_nodes() -> None:
    assert len(BOARD_NODES) == 11
    for rank, file in CORNERS:
        assert not Position(rank, file).is_board_node()


def test_within_bounds() -> None:
    """All grid cells are within bounds, even the corners that are not board nodes"""
    for rank in range(BOARD_DIMENSIONS[0]):
        for file in range(BOARD_DIMENSIONS[1]):
            assert Position(rank, file).is_within_bounds()


@pytest.mark.parametrize("rank, file", [(5, 1), (-1, 1), (2, 3), (2, -1)])
def test_out_of_bounds(rank: int, file: int) -> None:
    position = Position(rank, file)
    assert not position.is_within_bounds()
    assert not position.is_board_node()
