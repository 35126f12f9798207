"""Unit tests for /src/hareandhounds/repetition.py"""

import pytest

from src.core.exceptions import GameStateError
from src.hareandhounds.board import Board
from src.hareandhounds.moves import Move
from src.hareandhounds.repetition import RepetitionLedger, fingerprint


def test_fingerprint_starting_position() -> None:
    assert fingerprint(Board.starting_position()) == "01_10_12_41"


def test_fingerprint_ignores_hound_order() -> None:
    """Same squares, hounds recorded in a different order --> same key"""
    one = Board.from_notation("21/11/20/32")
    other = Board.from_notation("21/32/11/20")
    assert one.pieces != other.pieces
    assert fingerprint(one) == fingerprint(other)


def test_fingerprint_distinguishes_hare_square() -> None:
    """Swapping the hare with a hound is a different position"""
    one = Board.from_notation("21/11/20/32")
    other = Board.from_notation("11/21/20/32")
    assert fingerprint(one) != fingerprint(other)


def test_record_counts_occurrences() -> None:
    ledger = RepetitionLedger()
    board = Board.starting_position()
    assert ledger.record(board) == 1
    assert ledger.record(board) == 2
    assert ledger.to_counts() == {fingerprint(board): 2}
    assert not ledger.is_stalling()

    assert ledger.record(board) == 3
    assert ledger.is_stalling()


def test_ledger_only_grows() -> None:
    ledger = RepetitionLedger()
    board = Board.starting_position()
    ledger.record(board)
    board.move_piece(Move.from_coordinates(0, 1, 1, 1))
    ledger.record(board)
    board.move_piece(Move.from_coordinates(4, 1, 3, 1))
    ledger.record(board)
    assert len(ledger.to_counts()) == 3
    assert all(count == 1 for count in ledger.to_counts().values())


def test_empty_ledger() -> None:
    ledger = RepetitionLedger()
    assert ledger.to_counts() == {}
    assert not ledger.is_stalling()


def test_counts_roundtrip() -> None:
    counts = {"01_10_12_41": 2, "10_11_12_41": 1}
    assert RepetitionLedger.from_counts(counts).to_counts() == counts


def test_invalid_counts() -> None:
    with pytest.raises(GameStateError):
        _ = RepetitionLedger.from_counts({"01_10_12_41": 0})
