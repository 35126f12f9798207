"""Unit tests for /src/hareandhounds/win_conditions.py"""

import pytest

from src.core.shared_types import GameState, PieceKind
from src.hareandhounds.board import Board
from src.hareandhounds.repetition import RepetitionLedger
from src.hareandhounds.win_conditions import evaluate, has_hare_escaped, is_hare_trapped


def _ledger_with(board: Board, times: int) -> RepetitionLedger:
    ledger = RepetitionLedger()
    for _ in range(times):
        ledger.record(board)
    return ledger


@pytest.mark.parametrize(
    "notation",
    [
        "41/30/31/32",
        "20/10/21/30",
        "22/12/21/32",
        "22/32/12/21",  # hound order does not matter
    ],
)
def test_hare_trapped(notation: str) -> None:
    assert is_hare_trapped(Board.from_notation(notation))


@pytest.mark.parametrize(
    "notation",
    [
        "41/30/31/21",  # one line still open
        "20/10/21/11",
        "31/20/21/22",  # (3,1) is never a trap square
        "21/11/20/22",
    ],
)
def test_hare_not_trapped(notation: str) -> None:
    assert not is_hare_trapped(Board.from_notation(notation))


@pytest.mark.parametrize(
    "notation, escaped",
    [
        ("41/01/10/12", False),
        ("10/11/30/22", True),  # all hounds on the hare's rank or behind it
        ("21/20/22/30", True),
        ("21/11/22/30", False),  # one hound still in front
        ("01/10/11/12", True),
    ],
)
def test_hare_escaped(notation: str, escaped: bool) -> None:
    assert has_hare_escaped(Board.from_notation(notation)) == escaped


def test_no_win_keeps_state() -> None:
    board = Board.from_notation("31/11/10/12")
    ledger = _ledger_with(board, 1)
    assert evaluate(board, ledger, PieceKind.HOUND, GameState.TURN_HARE) == GameState.TURN_HARE
    assert evaluate(board, ledger, PieceKind.HARE, GameState.TURN_HOUND) == GameState.TURN_HOUND


def test_trap_after_hound_move() -> None:
    board = Board.from_notation("41/30/31/32")
    ledger = _ledger_with(board, 1)
    assert evaluate(board, ledger, PieceKind.HOUND, GameState.TURN_HARE) == GameState.WIN_HOUND


def test_trap_only_checked_after_hound_move() -> None:
    board = Board.from_notation("41/30/31/32")
    ledger = _ledger_with(board, 1)
    assert evaluate(board, ledger, PieceKind.HARE, GameState.TURN_HOUND) == GameState.TURN_HOUND


def test_escape() -> None:
    board = Board.from_notation("10/11/30/22")
    ledger = _ledger_with(board, 1)
    for mover, state in [
        (PieceKind.HARE, GameState.TURN_HOUND),
        (PieceKind.HOUND, GameState.TURN_HARE),
    ]:
        assert evaluate(board, ledger, mover, state) == GameState.WIN_HARE_BY_ESCAPE


def test_stalling() -> None:
    board = Board.from_notation("31/11/10/12")
    ledger = _ledger_with(board, 3)
    assert (
        evaluate(board, ledger, PieceKind.HARE, GameState.TURN_HOUND)
        == GameState.WIN_HARE_BY_STALLING
    )


def test_two_repetitions_is_not_stalling() -> None:
    board = Board.from_notation("31/11/10/12")
    ledger = _ledger_with(board, 2)
    assert evaluate(board, ledger, PieceKind.HARE, GameState.TURN_HOUND) == GameState.TURN_HOUND


def test_stalling_overrides_escape() -> None:
    """Both conditions hold: the stalling check runs last and wins."""
    board = Board.from_notation("10/11/30/22")
    ledger = _ledger_with(board, 3)
    assert has_hare_escaped(board)
    assert (
        evaluate(board, ledger, PieceKind.HARE, GameState.TURN_HOUND)
        == GameState.WIN_HARE_BY_STALLING
    )


def test_surrounded_on_first_rank_is_an_escape() -> None:
    """A hare on (0,1) surrounded by hounds has no moves left, but it has sneaked past all of them."""
    board = Board.from_notation("01/10/11/12")
    ledger = _ledger_with(board, 1)
    assert (
        evaluate(board, ledger, PieceKind.HOUND, GameState.TURN_HARE)
        == GameState.WIN_HARE_BY_ESCAPE
    )
