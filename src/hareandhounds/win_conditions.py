"""
End of game checks, performed after every accepted move.

The turns continue until one of the following occurs:

1. The hare is trapped: it has no point left to move to. Hounds win.
2. The hare sneaked past the hounds: no hound stands on a rank in front of it. Hare wins.
3. The same board position occurred three times. The hounds are stalling, hare wins.

The checks always run in this order and none of them stops the others.
A later verdict replaces an earlier one.
"""

from src.core.shared_types import GameState, PieceKind
from src.hareandhounds.board import Board
from src.hareandhounds.repetition import RepetitionLedger
from src.hareandhounds.topology import TRAP_SQUARES


def is_hare_trapped(board: Board) -> bool:
    trapping_squares = TRAP_SQUARES.get(board.hare.position)
    if trapping_squares is None:
        return False
    return board.are_all_occupied(trapping_squares)


def has_hare_escaped(board: Board) -> bool:
    """No hound left to the hare (on a lower rank)"""
    hare_rank = board.hare.position.rank
    return all(hound.position.rank >= hare_rank for hound in board.hounds)


def evaluate(
    board: Board, ledger: RepetitionLedger, mover: PieceKind, state: GameState
) -> GameState:
    """Return the state the game ends up in after `mover` made a move. `state` is the state after the turn switched."""

    # Only a hound move can close the trap
    if mover == PieceKind.HOUND and is_hare_trapped(board):
        state = GameState.WIN_HOUND

    if has_hare_escaped(board):
        state = GameState.WIN_HARE_BY_ESCAPE

    if ledger.is_stalling():
        state = GameState.WIN_HARE_BY_STALLING

    return state
