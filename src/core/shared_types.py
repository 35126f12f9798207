"""
Type definitions used across layers
"""

from enum import StrEnum


class PieceKind(StrEnum):
    HARE = "HARE"
    HOUND = "HOUND"


class GameState(StrEnum):
    WAITING_FOR_SECOND_PLAYER = "WAITING_FOR_SECOND_PLAYER"
    TURN_HOUND = "TURN_HOUND"
    TURN_HARE = "TURN_HARE"
    WIN_HARE_BY_ESCAPE = "WIN_HARE_BY_ESCAPE"
    WIN_HARE_BY_STALLING = "WIN_HARE_BY_STALLING"
    WIN_HOUND = "WIN_HOUND"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATES


TERMINAL_STATES: frozenset[GameState] = frozenset(
    {
        GameState.WIN_HARE_BY_ESCAPE,
        GameState.WIN_HARE_BY_STALLING,
        GameState.WIN_HOUND,
    }
)

# Whose turn it is in each of the two turn states
TURN_STATES: dict[GameState, PieceKind] = {
    GameState.TURN_HOUND: PieceKind.HOUND,
    GameState.TURN_HARE: PieceKind.HARE,
}


class MoveResult(StrEnum):
    OK = "OK"
