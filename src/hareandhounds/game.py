"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of Hare and Hounds -->
passes this information to the service layer, which can then pass it onwards to the API layer.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import (
    AlreadyJoinedError,
    GameStateError,
    IllegalMoveError,
    IncorrectTurnError,
    InvalidPlayerError,
)
from src.core.models import GameModel
from src.core.shared_types import TURN_STATES, GameState, PieceKind
from src.hareandhounds import win_conditions
from src.hareandhounds.board import Board
from src.hareandhounds.moves import Move, legal_moves, validate_move
from src.hareandhounds.repetition import RepetitionLedger

PlayerId = int


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    ledger: RepetitionLedger
    players: dict[PieceKind, PlayerId]
    state: GameState

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.state not in GameState.__members__:
            raise GameStateError(
                f"Invalid state: {model.state!r}. \nPick one from {','.join(GameState)}"
            )
        unknown_kinds = set(model.registered_players) - set(PieceKind)
        if unknown_kinds:
            raise GameStateError(f"Unknown piece kind(s): {sorted(unknown_kinds)}")

        # create the Game
        board = Board.from_notation(model.board)
        ledger = RepetitionLedger.from_counts(model.repetitions)
        players = {
            PieceKind(kind): player_id
            for kind, player_id in model.registered_players.items()
        }
        state = GameState[model.state]

        return cls(board, ledger, players, state)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            board=self.board.to_notation(),
            repetitions=self.ledger.to_counts(),
            registered_players={
                str(kind): player_id for kind, player_id in self.players.items()
            },
            state=str(self.state),
        )

    @classmethod
    def new_game(cls, player_id: PlayerId, kind: str) -> Self:
        """To start a new game with the player using the pieces of the indicated kind."""

        if kind.upper() not in PieceKind.__members__:
            raise GameStateError(
                f"Cannot create new game. Piece kind {kind} not in {','.join(PieceKind)}."
            )
        board = Board.starting_position()
        ledger = RepetitionLedger()
        # the starting position counts as the first occurrence
        ledger.record(board)
        return cls(
            board=board,
            ledger=ledger,
            players={PieceKind[kind.upper()]: player_id},
            state=GameState.WAITING_FOR_SECOND_PLAYER,
        )

    @property
    def is_finished(self) -> bool:
        return self.state.is_terminal

    @property
    def open_seat(self) -> Optional[PieceKind]:
        """The kind of pieces still waiting for a player (if any)"""
        return next((kind for kind in PieceKind if kind not in self.players), None)

    def register_player(self, player_id: PlayerId) -> PieceKind:
        """Registering the 2nd player to an open game. The hounds always move first."""
        kind = self.open_seat
        if kind is None:
            raise AlreadyJoinedError("Cannot join this game. Both seats are taken.")

        self.players[kind] = player_id
        self._change_state(GameState.TURN_HOUND)
        return kind

    def player_kind(self, player_id: PlayerId) -> PieceKind:
        for kind, seated_id in self.players.items():
            if seated_id == player_id:
                return kind
        raise InvalidPlayerError(f"Player {player_id} is not seated in this game.")

    def legal_moves(self, player_id: PlayerId) -> list[str]:
        """
        Service will request the set of legal moves.
        ----

        1. Check if it is your turn
        2. Yes? Generate legal moves and return them in notation.
        """
        kind = self._assert_your_turn(player_id)
        return [move.to_notation() for move in legal_moves(self.board, kind)]

    def make_move(self, move: Move, player_id: PlayerId) -> None:
        """
        Attempt to make a move
        -----

        1. make sure it is your turn
        2. validate the move against the board
        3. update the board
        4. hand the turn to the opponent
        5. register the new board position
        6. update game state (if the game ended)
        """
        kind = self._assert_your_turn(player_id)

        validate_move(self.board, kind, move)

        self.board.move_piece(move)

        self._pass_turn()

        self.ledger.record(self.board)

        self._update_game_state(mover=kind)

    # -- PRIVATE HELPERS ---
    def _assert_your_turn(self, player_id: PlayerId) -> PieceKind:
        """You must wait for your turn before calculating legal moves / making a move."""
        kind = self.player_kind(player_id)

        if self.state == GameState.WAITING_FOR_SECOND_PLAYER:
            raise InvalidPlayerError(
                "No turns can be played before the second player has joined."
            )

        if self.is_finished:
            raise IllegalMoveError(f"Game is over. state: {self.state}")

        if TURN_STATES[self.state] != kind:
            raise IncorrectTurnError(
                f"It is not your turn. Waiting for the {TURN_STATES[self.state].lower()} player to make a move first."
            )
        return kind

    def _pass_turn(self) -> None:
        next_state = (
            GameState.TURN_HARE
            if self.state == GameState.TURN_HOUND
            else GameState.TURN_HOUND
        )
        self._change_state(next_state)

    def _update_game_state(self, mover: PieceKind) -> None:
        """Performs checks to see if game has ended and changes state accordingly."""
        self._change_state(
            win_conditions.evaluate(self.board, self.ledger, mover, self.state)
        )

    def _change_state(self, new_state: GameState) -> None:
        self.state = new_state
