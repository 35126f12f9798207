"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from copy import deepcopy
from threading import Lock
from typing import Optional

from src.api.models import (
    BoardResponse,
    CreateGameRequest,
    DeleteGameRequest,
    GameInfoResponse,
    GameStateResponse,
    GetGameRequest,
    JoinGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    MoveResponse,
    PieceResponse,
)
from src.core.exceptions import AlreadyJoinedError, GameError, GameNotFoundError
from src.core.shared_types import MoveResult
from src.db.repository import GameRepository
from src.hareandhounds.game import Game
from src.hareandhounds.moves import Move
from src.services.ids import IdGenerator, SequentialIdGenerator

logger = logging.getLogger(__name__)


class GameService:
    """
    Orchestration of layers for Hare and Hounds.

    Games are kept in memory, indexed by their ID, and every change is written through to the repository.
    Changes to a game are made on a copy: only once the repository accepted the copy does it replace the game in memory.
    """

    def __init__(
        self, repository: GameRepository, player_ids: Optional[IdGenerator] = None
    ) -> None:
        self.repo = repository
        self._games: dict[int, Game] = {}
        self._locks: dict[int, Lock] = {}
        self._locks_guard = Lock()

        if player_ids is None:
            highest_id = self.repo.max_player_id()
            player_ids = SequentialIdGenerator(
                start=0 if highest_id is None else highest_id + 1
            )
        self.player_ids = player_ids

        self._load_unfinished_games()

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameInfoResponse:
        """First player requested to create a new game."""

        player_id = self.player_ids.next_id()
        new_game = Game.new_game(player_id=player_id, kind=request.piece_type)

        # Store the GameModel in the repository, only then make it available
        _, game_id = self.repo.create_game(new_game.to_model())
        with self._locks_guard:
            lock = self._locks.setdefault(game_id, Lock())
        with lock:
            self._games[game_id] = new_game

        logger.info(
            "Game %s created by player %s (%s)", game_id, player_id, request.piece_type
        )
        return GameInfoResponse(
            game_id=game_id,
            player_id=player_id,
            piece_type=request.piece_type,
            state=new_game.state,
        )

    def join_game(self, request: JoinGameRequest) -> GameInfoResponse:
        """Second player requested to join a game."""

        with self._game_lock(request.game_id):
            game = deepcopy(self._fetch_game(request.game_id))
            if game.open_seat is None:
                raise AlreadyJoinedError(
                    f"Game {request.game_id} already has two players."
                )

            player_id = self.player_ids.next_id()
            kind = game.register_player(player_id)
            self._commit(request.game_id, game)

        logger.info("Player %s joined game %s (%s)", player_id, request.game_id, kind)
        return GameInfoResponse(
            game_id=request.game_id,
            player_id=player_id,
            piece_type=kind,
            state=game.state,
        )

    def get_game_state(self, request: GetGameRequest) -> GameStateResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        with self._game_lock(request.game_id):
            game = self._fetch_game(request.game_id)
            return GameStateResponse(game_id=request.game_id, state=game.state)

    def get_game_board(self, request: GetGameRequest) -> BoardResponse:
        """The four pieces: hare first, then the hounds."""
        with self._game_lock(request.game_id):
            game = self._fetch_game(request.game_id)
            pieces = [
                PieceResponse(
                    piece_type=piece.kind,
                    rank=piece.position.rank,
                    file=piece.position.file,
                )
                for piece in game.board.pieces
            ]
        return BoardResponse(game_id=request.game_id, pieces=pieces)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal moves."""
        with self._game_lock(request.game_id):
            game = self._fetch_game(request.game_id)
            legal_moves = game.legal_moves(request.player_id)
            kind = game.player_kind(request.player_id)

        return LegalMovesResponse(
            game_id=request.game_id,
            player_id=request.player_id,
            piece_type=kind,
            legal_moves=legal_moves,
        )

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Make a move attempt."""

        move = Move.from_coordinates(
            from_rank=request.from_rank,
            from_file=request.from_file,
            to_rank=request.to_rank,
            to_file=request.to_file,
        )

        with self._game_lock(request.game_id):
            game = deepcopy(self._fetch_game(request.game_id))

            # Attempt the move (raises if rejected, leaving the stored game untouched)
            try:
                game.make_move(move, request.player_id)
            except GameError as exc:
                logger.debug(
                    "Game %s: move %s by player %s rejected: %s",
                    request.game_id,
                    move.to_notation(),
                    request.player_id,
                    exc,
                )
                raise

            self._commit(request.game_id, game)

        logger.info(
            "Game %s: player %s moved %s, state %s",
            request.game_id,
            request.player_id,
            move.to_notation(),
            game.state,
        )
        if game.is_finished:
            logger.info("Game %s finished: %s", request.game_id, game.state)
        return MoveResponse(game_id=request.game_id, result=MoveResult.OK, state=game.state)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        with self._game_lock(request.game_id):
            deleted = self.repo.delete_game(request.game_id)
            self._forget(request.game_id)
        if deleted is None:
            raise GameNotFoundError(f"Game with game_id={request.game_id} not found.")
        logger.info("Game %s deleted", request.game_id)

    # -- Internal helpers --
    def _load_unfinished_games(self) -> None:
        """Pick up the games that were still being played before a restart."""
        for game_id, model in self.repo.list_unfinished_games():
            self._games[game_id] = Game.from_model(model)
        logger.info("Loaded %d unfinished game(s)", len(self._games))

    def _game_lock(self, game_id: int) -> Lock:
        """Lock of an existing game. Unknown IDs raise without leaving a lock behind."""
        with self._locks_guard:
            lock = self._locks.get(game_id)
        if lock is not None:
            return lock

        if game_id not in self._games and self.repo.get_game(game_id) is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        with self._locks_guard:
            return self._locks.setdefault(game_id, Lock())

    def _forget(self, game_id: int) -> None:
        """Drop a game that no longer exists in the repository, together with its lock."""
        self._games.pop(game_id, None)
        with self._locks_guard:
            self._locks.pop(game_id, None)

    def _fetch_game(self, game_id: int) -> Game:
        """Attempt to find the game (in memory first, then in the repository) and raise error if it fails.

        NOTE: call while holding the lock of this game.
        """
        game = self._games.get(game_id)
        if game is not None:
            return game

        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        game = Game.from_model(game_model)
        self._games[game_id] = game
        return game

    def _commit(self, game_id: int, game: Game) -> None:
        """Persist the changed game, then replace the one in memory.

        NOTE: call while holding the lock of this game.
        """
        if self.repo.update_game(game_id, game.to_model()) is None:
            self._forget(game_id)
            raise GameNotFoundError(f"Game with {game_id=} no longer exists.")
        self._games[game_id] = game
