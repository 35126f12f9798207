"""Implementation of (Game)Repository using SQLAlchemy"""

import logging
from collections.abc import Callable
from typing import Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import TERMINAL_STATES
from src.db.schema import DBGame

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy. Every call runs in its own session."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory

    def get_game(self, game_id: int) -> GameModel | None:
        """Get game by ID, if record exists."""

        def _get(db: Session) -> GameModel | None:
            game_db = self._fetch_game(db, game_id)
            if game_db:
                return self._to_model(game_db)
            return None

        return self._run("get_game", _get)

    def create_game(self, game: GameModel) -> tuple[GameModel, int]:
        """Store new game and return the stored data + newly created game ID."""

        def _create(db: Session) -> tuple[GameModel, int]:
            game_db = DBGame(
                board=game.board,
                repetitions=dict(game.repetitions),
                registered_players=dict(game.registered_players),
                state=game.state,
            )
            db.add(game_db)
            db.commit()
            db.refresh(game_db)
            return self._to_model(game_db), game_db.id

        return self._run("create_game", _create)

    def update_game(self, game_id: int, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""

        def _update(db: Session) -> GameModel | None:
            game_db = self._fetch_game(db, game_id)
            if not game_db:
                return None
            game_db.board = game.board
            # assign new objects so SQLAlchemy notices the change of the JSON columns
            game_db.repetitions = dict(game.repetitions)
            game_db.registered_players = dict(game.registered_players)
            game_db.state = game.state
            db.commit()
            db.refresh(game_db)
            return self._to_model(game_db)

        return self._run("update_game", _update)

    def delete_game(self, game_id: int) -> GameModel | None:
        """Remove a game's record."""

        def _delete(db: Session) -> GameModel | None:
            game_db = self._fetch_game(db, game_id)
            if not game_db:
                return None
            game_model = self._to_model(game_db)
            db.delete(game_db)
            db.commit()
            return game_model

        return self._run("delete_game", _delete)

    def list_unfinished_games(self) -> list[tuple[int, GameModel]]:
        """All games that have not reached a terminal state."""

        def _list(db: Session) -> list[tuple[int, GameModel]]:
            query = (
                select(DBGame)
                .where(DBGame.state.not_in([str(state) for state in TERMINAL_STATES]))
                .order_by(DBGame.id)
            )
            return [(game_db.id, self._to_model(game_db)) for game_db in db.scalars(query)]

        return self._run("list_unfinished_games", _list)

    def max_player_id(self) -> Optional[int]:
        """Player IDs live inside the JSON column, so they get collected in Python."""

        def _max(db: Session) -> Optional[int]:
            player_ids = [
                player_id
                for seats in db.scalars(select(DBGame.registered_players))
                for player_id in seats.values()
            ]
            return max(player_ids, default=None)

        return self._run("max_player_id", _max)

    def _run(self, operation: str, fn: Callable[[Session], T]) -> T:
        """Open a session, run the operation and convert database failures into a RepositoryError."""
        try:
            with self.session_factory() as db:
                return fn(db)
        except SQLAlchemyError as exc:
            logger.exception("SQLGameRepository.%s: database failure", operation)
            raise RepositoryError(f"SQLGameRepository.{operation} failed") from exc

    def _fetch_game(self, db: Session, game_id: int) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return db.scalar(query)

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            board=game_db.board,
            repetitions=dict(game_db.repetitions),
            registered_players=dict(game_db.registered_players),
            state=game_db.state,
        )
