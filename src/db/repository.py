"""Protocol repository (implemented with SQLAlchemy, mocked with a dictionary in the service tests)"""

from typing import Optional, Protocol

from src.core.models import GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def get_game(self, game_id: int) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, int]:
        """Store new game and return the stored data + newly created game ID."""
        ...

    def update_game(self, game_id: int, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        ...

    def delete_game(self, game_id: int) -> GameModel | None:
        """Remove a game's record."""
        ...

    def list_unfinished_games(self) -> list[tuple[int, GameModel]]:
        """All games that have not reached a terminal state, to pick them up again after a restart."""
        ...

    def max_player_id(self) -> Optional[int]:
        """Highest player ID seated in any recorded game (None for an empty store)."""
        ...
