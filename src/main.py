"""
Hare and Hounds game server.

Run with
    python -m src.main
or point uvicorn at the factory:
    uvicorn src.main:create_app --factory
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from src.api.errors import register_error_handlers
from src.api.routes import router
from src.core.config import Settings, get_settings
from src.db.database import build_engine, build_session_factory
from src.db.sql_repository import SQLGameRepository
from src.services.game_service import GameService

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Connect to the database and pick up unfinished games at startup, release the engine at shutdown."""
        logger.info("Starting Hare and Hounds server...")
        engine = build_engine(settings)
        repository = SQLGameRepository(build_session_factory(engine))
        app.state.game_service = GameService(repository)
        yield
        logger.info("Shutting down Hare and Hounds server...")
        engine.dispose()

    app = FastAPI(
        title="Hare and Hounds",
        description="Rules engine and game server for the board game Hare and Hounds",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.include_router(router)
    register_error_handlers(app)
    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=4567)
